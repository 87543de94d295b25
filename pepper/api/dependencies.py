"""FastAPI dependencies: the app's Database and the stores built on it."""
from fastapi import Request

from pepper.infra.database import Database
from pepper.infra.Plan_Repository import MealPlanRepository
from pepper.infra.Recipe_Repository import RecipeRepository
from pepper.infra.ShoppingList_Repository import ShoppingListRepository


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_recipe_repository(request: Request) -> RecipeRepository:
    return RecipeRepository(get_database(request))


def get_plan_repository(request: Request) -> MealPlanRepository:
    return MealPlanRepository(get_database(request))


def get_shopping_list_repository(request: Request) -> ShoppingListRepository:
    return ShoppingListRepository(get_database(request))
