import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Response

from pepper.api.auth import get_current_user
from pepper.api.dependencies import (
    get_plan_repository,
    get_recipe_repository,
    get_shopping_list_repository,
)
from pepper.domain.ShoppingItem import ShoppingItem
from pepper.domain.ShoppingList import ItemIndexError
from pepper.domain.User import User
from pepper.infra.pdf_utils import generate_pdf_for_shopping_list
from pepper.infra.Plan_Repository import MealPlanRepository
from pepper.infra.Recipe_Repository import RecipeRepository
from pepper.infra.ShoppingList_Repository import ShoppingListNotFound, ShoppingListRepository
from pepper.logic.shopping.list_builder import consolidate
from pepper.utilities.config import FETCH_MAX_WORKERS, FETCH_TIMEOUT_SECONDS
from pepper.utilities.constants import DATE_FORMAT, NO_MEAL_PLAN_MESSAGE
from pepper.utilities.validators import ShoppingListItemDelete, ShoppingListItemUpdate

router = APIRouter(tags=["shopping-list"])
logger = logging.getLogger(__name__)


@router.get("")
@router.get("/")
def get_shopping_list(user: User = Depends(get_current_user),
                      lists: ShoppingListRepository = Depends(get_shopping_list_repository)):
    """Return the user's persisted shopping list, or null when none was generated yet."""
    shopping_list = lists.get_user_shopping_list(user.id)
    return {"shoppingList": shopping_list.to_dict() if shopping_list else None}


@router.post("", status_code=201)
@router.post("/", status_code=201)
def generate_shopping_list(user: User = Depends(get_current_user),
                           plans: MealPlanRepository = Depends(get_plan_repository),
                           recipes: RecipeRepository = Depends(get_recipe_repository),
                           lists: ShoppingListRepository = Depends(get_shopping_list_repository)):
    """Consolidate the ingredients of the user's current meal plan into a new shopping list.

    Response JSON structure:
        {
          "success": true,
          "shoppingListId": <str>,
          "items": [ { ingredient, amount, category } ],
          "message": <str>
        }
    """
    meal_plan = plans.get_user_meal_plan(user.id)
    if meal_plan is None or meal_plan.is_empty():
        raise HTTPException(status_code=400, detail=NO_MEAL_PLAN_MESSAGE)

    logger.info("Generating shopping list for user=%s plan=%s recipes=%s",
                user.id, meal_plan.id, meal_plan.recipe_ids())
    items = consolidate(meal_plan.recipe_ids(), recipes.get_ingredients,
                        max_workers=FETCH_MAX_WORKERS, timeout=FETCH_TIMEOUT_SECONDS)

    name = f"Shopping List - {date.today().strftime(DATE_FORMAT)}"
    shopping_list_id = lists.create_shopping_list(user.id, meal_plan.id, items, name)
    return {
        "success": True,
        "shoppingListId": shopping_list_id,
        "items": [i.to_dict() for i in items],
        "message": "Shopping list generated successfully!",
    }


@router.put("")
@router.put("/")
def update_shopping_list_item(payload: ShoppingListItemUpdate,
                              user: User = Depends(get_current_user),
                              lists: ShoppingListRepository = Depends(get_shopping_list_repository)):
    item = ShoppingItem(**payload.updated_item.model_dump())
    try:
        shopping_list = lists.update_item(payload.shopping_list_id, user.id, payload.item_index, item)
    except ShoppingListNotFound:
        raise HTTPException(status_code=404, detail="Shopping list not found")
    except ItemIndexError:
        raise HTTPException(status_code=404, detail="Item not found")
    return {"success": True, "shoppingList": shopping_list.to_dict()}


@router.delete("")
@router.delete("/")
def delete_shopping_list_item(payload: ShoppingListItemDelete,
                              user: User = Depends(get_current_user),
                              lists: ShoppingListRepository = Depends(get_shopping_list_repository)):
    try:
        shopping_list = lists.delete_item(payload.shopping_list_id, user.id, payload.item_index)
    except ShoppingListNotFound:
        raise HTTPException(status_code=404, detail="Shopping list not found")
    except ItemIndexError:
        raise HTTPException(status_code=404, detail="Item not found")
    return {"success": True, "shoppingList": shopping_list.to_dict()}


@router.get("/pdf")
def export_shopping_list_pdf(user: User = Depends(get_current_user),
                             lists: ShoppingListRepository = Depends(get_shopping_list_repository)):
    shopping_list = lists.get_user_shopping_list(user.id)
    if shopping_list is None:
        raise HTTPException(status_code=404, detail="Shopping list not found")
    pdf_bytes = generate_pdf_for_shopping_list(shopping_list)
    headers = {"Content-Disposition": 'attachment; filename="shopping_list.pdf"'}
    return Response(content=pdf_bytes, media_type="application/pdf", headers=headers)
