"""Meal plan domain entities: a user-owned ordered collection of (recipe, day) assignments."""
from typing import List, Optional


class MealPlanItem:
    def __init__(self, id: str, meal_plan_id: str, recipe_id: int, recipe_title: str = "",
                 day_of_week: str = "", meal_type: str = "dinner"):
        self.id = id
        self.meal_plan_id = meal_plan_id
        self.recipe_id = recipe_id
        self.recipe_title = recipe_title
        self.day_of_week = day_of_week
        self.meal_type = meal_type

    def __repr__(self) -> str:
        return f"MealPlanItem({self.day_of_week} {self.meal_type}: {self.recipe_title} #{self.recipe_id})"


class MealPlan:
    def __init__(self, id: str, user_id: str, name: str = "My Meal Plan",
                 items: Optional[List[MealPlanItem]] = None,
                 created_at: str = "", updated_at: str = ""):
        self.id = id
        self.user_id = user_id
        self.name = name
        self.items = items[:] if items else []
        self.created_at = created_at
        self.updated_at = updated_at

    def recipe_ids(self) -> List[int]:
        """Recipe ids in plan order (duplicates kept, order decides first-seen priority)."""
        return [item.recipe_id for item in self.items]

    def is_empty(self) -> bool:
        return not self.items
