"""Meal plan store: user meal plans and their (recipe, day) items."""
import logging
from datetime import datetime
from typing import Optional
from uuid import uuid4

from pepper.domain.Plan import MealPlan, MealPlanItem
from pepper.infra.database import Database
from pepper.utilities.constants import DAYS_OF_WEEK

logger = logging.getLogger(__name__)

# Monday..Sunday, unknown day names last
_DAY_ORDER_SQL = "CASE day_of_week " + " ".join(
    f"WHEN '{day}' THEN {i}" for i, day in enumerate(DAYS_OF_WEEK)
) + f" ELSE {len(DAYS_OF_WEEK)} END"


def _now() -> str:
    return datetime.now().isoformat()


class MealPlanRepository:
    def __init__(self, db: Database):
        self.db = db

    def create_meal_plan(self, user_id: str, name: str = "My Meal Plan") -> str:
        plan_id = str(uuid4())
        now = _now()
        with self.db.connect() as conn:
            conn.execute(
                "INSERT INTO meal_plans (id, user_id, name, created_at, updated_at) VALUES (?, ?, ?, ?, ?)",
                (plan_id, user_id, name, now, now),
            )
        return plan_id

    def add_recipe_to_meal_plan(self, meal_plan_id: str, recipe_id: int, recipe_title: str,
                                day_of_week: str, meal_type: str = "dinner") -> str:
        item_id = str(uuid4())
        now = _now()
        with self.db.connect() as conn:
            conn.execute(
                """
                INSERT INTO meal_plan_items (id, meal_plan_id, recipe_id, recipe_title, day_of_week, meal_type, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (item_id, meal_plan_id, recipe_id, recipe_title, day_of_week, meal_type, now),
            )
            conn.execute("UPDATE meal_plans SET updated_at = ? WHERE id = ?", (now, meal_plan_id))
        return item_id

    def clear_meal_plan(self, meal_plan_id: str) -> None:
        with self.db.connect() as conn:
            conn.execute("DELETE FROM meal_plan_items WHERE meal_plan_id = ?", (meal_plan_id,))
            conn.execute("UPDATE meal_plans SET updated_at = ? WHERE id = ?", (_now(), meal_plan_id))

    def get_user_meal_plan(self, user_id: str) -> Optional[MealPlan]:
        """Most recently updated plan of the user.

        Items are ordered Monday..Sunday, then by insertion. This intentionally
        differs from sorting day names alphabetically, so the first planned day
        decides which recipe fixes an ingredient's position in the shopping list.
        """
        with self.db.connect() as conn:
            plan = conn.execute(
                """
                SELECT * FROM meal_plans
                WHERE user_id = ?
                ORDER BY updated_at DESC, rowid DESC
                LIMIT 1
                """,
                (user_id,),
            ).fetchone()
            if not plan:
                return None
            rows = conn.execute(
                f"""
                SELECT * FROM meal_plan_items
                WHERE meal_plan_id = ?
                ORDER BY {_DAY_ORDER_SQL}, rowid
                """,
                (plan["id"],),
            ).fetchall()
        items = [
            MealPlanItem(r["id"], r["meal_plan_id"], int(r["recipe_id"]), r["recipe_title"],
                         r["day_of_week"], r["meal_type"])
            for r in rows
        ]
        return MealPlan(plan["id"], plan["user_id"], plan["name"], items,
                        created_at=plan["created_at"], updated_at=plan["updated_at"])
