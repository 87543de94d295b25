"""Shopping list store: one generated list per user, items kept as an ordered JSON blob."""
import json
import logging
from datetime import datetime
from typing import Iterable, Optional
from uuid import uuid4

from pepper.domain.ShoppingItem import ShoppingItem
from pepper.domain.ShoppingList import ShoppingList
from pepper.infra.database import Database

logger = logging.getLogger(__name__)


class ShoppingListNotFound(LookupError):
    """Raised when a list id is unknown or belongs to another user."""


class ShoppingListRepository:
    def __init__(self, db: Database):
        self.db = db

    @staticmethod
    def _from_row(row) -> ShoppingList:
        try:
            raw_items = json.loads(row["items"]) or []
        except json.JSONDecodeError as e:
            logger.error("Invalid items JSON in shopping list %s: %s", row["id"], e)
            raw_items = []
        return ShoppingList(
            id=row["id"],
            user_id=row["user_id"],
            meal_plan_id=row["meal_plan_id"],
            name=row["name"],
            items=[ShoppingItem.from_dict(i) for i in raw_items],
            created_at=row["created_at"],
        )

    def create_shopping_list(self, user_id: str, meal_plan_id: Optional[str],
                             items: Iterable[ShoppingItem], name: str = "Shopping List") -> str:
        """Store a new list for the user, replacing any list they already had."""
        list_id = str(uuid4())
        payload = json.dumps([i.to_dict() for i in items], ensure_ascii=False)
        with self.db.connect() as conn:
            conn.execute("DELETE FROM shopping_lists WHERE user_id = ?", (user_id,))
            conn.execute(
                """
                INSERT INTO shopping_lists (id, user_id, meal_plan_id, name, items, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (list_id, user_id, meal_plan_id, name, payload, datetime.now().isoformat()),
            )
        logger.info("Created shopping list %s for user %s", list_id, user_id)
        return list_id

    def get_user_shopping_list(self, user_id: str) -> Optional[ShoppingList]:
        with self.db.connect() as conn:
            row = conn.execute(
                "SELECT * FROM shopping_lists WHERE user_id = ? ORDER BY created_at DESC LIMIT 1",
                (user_id,),
            ).fetchone()
        return self._from_row(row) if row else None

    def _get_owned(self, conn, list_id: str, user_id: str) -> ShoppingList:
        row = conn.execute(
            "SELECT * FROM shopping_lists WHERE id = ? AND user_id = ?", (list_id, user_id)
        ).fetchone()
        if not row:
            raise ShoppingListNotFound(f"Shopping list {list_id} not found")
        return self._from_row(row)

    def _save_items(self, conn, shopping_list: ShoppingList) -> None:
        conn.execute(
            "UPDATE shopping_lists SET items = ? WHERE id = ?",
            (json.dumps(shopping_list.items_to_list(), ensure_ascii=False), shopping_list.id),
        )

    def update_item(self, list_id: str, user_id: str, index: int, item: ShoppingItem) -> ShoppingList:
        """Replace the item at `index`; raises ShoppingListNotFound or ItemIndexError."""
        with self.db.connect() as conn:
            shopping_list = self._get_owned(conn, list_id, user_id)
            shopping_list.replace_item(index, item)
            self._save_items(conn, shopping_list)
        return shopping_list

    def delete_item(self, list_id: str, user_id: str, index: int) -> ShoppingList:
        """Remove the item at `index`; raises ShoppingListNotFound or ItemIndexError."""
        with self.db.connect() as conn:
            shopping_list = self._get_owned(conn, list_id, user_id)
            removed = shopping_list.remove_item(index)
            self._save_items(conn, shopping_list)
        logger.info("Removed '%s' from shopping list %s", removed.ingredient, list_id)
        return shopping_list
