"""Recipe store: recipes and their ingredient rows."""
import logging
from typing import Iterable, List, Optional, Union

from pepper.domain.IngredientRow import IngredientRow
from pepper.infra.database import Database

logger = logging.getLogger(__name__)


class RecipeRepository:
    def __init__(self, db: Database):
        self.db = db

    def add_recipe(self, title: str, ingredients: Iterable[Union[IngredientRow, dict]],
                   recipe_id: Optional[int] = None) -> int:
        """Insert (or replace) a recipe with its ingredient rows; returns the recipe id."""
        rows = [ing if isinstance(ing, IngredientRow) else IngredientRow.from_dict(ing) for ing in ingredients]
        with self.db.connect() as conn:
            cursor = conn.cursor()
            if recipe_id is None:
                cursor.execute("INSERT INTO recipes (title) VALUES (?)", (title,))
                recipe_id = cursor.lastrowid
            else:
                cursor.execute("INSERT OR REPLACE INTO recipes (id, title) VALUES (?, ?)", (recipe_id, title))
                cursor.execute("DELETE FROM recipe_ingredients WHERE recipe_id = ?", (recipe_id,))
            cursor.executemany(
                """
                INSERT INTO recipe_ingredients (recipe_id, position, name, raw, qty, unit)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                [(recipe_id, pos, row.name, row.raw, row.qty, row.unit) for pos, row in enumerate(rows)],
            )
        logger.info("Stored recipe %s '%s' with %d ingredients", recipe_id, title, len(rows))
        return recipe_id

    def get_recipe_title(self, recipe_id: int) -> Optional[str]:
        with self.db.connect() as conn:
            row = conn.execute("SELECT title FROM recipes WHERE id = ?", (recipe_id,)).fetchone()
        return row["title"] if row else None

    def get_ingredients(self, recipe_id: int) -> List[IngredientRow]:
        """Ingredient rows of one recipe in stored order (empty list for unknown ids)."""
        with self.db.connect() as conn:
            rows = conn.execute(
                """
                SELECT name, raw, qty, unit FROM recipe_ingredients
                WHERE recipe_id = ?
                ORDER BY position, id
                """,
                (recipe_id,),
            ).fetchall()
        return [IngredientRow(r["name"], r["raw"], r["qty"], r["unit"]) for r in rows]

    def count(self) -> int:
        with self.db.connect() as conn:
            return conn.execute("SELECT COUNT(*) FROM recipes").fetchone()[0]
