"""SQLite access for the Recipe, Meal Plan and Shopping List stores.

The Database object is built explicitly and handed to the repositories; the
schema is created by an explicit init_schema() call at startup. Every
connect() opens a short-lived connection, so repositories can be used from
worker threads.
"""
import sqlite3
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

logger = logging.getLogger(__name__)

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS recipes (
        id INTEGER PRIMARY KEY,
        title TEXT NOT NULL,
        created_at TEXT DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS recipe_ingredients (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        recipe_id INTEGER NOT NULL,
        position INTEGER NOT NULL,
        name TEXT NOT NULL,
        raw TEXT,
        qty REAL,
        unit TEXT,
        FOREIGN KEY (recipe_id) REFERENCES recipes (id)
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_recipe_ingredients_recipe
    ON recipe_ingredients(recipe_id, position)
    """,
    """
    CREATE TABLE IF NOT EXISTS meal_plans (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        name TEXT DEFAULT 'My Meal Plan',
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS meal_plan_items (
        id TEXT PRIMARY KEY,
        meal_plan_id TEXT NOT NULL,
        recipe_id INTEGER NOT NULL,
        recipe_title TEXT NOT NULL,
        day_of_week TEXT NOT NULL,
        meal_type TEXT DEFAULT 'dinner',
        created_at TEXT NOT NULL,
        FOREIGN KEY (meal_plan_id) REFERENCES meal_plans (id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS shopping_lists (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        meal_plan_id TEXT,
        name TEXT DEFAULT 'Shopping List',
        items TEXT NOT NULL,
        created_at TEXT NOT NULL,
        FOREIGN KEY (meal_plan_id) REFERENCES meal_plans (id)
    )
    """,
)


class Database:
    """Handle on one SQLite database file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"Database({self.path})"

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection; commit on success, roll back on error, always close."""
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_schema(self) -> None:
        """Create tables and indexes if missing. Safe to call more than once."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.connect() as conn:
            cursor = conn.cursor()
            for statement in SCHEMA:
                cursor.execute(statement)
        logger.info("Database schema ready at %s", self.path)
