"""
Import recipes into the Recipe Store and export shopping lists.
"""
import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from pepper.infra.database import Database
from pepper.infra.Recipe_Repository import RecipeRepository
from pepper.infra.ShoppingList_Repository import ShoppingListRepository

logger = logging.getLogger(__name__)

SAMPLE_RECIPES_FILE = Path(__file__).parent.parent / 'data' / 'sample_recipes.json'


class DataImporter:
    """Load recipes with their ingredient rows from a JSON file.

    Expected format:
        [ { "id": 245, "title": "Tofu Stir-fry",
            "ingredients": [ { "name": str, "raw": str|null, "qty": num|null, "unit": str|null } ] } ]
    """

    def __init__(self, db: Database):
        self.recipes = RecipeRepository(db)

    def import_recipes(self, input_path: Path) -> int:
        """Import every recipe in the file; returns how many were stored."""
        with open(input_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"{input_path}: expected a list of recipes")

        imported = 0
        for entry in data:
            title = (entry.get('title') or '').strip() if isinstance(entry, dict) else ''
            if not title:
                logger.warning(f"Skipping recipe without title: {entry!r}")
                continue
            self.recipes.add_recipe(title, entry.get('ingredients') or [], recipe_id=entry.get('id'))
            imported += 1
        logger.info(f"Imported {imported} recipes from {input_path}")
        return imported


class DataExporter:
    """Export a user's shopping list for spreadsheets."""

    def __init__(self, db: Database):
        self.lists = ShoppingListRepository(db)

    def export_shopping_list_csv(self, user_id: str, output_path: Optional[Path] = None) -> Optional[Path]:
        shopping_list = self.lists.get_user_shopping_list(user_id)
        if shopping_list is None:
            logger.error(f"No shopping list for user {user_id}")
            return None
        if output_path is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_path = Path(f"shopping_list_{timestamp}.csv")

        with open(output_path, 'w', newline='', encoding='utf-8') as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=['category', 'ingredient', 'amount'])
            writer.writeheader()
            for item in shopping_list.items:
                writer.writerow(item.to_dict())

        logger.info(f"Exported {len(shopping_list.items)} shopping items to {output_path}")
        return output_path


def main(argv=None):
    import argparse
    from pepper.utilities.config import DATABASE_PATH, LOG_LEVEL

    parser = argparse.ArgumentParser(description="Import recipes / export shopping lists for Pepper's Pantry")
    parser.add_argument('action', choices=['import', 'export'], help='Action to perform')
    parser.add_argument('--file', help='Input/output file path (import defaults to the bundled sample recipes)')
    parser.add_argument('--user', help='User id whose shopping list is exported')
    parser.add_argument('--db', default=str(DATABASE_PATH), help='SQLite database path')

    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    db = Database(args.db)
    db.init_schema()

    if args.action == 'import':
        source = Path(args.file) if args.file else SAMPLE_RECIPES_FILE
        count = DataImporter(db).import_recipes(source)
        print(f"✓ Imported {count} recipes from: {source}")
        return 0

    if not args.user:
        print("Error: --user is required for export")
        return 1
    result = DataExporter(db).export_shopping_list_csv(args.user, Path(args.file) if args.file else None)
    if result:
        print(f"✓ Exported to: {result}")
        return 0
    print("✗ Export failed")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
