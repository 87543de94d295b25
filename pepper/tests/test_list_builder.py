import time
import threading
import unittest
from pepper.domain.IngredientRow import IngredientRow
from pepper.domain.ShoppingItem import ShoppingItem
from pepper.logic.shopping.list_builder import consolidate

RECIPES = {
    1: [
        IngredientRow("Fresh chopped onion", "1 cup chopped onion"),
        IngredientRow("Chicken breast", "1 lb chicken breast ($5.99)"),
        IngredientRow("Olive oil", None, 2, "tbsp"),
    ],
    2: [
        IngredientRow("dried onion", "2 tsp dried onion"),
        IngredientRow("Whole milk", "1 cup milk, cold"),
        IngredientRow("Olive oil", "1 tbsp olive oil"),
    ],
    3: [
        IngredientRow("Red onion", "1/4 cup red onion, sliced"),
    ],
}


def fetch(recipe_id):
    return RECIPES.get(recipe_id, [])


class TestConsolidate(unittest.TestCase):

    def test_merges_by_normalized_key_in_first_seen_order(self):
        items = consolidate([1, 2], fetch)
        self.assertEqual(items, [
            ShoppingItem("Fresh chopped onion", "1 cup + 2 tsp", "Produce"),
            ShoppingItem("Chicken breast", "1 lb", "Meat & Protein"),
            ShoppingItem("Olive oil", "2 tbsp + 1 tbsp", "Pantry"),
            ShoppingItem("Whole milk", "1 cup", "Dairy"),
        ])

    def test_same_ingredient_in_two_recipes_gives_one_item(self):
        rows = {
            10: [IngredientRow("onion", "1 large onion")],
            11: [IngredientRow("Onion", "2 cups onion, diced")],
        }
        items = consolidate([10, 11], rows.get)
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].amount, "1 + 2 cups")

    def test_different_base_names_are_not_merged(self):
        items = consolidate([1, 3], fetch)
        names = [i.ingredient for i in items]
        self.assertIn("Fresh chopped onion", names)
        self.assertIn("Red onion", names)

    def test_deterministic(self):
        first = [i.to_dict() for i in consolidate([3, 2, 1], fetch)]
        second = [i.to_dict() for i in consolidate([3, 2, 1], fetch)]
        self.assertEqual(first, second)
        self.assertEqual(first[0]["ingredient"], "Red onion")

    def test_repeated_recipe_repeats_amounts(self):
        items = consolidate([1, 1], fetch)
        self.assertEqual(items[1].amount, "1 lb + 1 lb")

    def test_failing_fetch_skips_only_that_recipe(self):
        def flaky(recipe_id):
            if recipe_id == 2:
                raise RuntimeError("database is locked")
            return fetch(recipe_id)

        with self.assertLogs("pepper.logic.shopping.list_builder", level="WARNING"):
            items = consolidate([1, 2, 3], flaky)
        names = [i.ingredient for i in items]
        self.assertEqual(names, ["Fresh chopped onion", "Chicken breast", "Olive oil", "Red onion"])
        self.assertEqual(items[2].amount, "2 tbsp")

    def test_rows_without_usable_name_keep_their_amounts(self):
        rows = {1: [IngredientRow("", "1 cup"), IngredientRow("½", None, 1, "cup"), IngredientRow("salt", "1 tsp")]}
        items = consolidate([1], rows.get)
        self.assertEqual(items, [
            ShoppingItem("", "1 cup + 1 cup", "Pantry"),
            ShoppingItem("Salt", "1 tsp", "Pantry"),
        ])

    def test_empty_plan(self):
        self.assertEqual(consolidate([], fetch), [])


class TestConsolidateParallel(unittest.TestCase):

    def test_parallel_keeps_plan_order(self):
        release = threading.Event()

        def slow_first(recipe_id):
            if recipe_id == 1:
                release.wait(2)
            else:
                release.set()
            return fetch(recipe_id)

        parallel = consolidate([1, 2, 3], slow_first, max_workers=3, timeout=5)
        sequential = consolidate([1, 2, 3], fetch)
        self.assertEqual([i.to_dict() for i in parallel], [i.to_dict() for i in sequential])

    def test_timed_out_fetch_is_skipped(self):
        stuck = threading.Event()

        def hangs_on_two(recipe_id):
            if recipe_id == 2:
                stuck.wait(5)
            return fetch(recipe_id)

        try:
            with self.assertLogs("pepper.logic.shopping.list_builder", level="WARNING") as logs:
                items = consolidate([1, 2, 3], hangs_on_two, max_workers=3, timeout=0.2)
        finally:
            stuck.set()
        self.assertTrue(any("timed out" in line for line in logs.output))
        names = [i.ingredient for i in items]
        self.assertNotIn("Whole milk", names)
        self.assertIn("Red onion", names)
        self.assertEqual(items[0].amount, "1 cup")

    def test_single_recipe_fetch_is_bounded_by_timeout(self):
        stuck = threading.Event()

        def hangs(recipe_id):
            stuck.wait(3)
            return fetch(recipe_id)

        started = time.monotonic()
        try:
            with self.assertLogs("pepper.logic.shopping.list_builder", level="WARNING") as logs:
                items = consolidate([1], hangs, max_workers=4, timeout=0.2)
        finally:
            stuck.set()
        self.assertLess(time.monotonic() - started, 1.0)
        self.assertEqual(items, [])
        self.assertTrue(any("timed out" in line for line in logs.output))

    def test_one_worker_still_honours_timeout(self):
        stuck = threading.Event()

        def hangs_on_one(recipe_id):
            if recipe_id == 1:
                stuck.wait(3)
            return fetch(recipe_id)

        started = time.monotonic()
        try:
            with self.assertLogs("pepper.logic.shopping.list_builder", level="WARNING"):
                items = consolidate([1, 3], hangs_on_one, max_workers=1, timeout=0.2)
        finally:
            stuck.set()
        self.assertLess(time.monotonic() - started, 1.0)
        # recipe 3 is queued behind the hung fetch on the single worker
        self.assertEqual(items, [])

    def test_timeout_is_shared_by_all_fetches(self):
        stuck = threading.Event()

        def hangs(recipe_id):
            stuck.wait(3)
            return fetch(recipe_id)

        started = time.monotonic()
        try:
            with self.assertLogs("pepper.logic.shopping.list_builder", level="WARNING") as logs:
                items = consolidate([1, 2, 3, 4, 5, 6], hangs, max_workers=6, timeout=0.3)
        finally:
            stuck.set()
        self.assertLess(time.monotonic() - started, 1.2)
        self.assertEqual(items, [])
        self.assertEqual(len(logs.output), 6)
