import unittest
from pepper.logic.shopping.ingredient_text import (
    clean_amount,
    clean_name,
    is_quantity_or_unit,
    normalize_key,
)


class TestCleanName(unittest.TestCase):

    def test_strips_leading_debris_and_capitalizes(self):
        self.assertEqual(clean_name("¼cup flour"), "Cup flour")
        self.assertEqual(clean_name("  2 onions"), "Onions")
        self.assertEqual(clean_name("- garlic cloves"), "Garlic cloves")

    def test_only_first_letter_changes(self):
        self.assertEqual(clean_name("olive oil"), "Olive oil")
        self.assertEqual(clean_name("bBQ sauce"), "BBQ sauce")

    def test_empty_and_punctuation_only(self):
        self.assertEqual(clean_name(""), "")
        self.assertEqual(clean_name("!!! 12 /"), "")
        self.assertEqual(clean_name(None), "")

    def test_idempotent_for_names_starting_with_letter(self):
        for name in ("onion", "Chicken breast", "red bell pepper", "Sour cream"):
            once = clean_name(name)
            self.assertEqual(clean_name(once), once)


class TestNormalizeKey(unittest.TestCase):

    def test_descriptors_do_not_change_key(self):
        self.assertEqual(normalize_key("Fresh chopped onion"), "onion")
        self.assertEqual(normalize_key("dried onion"), "onion")
        self.assertEqual(normalize_key("Minced  Garlic "), "garlic")
        self.assertEqual(normalize_key("sliced fresh mushrooms"), "mushrooms")
        self.assertEqual(normalize_key("Diced tomato"), normalize_key("tomato"))

    def test_distinct_ingredients_stay_distinct(self):
        self.assertNotEqual(normalize_key("Red onion"), normalize_key("Onion"))
        self.assertNotEqual(normalize_key("Green onions"), normalize_key("Onion"))

    def test_only_standalone_words_removed(self):
        self.assertEqual(normalize_key("Freshwater fish"), "freshwater fish")
        self.assertEqual(normalize_key("Dicedtomato"), "dicedtomato")


class TestQuantityOrUnit(unittest.TestCase):

    def test_numbers_and_fractions(self):
        for word in ("2", "12", "1/2", "½", "¼", "¾", "1½"):
            self.assertTrue(is_quantity_or_unit(word), word)

    def test_units_any_case(self):
        for word in ("cup", "Cups", "TBSP", "teaspoons", "oz", "lb", "cloves", "bunches", "inch"):
            self.assertTrue(is_quantity_or_unit(word), word)

    def test_other_words(self):
        for word in ("", "large", "olive", "1.5", "(14", "handful"):
            self.assertFalse(is_quantity_or_unit(word), word)


class TestCleanAmount(unittest.TestCase):

    def test_price_annotation_and_description_dropped(self):
        self.assertEqual(clean_amount("2 tablespoons extra virgin olive oil ($3.50)", None, None), "2 tablespoons")

    def test_text_after_comma_dropped(self):
        self.assertEqual(clean_amount("3 cloves garlic, minced", 3, "cloves"), "3 cloves")

    def test_mixed_numbers(self):
        self.assertEqual(clean_amount("1 ½ cups sugar", None, None), "1 ½ cups")
        self.assertEqual(clean_amount("1/2 cup red wine ($2.00)", None, None), "1/2 cup")

    def test_first_word_always_kept(self):
        self.assertEqual(clean_amount("1 block (14 oz)", None, None), "1")
        self.assertEqual(clean_amount("Onion, diced", None, None), "Onion")

    def test_fallback_to_qty_and_unit(self):
        self.assertEqual(clean_amount(None, 1.5, "cups"), "1.5 cups")
        self.assertEqual(clean_amount("", 2.0, None), "2")
        self.assertEqual(clean_amount(None, None, "pinch"), "pinch")
        self.assertEqual(clean_amount("($3.50)", 1, "cup"), "1 cup")

    def test_nothing_known(self):
        self.assertEqual(clean_amount(None, None, None), "")
