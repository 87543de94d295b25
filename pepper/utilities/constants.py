from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Grocery sections, checked in this order (first keyword hit wins)
PRODUCE: Final[str] = "Produce"
MEAT_PROTEIN: Final[str] = "Meat & Protein"
DAIRY: Final[str] = "Dairy"
PANTRY: Final[str] = "Pantry"
DEFAULT_CATEGORY: Final[str] = PANTRY

CATEGORY_KEYWORDS: Final[tuple[tuple[str, tuple[str, ...]], ...]] = (
    (PRODUCE, ("onion", "garlic", "tomato", "pepper", "lettuce", "spinach", "carrot",
               "celery", "potato", "broccoli", "mushroom", "herb")),
    (MEAT_PROTEIN, ("chicken", "beef", "pork", "fish", "tofu", "egg", "turkey",
                    "salmon", "shrimp")),
    (DAIRY, ("milk", "cheese", "butter", "cream", "yogurt", "sour cream")),
    (PANTRY, ("oil", "vinegar", "sauce", "flour", "sugar", "rice", "pasta", "bread",
              "cereal", "beans", "lentils", "quinoa")),
)

# Words that do not change what has to be bought
STATE_DESCRIPTORS: Final[tuple[str, ...]] = ("fresh", "dried")
PREP_DESCRIPTORS: Final[tuple[str, ...]] = ("chopped", "diced", "minced", "sliced")

UNIT_WORDS: Final[frozenset[str]] = frozenset({
    "cup", "cups",
    "tsp", "teaspoon", "teaspoons",
    "tbsp", "tablespoon", "tablespoons",
    "oz", "ounce", "ounces",
    "lb", "pound", "pounds",
    "gram", "grams",
    "kg", "kilogram",
    "liter", "liters",
    "ml", "milliliter",
    "quart", "quarts",
    "pint", "pints",
    "can", "cans",
    "jar", "jars",
    "bottle", "bottles",
    "package", "packages",
    "clove", "cloves",
    "head", "heads",
    "bunch", "bunches",
    "piece", "pieces",
    "slice", "slices",
    "strip", "strips",
    "inch", "inches",
})

DAYS_OF_WEEK: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)

NO_MEAL_PLAN_MESSAGE: Final[str] = (
    "No meal plan found. Create a meal plan first to generate a shopping list."
)
