"""Grocery-section lookup for shopping items."""
from pepper.utilities.constants import CATEGORY_KEYWORDS, DEFAULT_CATEGORY


def categorize(cleaned_name: str) -> str:
    """Return the first section in CATEGORY_KEYWORDS with a keyword contained in the name.

    Priority is the order of CATEGORY_KEYWORDS, not the best match:
    "Pepper jack cheese" is Produce because Produce is checked before Dairy.
    """
    n = (cleaned_name or '').lower()
    for category, keywords in CATEGORY_KEYWORDS:
        for frag in keywords:
            if frag in n:
                return category
    return DEFAULT_CATEGORY


__all__ = ['categorize']
