"""ShoppingItem: display-ready line of a shopping list (ingredient, amount, grocery section)."""
from pepper.utilities.constants import DEFAULT_CATEGORY


class ShoppingItem:
    def __init__(self, ingredient: str = "", amount: str = "", category: str = DEFAULT_CATEGORY):
        self.ingredient = ingredient
        self.amount = amount
        self.category = category

    def append_amount(self, amount: str):
        '''Records another occurrence of the same ingredient; amounts are joined as text.'''
        self.amount = f"{self.amount} + {amount}"

    def __str__(self) -> str:
        return f"{self.ingredient} - {self.amount} [{self.category}]"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return ShoppingItem(
            ingredient=str(d.get("ingredient") or ""),
            amount=str(d.get("amount") or ""),
            category=str(d.get("category") or DEFAULT_CATEGORY),
        )

    def to_dict(self):
        '''Converts the item to a dictionary for JSON persistence and responses.'''
        return {
            "ingredient": self.ingredient,
            "amount": self.amount,
            "category": self.category,
        }
