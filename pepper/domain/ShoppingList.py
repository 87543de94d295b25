"""ShoppingList aggregate: a user's persisted, ordered list of ShoppingItem."""
from typing import List, Optional

from pepper.domain.ShoppingItem import ShoppingItem


class ItemIndexError(LookupError):
    """Raised when an item position does not exist in the list."""


class ShoppingList:
    def __init__(self, id: str = "", user_id: str = "", meal_plan_id: Optional[str] = None,
                 name: str = "Shopping List", items: Optional[List[ShoppingItem]] = None,
                 created_at: str = ""):
        self.id = id
        self.user_id = user_id
        self.meal_plan_id = meal_plan_id
        self.name = name
        self.items = items[:] if items else []
        self.created_at = created_at

    def _check_index(self, index: int):
        if not isinstance(index, int) or index < 0 or index >= len(self.items):
            raise ItemIndexError(f"Item index {index} out of range (list has {len(self.items)} items)")

    def replace_item(self, index: int, item: ShoppingItem):
        '''
        Replaces the item at the given position.
        '''
        self._check_index(index)
        self.items[index] = item

    def remove_item(self, index: int) -> ShoppingItem:
        '''
        Removes and returns the item at the given position.
        '''
        self._check_index(index)
        return self.items.pop(index)

    def get_items(self):
        return self.items

    def grouped_by_category(self):
        '''Returns {category: [items]} keeping first-seen category and item order.'''
        groups = {}
        for item in self.items:
            groups.setdefault(item.category, []).append(item)
        return groups

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"{self.name} Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def items_to_list(self):
        return [item.to_dict() for item in self.items]

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "meal_plan_id": self.meal_plan_id,
            "name": self.name,
            "items": self.items_to_list(),
            "created_at": self.created_at,
        }
