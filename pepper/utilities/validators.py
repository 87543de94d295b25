"""
Input validation schemas using Pydantic for the shopping list endpoints.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from pepper.utilities.constants import DEFAULT_CATEGORY


class ShoppingItemInput(BaseModel):
    """Schema for a single shopping list item."""
    ingredient: str = Field(..., min_length=1, max_length=200)
    amount: str = Field(default="", max_length=200)
    category: str = Field(default=DEFAULT_CATEGORY, max_length=50)

    @field_validator('ingredient', 'amount', 'category')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('ingredient')
    @classmethod
    def validate_ingredient(cls, v):
        if not v:
            raise ValueError('Ingredient cannot be empty')
        return v

    @field_validator('category')
    @classmethod
    def default_category(cls, v):
        return v or DEFAULT_CATEGORY


class ShoppingListItemDelete(BaseModel):
    """Body of DELETE /shopping-list: remove one item by position."""
    model_config = ConfigDict(populate_by_name=True)

    shopping_list_id: str = Field(..., alias='shoppingListId', min_length=1)
    item_index: int = Field(..., alias='itemIndex', ge=0)


class ShoppingListItemUpdate(ShoppingListItemDelete):
    """Body of PUT /shopping-list: replace one item by position."""
    updated_item: ShoppingItemInput = Field(..., alias='updatedItem')
