"""IngredientRow: one stored ingredient line of a recipe (name, raw text, quantity, unit)."""
from typing import Optional


class IngredientRow:
    def __init__(self, name: str = "", raw: Optional[str] = None,
                 qty: Optional[float] = None, unit: Optional[str] = None):
        self.name = name or ""
        self.raw = raw
        self.qty = qty
        self.unit = unit

    def __str__(self) -> str:
        if self.raw:
            return f"{self.name} ({self.raw})"
        return f"{self.name} - {self.qty if self.qty is not None else ''} {self.unit or ''}".rstrip()

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, IngredientRow):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Creates an IngredientRow from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        qty = d.get("qty")
        if qty is not None and not isinstance(qty, (int, float)):
            try:
                qty = float(qty)
            except (TypeError, ValueError):
                qty = None
        return IngredientRow(
            name=d.get("name") or "",
            raw=d.get("raw"),
            qty=qty,
            unit=d.get("unit"),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "raw": self.raw,
            "qty": self.qty,
            "unit": self.unit,
        }
