"""Recipe line item: ingredient text, free-form quantity and a unit."""
from dinner.domain.CookingUnit import CookingUnit


class RecipeIngredient:
    __slots__ = ("name", "quantity", "unit")

    def __init__(self, name: str, quantity: str = "", unit: CookingUnit = CookingUnit.NONE):
        self.name = name
        # Free text ("1/2", "a handful"); never parsed as a number
        self.quantity = quantity
        self.unit = CookingUnit.from_raw(unit)

    def _fields(self):
        return (self.name, self.quantity, self.unit)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RecipeIngredient):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(self._fields())

    def __str__(self) -> str:
        parts = [p for p in (self.quantity, self.unit.value, self.name) if p]
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"RecipeIngredient({self.name!r}, {self.quantity!r}, {self.unit!r})"

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return RecipeIngredient(
            name=d.get("name") or "",
            quantity=d.get("quantity") or "",
            unit=CookingUnit.from_raw(d.get("unit")),
        )

    def to_dict(self):
        return {"name": self.name, "quantity": self.quantity, "unit": self.unit.value}
