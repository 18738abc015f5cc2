"""
Recipe input: ingredient names plus optional per-serving calories.
Only the ingredient name takes part in analysis; quantity/unit pass through.
"""
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .profile import positive_number


@dataclass(frozen=True)
class Ingredient:
    name: str
    quantity: Optional[str] = None
    unit: Optional[str] = None

    @property
    def usable(self) -> bool:
        return isinstance(self.name, str) and bool(self.name.strip())

    @classmethod
    def from_value(cls, value: Any) -> Optional["Ingredient"]:
        """Dict entries or bare strings. Entries without a usable name -> None."""
        if isinstance(value, str):
            return cls(name=value) if value.strip() else None
        if not isinstance(value, dict):
            return None
        name = value.get("name")
        if not isinstance(name, str) or not name.strip():
            return None
        quantity = value.get("quantity")
        unit = value.get("unit")
        return cls(
            name=name,
            quantity=str(quantity) if quantity is not None else None,
            unit=str(unit) if unit is not None else None,
        )


@dataclass(frozen=True)
class Recipe:
    ingredients: Tuple[Ingredient, ...] = ()
    calories: Optional[float] = None
    recipe_id: Optional[str] = None

    def ingredient_names(self) -> Tuple[str, ...]:
        """Usable ingredient names in recipe order."""
        return tuple(
            ing.name for ing in self.ingredients or ()
            if isinstance(ing, Ingredient) and ing.usable
        )

    @classmethod
    def from_dict(cls, data: Any) -> "Recipe":
        if not isinstance(data, dict):
            return cls()
        raw = data.get("ingredients")
        ingredients = []
        if isinstance(raw, (list, tuple)):
            for entry in raw:
                ing = Ingredient.from_value(entry)
                if ing is not None:
                    ingredients.append(ing)
        recipe_id = data.get("_id", data.get("id"))
        return cls(
            ingredients=tuple(ingredients),
            calories=positive_number(data.get("calories")),
            recipe_id=str(recipe_id) if recipe_id is not None else None,
        )
