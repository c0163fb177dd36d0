"""Ingredient reference data."""

import math
from dataclasses import dataclass

from recipe_scaling.domain.errors import NegativeNutrientValue

NUTRIENT_FIELDS: tuple[str, ...] = (
    "calories",
    "protein",
    "carbs",
    "fat",
    "fiber",
    "sugar",
    "sodium",
    "vitamin_a",
    "vitamin_c",
    "vitamin_d",
    "calcium",
    "iron",
)


@dataclass(frozen=True)
class Ingredient:
    """Ingredient with a nutrient profile per 100 grams.

    ``None`` marks a nutrient that was never measured. Energy is kcal,
    macros are grams, sodium/vitamin C/calcium/iron are mg and vitamin A/D
    are mcg.
    """

    id: str
    name: str
    category: str | None = None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None
    vitamin_a: float | None = None
    vitamin_c: float | None = None
    vitamin_d: float | None = None
    calcium: float | None = None
    iron: float | None = None

    def __post_init__(self) -> None:
        for name in NUTRIENT_FIELDS:
            value = getattr(self, name)
            if value is not None and (not math.isfinite(value) or value < 0):
                raise NegativeNutrientValue(
                    f"Ingredient {self.id} has invalid {name}: {value}"
                )

    def nutrient(self, name: str) -> float:
        """Return a nutrient value, treating unmeasured as zero."""
        value = getattr(self, name)
        return float(value) if value is not None else 0.0
