"""Nutrition result models."""

from dataclasses import dataclass, field

from recipe_scaling.domain.warnings import EngineWarning


@dataclass(frozen=True)
class NutritionValues:
    """Twelve nutrient amounts for a whole recipe or a single serving."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    vitamin_a: float = 0.0
    vitamin_c: float = 0.0
    vitamin_d: float = 0.0
    calcium: float = 0.0
    iron: float = 0.0


@dataclass(frozen=True)
class NutritionResult:
    """Totals and per-serving nutrition for a recipe."""

    totals: NutritionValues
    per_serving: NutritionValues
    effective_servings: int
    warnings: tuple[EngineWarning, ...] = field(default_factory=tuple)
