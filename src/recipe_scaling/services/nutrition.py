"""Nutrition aggregation over recipe lines."""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field, fields
from typing import Protocol

from recipe_scaling.domain.errors import InvalidAmount, InvalidScale, InvalidServings
from recipe_scaling.domain.ingredients import NUTRIENT_FIELDS, Ingredient
from recipe_scaling.domain.nutrition import NutritionResult, NutritionValues
from recipe_scaling.domain.recipes import RecipeIngredientLine
from recipe_scaling.domain.warnings import MISSING_INGREDIENT, EngineWarning
from recipe_scaling.services.rounding import round_half_away
from recipe_scaling.services.scaling import ensure_valid_amount
from recipe_scaling.services.units import UnitNormalizer

# Nutrition-label convention: grams of macros to one decimal, everything
# else (kcal, mg, mcg) to whole numbers.
ROUNDING_PLACES: dict[str, int] = {
    "calories": 0,
    "protein": 1,
    "carbs": 1,
    "fat": 1,
    "fiber": 1,
    "sugar": 1,
    "sodium": 0,
    "vitamin_a": 0,
    "vitamin_c": 0,
    "vitamin_d": 0,
    "calcium": 0,
    "iron": 0,
}

_logger = logging.getLogger(__name__)


class IngredientLookup(Protocol):
    """Read-only ingredient source keyed by ingredient id."""

    def get(self, ingredient_id: str, /) -> Ingredient | None:
        """Return the ingredient or None when it is unknown."""


@dataclass
class NutritionAggregator:
    """Sums per-100g nutrient profiles over recipe lines."""

    normalizer: UnitNormalizer = field(default_factory=UnitNormalizer)
    debug: bool = False

    def aggregate(
        self,
        lines: Iterable[RecipeIngredientLine],
        ingredient_lookup: IngredientLookup,
        base_servings: int,
        scale_factor: float = 1.0,
    ) -> NutritionResult:
        """Compute rounded totals and per-serving values.

        ``lines`` should carry unrounded amounts; ``scale_factor`` only
        determines the effective serving count.
        """
        servings = effective_servings(base_servings, scale_factor)
        totals = dict.fromkeys(NUTRIENT_FIELDS, 0.0)
        collected: list[EngineWarning] = []

        for line in lines:
            ensure_valid_amount(line)
            ingredient = ingredient_lookup.get(line.ingredient_id)
            if ingredient is None:
                collected.append(
                    EngineWarning(
                        code=MISSING_INGREDIENT,
                        message=(
                            f"Ingredient {line.ingredient_id} not found for "
                            f"line {line.id}; contributing nothing."
                        ),
                        line_id=line.id,
                    )
                )
                continue
            conversion = self.normalizer.convert(
                line.amount, line.unit, ingredient.name
            )
            if conversion.warning is not None:
                collected.append(
                    EngineWarning(
                        code=conversion.warning.code,
                        message=conversion.warning.message,
                        line_id=line.id,
                    )
                )
            ratio = conversion.grams / 100.0
            for name in NUTRIENT_FIELDS:
                totals[name] += ingredient.nutrient(name) * ratio

        overflowed = [
            name for name, value in totals.items() if not math.isfinite(value)
        ]
        if overflowed:
            raise InvalidAmount(
                f"Nutrition totals overflow for: {', '.join(overflowed)}"
            )

        for warning in collected:
            _logger.warning("Nutrition %s: %s", warning.code, warning.message)
        if self.debug:
            _logger.info(
                "Nutrition aggregated: servings=%s calories=%.1f warnings=%s",
                servings,
                totals["calories"],
                len(collected),
            )

        per_serving = {name: value / servings for name, value in totals.items()}
        return NutritionResult(
            totals=round_nutrition(totals),
            per_serving=round_nutrition(per_serving),
            effective_servings=servings,
            warnings=tuple(collected),
        )


def effective_servings(base_servings: int, scale_factor: float) -> int:
    """Return the serving divisor for a scaled recipe, never below one."""
    if base_servings < 1:
        raise InvalidServings(f"Servings must be at least 1: {base_servings!r}")
    if not math.isfinite(scale_factor) or scale_factor <= 0:
        raise InvalidScale(
            f"Scale factor must be a finite positive number: {scale_factor!r}"
        )
    scaled = base_servings * scale_factor
    if not math.isfinite(scaled):
        raise InvalidScale(f"Scale factor {scale_factor!r} overflows servings")
    return max(1, int(round_half_away(scaled)))


def round_nutrition(values: dict[str, float]) -> NutritionValues:
    """Apply label rounding to raw nutrient sums."""
    return NutritionValues(
        **{
            item.name: round_half_away(values[item.name], ROUNDING_PLACES[item.name])
            for item in fields(NutritionValues)
        }
    )
