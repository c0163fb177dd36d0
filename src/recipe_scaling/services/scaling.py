"""Scale factor resolution and ingredient scaling."""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, replace

from recipe_scaling.domain.errors import (
    InvalidIngredientAmount,
    InvalidScale,
    NoScalingKeyConfigured,
    ScalingKeyNotFound,
)
from recipe_scaling.domain.recipes import (
    Multiplier,
    Recipe,
    RecipeIngredientLine,
    ScaleIntent,
    TargetKeyAmount,
)
from recipe_scaling.services.rounding import round_display_amount

_logger = logging.getLogger(__name__)


@dataclass
class ScaleResolver:
    """Turns a scale intent into a single multiplier."""

    debug: bool = False

    def resolve(self, recipe: Recipe, intent: ScaleIntent) -> float:
        """Return a finite positive scale factor for the recipe."""
        if isinstance(intent, Multiplier):
            factor = _require_positive(intent.factor, "Scale multiplier")
        elif isinstance(intent, TargetKeyAmount):
            target = _require_positive(intent.amount, "Target key amount")
            key_line = find_key_line(recipe)
            ensure_valid_amount(key_line)
            factor = target / key_line.amount
            if not math.isfinite(factor) or factor <= 0:
                raise InvalidScale(
                    f"Target {target!r} yields unusable factor {factor!r}"
                )
        else:
            raise InvalidScale(f"Unsupported scale intent: {intent!r}")
        if self.debug:
            _logger.info("Resolved scale: recipe=%s factor=%s", recipe.id, factor)
        return factor


def find_key_line(recipe: Recipe) -> RecipeIngredientLine:
    """Return the line referenced by the recipe's scaling key."""
    key = recipe.scaling_key_ingredient_id
    if not key:
        raise NoScalingKeyConfigured(
            f"Recipe {recipe.id} has no scaling key ingredient"
        )
    for line in recipe.lines:
        if line.id == key:
            return line
    for line in recipe.lines:
        if line.ingredient_id == key:
            return line
    raise ScalingKeyNotFound(
        f"Key ingredient {key} not found in recipe {recipe.id}"
    )


@dataclass
class IngredientScaler:
    """Applies a scale factor to every recipe line."""

    def scale(
        self, lines: Iterable[RecipeIngredientLine], factor: float
    ) -> list[RecipeIngredientLine]:
        """Return new lines with amounts rounded for display."""
        return [
            replace(line, amount=round_display_amount(line.amount))
            for line in self.scale_exact(lines, factor)
        ]

    def scale_exact(
        self, lines: Iterable[RecipeIngredientLine], factor: float
    ) -> list[RecipeIngredientLine]:
        """Return new lines with unrounded amounts."""
        _require_positive(factor, "Scale factor")
        scaled: list[RecipeIngredientLine] = []
        for line in lines:
            ensure_valid_amount(line)
            amount = line.amount * factor
            if not math.isfinite(amount):
                raise InvalidScale(
                    f"Scaling line {line.id} by {factor!r} overflows its amount"
                )
            scaled.append(replace(line, amount=amount))
        return scaled


def ensure_valid_amount(line: RecipeIngredientLine) -> None:
    """Reject lines whose amount is not a finite positive number."""
    if not math.isfinite(line.amount) or line.amount <= 0:
        raise InvalidIngredientAmount(line.id, line.amount)


def _require_positive(value: float, label: str) -> float:
    if not math.isfinite(value) or value <= 0:
        raise InvalidScale(f"{label} must be a finite positive number: {value!r}")
    return float(value)
