"""Unit normalization to grams."""

import math
import warnings
from dataclasses import dataclass, field

from recipe_scaling.domain.errors import InvalidAmount
from recipe_scaling.domain.warnings import (
    UNKNOWN_UNIT,
    EngineWarning,
    UnknownUnitWarning,
)

DEFAULT_UNKNOWN_UNIT_GRAMS = 100.0

# Volume units assume water density; count units are rough averages.
BASE_UNIT_GRAMS: dict[str, float] = {
    "g": 1.0,
    "kg": 1000.0,
    "oz": 28.35,
    "lb": 453.59,
    "ml": 1.0,
    "l": 1000.0,
    "cup": 240.0,
    "cups": 240.0,
    "tbsp": 15.0,
    "tsp": 5.0,
    "piece": 100.0,
    "pieces": 100.0,
    "large": 150.0,
    "medium": 100.0,
    "small": 50.0,
    "slice": 25.0,
    "slices": 25.0,
    "clove": 3.0,
    "cloves": 3.0,
}


@dataclass(frozen=True)
class OverrideRule:
    """Ingredient-specific grams-per-unit weight.

    ``units`` are compared exactly unless ``unit_contains`` is set, in which
    case any unit containing one of them matches ("extra large" matches
    "large").
    """

    name_pattern: str
    units: tuple[str, ...]
    grams_per_unit: float
    unit_contains: bool = False

    def matches(self, name: str, unit: str) -> bool:
        """Return True when both lowercased name and unit satisfy the rule."""
        if self.name_pattern not in name:
            return False
        if self.unit_contains:
            return any(candidate in unit for candidate in self.units)
        return unit in self.units


# Evaluated in order; the first match wins.
OVERRIDE_RULES: tuple[OverrideRule, ...] = (
    OverrideRule("egg", ("large",), 50.0, unit_contains=True),
    OverrideRule("egg", ("medium",), 44.0, unit_contains=True),
    OverrideRule("egg", ("small",), 38.0, unit_contains=True),
    OverrideRule("egg", ("piece", "pieces"), 50.0),
    OverrideRule("flour", ("cup", "cups"), 120.0),
    OverrideRule("sugar", ("cup", "cups"), 200.0),
    OverrideRule("butter", ("cup", "cups"), 227.0),
    OverrideRule("butter", ("tbsp",), 14.0),
    OverrideRule("milk", ("cup", "cups"), 240.0),
)


@dataclass(frozen=True)
class UnitConversion:
    """Grams for an amount, plus a warning when the unit was not recognised."""

    grams: float
    warning: EngineWarning | None = None


@dataclass
class UnitNormalizer:
    """Converts ``(amount, unit, ingredient name)`` to grams."""

    unknown_unit_grams: float = DEFAULT_UNKNOWN_UNIT_GRAMS
    rules: tuple[OverrideRule, ...] = OVERRIDE_RULES
    base_units: dict[str, float] = field(
        default_factory=lambda: dict(BASE_UNIT_GRAMS)
    )

    def convert(
        self, amount: float, unit: str, ingredient_name_hint: str = ""
    ) -> UnitConversion:
        """Convert to grams without emitting Python warnings."""
        if not math.isfinite(amount) or amount < 0:
            raise InvalidAmount(f"Amount must be finite and non-negative: {amount!r}")
        unit_key = unit.strip().lower()
        name_key = ingredient_name_hint.lower()

        for rule in self.rules:
            if rule.matches(name_key, unit_key):
                grams = _finite_grams(amount * rule.grams_per_unit)
                return UnitConversion(grams=grams)

        grams_per_unit = self.base_units.get(unit_key)
        if grams_per_unit is not None:
            return UnitConversion(grams=_finite_grams(amount * grams_per_unit))

        label = ingredient_name_hint or "ingredient"
        return UnitConversion(
            grams=_finite_grams(amount * self.unknown_unit_grams),
            warning=EngineWarning(
                code=UNKNOWN_UNIT,
                message=(
                    f"Unknown unit: {unit} for {label}. "
                    f"Assuming {self.unknown_unit_grams:g}g per unit."
                ),
            ),
        )

    def normalize(
        self, amount: float, unit: str, ingredient_name_hint: str = ""
    ) -> float:
        """Return grams; unknown units emit ``UnknownUnitWarning``."""
        conversion = self.convert(amount, unit, ingredient_name_hint)
        if conversion.warning is not None:
            warnings.warn(conversion.warning.message, UnknownUnitWarning, stacklevel=2)
        return conversion.grams


def _finite_grams(grams: float) -> float:
    if not math.isfinite(grams):
        raise InvalidAmount(f"Amount is too large to convert to grams: {grams!r}")
    return grams


_default_normalizer = UnitNormalizer()


def normalize(amount: float, unit: str, ingredient_name_hint: str = "") -> float:
    """Convert with the default rule set."""
    return _default_normalizer.normalize(amount, unit, ingredient_name_hint)
