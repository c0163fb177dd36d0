"""Rounding helpers shared by the scaling and nutrition services."""

import math
from decimal import ROUND_HALF_UP, Decimal

DISPLAY_AMOUNT_PLACES = 2

# Every float at or above 2**52 is a whole number.
_INTEGRAL_FLOAT_THRESHOLD = 2.0**52


def round_half_away(value: float, places: int = 0) -> float:
    """Round to ``places`` decimals, ties away from zero.

    The float's shortest repr is used so that 2.675 rounds to 2.68 rather
    than to the binary neighbour below it. Non-finite and already-integral
    magnitudes are returned unchanged.
    """
    if not math.isfinite(value) or abs(value) >= _INTEGRAL_FLOAT_THRESHOLD:
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_display_amount(value: float) -> float:
    """Round an ingredient amount for display."""
    return round_half_away(value, DISPLAY_AMOUNT_PLACES)
