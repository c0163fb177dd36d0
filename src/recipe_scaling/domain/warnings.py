"""Non-fatal conditions reported alongside computed results."""

from dataclasses import dataclass

UNKNOWN_UNIT = "unknown_unit"
MISSING_INGREDIENT = "missing_ingredient"


@dataclass(frozen=True)
class EngineWarning:
    """A degraded-but-valid computation step."""

    code: str
    message: str
    line_id: str | None = None


class UnknownUnitWarning(UserWarning):
    """Emitted when a unit falls back to the default grams-per-unit value."""
