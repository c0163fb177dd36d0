"""Domain models for recipes and scale requests."""

from dataclasses import dataclass

from recipe_scaling.domain.errors import RecipeScalingError
from recipe_scaling.domain.nutrition import NutritionResult


@dataclass(frozen=True)
class RecipeIngredientLine:
    """An ingredient used by a recipe, with amount and free-form unit."""

    id: str
    ingredient_id: str
    amount: float
    unit: str
    notes: str | None = None
    brand: str | None = None
    is_optional: bool = False
    order: int = 0


@dataclass(frozen=True)
class Recipe:
    """Base recipe. Scaling never mutates it."""

    id: str
    title: str
    servings: int
    lines: tuple[RecipeIngredientLine, ...] = ()
    scaling_key_ingredient_id: str | None = None


@dataclass(frozen=True)
class Multiplier:
    """Scale every amount by ``factor``."""

    factor: float


@dataclass(frozen=True)
class TargetKeyAmount:
    """Scale so the key ingredient line ends up at ``amount``."""

    amount: float


ScaleIntent = Multiplier | TargetKeyAmount


@dataclass(frozen=True)
class ScaledRecipe:
    """Derived view of a recipe at a given scale factor."""

    recipe: Recipe
    factor: float
    lines: list[RecipeIngredientLine]
    effective_servings: int
    nutrition: NutritionResult


@dataclass(frozen=True)
class BatchOutcome:
    """Result of scaling one recipe in a batch."""

    recipe_id: str
    scaled: ScaledRecipe | None = None
    error: RecipeScalingError | None = None
