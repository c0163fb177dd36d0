"""Errors raised when a scaling or nutrition request is rejected."""


class RecipeScalingError(ValueError):
    """Base class for rejected engine requests."""

    code = "recipe_scaling_error"


class InvalidScale(RecipeScalingError):
    """Scale multiplier or target amount is not a finite positive number."""

    code = "invalid_scale"


class NoScalingKeyConfigured(RecipeScalingError):
    """Reverse scaling was requested for a recipe without a key ingredient."""

    code = "no_scaling_key"


class ScalingKeyNotFound(RecipeScalingError):
    """The configured key ingredient does not match any recipe line."""

    code = "scaling_key_not_found"


class InvalidIngredientAmount(RecipeScalingError):
    """A recipe line has a zero, negative or non-finite amount."""

    code = "invalid_ingredient_amount"

    def __init__(self, line_id: str, amount: float) -> None:
        super().__init__(f"Ingredient line {line_id} has invalid amount {amount!r}")
        self.line_id = line_id
        self.amount = amount


class InvalidServings(RecipeScalingError):
    """Base serving count is below one."""

    code = "invalid_servings"


class InvalidAmount(RecipeScalingError):
    """An amount passed to unit conversion is negative or non-finite."""

    code = "invalid_amount"


class NegativeNutrientValue(RecipeScalingError):
    """An ingredient declares a negative or non-finite nutrient value."""

    code = "negative_nutrient"
