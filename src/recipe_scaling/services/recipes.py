"""Recipe scaling service combining factor resolution, scaling and nutrition."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from recipe_scaling.domain.errors import InvalidServings, RecipeScalingError
from recipe_scaling.domain.nutrition import NutritionResult
from recipe_scaling.domain.recipes import (
    BatchOutcome,
    Multiplier,
    Recipe,
    ScaledRecipe,
    ScaleIntent,
)
from recipe_scaling.services.nutrition import IngredientLookup, NutritionAggregator
from recipe_scaling.services.scaling import (
    IngredientScaler,
    ScaleResolver,
    ensure_valid_amount,
)

IDENTITY = Multiplier(1.0)

_logger = logging.getLogger(__name__)


@dataclass
class RecipeScalingService:
    """Builds scaled views of recipes with their nutrition."""

    resolver: ScaleResolver = field(default_factory=ScaleResolver)
    scaler: IngredientScaler = field(default_factory=IngredientScaler)
    aggregator: NutritionAggregator = field(default_factory=NutritionAggregator)

    def scale_recipe(
        self,
        recipe: Recipe,
        intent: ScaleIntent,
        ingredients: IngredientLookup,
    ) -> ScaledRecipe:
        """Return the recipe scaled by ``intent`` with nutrition attached."""
        validate_recipe(recipe)
        factor = self.resolver.resolve(recipe, intent)
        display_lines = self.scaler.scale(recipe.lines, factor)
        exact_lines = self.scaler.scale_exact(recipe.lines, factor)
        nutrition = self.aggregator.aggregate(
            exact_lines, ingredients, recipe.servings, factor
        )
        return ScaledRecipe(
            recipe=recipe,
            factor=factor,
            lines=display_lines,
            effective_servings=nutrition.effective_servings,
            nutrition=nutrition,
        )

    def nutrition_for(
        self, recipe: Recipe, ingredients: IngredientLookup
    ) -> NutritionResult:
        """Return nutrition for the unscaled recipe."""
        validate_recipe(recipe)
        return self.aggregator.aggregate(recipe.lines, ingredients, recipe.servings)

    def scale_many(
        self,
        recipes: Iterable[Recipe],
        intent: ScaleIntent,
        ingredients: IngredientLookup,
    ) -> list[BatchOutcome]:
        """Scale each recipe independently; rejected recipes carry their error."""
        outcomes: list[BatchOutcome] = []
        for recipe in recipes:
            try:
                scaled = self.scale_recipe(recipe, intent, ingredients)
            except RecipeScalingError as exc:
                _logger.warning("Batch scaling rejected recipe %s: %s", recipe.id, exc)
                outcomes.append(BatchOutcome(recipe_id=recipe.id, error=exc))
                continue
            outcomes.append(BatchOutcome(recipe_id=recipe.id, scaled=scaled))
        return outcomes


def validate_recipe(recipe: Recipe) -> None:
    """Reject recipes with a bad serving count or non-positive line amounts."""
    if isinstance(recipe.servings, bool) or recipe.servings < 1:
        raise InvalidServings(
            f"Recipe {recipe.id} servings must be at least 1: {recipe.servings!r}"
        )
    for line in recipe.lines:
        ensure_valid_amount(line)

