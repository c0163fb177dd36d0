"""Dependency container wiring for the application."""

from dataclasses import dataclass

from recipe_scaling.config import Settings
from recipe_scaling.services.nutrition import NutritionAggregator
from recipe_scaling.services.recipes import RecipeScalingService
from recipe_scaling.services.scaling import IngredientScaler, ScaleResolver
from recipe_scaling.services.units import UnitNormalizer


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    unit_normalizer: UnitNormalizer
    scale_resolver: ScaleResolver
    ingredient_scaler: IngredientScaler
    nutrition_aggregator: NutritionAggregator
    recipe_scaling_service: RecipeScalingService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    unit_normalizer = UnitNormalizer(
        unknown_unit_grams=resolved_settings.unknown_unit_grams
    )
    scale_resolver = ScaleResolver(debug=resolved_settings.debug)
    ingredient_scaler = IngredientScaler()
    nutrition_aggregator = NutritionAggregator(
        normalizer=unit_normalizer,
        debug=resolved_settings.debug,
    )
    recipe_scaling_service = RecipeScalingService(
        resolver=scale_resolver,
        scaler=ingredient_scaler,
        aggregator=nutrition_aggregator,
    )
    return AppContainer(
        settings=resolved_settings,
        unit_normalizer=unit_normalizer,
        scale_resolver=scale_resolver,
        ingredient_scaler=ingredient_scaler,
        nutrition_aggregator=nutrition_aggregator,
        recipe_scaling_service=recipe_scaling_service,
    )
