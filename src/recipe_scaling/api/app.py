"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from recipe_scaling.api.models import NutritionRequest, ScaleRequest
from recipe_scaling.app_logging import configure_logging
from recipe_scaling.containers import AppContainer
from recipe_scaling.domain.errors import RecipeScalingError
from recipe_scaling.domain.nutrition import NutritionResult
from recipe_scaling.domain.recipes import ScaledRecipe


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(RecipeScalingError)
    async def rejected_request(
        request: Request, exc: RecipeScalingError
    ) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"error": exc.code, "detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/recipes/scale")
    async def scale_recipe(
        payload: ScaleRequest, request: Request
    ) -> dict[str, object]:
        """Scale a recipe and compute nutrition for the scaled amounts."""
        state_container: AppContainer = request.app.state.container
        scaled = state_container.recipe_scaling_service.scale_recipe(
            payload.recipe.to_domain(),
            payload.intent(),
            payload.ingredient_lookup(),
        )
        return _scaled_recipe_payload(scaled)

    @app.post("/recipes/nutrition")
    async def recipe_nutrition(
        payload: NutritionRequest, request: Request
    ) -> dict[str, object]:
        """Compute nutrition for an unscaled recipe."""
        state_container: AppContainer = request.app.state.container
        nutrition = state_container.recipe_scaling_service.nutrition_for(
            payload.recipe.to_domain(),
            payload.ingredient_lookup(),
        )
        return _nutrition_payload(nutrition)

    return app


def _scaled_recipe_payload(scaled: ScaledRecipe) -> dict[str, object]:
    return {
        "recipe_id": scaled.recipe.id,
        "factor": scaled.factor,
        "effective_servings": scaled.effective_servings,
        "lines": [asdict(line) for line in scaled.lines],
        "nutrition": _nutrition_payload(scaled.nutrition),
    }


def _nutrition_payload(nutrition: NutritionResult) -> dict[str, object]:
    return {
        "effective_servings": nutrition.effective_servings,
        "totals": asdict(nutrition.totals),
        "per_serving": asdict(nutrition.per_serving),
        "warnings": [asdict(warning) for warning in nutrition.warnings],
    }
