"""Shared test fixtures."""

import pytest

from recipe_scaling.config import Settings
from recipe_scaling.containers import AppContainer, build_container
from recipe_scaling.domain.ingredients import Ingredient
from recipe_scaling.domain.recipes import Recipe, RecipeIngredientLine


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", debug=False, unknown_unit_grams=100.0)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def egg() -> Ingredient:
    return Ingredient(id="ing-egg", name="Egg", calories=155, protein=13.0)


@pytest.fixture
def flour() -> Ingredient:
    return Ingredient(
        id="ing-flour",
        name="All-purpose flour",
        category="baking",
        calories=364,
        protein=10.3,
        carbs=76.3,
        fat=1.0,
        fiber=2.7,
        sugar=0.3,
        sodium=2,
        calcium=15,
        iron=4.6,
    )


@pytest.fixture
def ingredients(egg: Ingredient, flour: Ingredient) -> dict[str, Ingredient]:
    return {egg.id: egg, flour.id: flour}


@pytest.fixture
def egg_recipe() -> Recipe:
    return Recipe(
        id="recipe-eggs",
        title="Boiled eggs",
        servings=2,
        lines=(
            RecipeIngredientLine(
                id="line-egg", ingredient_id="ing-egg", amount=2, unit="large"
            ),
        ),
        scaling_key_ingredient_id="line-egg",
    )


@pytest.fixture
def pancake_recipe() -> Recipe:
    return Recipe(
        id="recipe-pancakes",
        title="Pancakes",
        servings=4,
        lines=(
            RecipeIngredientLine(
                id="line-flour",
                ingredient_id="ing-flour",
                amount=1.5,
                unit="cups",
                order=0,
            ),
            RecipeIngredientLine(
                id="line-egg",
                ingredient_id="ing-egg",
                amount=2,
                unit="large",
                notes="room temperature",
                brand="Happy Hens",
                order=1,
            ),
            RecipeIngredientLine(
                id="line-sprinkles",
                ingredient_id="ing-sprinkles",
                amount=1,
                unit="tbsp",
                is_optional=True,
                order=2,
            ),
        ),
    )
