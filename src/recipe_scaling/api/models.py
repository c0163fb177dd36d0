"""Pydantic models for recipe scaling request payloads."""

from pydantic import BaseModel, model_validator

from recipe_scaling.domain.ingredients import Ingredient
from recipe_scaling.domain.recipes import (
    Multiplier,
    Recipe,
    RecipeIngredientLine,
    ScaleIntent,
    TargetKeyAmount,
)
from recipe_scaling.services.recipes import IDENTITY


class IngredientPayload(BaseModel):
    """Ingredient with per-100g nutrients."""

    id: str
    name: str
    category: str | None = None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None
    vitamin_a: float | None = None
    vitamin_c: float | None = None
    vitamin_d: float | None = None
    calcium: float | None = None
    iron: float | None = None

    def to_domain(self) -> Ingredient:
        return Ingredient(**self.model_dump())


class RecipeLinePayload(BaseModel):
    """Recipe ingredient line payload."""

    id: str
    ingredient_id: str
    amount: float
    unit: str
    notes: str | None = None
    brand: str | None = None
    is_optional: bool = False
    order: int = 0

    def to_domain(self) -> RecipeIngredientLine:
        return RecipeIngredientLine(**self.model_dump())


class RecipePayload(BaseModel):
    """Recipe payload."""

    id: str
    title: str
    servings: int
    lines: list[RecipeLinePayload]
    scaling_key_ingredient_id: str | None = None

    def to_domain(self) -> Recipe:
        return Recipe(
            id=self.id,
            title=self.title,
            servings=self.servings,
            lines=tuple(line.to_domain() for line in self.lines),
            scaling_key_ingredient_id=self.scaling_key_ingredient_id,
        )


class NutritionRequest(BaseModel):
    """Recipe with the ingredient profiles it references."""

    recipe: RecipePayload
    ingredients: list[IngredientPayload]

    def ingredient_lookup(self) -> dict[str, Ingredient]:
        return {item.id: item.to_domain() for item in self.ingredients}


class ScaleRequest(NutritionRequest):
    """Scale request; at most one of the intent fields may be set."""

    multiplier: float | None = None
    target_key_amount: float | None = None

    @model_validator(mode="after")
    def check_single_intent(self) -> "ScaleRequest":
        """Reject requests that set both a multiplier and a target amount."""
        if self.multiplier is not None and self.target_key_amount is not None:
            raise ValueError("Provide either multiplier or target_key_amount, not both")
        return self

    def intent(self) -> ScaleIntent:
        if self.target_key_amount is not None:
            return TargetKeyAmount(self.target_key_amount)
        if self.multiplier is not None:
            return Multiplier(self.multiplier)
        return IDENTITY
