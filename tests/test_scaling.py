"""Tests for scale resolution and ingredient scaling."""

from dataclasses import replace

import pytest

from recipe_scaling.domain.errors import (
    InvalidIngredientAmount,
    InvalidScale,
    NoScalingKeyConfigured,
    ScalingKeyNotFound,
)
from recipe_scaling.domain.recipes import (
    Multiplier,
    RecipeIngredientLine,
    TargetKeyAmount,
)
from recipe_scaling.services.scaling import IngredientScaler, ScaleResolver


def test_multiplier_is_returned_directly(egg_recipe) -> None:
    assert ScaleResolver().resolve(egg_recipe, Multiplier(2.5)) == 2.5


@pytest.mark.parametrize("factor", [0, -1, float("nan"), float("inf")])
def test_non_positive_multiplier_is_rejected(egg_recipe, factor) -> None:
    with pytest.raises(InvalidScale):
        ScaleResolver().resolve(egg_recipe, Multiplier(factor))


def test_target_key_amount_matches_multiplier(egg_recipe) -> None:
    resolver = ScaleResolver()
    base_amount = egg_recipe.lines[0].amount

    by_target = resolver.resolve(egg_recipe, TargetKeyAmount(base_amount * 3))
    by_multiplier = resolver.resolve(egg_recipe, Multiplier(3))

    assert by_target == 3
    assert by_target == by_multiplier


def test_target_key_amount_with_fractional_base(pancake_recipe) -> None:
    recipe = replace(pancake_recipe, scaling_key_ingredient_id="line-flour")

    factor = ScaleResolver().resolve(recipe, TargetKeyAmount(0.75))

    assert factor == pytest.approx(0.5)


def test_key_may_reference_ingredient_id(pancake_recipe) -> None:
    recipe = replace(pancake_recipe, scaling_key_ingredient_id="ing-egg")

    assert ScaleResolver().resolve(recipe, TargetKeyAmount(5)) == 2.5


def test_target_without_key_is_rejected(pancake_recipe) -> None:
    with pytest.raises(NoScalingKeyConfigured):
        ScaleResolver().resolve(pancake_recipe, TargetKeyAmount(4))


def test_target_with_unknown_key_is_rejected(pancake_recipe) -> None:
    recipe = replace(pancake_recipe, scaling_key_ingredient_id="line-missing")

    with pytest.raises(ScalingKeyNotFound):
        ScaleResolver().resolve(recipe, TargetKeyAmount(4))


def test_non_positive_target_is_rejected(egg_recipe) -> None:
    with pytest.raises(InvalidScale):
        ScaleResolver().resolve(egg_recipe, TargetKeyAmount(0))


def test_key_line_with_zero_amount_is_rejected(egg_recipe) -> None:
    recipe = replace(egg_recipe, lines=(replace(egg_recipe.lines[0], amount=0),))

    with pytest.raises(InvalidIngredientAmount) as excinfo:
        ScaleResolver().resolve(recipe, TargetKeyAmount(4))

    assert excinfo.value.line_id == "line-egg"


def test_identity_scaling_keeps_amounts(pancake_recipe) -> None:
    scaled = IngredientScaler().scale(pancake_recipe.lines, 1.0)

    assert [line.amount for line in scaled] == [
        line.amount for line in pancake_recipe.lines
    ]
    assert scaled == list(pancake_recipe.lines)


@pytest.mark.parametrize("factor", [0.25, 1.5, 3, 7.3])
def test_scale_exact_is_linear(pancake_recipe, factor) -> None:
    scaled = IngredientScaler().scale_exact(pancake_recipe.lines, factor)

    for original, line in zip(pancake_recipe.lines, scaled, strict=True):
        assert line.amount == original.amount * factor


def test_scale_rounds_to_two_places() -> None:
    lines = [RecipeIngredientLine(id="l1", ingredient_id="i1", amount=1, unit="cup")]

    assert IngredientScaler().scale(lines, 1 / 3)[0].amount == 0.33
    assert IngredientScaler().scale_exact(lines, 1 / 3)[0].amount == 1 / 3


def test_scale_keeps_other_fields_and_optional_lines(pancake_recipe) -> None:
    scaled = IngredientScaler().scale(pancake_recipe.lines, 2)

    assert len(scaled) == len(pancake_recipe.lines)
    egg_line = scaled[1]
    assert egg_line.unit == "large"
    assert egg_line.notes == "room temperature"
    assert egg_line.brand == "Happy Hens"
    assert egg_line.order == 1
    assert scaled[2].is_optional is True
    assert scaled[2].amount == 2


def test_scale_does_not_mutate_input(pancake_recipe) -> None:
    IngredientScaler().scale(pancake_recipe.lines, 4)

    assert pancake_recipe.lines[0].amount == 1.5


def test_scale_empty_list() -> None:
    assert IngredientScaler().scale([], 2) == []


def test_scale_rejects_non_positive_line_amount() -> None:
    lines = [RecipeIngredientLine(id="l1", ingredient_id="i1", amount=-2, unit="g")]

    with pytest.raises(InvalidIngredientAmount):
        IngredientScaler().scale(lines, 2)


def test_scale_rejects_bad_factor(pancake_recipe) -> None:
    with pytest.raises(InvalidScale):
        IngredientScaler().scale(pancake_recipe.lines, 0)


def test_scale_exact_rejects_overflowing_amount(egg_recipe) -> None:
    with pytest.raises(InvalidScale):
        IngredientScaler().scale_exact(egg_recipe.lines, 1e308)
