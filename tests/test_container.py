"""Tests for container wiring."""

from recipe_scaling.config import Settings
from recipe_scaling.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.recipe_scaling_service is not None
    assert container.recipe_scaling_service.aggregator is container.nutrition_aggregator
    assert container.nutrition_aggregator.normalizer is container.unit_normalizer


def test_container_applies_unknown_unit_setting() -> None:
    container = build_container(Settings(unknown_unit_grams=25.0, debug=True))

    assert container.unit_normalizer.convert(2, "pinch", "Salt").grams == 50
    assert container.scale_resolver.debug is True


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("UNKNOWN_UNIT_GRAMS", "40")
    monkeypatch.setenv("DEBUG", "true")

    settings = Settings()

    assert settings.unknown_unit_grams == 40
    assert settings.debug is True
