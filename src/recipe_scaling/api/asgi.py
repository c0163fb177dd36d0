"""ASGI entrypoint for the recipe scaling API."""

from recipe_scaling.api.app import create_app
from recipe_scaling.containers import build_container

app = create_app(build_container())
