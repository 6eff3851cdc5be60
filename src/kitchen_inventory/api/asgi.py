"""ASGI entrypoint for the kitchen inventory API."""

from kitchen_inventory.api.app import create_app
from kitchen_inventory.containers import build_container

app = create_app(build_container())
