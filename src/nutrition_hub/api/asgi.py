"""ASGI entrypoint for the nutrition hub API."""

from nutrition_hub.api.app import create_app
from nutrition_hub.containers import build_container

app = create_app(build_container())
