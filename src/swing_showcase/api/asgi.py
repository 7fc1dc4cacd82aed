"""ASGI entrypoint for the Swing Boudoir API."""

from swing_showcase.api.app import create_app
from swing_showcase.containers import build_container

app = create_app(build_container())
