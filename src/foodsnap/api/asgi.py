"""ASGI entrypoint for the FoodSnap API."""

from foodsnap.api.app import create_app
from foodsnap.containers import build_container

app = create_app(build_container())
