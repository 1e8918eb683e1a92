"""ASGI entrypoint for the recipe API."""

from chef_next_door.api.app import create_app
from chef_next_door.containers import build_container

app = create_app(build_container())
