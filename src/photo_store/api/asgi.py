"""ASGI entrypoint for the photo store API."""

from photo_store.api.app import create_app
from photo_store.containers import build_container

app = create_app(build_container())
