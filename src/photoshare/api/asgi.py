"""ASGI entrypoint for the photo sharing API."""

from photoshare.api.app import create_app
from photoshare.containers import build_container

app = create_app(build_container())
