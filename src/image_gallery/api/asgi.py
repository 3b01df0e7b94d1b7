"""ASGI entrypoint for the image gallery API."""

from image_gallery.api.app import create_app
from image_gallery.containers import build_container

app = create_app(build_container())
