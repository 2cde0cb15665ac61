"""ASGI entrypoint for the OhSnap API."""

from ohsnap.api.app import create_app
from ohsnap.containers import build_container

app = create_app(build_container())
