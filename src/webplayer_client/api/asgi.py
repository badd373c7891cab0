"""ASGI entrypoint for the Web Player host API."""

from webplayer_client.api.app import create_app
from webplayer_client.containers import build_container

app = create_app(build_container())
