"""Tests for container wiring."""

import asyncio

from webplayer_client.adapters.project_api import HttpxProjectApi
from webplayer_client.containers import build_container


def test_build_container_creates_project_api(settings) -> None:
    container = build_container(settings)
    assert isinstance(container.project_api, HttpxProjectApi)
    assert container.project_api.project_id == "project-1"
    asyncio.run(container.close_resources())
