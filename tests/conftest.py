"""Shared test fixtures."""

import asyncio
import logging
from dataclasses import dataclass, field

import pytest

from webplayer_client.adapters.project_api import ApiError, ProjectApi
from webplayer_client.app_logging import PACKAGE_LOGGER
from webplayer_client.config import Settings
from webplayer_client.containers import AppContainer
from webplayer_client.domain.sessions import WebPlayerFeatures


@dataclass
class FakeProjectApi(ProjectApi):
    """Fake project API that records calls and replays queued responses.

    A queued ``ApiError`` is raised instead of returned. When ``gate`` is set,
    each call waits on it before answering.
    """

    project_id: str = "project-1"
    responses: list[object] = field(default_factory=list)
    calls: list[tuple[str, str, dict[str, object] | None]] = field(
        default_factory=list
    )
    gate: asyncio.Event | None = None

    async def fetch(
        self,
        endpoint: str,
        method: str = "GET",
        json: dict[str, object] | None = None,
    ) -> object:
        self.calls.append((method, endpoint, json))
        if self.gate is not None:
            await self.gate.wait()
        response = self.responses.pop(0) if self.responses else {}
        if isinstance(response, ApiError):
            raise response
        return response


def session_record(**overrides: object) -> dict[str, object]:
    """Return a server-shaped session record."""
    record: dict[str, object] = {
        "identifier": "S1",
        "projectId": "project-1",
        "instanceId": "instance-1",
        "features": {"noIOS": False},
        "url": "https://player.example/S1",
        "token": "jwt-token",
        "expiration": "2030-01-01T00:00:00Z",
    }
    record.update(overrides)
    return record


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_base_url="https://api.test/v1",
        api_token="api-token",
        project_id="project-1",
        admin_token="admin-token",
    )


@pytest.fixture
def project_api() -> FakeProjectApi:
    return FakeProjectApi()


@pytest.fixture
def container(settings: Settings, project_api: FakeProjectApi) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        project_api=project_api,
        default_features=WebPlayerFeatures(),
        close_resources=close_resources,
    )


@pytest.fixture
def propagate_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    """Let package log records reach pytest's capture handler."""
    monkeypatch.setattr(logging.getLogger(PACKAGE_LOGGER), "propagate", True)
