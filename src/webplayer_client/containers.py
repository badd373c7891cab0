"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from webplayer_client.adapters.project_api import HttpxProjectApi, ProjectApi
from webplayer_client.config import Settings, parse_features
from webplayer_client.domain.sessions import WebPlayerFeatures


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    project_api: ProjectApi
    default_features: WebPlayerFeatures
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    project_api = HttpxProjectApi.create(
        api_base_url=resolved_settings.api_base_url,
        api_token=resolved_settings.api_token,
        project_id=resolved_settings.project_id,
        timeout=resolved_settings.request_timeout,
    )

    async def close_resources() -> None:
        await project_api.close()

    return AppContainer(
        settings=resolved_settings,
        project_api=project_api,
        default_features=parse_features(resolved_settings.webplayer_features),
        close_resources=close_resources,
    )
