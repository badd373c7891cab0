"""Web Player session lifecycle for a single project instance."""

import inspect
import logging
from collections.abc import Callable, Mapping

from webplayer_client.adapters.project_api import ProjectApi
from webplayer_client.domain.sessions import (
    WebPlayerFeatures,
    WebPlayerSession,
    clear_session,
    merge_session,
)

logger = logging.getLogger(__name__)

DestroyCallback = Callable[[], object]


def _noop() -> None:
    return None


class UnexpectedResponseError(Exception):
    """Raised when a successful response does not carry the expected body."""


async def _run_destroy_callback(
    on_destroy: DestroyCallback, session_id: str
) -> None:
    try:
        outcome = on_destroy()
        if inspect.isawaitable(outcome):
            await outcome
    except Exception:
        logger.exception(
            "WebPlayer destroy callback failed for session %s", session_id
        )


class WebPlayer:
    """Keeps one Web Player session in sync with the remote API.

    A client is meant for a single caller issuing operations one at a time.
    Nothing here serializes concurrent calls on the same instance.
    """

    def __init__(
        self,
        project: ProjectApi,
        instance_id: str,
        features: WebPlayerFeatures | None = None,
    ) -> None:
        self._project = project
        self._on_destroy: DestroyCallback | None = _noop
        self._session = WebPlayerSession(
            project_id=project.project_id,
            instance_id=instance_id,
            features=features or WebPlayerFeatures(),
        )

    @staticmethod
    async def _fetch(
        project: ProjectApi,
        session_id: str | None = None,
        method: str = "GET",
        json: dict[str, object] | None = None,
    ) -> object:
        endpoint = f"/webplayer/{session_id}" if session_id else "/webplayer"
        return await project.fetch(endpoint, method=method, json=json)

    @property
    def info(self) -> WebPlayerSession:
        """Return the last known session state."""
        return self._session

    @staticmethod
    async def list_sessions(project: ProjectApi) -> object:
        """List all active Web Player sessions of a project.

        The decoded response body is returned as sent by the server.
        """
        return await WebPlayer._fetch(project)

    @staticmethod
    async def fetch_session(
        project: ProjectApi, session_id: str
    ) -> dict[str, object] | None:
        """Return the server record for a session, or None if it is missing."""
        result = await WebPlayer._fetch(project, session_id)
        if isinstance(result, list) and result and result[0]:
            return result[0]
        return None

    async def refresh_session(self) -> WebPlayerSession:
        """Update the local session from the server and return it."""
        session_id = self._session.identifier
        if not session_id:
            return self._session
        # A missing record is not treated as a destroyed session.
        record = await WebPlayer.fetch_session(self._project, session_id)
        if record is None:
            logger.warning("WebPlayer session %s not found", session_id)
            return self._session
        self._session = merge_session(self._session, record)
        return self._session

    async def create_session(
        self, expires_in: int, on_destroy: DestroyCallback | None = None
    ) -> WebPlayerSession:
        """Create a session that expires after ``expires_in`` seconds."""
        new_session = await WebPlayer._fetch(
            self._project,
            method="POST",
            json={
                "projectId": self._session.project_id,
                "instanceId": self._session.instance_id,
                "features": self._session.features.to_payload(),
                "expiresIn": expires_in,
            },
        )
        if not isinstance(new_session, Mapping):
            raise UnexpectedResponseError(
                f"WebPlayer create returned {type(new_session).__name__}"
            )
        self._on_destroy = on_destroy
        self._session = merge_session(self._session, new_session)
        logger.info(
            "Created WebPlayer session %s for instance %s",
            self._session.identifier,
            self._session.instance_id,
        )
        return self._session

    async def destroy(self, session_id: str | None = None) -> object:
        """Destroy the session and return the raw API response.

        Local state is cleared before the request is sent. The destroy
        callback runs once the request has finished, whether or not it
        succeeded.
        """
        target = session_id or self._session.identifier
        # Without an id the DELETE would address the whole collection.
        if not target:
            raise ValueError("No WebPlayer session to destroy")
        on_destroy = self._on_destroy
        self._on_destroy = None
        self._session = clear_session(self._session)
        try:
            result = await WebPlayer._fetch(self._project, target, method="DELETE")
        finally:
            if on_destroy is not None:
                await _run_destroy_callback(on_destroy, target)
        logger.info("Destroyed WebPlayer session %s", target)
        return result


async def open_webplayer(
    project: ProjectApi,
    instance_id: str,
    expires_in: int,
    features: WebPlayerFeatures | None = None,
    on_destroy: DestroyCallback | None = None,
) -> WebPlayer:
    """Create a Web Player client for an instance and start its session."""
    webplayer = WebPlayer(project, instance_id, features)
    await webplayer.create_session(expires_in, on_destroy)
    return webplayer
