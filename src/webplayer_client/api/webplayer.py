"""Web Player endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from webplayer_client.adapters.project_api import ApiError, ApiResponse
from webplayer_client.api.models import CreateSessionRequest
from webplayer_client.domain.sessions import WebPlayerFeatures
from webplayer_client.services.webplayer import (
    UnexpectedResponseError,
    WebPlayer,
    open_webplayer,
)

if TYPE_CHECKING:
    from webplayer_client.containers import AppContainer

router = APIRouter(prefix="/webplayer", tags=["webplayer"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def _upstream_error(exc: ApiError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.result)


@router.get("/sessions", dependencies=[Depends(require_admin)])
async def list_sessions(request: Request) -> dict[str, object]:
    """Return all active Web Player sessions of the project."""
    container: AppContainer = request.app.state.container
    try:
        sessions = await WebPlayer.list_sessions(container.project_api)
    except ApiError as exc:
        raise _upstream_error(exc) from exc
    return {"sessions": sessions}


@router.post("/sessions", dependencies=[Depends(require_admin)])
async def create_session(
    body: CreateSessionRequest, request: Request
) -> dict[str, object]:
    """Open a Web Player session for an instance."""
    container: AppContainer = request.app.state.container
    features = (
        WebPlayerFeatures(no_ios=body.features.no_ios)
        if body.features is not None
        else container.default_features
    )
    try:
        webplayer = await open_webplayer(
            container.project_api,
            body.instance_id,
            expires_in=body.expires_in or container.settings.webplayer_expires_in,
            features=features,
        )
    except ApiError as exc:
        raise _upstream_error(exc) from exc
    except UnexpectedResponseError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
        ) from exc
    return webplayer.info.to_payload()


@router.get("/sessions/{session_id}", dependencies=[Depends(require_admin)])
async def session_detail(session_id: str, request: Request) -> dict[str, object]:
    """Return the server record for a session."""
    container: AppContainer = request.app.state.container
    try:
        record = await WebPlayer.fetch_session(container.project_api, session_id)
    except ApiError as exc:
        raise _upstream_error(exc) from exc
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return record


@router.delete("/sessions/{session_id}", dependencies=[Depends(require_admin)])
async def destroy_session(
    session_id: str, instance_id: str, request: Request
) -> dict[str, object]:
    """Destroy a session by id."""
    container: AppContainer = request.app.state.container
    webplayer = WebPlayer(container.project_api, instance_id)
    try:
        result = await webplayer.destroy(session_id)
    except ApiError as exc:
        raise _upstream_error(exc) from exc
    if isinstance(result, ApiResponse):
        return result.to_payload()
    return {"statusCode": status.HTTP_200_OK, "result": result}
