"""Domain models for Web Player sessions."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace

_NO_IOS = "noIOS"
_IMMUTABLE_KEYS = {"projectId", "instanceId", "features"}
_SESSION_KEYS = {"identifier", "url", "token", "expiration"}


@dataclass(frozen=True)
class WebPlayerFeatures:
    """Capability toggles applied when a session is created."""

    no_ios: bool = False

    def to_payload(self) -> dict[str, bool]:
        """Return the wire representation of the feature set."""
        return {_NO_IOS: self.no_ios}

    @classmethod
    def from_payload(cls, payload: Mapping[str, object] | None) -> "WebPlayerFeatures":
        """Build a feature set from a wire mapping."""
        if not payload:
            return cls()
        return cls(no_ios=bool(payload.get(_NO_IOS, False)))


@dataclass(frozen=True)
class WebPlayerSession:
    """Last known state of a Web Player session."""

    project_id: str
    instance_id: str
    features: WebPlayerFeatures = field(default_factory=WebPlayerFeatures)
    identifier: str | None = None
    url: str | None = None
    token: str | None = None
    expiration: str | None = None
    extra: dict[str, object] = field(default_factory=dict)

    def to_payload(self) -> dict[str, object]:
        """Return the session in the server's camelCase shape."""
        payload: dict[str, object] = dict(self.extra)
        payload.update(
            {
                "identifier": self.identifier,
                "projectId": self.project_id,
                "instanceId": self.instance_id,
                "features": self.features.to_payload(),
                "url": self.url,
                "token": self.token,
                "expiration": self.expiration,
            }
        )
        return payload

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "WebPlayerSession":
        """Build a session from a server record."""
        features = payload.get("features")
        blank = cls(
            project_id=str(payload.get("projectId", "")),
            instance_id=str(payload.get("instanceId", "")),
            features=WebPlayerFeatures.from_payload(
                features if isinstance(features, Mapping) else None
            ),
        )
        return merge_session(blank, payload)


def merge_session(
    session: WebPlayerSession, patch: Mapping[str, object]
) -> WebPlayerSession:
    """Shallow-merge a server record into a session and return the result.

    Keys present in ``patch`` overwrite the matching session fields; fields the
    patch does not mention keep their values. Project, instance and features
    are fixed at construction and are never taken from the patch.
    """
    updates: dict[str, object] = {}
    extra = dict(session.extra)
    for key, value in patch.items():
        if key in _IMMUTABLE_KEYS:
            continue
        if key in _SESSION_KEYS:
            updates[key] = value
        else:
            extra[key] = value
    return replace(session, extra=extra, **updates)


def clear_session(session: WebPlayerSession) -> WebPlayerSession:
    """Return the session with all server-assigned fields reset."""
    return replace(session, identifier=None, url=None, token=None, expiration=None)
