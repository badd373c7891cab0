"""Pydantic models for the Web Player host API."""

from pydantic import BaseModel, ConfigDict, Field


class FeaturesPayload(BaseModel):
    """Feature toggles requested for a new session."""

    no_ios: bool = Field(default=False, alias="noIOS")

    model_config = ConfigDict(populate_by_name=True)


class CreateSessionRequest(BaseModel):
    """Request body for opening a Web Player session."""

    instance_id: str
    features: FeaturesPayload | None = None
    expires_in: int | None = Field(default=None, gt=0)
