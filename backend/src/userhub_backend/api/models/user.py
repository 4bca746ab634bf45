"""Pydantic models for the user resource endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from userhub_backend.api.services.user import UserCandidate

USER_TEXT_MAX_LENGTH = 255


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: str = Field(alias="id")
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class UserCreateRequest(BaseModel):
    """Payload for creating a new user."""

    name: str = Field(min_length=1, max_length=USER_TEXT_MAX_LENGTH)
    email: str = Field(min_length=1, max_length=USER_TEXT_MAX_LENGTH)

    def to_candidate(self) -> UserCandidate:
        """Convert payload into the service-level candidate."""
        return UserCandidate(name=self.name, email=self.email)


class UserUpdateRequest(BaseModel):
    """Payload replacing the name and email of an existing user."""

    # presence is checked by the service once the user is known to exist
    name: str | None = Field(default=None, max_length=USER_TEXT_MAX_LENGTH)
    email: str | None = Field(default=None, max_length=USER_TEXT_MAX_LENGTH)

    def to_candidate(self) -> UserCandidate:
        """Convert payload into the service-level candidate."""
        return UserCandidate(name=self.name, email=self.email)


class ErrorResponse(BaseModel):
    """Error body returned for rejected requests."""

    detail: str


__all__ = [
    "ErrorResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
