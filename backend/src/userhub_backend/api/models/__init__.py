"""Models used for API request and response payloads."""

from userhub_backend.api.models.user import (
    ErrorResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "ErrorResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
