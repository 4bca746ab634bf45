"""Service layer for API-specific business logic."""

from userhub_backend.api.services.user import (
    InvalidArgumentError,
    UserCandidate,
    UserNotFoundError,
    UserService,
    UserServiceError,
    UserStore,
)

__all__ = [
    "InvalidArgumentError",
    "UserCandidate",
    "UserNotFoundError",
    "UserService",
    "UserServiceError",
    "UserStore",
]
