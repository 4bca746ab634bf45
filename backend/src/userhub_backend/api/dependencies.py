"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from userhub_backend.api.services import UserService, UserStore
from userhub_backend.database import get_user_repository


def get_user_service(
    repository: Annotated[UserStore, Depends(get_user_repository)],
) -> UserService:
    """Return a :class:`UserService` wired to the request's repository."""

    return UserService(repository)


__all__ = ["get_user_service"]
