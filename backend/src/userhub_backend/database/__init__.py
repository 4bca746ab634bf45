"""Database connectivity helpers and configuration objects."""

from userhub_backend.database.base import BaseSchema
from userhub_backend.database.dependencies import (
    SessionDep,
    get_database,
    get_session,
    get_user_repository,
)
from userhub_backend.database.repositories import UserData, UserRepository
from userhub_backend.database.schemas import UserSchema
from userhub_backend.database.service import DatabaseService
from userhub_backend.settings import BackendSettings, get_settings

__all__ = [
    "BaseSchema",
    "BackendSettings",
    "DatabaseService",
    "UserData",
    "UserRepository",
    "SessionDep",
    "UserSchema",
    "get_database",
    "get_session",
    "get_settings",
    "get_user_repository",
]
