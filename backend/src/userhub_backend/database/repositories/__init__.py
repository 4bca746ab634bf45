"""Repositories wrapping SQLAlchemy sessions."""

from userhub_backend.database.repositories.user import UserData, UserRepository

__all__ = ["UserData", "UserRepository"]
