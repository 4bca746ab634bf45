"""SQLAlchemy schemas persisted by the backend."""

from userhub_backend.database.schemas.user import UserSchema

__all__ = ["UserSchema"]
