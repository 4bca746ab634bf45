"""Repository helpers for working with users."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.orm import Session

from userhub_backend.database.schemas import UserSchema


@dataclass(slots=True, frozen=True)
class UserData:
    """Column values written when a user is created or replaced."""

    name: str
    email: str


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_many(self) -> list[UserSchema]:
        """Return every stored user."""
        stmt = select(UserSchema).order_by(UserSchema.created_at, UserSchema.id)
        return list(self._session.scalars(stmt))

    def find_unique(self, user_id: str) -> UserSchema | None:
        """Return user entity by user's ID."""
        return self._session.get(UserSchema, user_id)

    def create(self, data: UserData) -> UserSchema:
        """Insert a new user; the ID is generated on flush."""
        user = UserSchema(name=data.name, email=data.email)
        self._session.add(user)
        self._session.flush()
        self._session.refresh(user)
        return user

    def update(self, user_id: str, data: UserData) -> UserSchema | None:
        """Replace name and email of an existing user."""
        user = self.find_unique(user_id)
        if user is None:
            return None
        user.name = data.name
        user.email = data.email
        self._session.flush()
        self._session.refresh(user)
        return user

    def delete(self, user_id: str) -> bool:
        """Delete a user, returning ``False`` when nothing matched."""
        user = self.find_unique(user_id)
        if user is None:
            return False
        self._session.delete(user)
        self._session.flush()
        return True
