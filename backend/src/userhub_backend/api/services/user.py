"""User resource domain logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from userhub_backend.database import UserData, UserSchema

logger = logging.getLogger(__name__)

USER_ID_REQUIRED = "User ID is required"
USER_FIELDS_REQUIRED = "User name and email are required"
USER_NOT_FOUND = "User not found"


class UserServiceError(Exception):
    """Base class for errors reported by :class:`UserService`."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(UserServiceError):
    """Raised when a required input is missing or empty."""


class UserNotFoundError(UserServiceError):
    """Raised when the referenced user does not exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__(USER_NOT_FOUND)
        self.user_id = user_id


@dataclass(slots=True, frozen=True)
class UserCandidate:
    """Name and email supplied for a create or update call."""

    name: str | None = None
    email: str | None = None


class UserStore(Protocol):
    """Persistence operations the service relies on."""

    def find_many(self) -> list[UserSchema]: ...

    def find_unique(self, user_id: str) -> UserSchema | None: ...

    def create(self, data: UserData) -> UserSchema: ...

    def update(self, user_id: str, data: UserData) -> UserSchema | None: ...

    def delete(self, user_id: str) -> bool: ...


class UserService:
    """Validates user requests and forwards them to the injected store."""

    def __init__(self, repository: UserStore) -> None:
        self._repository = repository

    def list_users(self) -> list[UserSchema]:
        return self._repository.find_many()

    def fetch_user(self, user_id: str | None) -> UserSchema:
        self._require_id(user_id)
        return self._get_existing(user_id)

    def create_user(self, candidate: UserCandidate) -> UserSchema:
        data = self._require_fields(candidate)
        user = self._repository.create(data)
        logger.info("Created user %s", user.id)
        return user

    def update_user(self, user_id: str | None, candidate: UserCandidate) -> UserSchema:
        self._require_id(user_id)
        self._get_existing(user_id)
        data = self._require_fields(candidate)
        user = self._repository.update(user_id, data)
        if user is None:
            # removed between the lookup and the write
            raise UserNotFoundError(user_id)
        logger.info("Updated user %s", user_id)
        return user

    def remove_user(self, user_id: str | None) -> None:
        self._require_id(user_id)
        self._get_existing(user_id)
        if not self._repository.delete(user_id):
            raise UserNotFoundError(user_id)
        logger.info("Removed user %s", user_id)

    def _get_existing(self, user_id: str) -> UserSchema:
        user = self._repository.find_unique(user_id)
        if user is None:
            logger.info("User %s not found", user_id)
            raise UserNotFoundError(user_id)
        return user

    @staticmethod
    def _require_id(user_id: str | None) -> None:
        if not user_id:
            raise InvalidArgumentError(USER_ID_REQUIRED)

    @staticmethod
    def _require_fields(candidate: UserCandidate) -> UserData:
        if not candidate.name or not candidate.email:
            raise InvalidArgumentError(USER_FIELDS_REQUIRED)
        return UserData(name=candidate.name, email=candidate.email)
