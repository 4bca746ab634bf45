"""Unit tests for :class:`UserService` against an in-memory store."""

from __future__ import annotations

from datetime import UTC, datetime
from itertools import count

import pytest

from userhub_backend.api.services import (
    InvalidArgumentError,
    UserCandidate,
    UserNotFoundError,
    UserService,
)
from userhub_backend.database import UserData, UserSchema


class FakeUserStore:
    """In-memory store recording every mutation it receives."""

    def __init__(self) -> None:
        self._store: dict[str, UserSchema] = {}
        self._ids = count(1)
        self.mutations: list[str] = []

    def find_many(self) -> list[UserSchema]:
        return list(self._store.values())

    def find_unique(self, user_id: str) -> UserSchema | None:
        return self._store.get(user_id)

    def create(self, data: UserData) -> UserSchema:
        timestamp = datetime.now(UTC)
        user = UserSchema(
            id=f"u{next(self._ids)}",
            name=data.name,
            email=data.email,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self._store[user.id] = user
        self.mutations.append("create")
        return user

    def update(self, user_id: str, data: UserData) -> UserSchema | None:
        user = self._store.get(user_id)
        if user is None:
            return None
        user.name = data.name
        user.email = data.email
        self.mutations.append("update")
        return user

    def delete(self, user_id: str) -> bool:
        self.mutations.append("delete")
        return self._store.pop(user_id, None) is not None


@pytest.fixture
def store() -> FakeUserStore:
    return FakeUserStore()


@pytest.fixture
def service(store: FakeUserStore) -> UserService:
    return UserService(store)


def test_list_users_empty(service: UserService) -> None:
    assert service.list_users() == []


def test_list_users_returns_created(service: UserService) -> None:
    ann = service.create_user(UserCandidate(name="Ann", email="a@x.com"))
    bob = service.create_user(UserCandidate(name="Bob", email="b@x.com"))

    assert [user.id for user in service.list_users()] == [ann.id, bob.id]


def test_create_then_fetch_round_trip(service: UserService) -> None:
    created = service.create_user(UserCandidate(name="Ann", email="a@x.com"))

    fetched = service.fetch_user(created.id)

    assert created.id == "u1"
    assert (fetched.id, fetched.name, fetched.email) == ("u1", "Ann", "a@x.com")


@pytest.mark.parametrize(
    "candidate",
    [
        UserCandidate(name="Ann"),
        UserCandidate(email="a@x.com"),
        UserCandidate(name="", email="a@x.com"),
        UserCandidate(name="Ann", email=""),
        UserCandidate(),
    ],
)
def test_create_rejects_missing_fields(
    service: UserService, store: FakeUserStore, candidate: UserCandidate
) -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        service.create_user(candidate)

    assert exc_info.value.message == "User name and email are required"
    assert store.mutations == []
    assert service.list_users() == []


def test_create_accepts_any_email_text(service: UserService) -> None:
    first = service.create_user(UserCandidate(name="Ann", email="not-an-email"))
    second = service.create_user(UserCandidate(name="Bob", email="not-an-email"))

    assert first.id != second.id


@pytest.mark.parametrize("user_id", ["", None])
def test_empty_id_is_invalid_argument(
    service: UserService, store: FakeUserStore, user_id: str | None
) -> None:
    candidate = UserCandidate(name="Ann", email="a@x.com")

    with pytest.raises(InvalidArgumentError, match="User ID is required"):
        service.fetch_user(user_id)
    with pytest.raises(InvalidArgumentError, match="User ID is required"):
        service.update_user(user_id, candidate)
    with pytest.raises(InvalidArgumentError, match="User ID is required"):
        service.remove_user(user_id)

    assert store.mutations == []


def test_fetch_unknown_id_is_not_found(service: UserService) -> None:
    service.create_user(UserCandidate(name="Ann", email="a@x.com"))

    with pytest.raises(UserNotFoundError) as exc_info:
        service.fetch_user("never-created")

    assert exc_info.value.user_id == "never-created"
    assert exc_info.value.message == "User not found"


def test_update_replaces_fields_and_keeps_id(service: UserService) -> None:
    created = service.create_user(UserCandidate(name="Ann", email="a@x.com"))

    updated = service.update_user(
        created.id, UserCandidate(name="Anna", email="anna@x.com")
    )
    fetched = service.fetch_user(created.id)

    assert updated.id == created.id
    assert (fetched.id, fetched.name, fetched.email) == (
        created.id,
        "Anna",
        "anna@x.com",
    )


def test_update_unknown_id_is_not_found(
    service: UserService, store: FakeUserStore
) -> None:
    with pytest.raises(UserNotFoundError):
        service.update_user("missing", UserCandidate(name="Ann", email="a@x.com"))

    assert store.mutations == []


def test_update_rejects_empty_fields(
    service: UserService, store: FakeUserStore
) -> None:
    created = service.create_user(UserCandidate(name="Ann", email="a@x.com"))

    with pytest.raises(InvalidArgumentError):
        service.update_user(created.id, UserCandidate(name="", email="a@x.com"))

    assert store.mutations == ["create"]
    assert service.fetch_user(created.id).name == "Ann"


def test_remove_then_fetch_is_not_found(service: UserService) -> None:
    created = service.create_user(UserCandidate(name="Ann", email="a@x.com"))

    assert service.remove_user(created.id) is None

    with pytest.raises(UserNotFoundError):
        service.fetch_user(created.id)


def test_remove_unknown_id_is_not_found(
    service: UserService, store: FakeUserStore
) -> None:
    with pytest.raises(UserNotFoundError):
        service.remove_user("missing")

    assert store.mutations == []
