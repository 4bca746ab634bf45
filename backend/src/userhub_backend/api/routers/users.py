"""User resource endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from userhub_backend.api.dependencies import get_user_service
from userhub_backend.api.models import (
    ErrorResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from userhub_backend.api.services import (
    UserNotFoundError,
    UserService,
    UserServiceError,
)

router = APIRouter(prefix="/users", tags=["users"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


def _to_http_error(exc: UserServiceError) -> HTTPException:
    if isinstance(exc, UserNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)


@router.get("", response_model=list[UserResponse])
def list_users(
    user_service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """Return every stored user."""

    return [
        UserResponse.model_validate(user, from_attributes=True)
        for user in user_service.list_users()
    ]


@router.get("/{user_id}", response_model=UserResponse, responses=_ERROR_RESPONSES)
def fetch_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Return a single user by ID."""

    try:
        user = user_service.fetch_user(user_id)
    except UserServiceError as exc:
        raise _to_http_error(exc) from exc
    return UserResponse.model_validate(user, from_attributes=True)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def create_user(
    payload: UserCreateRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a new user."""

    try:
        user = user_service.create_user(payload.to_candidate())
    except UserServiceError as exc:
        raise _to_http_error(exc) from exc
    return UserResponse.model_validate(user, from_attributes=True)


@router.put("/{user_id}", response_model=UserResponse, responses=_ERROR_RESPONSES)
def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Replace the name and email of an existing user."""

    try:
        user = user_service.update_user(user_id, payload.to_candidate())
    except UserServiceError as exc:
        raise _to_http_error(exc) from exc
    return UserResponse.model_validate(user, from_attributes=True)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses=_ERROR_RESPONSES,
)
def remove_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> Response:
    """Delete a user; the response body is empty."""

    try:
        user_service.remove_user(user_id)
    except UserServiceError as exc:
        raise _to_http_error(exc) from exc
    return Response(status_code=status.HTTP_200_OK)
