"""Exception handlers installed on the FastAPI application."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from userhub_backend.api.services.user import USER_FIELDS_REQUIRED

logger = logging.getLogger(__name__)

INVALID_REQUEST_BODY = "Invalid request body"

_REQUIRED_FIELDS = {"name", "email"}
_ABSENT_VALUE_ERRORS = {"missing", "string_too_short"}


def _is_missing_required_field(error: dict[str, Any]) -> bool:
    loc = tuple(error.get("loc", ()))
    if error.get("type") not in _ABSENT_VALUE_ERRORS:
        return False
    # a request without any body reports the whole body as missing
    return loc == ("body",) or (
        len(loc) == 2 and loc[0] == "body" and loc[1] in _REQUIRED_FIELDS
    )


def _redact(errors: Sequence[Any]) -> list[dict[str, Any]]:
    """Drop the submitted values so user data stays out of logs and replies."""
    return [
        {key: value for key, value in error.items() if key != "input"}
        for error in errors
    ]


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed or incomplete payloads as bad requests."""

    errors = _redact(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    if errors and all(_is_missing_required_field(error) for error in errors):
        detail = USER_FIELDS_REQUIRED
    else:
        detail = INVALID_REQUEST_BODY
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail, "errors": jsonable_encoder(errors)},
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Register the application's exception handlers."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)


__all__ = [
    "INVALID_REQUEST_BODY",
    "install_exception_handlers",
    "request_validation_handler",
]
