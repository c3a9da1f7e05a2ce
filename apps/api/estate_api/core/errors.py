"""Error taxonomy and the JSON handlers that render it."""
from __future__ import annotations

import logging
from typing import Any, Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

STORE_ERROR_MESSAGE = "Internal server error"
_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}


class NotFoundError(HTTPException):
    """The addressed record does not exist."""

    def __init__(self, resource: str) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=f"{resource} not found")


class AuthError(HTTPException):
    """Missing or invalid admin proof."""

    def __init__(self, detail: str = "Unauthorized. Admin login required.") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ValidationFailed(HTTPException):
    """Request fields failed validation outside of pydantic parsing."""

    def __init__(self, errors: list[dict[str, str]], message: str = "Validation failed") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
        self.errors = errors

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationFailed":
        return cls([field_error(field, message)])


def field_error(field: str, message: str) -> dict[str, str]:
    """Build one machine-readable error entry."""

    return {"path": field, "field": field, "message": message}


def format_validation_errors(errors: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    """Collapse pydantic errors into one entry per failing field."""

    formatted: list[dict[str, str]] = []
    seen: set[str] = set()
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if error.get("type") == "json_invalid":
            # The location of a decode error is a character offset, not a field.
            loc = ["body"]
        elif len(loc) > 1 and loc[0] in _LOCATION_ROOTS:
            loc = loc[1:]
        path = ".".join(loc) or "body"
        if path in seen:
            continue
        seen.add(path)
        message = str(error.get("msg", "Invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        formatted.append(field_error(path, message))
    return formatted


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    content: dict[str, Any] = {"message": exc.detail}
    if isinstance(exc, ValidationFailed):
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": format_validation_errors(exc.errors())},
    )


async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Persistence failures are logged in full and reported generically.

    Covers ``OSError`` as well: an unreachable database surfaces from the driver
    as a connection error that SQLAlchemy does not wrap.
    """

    logger.exception("Store failure during %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": STORE_ERROR_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(OSError, store_error_handler)
