from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from .middleware.security_headers import SECURITY_HEADERS
from .storage.ids import LookupStatus

logger = logging.getLogger(__name__)


def raise_for_status(outcome: LookupStatus, resource: str) -> None:
    """Map a non-found lookup outcome to the matching HTTP error."""
    if outcome is LookupStatus.malformed:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid id")
    if outcome is LookupStatus.not_found:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{resource} not found")


def field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into ``{field, message}`` pairs."""
    errors: list[dict[str, str]] = []
    for err in exc.errors():
        loc: tuple[Any, ...] = tuple(err.get("loc", ()))
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        # json_invalid reports a character offset, not a field
        if err.get("type") == "json_invalid":
            loc = ()
        field = ".".join(str(part) for part in loc) or "body"
        errors.append({"field": field, "message": err.get("msg", "Invalid value")})
    return errors


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": field_errors(exc)},
    )


def _internal_error() -> JSONResponse:
    # Built outside the middleware stack for unhandled errors, so the
    # security headers are set here as well
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
        headers=SECURITY_HEADERS,
    )


async def storage_exception_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.exception("Storage error on %s %s", request.method, request.url.path, exc_info=exc)
    return _internal_error()


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _internal_error()


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PyMongoError, storage_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
