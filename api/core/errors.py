"""
Error rendering for the API.

Every failure leaves the service as `{"error": "<message>"}`:
- HTTPException -> its status code and detail
- request validation failures (query/path/body) -> 400 instead of FastAPI's 422;
  body failures use the static `error_message` of the endpoint's body schema
- integers too large for a sqlite INTEGER -> 400
- store failures (any sqlite error) -> 500 with the driver's message verbatim
"""

from __future__ import annotations

import logging
import typing
from functools import lru_cache
from typing import Any, Callable, ClassVar

import aiosqlite
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# sqlite INTEGER is a signed 64-bit value.
SQLITE_MAX_INTEGER = 2**63 - 1


class RequestBody(BaseModel):
    """
    Base for JSON request bodies.

    Subclasses set `error_message`, the static 400 detail returned when the
    body is missing, not JSON, or fails validation.
    """

    error_message: ClassVar[str] = "Invalid request body."


@lru_cache(maxsize=None)
def _body_error_message(endpoint: Callable[..., Any]) -> str:
    try:
        hints = typing.get_type_hints(endpoint)
    except (NameError, TypeError):
        return RequestBody.error_message
    for hint in hints.values():
        if isinstance(hint, type) and issubclass(hint, RequestBody):
            return hint.error_message
    return RequestBody.error_message


def _error(status_code: int, message: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, exc.detail)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if not errors:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request.")

    loc = tuple(errors[0].get("loc", ()))
    endpoint = request.scope.get("endpoint")
    if loc[:1] == ("body",) and endpoint is not None:
        return _error(status.HTTP_400_BAD_REQUEST, _body_error_message(endpoint))

    name = ".".join(str(part) for part in loc[1:]) or "request"
    return _error(status.HTTP_400_BAD_REQUEST, f"Invalid value for '{name}': {errors[0].get('msg', 'invalid')}")


async def overflow_exception_handler(request: Request, exc: OverflowError) -> JSONResponse:
    logger.warning("integer_overflow method=%s path=%s error=%s", request.method, request.url.path, exc)
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def store_exception_handler(request: Request, exc: aiosqlite.Error) -> JSONResponse:
    logger.error("store_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(OverflowError, overflow_exception_handler)
    app.add_exception_handler(aiosqlite.Error, store_exception_handler)
