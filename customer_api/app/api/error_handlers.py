"""
Exception handlers translating failures into HTTP responses.

All error bodies are plain text:

* ``CustomerNotFoundError`` -> 404 with the exception message;
* ``CustomerAlreadyExistsError`` -> 208 with the exception message;
* request validation errors -> 400 with one ``The field<name> <message>``
  entry per failing field, joined with
  ``Settings.validation_error_separator``; absent fields read
  "must not be null" and a malformed JSON body is named ``body``;
* ``sqlite3.Error`` -> 500 with a generic message.  Details are logged,
  never returned to the client.
"""

import logging
import sqlite3
from typing import Any, Dict, Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from customer_api.app.core.exceptions import CustomerAlreadyExistsError, CustomerNotFoundError
from customer_api.app.schemas.customer import MUST_NOT_BE_NULL

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _field_name(error: Dict[str, Any]) -> str:
    # Drop the request part ("body", "path", "query") from the location.
    # A malformed JSON body is located by byte offset; name the body instead.
    parts = [str(part) for part in error["loc"]]
    if error.get("type") == "json_invalid":
        return parts[0]
    return ".".join(parts[1:]) or parts[0]


def _message(error: Dict[str, Any]) -> str:
    if error.get("type") == "missing":
        return MUST_NOT_BE_NULL
    return error["msg"]


def format_validation_errors(errors: Iterable[Dict[str, Any]], separator: str = "") -> str:
    """Render validation errors as ``The field<name> <message>`` entries.

    Absent fields are reported like explicit nulls.
    """
    return separator.join(
        f"The field{_field_name(error)} {_message(error)}" for error in errors
    )


async def handle_customer_not_found(request: Request, exc: CustomerNotFoundError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)


async def handle_customer_already_exists(request: Request, exc: CustomerAlreadyExistsError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=status.HTTP_208_ALREADY_REPORTED)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    separator = request.app.state.settings.validation_error_separator
    body = format_validation_errors(exc.errors(), separator)
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, body)
    return PlainTextResponse(body, status_code=status.HTTP_400_BAD_REQUEST)


async def handle_store_error(request: Request, exc: sqlite3.Error) -> PlainTextResponse:
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CustomerNotFoundError, handle_customer_not_found)
    app.add_exception_handler(CustomerAlreadyExistsError, handle_customer_already_exists)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(sqlite3.Error, handle_store_error)
