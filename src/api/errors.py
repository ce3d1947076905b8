"""Map exceptions to JSON responses of the form {"message": ...}."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.exceptions import (
    ERROR_INCOMPLETE_DATA,
    ERROR_METHOD_NOT_ALLOWED,
    ERROR_NOT_FOUND,
    GameStoreError,
)

logger = logging.getLogger(__name__)


def _message(message: str, status_code: int, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse({"message": message}, status_code=status_code, headers=headers)


async def game_store_error_handler(request: Request, exc: GameStoreError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _message(exc.message, exc.status_code)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    A path id that is not an integer cannot match any game, so it is reported as not found.
    Anything wrong with the body (missing, not JSON, wrong types) is incomplete data.
    """
    if any(error["loc"][0] == "path" for error in exc.errors()):
        return _message(ERROR_NOT_FOUND, status.HTTP_404_NOT_FOUND)
    return _message(ERROR_INCOMPLETE_DATA, 422)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors raised by FastAPI itself (unknown path, unsupported method)."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = ERROR_NOT_FOUND
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = ERROR_METHOD_NOT_ALLOWED
    else:
        message = str(exc.detail)
    return _message(message, exc.status_code, headers=exc.headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GameStoreError, game_store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
