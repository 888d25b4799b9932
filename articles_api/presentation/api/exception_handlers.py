"""Exception handlers translating failures into the response envelope.

Validation and not-found outcomes are reported in-band (transport status 200
with ``code`` 400/404 in the payload); internal failures use transport status
500 with a generic message.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from articles_api.application.schemas.envelope import (
    BAD_REQUEST,
    INTERNAL_ERROR,
    NOT_FOUND,
    failure,
)
from articles_api.domain.exceptions import (
    ArticleValidationError,
    DataStoreError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _describe(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"Invalid request: {location}: {first.get('msg', 'invalid value')}"


async def _validation_error(request: Request, exc: ArticleValidationError) -> JSONResponse:
    return JSONResponse(content=failure(BAD_REQUEST, exc.message))


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(content=failure(BAD_REQUEST, _describe(exc)))


async def _not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return JSONResponse(content=failure(NOT_FOUND, f"{exc.entity_type} not found"))


async def _internal_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Internal error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=failure(INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ArticleValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(EntityNotFoundError, _not_found)
    app.add_exception_handler(DataStoreError, _internal_error)
    app.add_exception_handler(Exception, _internal_error)
