"""Uniform ``{code, message, data?}`` response envelope."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

SUCCESS = 200
BAD_REQUEST = 400
NOT_FOUND = 404
INTERNAL_ERROR = 500


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapped around every article endpoint response.

    ``code`` 400 and 404 travel inside the payload with transport status 200;
    only internal failures use transport status 500. ``data`` is left unset
    (and therefore omitted) when an outcome carries nothing.
    """

    code: int = SUCCESS
    message: str
    data: T | None = None


def success(message: str, data: Any = None) -> ApiResponse:
    if data is None:
        return ApiResponse(code=SUCCESS, message=message)
    return ApiResponse(code=SUCCESS, message=message, data=data)


def failure(code: int, message: str) -> dict[str, Any]:
    """Serialized error envelope, ready for a ``JSONResponse``."""
    return ApiResponse(code=code, message=message).model_dump(exclude_unset=True)
