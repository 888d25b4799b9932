"""Page/limit normalization and page-count arithmetic."""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from articles_api.domain.exceptions import InvalidParameterError

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """A normalized page window."""

    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Page(Generic[T]):
    """One page of results together with the size of the whole result set."""

    items: list[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return total_pages(self.total, self.limit)


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` rows; zero when there are none."""
    if total <= 0 or limit <= 0:
        return 0
    return math.ceil(total / limit)


def _coerce_int(name: str, value: int | str | None, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(name, value) from None


class Pager:
    """Coerces raw page/limit values and clamps them to a safe window.

    ``page`` below 1 becomes 1; ``limit`` is clamped into ``[1, max_limit]``.
    Non-integer values raise ``InvalidParameterError``.
    """

    def __init__(self, default_limit: int = 10, max_limit: int = 100):
        self._default_limit = default_limit
        self._max_limit = max_limit

    def normalize(
        self,
        page: int | str | None = None,
        limit: int | str | None = None,
    ) -> PageRequest:
        page_number = max(_coerce_int("page", page, 1), 1)
        page_size = _coerce_int("limit", limit, self._default_limit)
        page_size = min(max(page_size, 1), self._max_limit)
        return PageRequest(page=page_number, limit=page_size)
