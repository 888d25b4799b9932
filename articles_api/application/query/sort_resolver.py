"""Sort resolver: maps client sort parameters onto a known ordering."""

from dataclasses import dataclass
from enum import Enum

from articles_api.domain.exceptions import InvalidParameterError


class OrderingMode(str, Enum):
    FIELD = "field"
    RANKING = "ranking"


@dataclass(frozen=True)
class Ordering:
    """Ordering applied to a listing query.

    ``FIELD`` orders by ``field`` (an ``Article`` attribute name).
    ``RANKING`` orders by popularity score, then newest first.
    """

    mode: OrderingMode
    field: str = "created_at"
    descending: bool = True


# Request sort key → Article attribute. Anything else is rejected.
SORTABLE_FIELDS: dict[str, str] = {
    "articleId": "id",
    "title": "title",
    "author": "author",
    "category": "category",
    "status": "status",
    "viewCount": "view_count",
    "likeCount": "like_count",
    "commentCount": "comment_count",
    "createTime": "created_at",
    "updateTime": "updated_at",
}

_DIRECTIONS = {"ASC": False, "DESC": True}

DEFAULT_SORT_BY = "createTime"
DEFAULT_SORT_ORDER = "DESC"

RANKED = Ordering(OrderingMode.RANKING)
NEWEST_FIRST = Ordering(OrderingMode.FIELD, "created_at", True)


def resolve_sort(sort_by: str | None = None, sort_order: str | None = None) -> Ordering:
    """Resolve ``sortBy``/``sortOrder`` request values through the allow-list."""
    key = sort_by or DEFAULT_SORT_BY
    field = SORTABLE_FIELDS.get(key)
    if field is None:
        raise InvalidParameterError("sortBy", sort_by)

    direction = (sort_order or DEFAULT_SORT_ORDER).upper()
    if direction not in _DIRECTIONS:
        raise InvalidParameterError("sortOrder", sort_order)

    return Ordering(OrderingMode.FIELD, field, _DIRECTIONS[direction])
