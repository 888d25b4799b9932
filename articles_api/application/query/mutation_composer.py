"""Mutation composer: turns a partial update payload into column assignments."""

from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from articles_api.domain.entities import ArticleStatus
from articles_api.domain.exceptions import EmptyUpdateError, InvalidParameterError


def _as_text(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidParameterError(name, value)
    return value


def _as_status(name: str, value: Any) -> ArticleStatus:
    try:
        return ArticleStatus(value)
    except ValueError:
        raise InvalidParameterError(name, value) from None


# Mutable fields in assignment order, each with its value converter.
_ASSIGNMENT_RULES: tuple[tuple[str, Callable[[str, Any], Any]], ...] = (
    ("title", _as_text),
    ("content", _as_text),
    ("summary", _as_text),
    ("cover", _as_text),
    ("category", _as_text),
    ("tag", _as_text),
    ("status", _as_status),
)

MUTABLE_FIELDS: tuple[str, ...] = tuple(name for name, _ in _ASSIGNMENT_RULES)


def compose_mutation(
    changes: Mapping[str, Any],
    now: datetime | None = None,
) -> dict[str, Any]:
    """Build the ordered ``attribute → value`` assignments for one UPDATE.

    A field counts as present when its key is in ``changes`` with a non-null
    value; an empty string is a real assignment. ``updated_at`` is appended
    once. Raises ``EmptyUpdateError`` when nothing is present.
    """
    assignments: dict[str, Any] = {}
    for name, convert in _ASSIGNMENT_RULES:
        value = changes.get(name)
        if value is not None:
            assignments[name] = convert(name, value)

    if not assignments:
        raise EmptyUpdateError()

    assignments["updated_at"] = now or datetime.now(timezone.utc)
    return assignments
