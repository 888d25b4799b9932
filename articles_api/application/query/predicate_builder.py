"""Predicate builder: turns optional list filters into a parameterized WHERE clause.

Each rule contributes one clause fragment and one bound value when its
condition holds. Rules are evaluated in a fixed order, so identical filters
always yield an identical predicate; the same predicate backs both the page
query and its paired COUNT query.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from articles_api.domain.entities import ArticleStatus

# Category value meaning "all categories".
ALL_CATEGORIES = "comprehensive"


@dataclass(frozen=True)
class ArticleFilter:
    """Filter parameters accepted by the listing operations."""

    status: ArticleStatus = ArticleStatus.PUBLISHED
    category: str | None = None


@dataclass(frozen=True)
class Predicate:
    """A boolean filter expression plus its named bound parameters."""

    clauses: tuple[str, ...] = ()
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def sql(self) -> str:
        return " AND ".join(self.clauses)

    @property
    def values(self) -> tuple[Any, ...]:
        """Bound values in clause order."""
        return tuple(self.params.values())


@dataclass(frozen=True)
class _Rule:
    applies: Callable[[ArticleFilter], bool]
    clause: str
    param: str
    value: Callable[[ArticleFilter], Any]


def _has_category(filters: ArticleFilter) -> bool:
    return bool(filters.category) and filters.category != ALL_CATEGORIES


_RULES: tuple[_Rule, ...] = (
    _Rule(lambda _: True, "status = :status", "status", lambda f: f.status.value),
    _Rule(_has_category, "category = :category", "category", lambda f: f.category),
)


def build_predicate(filters: ArticleFilter) -> Predicate:
    """Evaluate the rule list against ``filters``."""
    clauses: list[str] = []
    params: dict[str, Any] = {}
    for rule in _RULES:
        if rule.applies(filters):
            clauses.append(rule.clause)
            params[rule.param] = rule.value(filters)
    return Predicate(clauses=tuple(clauses), params=params)
