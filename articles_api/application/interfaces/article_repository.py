"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from articles_api.application.query import Ordering, Predicate
from articles_api.domain.entities import Article, ArticleStatus


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def find(
        self,
        predicate: Predicate,
        ordering: Ordering,
        limit: int,
        offset: int = 0,
    ) -> list[Article]:
        """Return at most ``limit`` matching articles, starting at ``offset``."""
        ...

    @abstractmethod
    async def count(self, predicate: Predicate) -> int:
        """Count every article matching ``predicate``."""
        ...

    @abstractmethod
    async def get_by_id(
        self,
        article_id: int,
        statuses: Sequence[ArticleStatus] | None = None,
    ) -> Article | None:
        """Retrieve a single article, optionally only when its status is in ``statuses``."""
        ...

    @abstractmethod
    async def exists(self, article_id: int) -> bool:
        """True when a row with this id exists, whatever its status."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def apply_changes(self, article_id: int, assignments: dict[str, Any]) -> None:
        """Apply ``attribute → value`` assignments in a single UPDATE."""
        ...

    @abstractmethod
    async def increment_view_count(self, article_id: int) -> int | None:
        """Atomically add one view and return the stored count, or None if the id is unknown."""
        ...
