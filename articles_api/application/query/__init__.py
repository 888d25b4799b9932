from .mutation_composer import MUTABLE_FIELDS, compose_mutation
from .pager import Page, PageRequest, Pager, total_pages
from .predicate_builder import ALL_CATEGORIES, ArticleFilter, Predicate, build_predicate
from .sort_resolver import (
    NEWEST_FIRST,
    RANKED,
    SORTABLE_FIELDS,
    Ordering,
    OrderingMode,
    resolve_sort,
)

__all__ = [
    "MUTABLE_FIELDS",
    "compose_mutation",
    "Page",
    "PageRequest",
    "Pager",
    "total_pages",
    "ALL_CATEGORIES",
    "ArticleFilter",
    "Predicate",
    "build_predicate",
    "NEWEST_FIRST",
    "RANKED",
    "SORTABLE_FIELDS",
    "Ordering",
    "OrderingMode",
    "resolve_sort",
]
