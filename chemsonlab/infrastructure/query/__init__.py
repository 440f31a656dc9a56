"""Generic filterable/sortable query building over SQLAlchemy models."""

from . import parsers
from .executor import QuerySpec, execute, fetch_one, store_errors
from .filters import Filter, FilterSet, contains, equals, exact, same_day
from .loading import LoadSpec, Source
from .sorting import SortKey, SortSet

__all__ = [
    "parsers",
    "QuerySpec",
    "execute",
    "fetch_one",
    "store_errors",
    "Filter",
    "FilterSet",
    "contains",
    "equals",
    "exact",
    "same_day",
    "LoadSpec",
    "Source",
    "SortKey",
    "SortSet",
]
