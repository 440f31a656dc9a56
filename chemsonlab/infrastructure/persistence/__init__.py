"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for create_all and SQLAlchemy mapper configuration) and exports
the repository implementations, the per-kind query registry and the DI
factory.
"""

from chemsonlab.infrastructure.persistence.models import *  # noqa: F401, F403
from chemsonlab.infrastructure.persistence.models import __all__ as _orm_all
from chemsonlab.infrastructure.persistence.queries import QUERY_SPECS
from chemsonlab.infrastructure.persistence.repositories import (
    Repositories,
    SqlRepository,
    get_repositories,
)

__all__ = _orm_all + [
    "QUERY_SPECS",
    "Repositories",
    "SqlRepository",
    "get_repositories",
]
