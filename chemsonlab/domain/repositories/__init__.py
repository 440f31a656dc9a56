"""Domain repository interfaces.

Concrete implementations live in chemsonlab/infrastructure/persistence/ and
are wired at the application boundary via dependency injection.
"""

from .base import Repository

__all__ = ["Repository"]
