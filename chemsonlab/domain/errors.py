"""Domain error kinds.

Two failure classes are visible to callers:

  - StoreError: the backing store could not be read or written
    (connectivity, timeout, constraint violation).  Never swallowed.
  - FormatError: a temporal value could not be parsed under the wire grammar.

Malformed query input (bad filter value, unknown sort key) is *not* an error;
the query layer degrades to "not applied" instead.
"""

from __future__ import annotations

import asyncio


class StoreError(Exception):
    """Backing-store access failed."""


class StoreCancelledError(StoreError, asyncio.CancelledError):
    """In-flight store access was cancelled.

    Subclasses asyncio.CancelledError so task cancellation still propagates
    through the event loop, while `except StoreError` handlers see it too.
    """


class FormatError(ValueError):
    """A duration or timestamp string does not match the wire grammar."""
