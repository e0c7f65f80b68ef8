"""Storage blueprint and core utilities.

The service talks to storage only through :class:`StorageBlueprint`.
Import it to type-hint your own code or to plug in a test double.
"""

from .storage import StorageBlueprint
from .async_support import AsyncMixin, async_wrap


__all__ = [
    "StorageBlueprint",
    "AsyncMixin",
    "async_wrap",
]
