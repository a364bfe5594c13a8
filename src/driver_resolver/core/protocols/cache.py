"""Persistent cache protocol consumed by the release resolver.

One entry per project key holds the last successfully resolved release
and the server's Last-Modified timestamp at the time it was stored.
Per-key operations are assumed not to run concurrently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime

    from driver_resolver.core.github.models import ReleaseRecord


@runtime_checkable
class ReleaseCache(Protocol):
    """Last-known-good release store keyed by ``organization@project``."""

    async def load(self, key: str) -> ReleaseRecord:
        """Load the cached record for key."""
        ...

    async def store(
        self, record: ReleaseRecord, key: str, last_modified: datetime
    ) -> None:
        """Store record for key together with its Last-Modified time."""
        ...

    async def exists(self, key: str) -> bool:
        """Return True when a readable entry exists for key."""
        ...

    async def last_modification_of(self, key: str) -> datetime:
        """Return the stored Last-Modified time, or the Unix epoch."""
        ...
