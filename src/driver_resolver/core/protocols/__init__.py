"""Core protocols for dependency injection.

The resolver depends on these abstractions rather than on aiohttp or on
the file-backed cache directly, so both can be swapped in tests or by an
embedding application.

Available protocols:
    Transport: Asynchronous HTTP GET
    ReleaseCache: Persistent last-known-good release store

Usage:
    from driver_resolver.core.protocols import ReleaseCache, Transport

"""

from .cache import ReleaseCache
from .transport import Response, Transport

__all__ = [
    "ReleaseCache",
    "Response",
    "Transport",
]
