"""Resolve browser-driver download URLs from GitHub releases."""

from driver_resolver.core.cache import ReleaseCacheManager
from driver_resolver.core.github import (
    AiohttpTransport,
    ProjectIdentity,
    ReleaseRecord,
    ReleaseResolver,
)
from driver_resolver.exceptions import (
    CacheError,
    DriverResolverError,
    ReleaseUnavailableError,
    StaleCacheMissError,
    VersionNotFoundError,
)

__version__ = "1.0.0"

__all__ = [
    "AiohttpTransport",
    "CacheError",
    "DriverResolverError",
    "ProjectIdentity",
    "ReleaseCacheManager",
    "ReleaseRecord",
    "ReleaseResolver",
    "ReleaseUnavailableError",
    "StaleCacheMissError",
    "VersionNotFoundError",
    "__version__",
]
