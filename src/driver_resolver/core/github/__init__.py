"""GitHub release resolution - parsing, matching and the resolver."""

from driver_resolver.core.github.errors import describe_failure
from driver_resolver.core.github.matcher import AssetMatcher, NamingPolicy
from driver_resolver.core.github.models import (
    AssetEntry,
    ProjectIdentity,
    RateLimitHeaders,
    ReleaseFieldNames,
    ReleaseRecord,
)
from driver_resolver.core.github.pagination import build_page_url
from driver_resolver.core.github.parser import (
    ReleaseCandidate,
    ReleasePage,
    ReleaseParser,
)
from driver_resolver.core.github.resolver import ReleaseResolver
from driver_resolver.core.github.transport import AiohttpTransport

__all__ = [
    "AiohttpTransport",
    "AssetEntry",
    "AssetMatcher",
    "NamingPolicy",
    "ProjectIdentity",
    "RateLimitHeaders",
    "ReleaseCandidate",
    "ReleaseFieldNames",
    "ReleasePage",
    "ReleaseParser",
    "ReleaseRecord",
    "ReleaseResolver",
    "build_page_url",
    "describe_failure",
]
