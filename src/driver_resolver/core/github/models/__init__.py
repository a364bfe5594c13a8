"""GitHub release models."""

from driver_resolver.core.github.models.asset import AssetEntry
from driver_resolver.core.github.models.project import ProjectIdentity
from driver_resolver.core.github.models.release import ReleaseRecord
from driver_resolver.core.github.models.schema import (
    RateLimitHeaders,
    ReleaseFieldNames,
)

__all__ = [
    "AssetEntry",
    "ProjectIdentity",
    "RateLimitHeaders",
    "ReleaseFieldNames",
    "ReleaseRecord",
]
