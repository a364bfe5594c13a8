"""Configurable JSON key and header names.

GitHub API variants (or recording proxies that mangle header case) can be
handled by passing different instances to the resolver.
"""

from dataclasses import dataclass

from driver_resolver.constants import (
    HEADER_RATE_LIMIT_REMAINING,
    HEADER_RATE_LIMIT_RESET,
    KEY_ASSET_NAME,
    KEY_ASSETS,
    KEY_BROWSER_DOWNLOAD_URL,
    KEY_TAG_NAME,
)


@dataclass(slots=True, frozen=True)
class ReleaseFieldNames:
    """JSON field names read from release payloads.

    Attributes:
        tag_name: Release tag field
        assets: Asset array field
        asset_name: Per-asset file name field
        browser_download_url: Per-asset download URL field

    """

    tag_name: str = KEY_TAG_NAME
    assets: str = KEY_ASSETS
    asset_name: str = KEY_ASSET_NAME
    browser_download_url: str = KEY_BROWSER_DOWNLOAD_URL


@dataclass(slots=True, frozen=True)
class RateLimitHeaders:
    """Response header names used to detect rate limiting."""

    remaining: str = HEADER_RATE_LIMIT_REMAINING
    reset: str = HEADER_RATE_LIMIT_RESET
