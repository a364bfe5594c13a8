"""Asset matching against a per-driver naming policy."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from driver_resolver.core.github.models import AssetEntry

# Maps a release version to a regex the whole asset file name must match
NamingPolicy = Callable[[str], str]


class AssetMatcher:
    """Selects the download URL of a release's driver binary."""

    def __init__(self, naming_policy: NamingPolicy) -> None:
        """Initialize the matcher.

        Args:
            naming_policy: Callable returning the file name regex for a
                given version

        """
        self.naming_policy = naming_policy

    def find_download_url(
        self, assets: Iterable[AssetEntry], version: str
    ) -> str | None:
        """Return the URL of the first asset whose name matches.

        Assets are checked in the order given; no sorting is applied.

        Args:
            assets: Release assets in server order
            version: Release version the pattern is built for

        Returns:
            Browser download URL, or None when no asset matches

        Raises:
            re.error: If the naming policy returns an invalid pattern

        """
        pattern = re.compile(self.naming_policy(version))
        for asset in assets:
            if pattern.fullmatch(asset.name):
                return asset.download_url
        return None
