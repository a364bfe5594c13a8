"""GitHub release asset model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from driver_resolver.core.github.models.schema import ReleaseFieldNames


@dataclass(slots=True, frozen=True)
class AssetEntry:
    """A named, downloadable attachment of a release."""

    name: str
    download_url: str

    @classmethod
    def from_api_response(
        cls, asset_data: Any, fields: ReleaseFieldNames
    ) -> AssetEntry | None:
        """Create AssetEntry from GitHub API asset data.

        Args:
            asset_data: Raw asset object from GitHub API
            fields: JSON field names to read

        Returns:
            AssetEntry instance or None if required fields are missing

        """
        if not isinstance(asset_data, dict):
            return None

        name = asset_data.get(fields.asset_name)
        download_url = asset_data.get(fields.browser_download_url)
        if not isinstance(name, str) or not isinstance(download_url, str):
            return None
        if not name or not download_url:
            return None

        return cls(name=name, download_url=download_url)
