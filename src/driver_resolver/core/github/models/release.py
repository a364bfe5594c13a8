"""Resolved release model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class ReleaseRecord:
    """A resolved driver release.

    Attributes:
        version: Release tag, verbatim as published
        download_url: URL of the matching asset, or None when no asset
            matched the naming pattern

    """

    version: str
    download_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for caching."""
        return {"version": self.version, "download_url": self.download_url}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReleaseRecord:
        """Create ReleaseRecord from a cached dictionary.

        Args:
            data: Dictionary produced by to_dict()

        Returns:
            ReleaseRecord instance

        Raises:
            KeyError: If the version is missing
            TypeError: If the version is not a string

        """
        version = data["version"]
        if not isinstance(version, str):
            msg = f"Cached version must be a string, got {type(version)}"
            raise TypeError(msg)
        return cls(version=version, download_url=data.get("download_url"))
