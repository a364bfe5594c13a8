"""Release payload parsing.

Turns GitHub releases JSON (one release object, or an array of them) into
ReleaseCandidate instances. Payloads that are not valid JSON, or whose
shape is not what the endpoint promises, parse to "nothing" so callers can
apply their fallback rules instead of crashing on a rate-limit body.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import orjson

from driver_resolver.core.github.models import AssetEntry, ReleaseFieldNames
from driver_resolver.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class ReleaseCandidate:
    """A release as listed by GitHub, before asset matching.

    Attributes:
        tag_name: Release tag
        assets: Assets in server order

    """

    tag_name: str
    assets: list[AssetEntry] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class ReleasePage:
    """One page of the releases listing.

    Attributes:
        entry_count: Number of elements in the page array, tagged or not
        candidates: Tagged releases in server order

    """

    entry_count: int = 0
    candidates: list[ReleaseCandidate] = field(default_factory=list)

    def is_end_of_listing(self) -> bool:
        """Return True when the page array was empty or absent."""
        return self.entry_count == 0


class ReleaseParser:
    """Parses GitHub releases payloads using configurable field names."""

    def __init__(self, fields: ReleaseFieldNames | None = None) -> None:
        self.fields = fields or ReleaseFieldNames()

    @staticmethod
    def _decode(payload: str | None) -> Any | None:
        if not payload:
            return None
        try:
            return orjson.loads(payload)  # pylint: disable=no-member
        except orjson.JSONDecodeError as e:  # pylint: disable=no-member
            logger.debug("Release payload is not valid JSON: %s", e)
            return None

    def parse_release(self, payload: str | None) -> ReleaseCandidate | None:
        """Parse a single release object.

        Args:
            payload: Body of ``/releases/latest``

        Returns:
            ReleaseCandidate, or None when the payload is not a JSON object
            carrying a string tag name

        """
        data = self._decode(payload)
        if not isinstance(data, dict):
            return None
        return self.candidate_from_object(data)

    def parse_release_list(self, payload: str | None) -> ReleasePage:
        """Parse one page of the releases listing.

        Release objects without a tag name are skipped but still counted,
        so a page holding only untagged entries does not end the listing.

        Args:
            payload: Body of ``/releases[?page=N]``

        Returns:
            ReleasePage; its entry count is zero when the payload is
            absent, not a JSON array, or an empty array

        """
        data = self._decode(payload)
        if not isinstance(data, list):
            return ReleasePage()

        candidates = []
        for release in data:
            candidate = (
                self.candidate_from_object(release)
                if isinstance(release, dict)
                else None
            )
            if candidate is None:
                logger.debug("Skipping release entry without a tag name")
                continue
            candidates.append(candidate)
        return ReleasePage(entry_count=len(data), candidates=candidates)

    def candidate_from_object(
        self, release: dict[str, Any]
    ) -> ReleaseCandidate | None:
        """Build a candidate from a decoded release object.

        Args:
            release: Decoded release JSON object

        Returns:
            ReleaseCandidate or None if the tag name is missing

        """
        tag_name = release.get(self.fields.tag_name)
        if not isinstance(tag_name, str):
            return None

        raw_assets = release.get(self.fields.assets)
        if not isinstance(raw_assets, list):
            raw_assets = []

        assets = []
        for asset_data in raw_assets:
            asset = AssetEntry.from_api_response(asset_data, self.fields)
            if asset:
                assets.append(asset)

        return ReleaseCandidate(tag_name=tag_name, assets=assets)
