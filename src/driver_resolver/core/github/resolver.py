"""GitHub release resolution with conditional polling and cache fallback.

This module orchestrates the two release lookups a driver source needs:
the latest release (polled with ``If-Modified-Since`` and backed by the
persistent cache) and the release carrying an exact tag (found by walking
the paginated releases listing).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from driver_resolver.constants import (
    HEADER_IF_MODIFIED_SINCE,
    HEADER_LAST_MODIFIED,
    LATEST_RELEASE_PATH,
    RELEASES_PATH,
)
from driver_resolver.core.github.errors import describe_failure
from driver_resolver.core.github.matcher import AssetMatcher, NamingPolicy
from driver_resolver.core.github.models import (
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
from driver_resolver.exceptions import (
    ReleaseUnavailableError,
    StaleCacheMissError,
    VersionNotFoundError,
)
from driver_resolver.logger import get_logger
from driver_resolver.utils.datetime_utils import (
    format_http_date,
    get_current_datetime_utc,
    parse_http_date,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from driver_resolver.core.protocols import ReleaseCache, Response, Transport

logger = get_logger(__name__)


class ReleaseResolver:
    """Resolves driver releases of one GitHub project.

    Each public call performs its requests one after another and never
    retries; resilience comes from the cache across separate invocations.

    Usage:
        resolver = ReleaseResolver(
            project=ProjectIdentity("mozilla", "geckodriver"),
            transport=AiohttpTransport(session),
            cache=ReleaseCacheManager(cache_dir),
            naming_policy=geckodriver_pattern,
        )
        release = await resolver.get_latest_release()
    """

    def __init__(
        self,
        project: ProjectIdentity,
        transport: Transport,
        cache: ReleaseCache,
        naming_policy: NamingPolicy,
        fields: ReleaseFieldNames | None = None,
        rate_limit_headers: RateLimitHeaders | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            project: Repository the driver is published in
            transport: HTTP transport for GitHub API requests
            cache: Persistent last-known-good release store
            naming_policy: Maps a version to the asset file name regex
            fields: Release JSON field names (GitHub defaults if None)
            rate_limit_headers: Rate-limit header names (GitHub defaults
                if None)

        """
        self.project = project
        self.transport = transport
        self.cache = cache
        self.fields = fields or ReleaseFieldNames()
        self.rate_limit_headers = rate_limit_headers or RateLimitHeaders()
        self.parser = ReleaseParser(self.fields)
        self.matcher = AssetMatcher(naming_policy)

    @property
    def key(self) -> str:
        """Cache key of the project."""
        return self.project.unique_key

    async def get_latest_release(self) -> ReleaseRecord:
        """Resolve the latest release.

        Returns:
            Latest release; the cached record when GitHub reports no change
            or answers with an anomalous payload while a cache entry exists

        Raises:
            StaleCacheMissError: GitHub reported no change but nothing is
                cached
            ReleaseUnavailableError: The payload has no tag name and nothing
                is cached

        """
        url = self.project.project_url + LATEST_RELEASE_PATH
        response = await self._send_request(
            url, 1, await self._last_modification_header()
        )

        if not response.has_payload():
            return await self._load_unchanged_release(response)

        candidate = self.parser.parse_release(response.payload)
        if candidate is None:
            return await self._fallback_to_cached_release(response)

        record = self._build_record(candidate)
        await self.cache.store(
            record, self.key, self._extract_modification_date(response)
        )
        logger.debug(
            "Resolved latest release %s for %s", record.version, self.key
        )
        return record

    async def get_release_for_version(self, version: str) -> ReleaseRecord:
        """Resolve the release whose tag equals version exactly.

        Walks ``/releases`` page by page until a match is found or an empty
        page marks the end of the listing.

        Args:
            version: Release tag to look up

        Returns:
            Matching release

        Raises:
            VersionNotFoundError: No tag matched; lists all observed tags
            ReleaseUnavailableError: GitHub returned no releases at all

        """
        url = self.project.project_url + RELEASES_PATH
        available_versions: list[str] = []
        page = 1
        releases = await self._get_releases(url, page)

        while not releases.is_end_of_listing():
            for candidate in releases.candidates:
                if candidate.tag_name == version:
                    record = self._build_record(candidate)
                    logger.debug(
                        "Found release %s for %s on page %d",
                        version,
                        self.key,
                        page,
                    )
                    return record
                available_versions.append(candidate.tag_name)

            page += 1
            releases = await self._get_releases(url, page)

        if not available_versions:
            diagnostic = await self._send_request(url, 1, {})
            raise ReleaseUnavailableError(
                describe_failure(
                    diagnostic, self.rate_limit_headers, latest=False
                ),
                target=self.key,
            )

        versions = ", ".join(available_versions)
        msg = (
            f"No release matching version {version} has been found in the "
            f"repository {self.project.project_url} Available versions are: "
            f"[{versions}]."
        )
        raise VersionNotFoundError(msg, available_versions, target=self.key)

    async def _load_unchanged_release(self, response: Response) -> ReleaseRecord:
        """Return the cached record after a body-less response."""
        if not await self.cache.exists(self.key):
            msg = (
                f"GitHub returned no release data (HTTP {response.status}) "
                f"and there is no cached release for {self.project.project_url}"
            )
            raise StaleCacheMissError(msg, target=self.key)

        logger.debug("Latest release of %s not modified", self.key)
        return await self.cache.load(self.key)

    async def _fallback_to_cached_release(
        self, response: Response
    ) -> ReleaseRecord:
        """Substitute the cached record for an anomalous latest payload.

        The cached version may be arbitrarily old; only the warning tells
        the user that GitHub did not answer as expected.
        """
        msg = describe_failure(response, self.rate_limit_headers, latest=True)
        if not await self.cache.exists(self.key):
            raise ReleaseUnavailableError(msg, target=self.key)

        record = await self.cache.load(self.key)
        logger.warning(
            "%s It will be used the cached version as the latest one: %s",
            msg,
            record.version,
        )
        return record

    async def _get_releases(self, url: str, page: int) -> ReleasePage:
        response = await self._send_request(url, page, {})
        return self.parser.parse_release_list(response.payload)

    async def _send_request(
        self, url: str, page: int, headers: Mapping[str, str]
    ) -> Response:
        return await self.transport.get(build_page_url(url, page), headers)

    async def _last_modification_header(self) -> dict[str, str]:
        last_modified = await self.cache.last_modification_of(self.key)
        return {HEADER_IF_MODIFIED_SINCE: format_http_date(last_modified)}

    def _extract_modification_date(self, response: Response) -> datetime:
        """Parse Last-Modified, falling back to the current time."""
        raw = response.get_header(HEADER_LAST_MODIFIED)
        last_modified = parse_http_date(raw)
        if last_modified is None:
            logger.debug(
                "Missing or invalid Last-Modified header %r for %s",
                raw,
                self.key,
            )
            return get_current_datetime_utc()
        return last_modified

    def _build_record(self, candidate: ReleaseCandidate) -> ReleaseRecord:
        download_url = self.matcher.find_download_url(
            candidate.assets, candidate.tag_name
        )
        if download_url is None:
            logger.debug(
                "No asset of %s %s matches the naming pattern",
                self.key,
                candidate.tag_name,
            )
        return ReleaseRecord(version=candidate.tag_name, download_url=download_url)
