"""Persistent cache of last-resolved driver releases.

Each project key (``organization@project``) owns one JSON file holding the
resolved release and the GitHub ``Last-Modified`` time it was resolved
under. The resolver sends that time back as ``If-Modified-Since`` and falls
back to the stored release when GitHub has nothing new, or nothing usable,
to say.
"""

import contextlib
import re
from datetime import datetime
from pathlib import Path

import orjson

from driver_resolver.config import ConfigManager
from driver_resolver.constants import CACHE_FILE_SUFFIX, CACHE_SUBDIR
from driver_resolver.core.github.models import ReleaseRecord
from driver_resolver.exceptions import CacheError
from driver_resolver.logger import get_logger
from driver_resolver.types import CacheFileEntry
from driver_resolver.utils.datetime_utils import EPOCH

logger = get_logger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9@._-]")


class ReleaseCacheManager:
    """File-backed implementation of the ReleaseCache protocol.

    This cache:
    - Stores one entry per project key, overwritten on every store
    - Uses atomic writes (temporary file + rename)
    - Treats corrupted files as missing entries

    Usage:
        cache = ReleaseCacheManager(cache_dir=Path("/tmp/drivers"))
        await cache.store(record, "mozilla@geckodriver", last_modified)
    """

    def __init__(
        self,
        cache_dir: Path | None = None,
        config_manager: ConfigManager | None = None,
    ) -> None:
        """Initialize the cache manager.

        Args:
            cache_dir: Directory for cache files; derived from the
                configured cache directory when None
            config_manager: Configuration manager used to look up the
                cache directory (optional)

        """
        if cache_dir is None:
            config_manager = config_manager or ConfigManager()
            global_config = config_manager.load_global_config()
            cache_dir = global_config["directory"]["cache"] / CACHE_SUBDIR

        self.cache_dir = cache_dir
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def _get_cache_file_path(self, key: str) -> Path:
        """Get cache file path for a project key."""
        filename = _UNSAFE_KEY_CHARS.sub("_", key) + CACHE_FILE_SUFFIX
        return self.cache_dir / filename

    def _read_entry(self, key: str) -> CacheFileEntry | None:
        """Read and validate the cache file for key.

        Returns:
            Cache entry, or None when missing or unreadable

        """
        cache_file = self._get_cache_file_path(key)
        if not cache_file.exists():
            return None

        try:
            data = orjson.loads(cache_file.read_bytes())  # pylint: disable=no-member
            entry = CacheFileEntry(
                key=data["key"],
                last_modified=data["last_modified"],
                record=data["record"],
            )
            ReleaseRecord.from_dict(entry["record"])
            datetime.fromisoformat(entry["last_modified"])
        except (ValueError, KeyError, TypeError) as e:
            # orjson raises ValueError for JSON errors
            logger.warning("Cache file corrupted for %s: %s", key, e)
            return None
        except OSError as e:
            logger.error("Failed to read cache for %s: %s", key, e)
            return None

        # Distinct keys can share a sanitized file name
        if entry["key"] != key:
            logger.warning(
                "Cache file %s holds %r, not %r", cache_file.name, entry["key"], key
            )
            return None

        return entry

    async def exists(self, key: str) -> bool:
        """Return True when a readable entry exists for key."""
        return self._read_entry(key) is not None

    async def load(self, key: str) -> ReleaseRecord:
        """Load the cached release for key.

        Args:
            key: Project key

        Returns:
            Cached release record

        Raises:
            CacheError: If there is no readable entry for key

        """
        entry = self._read_entry(key)
        if entry is None:
            msg = f"No readable cache entry in {self.cache_dir}"
            raise CacheError(msg, target=key)

        logger.debug("Cache hit for %s", key)
        return ReleaseRecord.from_dict(entry["record"])

    async def last_modification_of(self, key: str) -> datetime:
        """Return the stored Last-Modified time, or the Unix epoch.

        The epoch never suppresses a fresh response when sent as
        ``If-Modified-Since``.
        """
        entry = self._read_entry(key)
        if entry is None:
            return EPOCH
        return datetime.fromisoformat(entry["last_modified"])

    async def store(
        self, record: ReleaseRecord, key: str, last_modified: datetime
    ) -> None:
        """Persist record for key, replacing any previous entry.

        Args:
            record: Resolved release
            key: Project key
            last_modified: GitHub Last-Modified time of the release

        Raises:
            OSError: If the cache file cannot be written

        """
        cache_file = self._get_cache_file_path(key)
        entry = CacheFileEntry(
            key=key,
            last_modified=last_modified.isoformat(),
            record=record.to_dict(),
        )

        temp_file = cache_file.with_suffix(".tmp")
        try:
            temp_file.write_bytes(
                orjson.dumps(entry, option=orjson.OPT_INDENT_2)  # pylint: disable=no-member
            )
            temp_file.replace(cache_file)
        except OSError:
            with contextlib.suppress(OSError):
                temp_file.unlink()
            raise

        logger.debug("Cached release %s for %s", record.version, key)

    async def clear(self, key: str | None = None) -> int:
        """Remove cache entries.

        Args:
            key: Project key to clear; all entries when None

        Returns:
            Number of removed files

        """
        if key is not None:
            cache_files = [self._get_cache_file_path(key)]
        else:
            cache_files = list(self.cache_dir.glob(f"*{CACHE_FILE_SUFFIX}"))

        removed = 0
        for cache_file in cache_files:
            with contextlib.suppress(FileNotFoundError):
                cache_file.unlink()
                removed += 1

        logger.debug("Cleared %d cache entries", removed)
        return removed
