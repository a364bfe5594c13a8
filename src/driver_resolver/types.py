"""Type definitions for driver-resolver configuration and cache files."""

from pathlib import Path
from typing import TypedDict


class NetworkConfig(TypedDict):
    """Network configuration section."""

    timeout_seconds: int


class DirectoryConfig(TypedDict):
    """Directory configuration section."""

    cache: Path
    logs: Path


class GlobalConfig(TypedDict):
    """Global configuration structure."""

    log_level: str
    console_log_level: str
    network: NetworkConfig
    directory: DirectoryConfig


class CachedRecord(TypedDict):
    """Serialized ReleaseRecord as stored on disk."""

    version: str
    download_url: str | None


class CacheFileEntry(TypedDict):
    """Cache file structure for one project key."""

    key: str
    last_modified: str  # ISO 8601 timestamp with offset
    record: CachedRecord
