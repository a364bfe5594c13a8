"""Centralized constants module for driver-resolver.

Constants are grouped by concern and use typing.Final annotations to
keep them immutable.

Usage:
    from driver_resolver.constants import GITHUB_API_BASE_URL
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "driver-resolver"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_TIMEOUT_SECONDS: Final[int] = 10

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_NETWORK: Final[str] = "network"
SECTION_DIRECTORY: Final[str] = "directory"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"

DIRECTORY_KEYS: Final[tuple[str, ...]] = ("cache", "logs")

# =============================================================================
# GitHub API Constants
# =============================================================================

GITHUB_API_BASE_URL: Final[str] = "https://api.github.com/repos"
LATEST_RELEASE_PATH: Final[str] = "/releases/latest"
RELEASES_PATH: Final[str] = "/releases"
PAGE_PARAMETER: Final[str] = "page"

HEADER_IF_MODIFIED_SINCE: Final[str] = "If-Modified-Since"
HEADER_LAST_MODIFIED: Final[str] = "Last-Modified"
HEADER_RATE_LIMIT_REMAINING: Final[str] = "X-RateLimit-Remaining"
HEADER_RATE_LIMIT_RESET: Final[str] = "X-RateLimit-Reset"

# Release payload keys
KEY_TAG_NAME: Final[str] = "tag_name"
KEY_ASSETS: Final[str] = "assets"
KEY_ASSET_NAME: Final[str] = "name"
KEY_BROWSER_DOWNLOAD_URL: Final[str] = "browser_download_url"

HTTP_NOT_MODIFIED: Final[int] = 304

# =============================================================================
# Cache Constants
# =============================================================================

CACHE_SUBDIR: Final[str] = "releases"
CACHE_FILE_SUFFIX: Final[str] = ".json"

# =============================================================================
# Logging Constants
# =============================================================================

LOG_ROOT_NAME: Final[str] = "driver_resolver"
LOG_FILE_NAME: Final[str] = "driver-resolver.log"
LOG_DIR_ENV_VAR: Final[str] = "DRIVER_RESOLVER_LOG_DIR"

# 1 MB rotation threshold
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
