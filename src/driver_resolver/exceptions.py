"""Exception classes for driver release resolution."""


class DriverResolverError(Exception):
    """Base exception for driver-resolver operations."""

    error_prefix: str = "Resolution failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional project key the failure belongs to.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class StaleCacheMissError(DriverResolverError):
    """Raised when GitHub reports no change but nothing is cached."""

    error_prefix = "No cached release"


class ReleaseUnavailableError(DriverResolverError):
    """Raised when GitHub is rate limited or returns an anomalous payload."""

    error_prefix = "GitHub releases unavailable"


class VersionNotFoundError(DriverResolverError, ValueError):
    """Raised when no release matches the requested version."""

    error_prefix = "Version not found"

    def __init__(
        self,
        message: str,
        available_versions: list[str],
        target: str | None = None,
    ) -> None:
        """Initialize error with the versions that were observed.

        Args:
            message: Error message describing the failure.
            available_versions: Every tag seen while paginating.
            target: Optional project key the failure belongs to.

        """
        super().__init__(message, target)
        self.available_versions = available_versions


class CacheError(DriverResolverError):
    """Raised when a cache entry cannot be read."""

    error_prefix = "Cache error"
