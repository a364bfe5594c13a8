"""HTTP transport protocol consumed by the release resolver.

Implementations perform a single GET and hand back status, headers and
body. Retrying, timeouts and connection pooling are the transport's
business; the resolver never retries.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(slots=True, frozen=True)
class Response:
    """Result of one HTTP GET.

    Attributes:
        status: HTTP status code
        headers: Response headers
        payload: Decoded body, or None when the server sent none

    """

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    payload: str | None = None

    def has_payload(self) -> bool:
        """Return True when a non-blank body was received."""
        return bool(self.payload and self.payload.strip())

    def get_header(self, name: str) -> str | None:
        """Look up a header case-insensitively.

        Args:
            name: Header name, e.g. "Last-Modified"

        Returns:
            Header value or None

        """
        value = self.headers.get(name)
        if value is not None:
            return value
        lowered = name.lower()
        for key, candidate in self.headers.items():
            if key.lower() == lowered:
                return candidate
        return None


@runtime_checkable
class Transport(Protocol):
    """Asynchronous HTTP GET."""

    async def get(self, url: str, headers: Mapping[str, str]) -> Response:
        """Send a GET request.

        Args:
            url: Absolute request URL
            headers: Request headers

        Returns:
            Response with status, headers and optional payload

        """
        ...
