"""aiohttp implementation of the Transport protocol."""

from __future__ import annotations

from collections.abc import Mapping

import aiohttp

from driver_resolver.constants import HTTP_NOT_MODIFIED
from driver_resolver.core.protocols import Response
from driver_resolver.logger import get_logger

logger = get_logger(__name__)


class AiohttpTransport:
    """Performs GET requests through a shared aiohttp session.

    Non-2xx responses are returned, not raised, so the resolver can read
    rate-limit headers and the error body.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        timeout: aiohttp.ClientTimeout | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            session: aiohttp session for making requests
            timeout: Optional per-request timeout (session default if None)

        """
        self.session = session
        self.timeout = timeout

    async def get(self, url: str, headers: Mapping[str, str]) -> Response:
        """Send a GET request.

        Args:
            url: Absolute request URL
            headers: Request headers

        Returns:
            Response; payload is None for 304 Not Modified

        Raises:
            aiohttp.ClientError: On connection failures
            TimeoutError: When the request times out

        """
        kwargs = {"headers": dict(headers)}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        async with self.session.get(url, **kwargs) as response:
            payload = None
            if response.status != HTTP_NOT_MODIFIED:
                # Proxies can return error pages that are not valid UTF-8
                payload = await response.text(errors="replace")
            logger.debug("GET %s -> %s", url, response.status)
            return Response(
                status=response.status,
                headers=dict(response.headers),
                payload=payload or None,
            )
