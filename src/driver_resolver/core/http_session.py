"""HTTP session utilities for driver-resolver."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from driver_resolver.constants import DEFAULT_TIMEOUT_SECONDS
from driver_resolver.types import GlobalConfig


def build_client_timeout(global_config: GlobalConfig) -> aiohttp.ClientTimeout:
    """Derive the request timeout from the network settings."""
    network_cfg = global_config.get("network", {})
    timeout_seconds = int(
        network_cfg.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)
    )
    return aiohttp.ClientTimeout(
        total=timeout_seconds * 3,
        sock_read=timeout_seconds * 2,
        sock_connect=timeout_seconds,
    )


@asynccontextmanager
async def create_http_session(
    global_config: GlobalConfig,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create configured HTTP session.

    Args:
        global_config: Global configuration dictionary

    Yields:
        Configured aiohttp.ClientSession

    """
    connector = aiohttp.TCPConnector(limit=10, limit_per_host=4)
    async with aiohttp.ClientSession(
        timeout=build_client_timeout(global_config),
        connector=connector,
        headers={"Accept": "application/vnd.github+json"},
    ) as session:
        yield session
