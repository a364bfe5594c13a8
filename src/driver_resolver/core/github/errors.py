"""Classification of failed GitHub responses into readable messages."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from driver_resolver.core.github.models import RateLimitHeaders
    from driver_resolver.core.protocols import Response


def format_reset_time(raw_reset: str | None) -> str | None:
    """Convert an ``X-RateLimit-Reset`` value into a readable time.

    Args:
        raw_reset: Header value in Unix seconds

    Returns:
        Time such as "2024-05-01 12:00:00 UTC", or None if the value is
        missing or not a usable number

    """
    if raw_reset is None:
        return None
    try:
        reset_at = datetime.fromtimestamp(int(raw_reset.strip()), UTC)
    except (ValueError, OverflowError, OSError):
        return None
    return reset_at.strftime("%Y-%m-%d %H:%M:%S %Z")


def is_rate_limited(response: Response, headers: RateLimitHeaders) -> bool:
    """Return True when GitHub reports no remaining requests."""
    remaining = response.get_header(headers.remaining)
    return remaining is not None and remaining.strip() == "0"


def describe_failure(
    response: Response,
    headers: RateLimitHeaders,
    *,
    latest: bool,
) -> str:
    """Build a human-readable message for a failed releases request.

    Never raises; an unparsable reset header just leaves the reset time
    out of the message.

    Args:
        response: Response that did not yield a usable release
        headers: Rate-limit header names
        latest: Whether the latest-release endpoint was queried

    Returns:
        Rate-limit message, or a server anomaly message carrying the raw body

    """
    if is_rate_limited(response, headers):
        subject = "latest release" if latest else "release"
        msg = (
            "GitHub API rate limit exceeded. To get the information about "
            f"the {subject} you need to wait till the rate limit is reset"
        )
        reset_time = format_reset_time(response.get_header(headers.reset))
        if reset_time:
            msg += f" which will be: {reset_time}"
        return msg + "."

    return (
        "There is some problem on GitHub server. It responded with: "
        f"{response.payload}"
    )
