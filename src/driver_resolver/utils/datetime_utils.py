"""Datetime utilities for HTTP date headers and cache timestamps.

GitHub sends and accepts RFC 1123 dates (``Wed, 21 Oct 2015 07:28:00 GMT``)
in ``Last-Modified`` and ``If-Modified-Since``.
"""

from datetime import UTC, datetime
from email.utils import format_datetime, parsedate_to_datetime

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def format_http_date(moment: datetime) -> str:
    """Format an aware datetime as an RFC 1123 date in GMT.

    Args:
        moment: Timezone-aware datetime (naive values are taken as UTC)

    Returns:
        HTTP date string, e.g. "Thu, 01 Jan 1970 00:00:00 GMT"

    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return format_datetime(moment.astimezone(UTC), usegmt=True)


def parse_http_date(value: str | None) -> datetime | None:
    """Parse an RFC 1123 / RFC 2822 date header.

    Args:
        value: Raw header value

    Returns:
        Aware datetime in UTC, or None when missing or malformed

    """
    if not value:
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def get_current_datetime_utc() -> datetime:
    """Get current datetime in UTC."""
    return datetime.now(UTC)
