"""Page parameter handling for GitHub listing endpoints."""

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from driver_resolver.constants import PAGE_PARAMETER


def build_page_url(url: str, page: int) -> str:
    """Return url pointing at the given page.

    Page 1 is the bare URL, as GitHub itself links it. For other pages the
    ``page`` parameter is set (replacing any existing one) and every other
    query parameter is kept in place.

    Args:
        url: Listing endpoint URL
        page: 1-based page number

    Returns:
        Request URL for the page

    Raises:
        ValueError: If page is lower than 1

    """
    if page < 1:
        msg = f"Page numbers start at 1, got {page}"
        raise ValueError(msg)
    if page == 1:
        return url

    parts = urlsplit(url)
    query = [
        (name, value)
        for name, value in parse_qsl(parts.query, keep_blank_values=True)
        if name != PAGE_PARAMETER
    ]
    query.append((PAGE_PARAMETER, str(page)))
    return urlunsplit(parts._replace(query=urlencode(query)))
