"""Tests for failed-response classification."""

import pytest

from driver_resolver.core.github import RateLimitHeaders, describe_failure
from driver_resolver.core.github.errors import format_reset_time
from driver_resolver.core.protocols import Response

HEADERS = RateLimitHeaders()


def test_rate_limit_message_contains_reset_time():
    response = Response(
        status=403,
        headers={"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "0"},
        payload='{"message": "API rate limit exceeded"}',
    )

    message = describe_failure(response, HEADERS, latest=True)

    assert message == (
        "GitHub API rate limit exceeded. To get the information about the "
        "latest release you need to wait till the rate limit is reset "
        "which will be: 1970-01-01 00:00:00 UTC."
    )


def test_rate_limit_message_for_release_listing():
    response = Response(status=403, headers={"X-RateLimit-Remaining": "0"})

    message = describe_failure(response, HEADERS, latest=False)

    assert message == (
        "GitHub API rate limit exceeded. To get the information about the "
        "release you need to wait till the rate limit is reset."
    )


@pytest.mark.parametrize("reset", ["soon", "", "1.5e9", "99999999999999999999"])
def test_malformed_reset_is_omitted(reset):
    response = Response(
        status=403,
        headers={"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": reset},
    )

    message = describe_failure(response, HEADERS, latest=True)

    assert "rate limit exceeded" in message
    assert "which will be" not in message


def test_server_anomaly_includes_body():
    response = Response(
        status=500,
        headers={"X-RateLimit-Remaining": "41"},
        payload="<h1>Unicorn!</h1>",
    )

    message = describe_failure(response, HEADERS, latest=True)

    assert message == (
        "There is some problem on GitHub server. It responded with: "
        "<h1>Unicorn!</h1>"
    )


def test_missing_remaining_header_is_server_anomaly():
    response = Response(status=502, payload="bad gateway")

    assert "problem on GitHub server" in describe_failure(
        response, HEADERS, latest=False
    )


def test_header_lookup_is_case_insensitive():
    response = Response(status=403, headers={"x-ratelimit-remaining": "0"})

    assert "rate limit exceeded" in describe_failure(
        response, HEADERS, latest=True
    )


def test_format_reset_time():
    assert format_reset_time("1700000000") == "2023-11-14 22:13:20 UTC"
    assert format_reset_time(None) is None
    assert format_reset_time("x") is None
