"""Tests for ReleaseParser."""

import orjson
import pytest

from driver_resolver.core.github import (
    AssetEntry,
    ReleaseCandidate,
    ReleaseFieldNames,
    ReleasePage,
    ReleaseParser,
)


@pytest.fixture
def parser() -> ReleaseParser:
    return ReleaseParser()


def test_parse_release_reads_tag_and_assets(parser):
    payload = orjson.dumps(
        {
            "tag_name": "v0.35.0",
            "assets": [
                {"name": "a.zip", "browser_download_url": "https://x/a.zip"},
                {"name": "b.zip", "browser_download_url": "https://x/b.zip"},
            ],
        }
    ).decode()

    candidate = parser.parse_release(payload)

    assert candidate == ReleaseCandidate(
        tag_name="v0.35.0",
        assets=[
            AssetEntry("a.zip", "https://x/a.zip"),
            AssetEntry("b.zip", "https://x/b.zip"),
        ],
    )


def test_parse_release_without_tag_returns_none(parser):
    assert parser.parse_release('{"message": "Not Found"}') is None


@pytest.mark.parametrize(
    "payload",
    [None, "", "not json", "[]", '"v1.0.0"', '{"tag_name": 5}'],
)
def test_parse_release_rejects_non_release_payloads(parser, payload):
    assert parser.parse_release(payload) is None


def test_parse_release_without_assets(parser):
    candidate = parser.parse_release('{"tag_name": "v1"}')

    assert candidate == ReleaseCandidate(tag_name="v1", assets=[])


def test_parse_release_skips_incomplete_assets(parser):
    payload = orjson.dumps(
        {
            "tag_name": "v1",
            "assets": [
                {"name": "no-url.zip"},
                {"browser_download_url": "https://x/no-name"},
                "garbage",
                {"name": "ok.zip", "browser_download_url": "https://x/ok.zip"},
            ],
        }
    ).decode()

    candidate = parser.parse_release(payload)

    assert candidate.assets == [AssetEntry("ok.zip", "https://x/ok.zip")]


def test_parse_release_list_keeps_server_order(parser):
    payload = orjson.dumps(
        [{"tag_name": "v3"}, {"tag_name": "v1"}, {"tag_name": "v2"}]
    ).decode()

    page = parser.parse_release_list(payload)
    tags = [c.tag_name for c in page.candidates]

    assert tags == ["v3", "v1", "v2"]


@pytest.mark.parametrize(
    "payload", [None, "", "[]", '{"message": "API rate limit exceeded"}', "{"]
)
def test_parse_release_list_end_of_listing(parser, payload):
    page = parser.parse_release_list(payload)

    assert page == ReleasePage()
    assert page.is_end_of_listing()


def test_parse_release_list_skips_untagged_entries(parser):
    payload = '[{"name": "draft"}, {"tag_name": "v1"}]'

    page = parser.parse_release_list(payload)

    assert [c.tag_name for c in page.candidates] == ["v1"]
    assert page.entry_count == 2


def test_page_of_untagged_entries_is_not_end_of_listing(parser):
    payload = '[{"name": "draft without tag", "assets": []}]'

    page = parser.parse_release_list(payload)

    assert page.candidates == []
    assert not page.is_end_of_listing()


def test_custom_field_names():
    parser = ReleaseParser(
        ReleaseFieldNames(
            tag_name="version",
            assets="files",
            asset_name="filename",
            browser_download_url="href",
        )
    )
    payload = '{"version": "2.1", "files": [{"filename": "d", "href": "u"}]}'

    candidate = parser.parse_release(payload)

    assert candidate == ReleaseCandidate("2.1", [AssetEntry("d", "u")])
