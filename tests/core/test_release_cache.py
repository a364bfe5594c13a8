"""Tests for the file-backed ReleaseCacheManager."""

from datetime import UTC, datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import MagicMock

import orjson
import pytest

from driver_resolver.config import ConfigManager
from driver_resolver.core.cache import ReleaseCacheManager
from driver_resolver.core.github import ReleaseRecord
from driver_resolver.core.protocols import ReleaseCache
from driver_resolver.exceptions import CacheError
from driver_resolver.utils.datetime_utils import EPOCH

KEY = "mozilla@geckodriver"


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    return tmp_path / "cache" / "releases"


@pytest.fixture
def cache_manager(cache_dir: Path) -> ReleaseCacheManager:
    return ReleaseCacheManager(cache_dir=cache_dir)


@pytest.fixture
def record() -> ReleaseRecord:
    return ReleaseRecord(
        version="v0.35.0",
        download_url="https://example.com/geckodriver-v0.35.0-linux64.tar.gz",
    )


class TestReleaseCacheManager:
    """Test suite for ReleaseCacheManager."""

    def test_init_creates_cache_directory(self, cache_dir):
        ReleaseCacheManager(cache_dir=cache_dir)

        assert cache_dir.is_dir()

    def test_init_uses_configured_cache_directory(self, tmp_path):
        config_manager = MagicMock(spec=ConfigManager)
        config_manager.load_global_config.return_value = {
            "directory": {"cache": tmp_path / "configured"}
        }

        cache = ReleaseCacheManager(config_manager=config_manager)

        assert cache.cache_dir == tmp_path / "configured" / "releases"
        assert cache.cache_dir.is_dir()

    def test_satisfies_protocol(self, cache_manager):
        assert isinstance(cache_manager, ReleaseCache)

    def test_cache_file_path_uses_key(self, cache_manager, cache_dir):
        assert cache_manager._get_cache_file_path(KEY) == (
            cache_dir / "mozilla@geckodriver.json"
        )

    def test_cache_file_path_sanitizes_separators(self, cache_manager):
        path = cache_manager._get_cache_file_path("../evil@x/y")

        assert path.parent == cache_manager.cache_dir
        assert "/" not in path.name

    @pytest.mark.asyncio
    async def test_store_and_load_round_trip(self, cache_manager, record):
        last_modified = datetime(2024, 8, 6, 16, 22, 57, tzinfo=UTC)

        await cache_manager.store(record, KEY, last_modified)

        assert await cache_manager.exists(KEY)
        assert await cache_manager.load(KEY) == record
        assert await cache_manager.last_modification_of(KEY) == last_modified

    @pytest.mark.asyncio
    async def test_store_writes_expected_file(
        self, cache_manager, cache_dir, record
    ):
        last_modified = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)

        await cache_manager.store(record, KEY, last_modified)

        data = orjson.loads((cache_dir / f"{KEY}.json").read_bytes())
        assert data == {
            "key": KEY,
            "last_modified": "2024-01-02T03:04:05+00:00",
            "record": {
                "version": "v0.35.0",
                "download_url": record.download_url,
            },
        }
        assert not (cache_dir / f"{KEY}.tmp").exists()

    @pytest.mark.asyncio
    async def test_store_overwrites_previous_entry(self, cache_manager, record):
        await cache_manager.store(record, KEY, EPOCH)
        newer = ReleaseRecord(version="v0.36.0", download_url=None)

        await cache_manager.store(newer, KEY, EPOCH + timedelta(days=1))

        assert await cache_manager.load(KEY) == newer

    @pytest.mark.asyncio
    async def test_timezone_is_preserved(self, cache_manager, record):
        offset = timezone(timedelta(hours=3))
        last_modified = datetime(2024, 1, 1, 12, 0, tzinfo=offset)

        await cache_manager.store(record, KEY, last_modified)

        loaded = await cache_manager.last_modification_of(KEY)
        assert loaded == last_modified
        assert loaded.utcoffset() == timedelta(hours=3)

    @pytest.mark.asyncio
    async def test_missing_entry(self, cache_manager):
        assert not await cache_manager.exists(KEY)
        assert await cache_manager.last_modification_of(KEY) == EPOCH
        with pytest.raises(CacheError):
            await cache_manager.load(KEY)

    @pytest.mark.asyncio
    async def test_entry_of_colliding_key_is_not_shared(
        self, cache_manager, record, caplog
    ):
        # Both keys sanitize to "acme@driver_x.json"
        await cache_manager.store(record, "acme@driver/x", EPOCH)

        assert not await cache_manager.exists("acme@driver x")
        assert await cache_manager.last_modification_of("acme@driver x") == EPOCH
        with pytest.raises(CacheError):
            await cache_manager.load("acme@driver x")
        assert "holds 'acme@driver/x'" in caplog.text
        assert await cache_manager.load("acme@driver/x") == record

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        [
            b"{not json",
            b"[]",
            b'{"key": "k", "last_modified": "yesterday", "record": {"version": "v1"}}',
            b'{"key": "k", "last_modified": "2024-01-01T00:00:00+00:00", "record": {}}',
        ],
    )
    async def test_corrupted_entry_is_treated_as_missing(
        self, cache_manager, cache_dir, content, caplog
    ):
        (cache_dir / f"{KEY}.json").write_bytes(content)

        assert not await cache_manager.exists(KEY)
        assert await cache_manager.last_modification_of(KEY) == EPOCH
        with pytest.raises(CacheError):
            await cache_manager.load(KEY)
        assert "Cache file corrupted" in caplog.text

    @pytest.mark.asyncio
    async def test_null_download_url_round_trip(self, cache_manager):
        record = ReleaseRecord(version="v1", download_url=None)

        await cache_manager.store(record, KEY, EPOCH)

        assert await cache_manager.load(KEY) == record

    @pytest.mark.asyncio
    async def test_clear_single_key(self, cache_manager, record):
        await cache_manager.store(record, KEY, EPOCH)
        await cache_manager.store(record, "operasoftware@operachromiumdriver", EPOCH)

        removed = await cache_manager.clear(KEY)

        assert removed == 1
        assert not await cache_manager.exists(KEY)
        assert await cache_manager.exists("operasoftware@operachromiumdriver")

    @pytest.mark.asyncio
    async def test_clear_all(self, cache_manager, record):
        await cache_manager.store(record, KEY, EPOCH)
        await cache_manager.store(record, "a@b", EPOCH)

        assert await cache_manager.clear() == 2
        assert await cache_manager.clear() == 0
