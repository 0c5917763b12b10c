"""Tests for the on-disk developer response cache."""

from pathlib import Path

import pytest

from tests.helpers.fake_transport import FailingRequestClient, FakeRequestClient
from tvdbclient import cache
from tvdbclient.cache import CachingRequestClient, cache_filename
from tvdbclient.errors import CommunicationError

URL = "https://api.thetvdb.com/search/series?name=scrubs"


def test_cache_filename_is_filesystem_safe() -> None:
    assert (
        cache_filename(URL) == "https___api.thetvdb.com_search_series_name_scrubs"
    )


def test_second_request_served_from_disk(tmp_path: Path) -> None:
    inner = FakeRequestClient({"/search/series": '{"data": []}'})
    client = CachingRequestClient(inner, tmp_path / "cache")

    assert client.get_url(URL, "tok") == '{"data": []}'
    assert client.get_url(URL, "tok") == '{"data": []}'
    assert inner.calls == [(URL, "tok")]
    assert client.cache_path(URL).read_text(encoding="utf-8") == '{"data": []}'


def test_bypass_refetches(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    inner = FakeRequestClient({"/search/series": "fresh"})
    client = CachingRequestClient(inner, tmp_path)
    client.cache_path(URL).write_text("stale", encoding="utf-8")

    assert client.get_url(URL) == "stale"
    monkeypatch.setattr(cache, "BYPASS_CACHE", True)
    assert client.get_url(URL) == "fresh"
    assert client.cache_path(URL).read_text(encoding="utf-8") == "fresh"


def test_failures_are_not_cached(tmp_path: Path) -> None:
    client = CachingRequestClient(FailingRequestClient(), tmp_path)
    with pytest.raises(CommunicationError):
        client.get_url(URL)
    assert not client.cache_path(URL).exists()


def test_default_cache_dir_is_relative() -> None:
    client = CachingRequestClient(FailingRequestClient())
    assert client.cache_dir == Path("cache")


def test_long_url_gets_hashed_name(tmp_path: Path) -> None:
    """Edge: very long URLs still map to a writable, unique file name."""
    long_url = f"https://api.thetvdb.com/search/series?name={'x' * 300}"
    other_url = f"https://api.thetvdb.com/search/series?name={'x' * 299}y"
    name = cache_filename(long_url)
    assert len(name) == cache.MAX_FILENAME_LENGTH
    assert name.startswith("https___api.thetvdb.com_search_series_name_xxx")
    assert name != cache_filename(other_url)

    inner = FakeRequestClient({"/search/series": '{"data": []}'})
    client = CachingRequestClient(inner, tmp_path)
    assert client.get_url(long_url) == '{"data": []}'
    assert client.get_url(long_url) == '{"data": []}'
    assert len(inner.calls) == 1
    assert client.cache_path(long_url).exists()
