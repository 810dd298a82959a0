"""
Tests for the file-based profile cache.
"""

import json

import pytest

from portfolio_scraper.analyzer import PortfolioAnalyzer
from portfolio_scraper.extractor import extract_profile
from portfolio_scraper.profile_cache import ProfileCache, analysis_key, profile_key

URL = "https://jane.dev"


@pytest.fixture
def cache(tmp_path):
    return ProfileCache(tmp_path / "cache")


@pytest.fixture
def profile(sample_document):
    return extract_profile(sample_document, URL, page_load_time=12.5)


def test_key_scheme():
    assert profile_key(URL) == "portfolio_https://jane.dev"
    assert analysis_key(URL) == "portfolio_analysis_https://jane.dev"


def test_cache_dir_is_created(tmp_path):
    ProfileCache(tmp_path / "nested" / "cache")

    assert (tmp_path / "nested" / "cache").is_dir()


def test_put_and_get_raw_value(cache):
    cache.put("some-key", {"a": 1})

    assert cache.get("some-key") == {"a": 1}
    assert cache.exists("some-key")
    assert cache.get("other-key") is None


def test_put_overwrites(cache):
    cache.put("k", {"v": 1})
    cache.put("k", {"v": 2})

    assert cache.get("k") == {"v": 2}
    assert len(cache.list_cached()) == 1


def test_distinct_urls_get_distinct_files(cache):
    first = cache.put(profile_key("https://a.dev/x?y"), {})
    second = cache.put(profile_key("https://a.dev/x#y"), {})

    assert first != second


def test_profile_survives_round_trip(cache, profile):
    cache.put_profile(URL, profile)

    assert cache.get_profile(URL) == profile


def test_profile_stored_as_camel_case_json(cache, profile):
    path = cache.put_profile(URL, profile)

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored["key"] == profile_key(URL)
    assert "created_at" in stored
    assert stored["value"]["metadata"]["pageLoadTime"] == 12.5
    assert stored["value"]["technologies"] == sorted(profile.technologies)


def test_analysis_survives_round_trip(cache, profile):
    analysis = PortfolioAnalyzer().analyze(profile)
    cache.put_analysis(URL, analysis)

    assert cache.get_analysis(URL) == analysis


def test_invalid_cached_profile_is_discarded(cache):
    cache.put(profile_key(URL), {"title": "no metadata"})

    assert cache.get_profile(URL) is None


def test_corrupt_file_is_a_miss(cache):
    cache._path_for("broken").write_text("{not json", encoding="utf-8")

    assert cache.get("broken") is None


def test_delete_and_clear(cache):
    cache.put("a", {})
    cache.put("b", {})

    assert cache.delete("a") is True
    assert cache.delete("a") is False
    assert [entry["key"] for entry in cache.list_cached()] == ["b"]
    assert cache.clear() == 1
    assert cache.list_cached() == []
