"""Tests for the TTL cache."""

from fakes import Clock

from newsscript.cache import DEFAULT_TTL_SEC, TTLCache


def test_default_ttl_is_four_hours() -> None:
    """Test the default TTL."""
    assert DEFAULT_TTL_SEC == 14400
    assert TTLCache().ttl == 14400.0


def test_put_get_case_insensitive() -> None:
    """Test that keys are lower-cased."""
    cache = TTLCache(clock=Clock())
    cache.put("Europe", {"stories": []})
    entry = cache.get("EUROPE")
    assert entry is not None
    assert entry.key == "europe"
    assert entry.payload == {"stories": []}
    assert entry.timestamp == 1000.0
    assert cache.get("Asia") is None


def test_is_fresh_boundary() -> None:
    """Test freshness is strictly less than the TTL."""
    clock = Clock()
    cache = TTLCache(ttl=10, clock=clock)
    entry = cache.put("asia", {})
    assert cache.is_fresh(entry, now=1009.999)
    assert not cache.is_fresh(entry, now=1010.0)
    clock.advance(5)
    assert cache.fresh("asia") is entry
    clock.advance(5)
    assert cache.fresh("asia") is None
    # stale entries are still readable
    assert cache.get("asia") is entry


def test_put_overwrites() -> None:
    """Test that put overwrites and moves the timestamp forward."""
    clock = Clock()
    cache = TTLCache(clock=clock)
    cache.put("africa", {"n": 1})
    clock.advance(60)
    cache.put("africa", {"n": 2})
    entry = cache.get("africa")
    assert entry is not None and entry.payload == {"n": 2}
    assert entry.timestamp == 1060.0
    assert len(cache) == 1


def test_timestamp_never_decreases() -> None:
    """Test that a clock stepping backwards keeps the later timestamp."""
    clock = Clock()
    cache = TTLCache(clock=clock)
    cache.put("oceania", {"n": 1})
    clock.advance(-30)
    entry = cache.put("oceania", {"n": 2})
    assert entry.timestamp == 1000.0
    assert entry.payload == {"n": 2}


def test_zero_ttl_disables_caching() -> None:
    """Test that ttl=0 makes every entry stale."""
    cache = TTLCache(ttl=0, clock=Clock())
    cache.put("asia", {})
    assert cache.fresh("asia") is None


def test_clear() -> None:
    """Test that clear drops all entries."""
    cache = TTLCache(clock=Clock())
    cache.put("asia", {})
    cache.put("europe", {})
    cache.clear()
    assert len(cache) == 0
