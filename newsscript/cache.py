"""In-process TTL cache for news payloads keyed by continent."""

import time
import typing as t
from dataclasses import dataclass

DEFAULT_TTL_SEC = 4 * 60 * 60


@dataclass(frozen=True)
class CachedEntry:
    """A cached payload and the time it was stored."""

    key: str
    payload: dict[str, t.Any]
    timestamp: float


class TTLCache:
    """Best-effort cache owned by the news service.

    Entries are overwritten on every successful fetch and never evicted
    otherwise; the key space is the fixed continent set. There is no
    locking: concurrent writers on one process race and the last one wins.

    :param ttl: Seconds an entry stays fresh. ``ttl <= 0`` makes every
        entry stale, which disables caching.
    :param clock: Time source returning seconds, injectable for tests.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SEC,
        clock: t.Callable[[], float] = time.time,
    ) -> None:
        self.ttl = float(ttl)
        self._clock = clock
        self._entries: dict[str, CachedEntry] = {}

    @staticmethod
    def _key(key: str) -> str:
        return key.strip().lower()

    def now(self) -> float:
        """Return the current time from the injected clock."""
        return self._clock()

    def get(self, key: str) -> CachedEntry | None:
        """Get the entry for a key, fresh or not.

        :param key: Cache key (case-insensitive).
        :return: The stored entry or None.
        """
        return self._entries.get(self._key(key))

    def put(self, key: str, payload: dict[str, t.Any]) -> CachedEntry:
        """Store a payload, overwriting any previous entry.

        :param key: Cache key (case-insensitive).
        :param payload: Payload to store.
        :return: The new entry.
        """
        k = self._key(key)
        ts = self.now()
        prev = self._entries.get(k)
        # timestamps are monotonic per key even if the clock steps back
        if prev is not None and prev.timestamp > ts:
            ts = prev.timestamp
        entry = CachedEntry(key=k, payload=payload, timestamp=ts)
        self._entries[k] = entry
        return entry

    def is_fresh(self, entry: CachedEntry, now: float | None = None) -> bool:
        """Check whether an entry is younger than the TTL.

        :param entry: Entry to check.
        :param now: Reference time; defaults to the injected clock.
        :return: True if ``now - entry.timestamp < ttl``.
        """
        if now is None:
            now = self.now()
        return now - entry.timestamp < self.ttl

    def fresh(self, key: str) -> CachedEntry | None:
        """Get the entry for a key only if it is still fresh."""
        entry = self.get(key)
        if entry is None or not self.is_fresh(entry):
            return None
        return entry

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
