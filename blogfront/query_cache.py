# blogfront/query_cache.py
"""Keyed cache for store reads.

Keys are tuples naming a logical query, e.g. ``("blogs",)`` or
``("blog", 7)``. One cache is built per app and shared by every request.

- ``fetch(key, loader)`` serves an entry younger than ``stale_after``
  without calling ``loader``; otherwise it loads, and concurrent callers
  asking for the same key wait for that single load instead of starting
  their own. With the default ``stale_after=0`` every observation reloads
  and the cache only deduplicates.
- ``invalidate(key)`` marks the key and every key it prefixes as stale, so
  the next ``fetch`` reloads.
- Errors are recorded on the entry and returned, never raised. An errored
  entry is reloaded on the next ``fetch``.
- Entries not observed for ``gc_after`` seconds are dropped, and the map
  never holds more than ``max_entries``; the least recently observed go first.
"""
import dataclasses
import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Hashable, Optional, Tuple

log = logging.getLogger(__name__)

Key = Tuple[Hashable, ...]


class QueryStatus(str, Enum):
    PENDING = "pending"
    ERROR = "error"
    SUCCESS = "success"


class LoadAborted(Exception):
    """Recorded when a loader was interrupted before producing a result."""


@dataclass
class QueryResult:
    status: QueryStatus
    data: Any = None
    error: Optional[BaseException] = None
    updated_at: Optional[float] = None
    is_fetching: bool = False

    @property
    def is_pending(self) -> bool:
        return self.status is QueryStatus.PENDING

    @property
    def is_error(self) -> bool:
        return self.status is QueryStatus.ERROR

    @property
    def is_success(self) -> bool:
        return self.status is QueryStatus.SUCCESS


class _Load:
    def __init__(self):
        self.done = threading.Event()
        self.result: Optional[QueryResult] = None


class _Entry:
    def __init__(self, now: float):
        self.result: Optional[QueryResult] = None
        self.stale = False
        self.load: Optional[_Load] = None
        self.observed_at = now


class QueryCache:
    def __init__(self, stale_after: float = 0, retry: int = 0, gc_after: float = 300,
                 max_entries: int = 500, clock: Callable[[], float] = time.monotonic):
        self.stale_after = stale_after
        self.retry = max(0, int(retry))
        self.gc_after = gc_after
        self.max_entries = max(1, int(max_entries))
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: "OrderedDict[Key, _Entry]" = OrderedDict()

    def __len__(self):
        with self._lock:
            return len(self._entries)

    def _is_fresh(self, entry: _Entry) -> bool:
        res = entry.result
        if res is None or entry.stale or not res.is_success or self.stale_after <= 0:
            return False
        return self._clock() - res.updated_at < self.stale_after

    def _observe(self, key: Key, now: float) -> _Entry:
        # caller holds the lock
        entry = self._entries.get(key)
        if entry is None:
            entry = self._entries[key] = _Entry(now)
        entry.observed_at = now
        self._entries.move_to_end(key)
        self._collect(now, keep=key)
        return entry

    def _collect(self, now: float, keep: Optional[Key] = None) -> None:
        # caller holds the lock; entries are ordered by last observation
        for k, entry in list(self._entries.items()):
            too_many = len(self._entries) > self.max_entries
            expired = self.gc_after > 0 and now - entry.observed_at >= self.gc_after
            if not (too_many or expired):
                break
            if entry.load is not None or k == keep:
                continue
            del self._entries[k]

    def fetch(self, key: Key, loader: Callable[[], Any]) -> QueryResult:
        key = tuple(key)
        with self._lock:
            entry = self._observe(key, self._clock())
            if entry.load is not None:
                load, owner = entry.load, False
            elif self._is_fresh(entry):
                return entry.result
            else:
                load, owner = _Load(), True
                entry.load = load
                entry.stale = False

        if not owner:
            load.done.wait()
            return load.result

        result = None
        try:
            result = self._run(key, loader)
        finally:
            if result is None:
                result = QueryResult(QueryStatus.ERROR, error=LoadAborted(f"load of {key!r} was interrupted"),
                                     updated_at=self._clock())
            with self._lock:
                entry.load = None
                # the entry may have been dropped by clear() while loading
                if self._entries.get(key) is entry:
                    entry.result = result
            load.result = result
            load.done.set()
        return result

    def _run(self, key: Key, loader: Callable[[], Any]) -> QueryResult:
        attempts = self.retry + 1
        for attempt in range(1, attempts + 1):
            try:
                data = loader()
            except Exception as e:
                log.warning("query %r failed (attempt %d/%d): %s", key, attempt, attempts, e)
                error = e
                continue
            return QueryResult(QueryStatus.SUCCESS, data=data, updated_at=self._clock())
        return QueryResult(QueryStatus.ERROR, error=error.with_traceback(None), updated_at=self._clock())

    def peek(self, key: Key) -> QueryResult:
        """Current result without loading. ``is_fetching`` is set while a load is in flight."""
        with self._lock:
            entry = self._entries.get(tuple(key))
            if entry is None:
                return QueryResult(QueryStatus.PENDING)
            fetching = entry.load is not None
            if entry.result is None:
                return QueryResult(QueryStatus.PENDING, is_fetching=fetching)
            return dataclasses.replace(entry.result, is_fetching=fetching)

    def is_stale(self, key: Key) -> bool:
        with self._lock:
            entry = self._entries.get(tuple(key))
            return entry is None or not self._is_fresh(entry)

    def invalidate(self, key: Key) -> int:
        prefix = tuple(key)
        n = 0
        with self._lock:
            for k, entry in self._entries.items():
                if k[:len(prefix)] == prefix:
                    entry.stale = True
                    n += 1
        log.debug("invalidated %d entr%s under %r", n, "y" if n == 1 else "ies", prefix)
        return n

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
