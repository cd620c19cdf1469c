"""Explicit memoization of rollups keyed by a content hash of the input subtree.

Snapshots are immutable, so an edited subtree hashes differently and simply
misses; ``invalidate`` exists for callers that want to drop stale entries
eagerly. There is no module-level cache: callers own their RollupCache.
"""

from __future__ import annotations

import dataclasses
import hashlib
import json
import logging
from collections import OrderedDict
from datetime import date
from typing import Any, Callable, TypeVar

from metrics_engine import config

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _json_default(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    return str(value)


def content_hash(subtree: Any) -> str:
    """SHA-256 of the canonical JSON form of a dataclass subtree.

    Args:
        subtree: A Workout, Day, Week or any other dataclass instance.

    Returns:
        Hex digest; equal for structurally equal snapshots.
    """
    payload = {
        "type": type(subtree).__name__,
        "data": dataclasses.asdict(subtree) if dataclasses.is_dataclass(subtree) else subtree,
    }
    encoded = json.dumps(payload, sort_keys=True, default=_json_default)
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()


class RollupCache:
    """Bounded LRU map of ``(level, content hash) -> rollup result``."""

    def __init__(self, max_entries: int | None = None) -> None:
        self.max_entries = max(1, max_entries if max_entries is not None else config.CACHE_MAX_ENTRIES)
        self._entries: OrderedDict[tuple[str, str], Any] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, level: str, subtree: Any) -> Any | None:
        key = (level, content_hash(subtree))
        if key not in self._entries:
            self.misses += 1
            return None
        self.hits += 1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, level: str, subtree: Any, result: Any) -> None:
        self._store((level, content_hash(subtree)), result)

    def _store(self, key: tuple[str, str], result: Any) -> None:
        self._entries[key] = result
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted %s rollup %s", evicted[0], evicted[1][:12])

    def get_or_compute(self, level: str, subtree: Any, compute: Callable[[], T]) -> T:
        """Return the cached result for ``subtree`` or compute and store it."""
        key = (level, content_hash(subtree))
        if key in self._entries:
            self.hits += 1
            self._entries.move_to_end(key)
            logger.debug("Cache hit for %s rollup %s", level, key[1][:12])
            return self._entries[key]
        self.misses += 1
        result = compute()
        self._store(key, result)
        return result

    def invalidate(self, subtree: Any) -> int:
        """Drop every level's entry for this subtree; returns the number removed."""
        digest = content_hash(subtree)
        stale = [key for key in self._entries if key[1] == digest]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0
