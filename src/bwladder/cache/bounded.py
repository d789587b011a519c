"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

In-memory cache bounded by entry age and aggregate serialized size.
"""

from __future__ import annotations

import time
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

from ..errors import InvalidInputError
from .base import CacheEntry
from .keys import size_of_json


class BoundedTTLCache:
    """
    Process-local LRU cache with per-entry TTL and an aggregate byte budget.

    Entry sizes come from ``sizer`` (serialized JSON size by default), never
    from the caller. The sum of resident sizes never exceeds ``max_bytes``;
    least recently used entries are evicted to make room, and a value that
    alone exceeds the budget is not stored. Entries older than
    ``ttl_seconds`` read as absent even while still resident.
    """

    def __init__(
        self,
        max_bytes: int,
        ttl_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        sizer: Callable[[Any], int] = size_of_json,
    ) -> None:
        if max_bytes <= 0:
            raise InvalidInputError(f"max_bytes must be positive, got {max_bytes}")
        if ttl_seconds <= 0:
            raise InvalidInputError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self._max_bytes = max_bytes
        self._ttl_s = float(ttl_seconds)
        self._clock = clock
        self._sizer = sizer
        self._rows: OrderedDict[str, CacheEntry] = OrderedDict()
        self._total_bytes = 0

    @property
    def max_bytes(self) -> int:
        return self._max_bytes

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_s

    @property
    def total_bytes(self) -> int:
        return self._total_bytes

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, key: object) -> bool:
        row = self._rows.get(key)  # type: ignore[arg-type]
        return row is not None and not self._is_expired(row, self._clock())

    def _is_expired(self, row: CacheEntry, now: float) -> bool:
        return now - row.inserted_at_s > self._ttl_s

    def _drop(self, key: str) -> None:
        row = self._rows.pop(key, None)
        if row is not None:
            self._total_bytes -= row.size_bytes

    def get(self, key: str, default: Any = None) -> Any:
        row = self._rows.get(key)
        if row is None:
            return default
        if self._is_expired(row, self._clock()):
            self._drop(key)
            return default
        self._rows.move_to_end(key)
        return row.value

    def set(self, key: str, value: Any) -> None:
        size = self._sizer(value)
        self._drop(key)
        if size > self._max_bytes:
            return

        now = self._clock()
        self._rows[key] = CacheEntry(value=value, inserted_at_s=now, size_bytes=size)
        self._total_bytes += size
        self._prune(now)

    def delete(self, key: str) -> None:
        self._drop(key)

    def clear(self) -> None:
        self._rows.clear()
        self._total_bytes = 0

    def _prune(self, now: float) -> None:
        expired = [key for key, row in self._rows.items() if self._is_expired(row, now)]
        for key in expired:
            self._drop(key)
        while self._total_bytes > self._max_bytes:
            oldest = next(iter(self._rows))
            self._drop(oldest)
