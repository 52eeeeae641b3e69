# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""
Bounded memoization for gamut solver results.

A slider track re-evaluates the solver for every one of its samples on
every redraw, but only over a handful of distinct (lightness, hue) pairs.
The cache is a fixed-capacity LRU keyed by the literal numeric tuple the
caller passed; no rounding is applied, so 0.5 and 0.50000001 are
different keys.

Entries are written once and never modified. A lock makes a shared
resolver safe to use from several threads.
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Hashable, Optional

from okpicker.schema import CacheInfo


class GamutCache:
    """Fixed-capacity least-recently-used cache of max chroma values."""

    def __init__(self, maxsize: int = 4096) -> None:
        if maxsize < 0:
            raise ValueError(f"maxsize must be >= 0, got {maxsize}")
        self._maxsize = maxsize
        self._entries: OrderedDict[Hashable, float] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def maxsize(self) -> int:
        return self._maxsize

    def get(self, key: Hashable) -> Optional[float]:
        """Return the cached value for key, or None on a miss."""
        with self._lock:
            try:
                value = self._entries[key]
            except KeyError:
                self._misses += 1
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return value

    def put(self, key: Hashable, value: float) -> None:
        """
        Store value under key.

        An existing entry is kept as is (entries are immutable); the least
        recently used entry is evicted once the cache is full.
        """
        if self._maxsize == 0:
            return
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
                return
            self._entries[key] = value
            if len(self._entries) > self._maxsize:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        """Drop all entries and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def info(self) -> CacheInfo:
        """Hit/miss statistics and current size."""
        with self._lock:
            return CacheInfo(
                hits=self._hits,
                misses=self._misses,
                maxsize=self._maxsize,
                currsize=len(self._entries),
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
