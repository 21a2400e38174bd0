"""A cache driver that keeps everything in process memory."""

from __future__ import annotations

import re

from foxtive.cache.driver import CacheDriver


class InMemoryDriver(CacheDriver):
    """Stores raw strings in a dictionary.

    Patterns are regular expressions matched anywhere in a key. An invalid
    pattern raises ``re.error``.
    """

    def __init__(self) -> None:
        self._storage: dict[str, str] = {}

    async def keys(self) -> list[str]:
        return list(self._storage)

    async def keys_by_pattern(self, pattern: str) -> list[str]:
        regex = re.compile(pattern)
        return [key for key in await self.keys() if regex.search(key)]

    async def put_raw(self, key: str, value: str) -> str:
        """Store ``value`` under ``key`` and return the stored value."""
        self._storage[key] = value
        return value

    async def get_raw(self, key: str) -> str | None:
        return self._storage.get(key)

    async def forget(self, key: str) -> int:
        return 0 if self._storage.pop(key, None) is None else 1

    async def forget_by_pattern(self, pattern: str) -> int:
        regex = re.compile(pattern)
        matched = [key for key in self._storage if regex.search(key)]
        removed = 0
        for key in matched:
            if self._storage.pop(key, None) is not None:
                removed += 1
        return removed