"""A high-level cache that stores JSON values through a pluggable driver."""

from __future__ import annotations

import json
from typing import Any

from foxtive.cache.driver import CacheDriver, Setter


class Cache:
    """Stores and retrieves serialisable values using a ``CacheDriver``."""

    def __init__(self, driver: CacheDriver) -> None:
        self._driver = driver

    def driver(self) -> CacheDriver:
        """The underlying driver."""
        return self._driver

    async def put(self, key: str, value: Any) -> str:
        """Serialise ``value`` as JSON and store it under ``key``."""
        raw = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        return await self._driver.put_raw(key, raw)

    async def get(self, key: str) -> Any:
        """The decoded value under ``key``, or None if it is not cached."""
        raw = await self._driver.get_raw(key)
        if raw is None:
            return None
        return json.loads(raw)

    async def forget(self, key: str) -> int:
        """Remove ``key``; return the number of keys removed."""
        return await self._driver.forget(key)

    async def get_or_put(self, key: str, setter: Setter) -> Any:
        """Return the cached value, or compute it with ``setter`` and store it."""
        return await self._driver.get_or_put(key, setter)

    async def keys(self) -> list[str]:
        """All keys in the cache."""
        return await self._driver.keys()

    async def keys_by_pattern(self, pattern: str) -> list[str]:
        """All keys matching ``pattern``."""
        return await self._driver.keys_by_pattern(pattern)

    async def forget_by_pattern(self, pattern: str) -> int:
        """Remove every key matching ``pattern``; return how many were removed."""
        return await self._driver.forget_by_pattern(pattern)