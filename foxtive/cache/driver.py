"""The contract every cache storage driver fulfils, plus JSON-aware helpers."""

from __future__ import annotations

import inspect
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Union

_logger = logging.getLogger(__name__)

Setter = Callable[[], Union[Awaitable[Any], Any]]


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class CacheDriver(ABC):
    """A key/value store for strings.

    Subclasses supply the raw string operations. Values are stored as JSON
    by the ``put``, ``get`` and ``get_or_put`` helpers.
    """

    @abstractmethod
    async def keys(self) -> list[str]:
        """All keys present in the cache."""

    @abstractmethod
    async def keys_by_pattern(self, pattern: str) -> list[str]:
        """All keys matching ``pattern``."""

    @abstractmethod
    async def put_raw(self, key: str, value: str) -> str:
        """Store a raw string under ``key``."""

    @abstractmethod
    async def get_raw(self, key: str) -> str | None:
        """The raw string stored under ``key``, or None if absent."""

    @abstractmethod
    async def forget(self, key: str) -> int:
        """Remove ``key``; return the number of keys removed."""

    @abstractmethod
    async def forget_by_pattern(self, pattern: str) -> int:
        """Remove every key matching ``pattern``; return how many were removed."""

    async def put(self, key: str, value: Any) -> str:
        """Serialise ``value`` as JSON and store it."""
        return await self.put_raw(key, _to_json(value))

    async def get(self, key: str) -> Any:
        """Load and decode the JSON stored under ``key``, or None if absent."""
        raw = await self.get_raw(key)
        if raw is None:
            return None
        return json.loads(raw)

    async def get_or_put(self, key: str, setter: Setter) -> Any:
        """Return the cached value, or compute it with ``setter`` and store it."""
        cached = await self.get(key)
        if cached is not None:
            _logger.debug("'%s' collected from cache :)", key)
            return cached

        _logger.debug("'%s' is missing in cache, executing setter()...", key)
        value = setter()
        if inspect.isawaitable(value):
            value = await value

        try:
            await self.put(key, value)
        except Exception as exc:
            _logger.error("Failed to cache value for '%s': %r", key, exc)
            raise
        return value