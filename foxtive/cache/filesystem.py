"""A cache driver that stores each entry as a file in a directory."""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

from foxtive.cache.driver import CacheDriver

_SUFFIX = ".cache"
_EMPTY_KEY_NAME = "empty_key"
_UNSAFE_CHARS = re.compile(r'[:/\\<>"|?*]')


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def _write_text(path: Path, value: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(value, encoding="utf-8")


def _remove(path: Path) -> bool:
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    return True


def _scan_keys(directory: Path) -> list[str]:
    found = []
    for entry in directory.iterdir():
        if not entry.is_file() or not entry.name.endswith(_SUFFIX):
            continue
        stem = entry.name[: -len(_SUFFIX)]
        found.append("" if stem == _EMPTY_KEY_NAME else stem)
    return found


class FilesystemCacheDriver(CacheDriver):
    """Stores each key in ``<base_path>/<safe key>.cache``.

    Characters that are unsafe in file names are replaced by ``_`` and the
    empty key is stored as ``empty_key.cache``. Patterns are regular
    expressions matched anywhere in a key; an invalid one raises ``re.error``.
    """

    def __init__(self, base_path: str | Path) -> None:
        self.base_path = Path(base_path)
        self._paths: dict[str, Path] = {}

    def _key_to_path(self, key: str) -> Path:
        path = self._paths.get(key)
        if path is not None:
            return path
        safe_key = _UNSAFE_CHARS.sub("_", key) if key else _EMPTY_KEY_NAME
        path = self.base_path / f"{safe_key}{_SUFFIX}"
        self._paths[key] = path
        return path

    async def keys(self) -> list[str]:
        """Keys known to this driver plus those found on disk."""
        keys = list(self._paths)
        for key in await asyncio.to_thread(_scan_keys, self.base_path):
            if key not in keys:
                keys.append(key)
        return keys

    async def keys_by_pattern(self, pattern: str) -> list[str]:
        regex = re.compile(pattern)
        return [key for key in await self.keys() if regex.search(key)]

    async def put_raw(self, key: str, value: str) -> str:
        """Write ``value`` to the key's file and return the key."""
        path = self._key_to_path(key)
        await asyncio.to_thread(_write_text, path, value)
        return key

    async def get_raw(self, key: str) -> str | None:
        path = self._key_to_path(key)
        return await asyncio.to_thread(_read_text, path)

    async def forget(self, key: str) -> int:
        path = self._key_to_path(key)
        self._paths.pop(key, None)
        return 1 if await asyncio.to_thread(_remove, path) else 0

    async def forget_by_pattern(self, pattern: str) -> int:
        """Remove matching keys known to this driver; return how many files went."""
        regex = re.compile(pattern)
        matched = [key for key in self._paths if regex.search(key)]
        removed = 0
        for key in matched:
            path = self._key_to_path(key)
            self._paths.pop(key, None)
            if await asyncio.to_thread(_remove, path):
                removed += 1
        return removed