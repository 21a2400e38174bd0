import json
import re

import pytest

from foxtive.cache.driver import CacheDriver


class DictDriver(CacheDriver):
    def __init__(self, fail_put=False):
        self.store = {}
        self.fail_put = fail_put

    async def keys(self):
        return list(self.store)

    async def keys_by_pattern(self, pattern):
        regex = re.compile(pattern)
        return [k for k in self.store if regex.search(k)]

    async def put_raw(self, key, value):
        if self.fail_put:
            raise OSError("disk full")
        self.store[key] = value
        return value

    async def get_raw(self, key):
        return self.store.get(key)

    async def forget(self, key):
        return 1 if self.store.pop(key, None) is not None else 0

    async def forget_by_pattern(self, pattern):
        matched = await self.keys_by_pattern(pattern)
        for key in matched:
            del self.store[key]
        return len(matched)


def test_driver_is_abstract():
    with pytest.raises(TypeError):
        CacheDriver()


@pytest.mark.asyncio
async def test_put_stores_compact_json():
    driver = DictDriver()
    stored = await CacheDriver.put(driver, "user:1", {"name": "John", "age": 3})
    assert stored == driver.store["user:1"]
    assert json.loads(driver.store["user:1"]) == {"name": "John", "age": 3}
    assert " " not in driver.store["user:1"]


@pytest.mark.asyncio
async def test_put_get_round_trip():
    driver = DictDriver()
    value = {"items": [1, 2, 3], "ok": True, "label": "café"}
    await CacheDriver.put(driver, "k", value)
    assert await CacheDriver.get(driver, "k") == value


@pytest.mark.asyncio
async def test_get_missing_is_none():
    driver = DictDriver()
    assert await CacheDriver.get(driver, "absent") is None


@pytest.mark.asyncio
async def test_get_invalid_json_raises():
    driver = DictDriver()
    await driver.put_raw("bad", "{not json")
    with pytest.raises(ValueError):
        await CacheDriver.get(driver, "bad")


@pytest.mark.asyncio
async def test_get_or_put_computes_once():
    driver = DictDriver()
    calls = []

    async def setter():
        calls.append(1)
        return [1, 2]

    first = await CacheDriver.get_or_put(driver, "list", setter)
    second = await CacheDriver.get_or_put(driver, "list", setter)
    assert first == [1, 2]
    assert second == [1, 2]
    assert len(calls) == 1
    assert json.loads(driver.store["list"]) == [1, 2]


@pytest.mark.asyncio
async def test_get_or_put_returns_cached_value():
    driver = DictDriver()
    await CacheDriver.put(driver, "k", "cached")

    async def setter():
        raise AssertionError("setter must not run")

    assert await CacheDriver.get_or_put(driver, "k", setter) == "cached"


@pytest.mark.asyncio
async def test_get_or_put_propagates_setter_error():
    driver = DictDriver()

    async def setter():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        await CacheDriver.get_or_put(driver, "k", setter)
    assert "k" not in driver.store


@pytest.mark.asyncio
async def test_get_or_put_raises_when_storing_fails():
    driver = DictDriver(fail_put=True)

    async def setter():
        return 5

    with pytest.raises(OSError, match="disk full"):
        await CacheDriver.get_or_put(driver, "k", setter)
    assert driver.store == {}