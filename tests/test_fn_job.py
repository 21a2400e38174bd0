import asyncio
import threading

import pytest

from foxtive.cron.fn_job import FnJob


def test_name_and_schedule():
    job = FnJob("Heartbeat", "*/10 * * * * * *", lambda: asyncio.sleep(0))
    assert job.name() == "Heartbeat"
    assert job.schedule() == "*/10 * * * * * *"
    assert job.description() is None


def test_async_function_runs_each_time():
    calls = []

    async def work():
        calls.append("ran")

    job = FnJob("Test Job", "*/5 * * * * * *", work)
    asyncio.run(job.run())
    asyncio.run(job.run())
    assert calls == ["ran", "ran"]
    assert job.name() == "Test Job"
    assert job.schedule() == "*/5 * * * * * *"


def test_async_error_propagates():
    async def fail():
        raise RuntimeError("Intentional failure")

    job = FnJob("fail", "*/1 * * * * * *", fail)
    with pytest.raises(RuntimeError, match="Intentional failure"):
        asyncio.run(job.run())


def test_blocking_runs_in_worker_thread():
    seen = []

    def work():
        seen.append(threading.get_ident())

    job = FnJob.blocking("Heavy Computation", "*/10 * * * * * *", work)
    asyncio.run(job.run())
    assert len(seen) == 1
    assert seen[0] != threading.get_ident()
    assert job.name() == "Heavy Computation"
    assert job.schedule() == "*/10 * * * * * *"


def test_blocking_error_propagates():
    def fail():
        raise ValueError("broken")

    job = FnJob.blocking("Backup", "0 0 * * * * *", fail)
    with pytest.raises(ValueError, match="broken"):
        asyncio.run(job.run())
    assert job.name() == "Backup"