import asyncio
from datetime import datetime, timezone

import pytest

from foxtive.cron.fn_job import FnJob
from foxtive.cron.job import JobItem
from foxtive.cron.schedule import ScheduleError

UTC = timezone.utc


def make_job(schedule="*/1 * * * * * *", calls=None):
    async def work():
        if calls is not None:
            calls.append("ran")

    return FnJob("repeat", schedule, work)


def test_name_comes_from_job():
    assert JobItem(make_job()).name() == "repeat"


def test_next_run_time_after_given_moment():
    after = datetime(2024, 5, 5, 8, 0, 0, tzinfo=UTC)
    result = JobItem(make_job("0 0 * * * * *")).next_run_time(after)
    assert result > after
    assert result.minute == 0 and result.second == 0


def test_next_run_time_defaults_to_now():
    before = datetime.now(UTC)
    result = JobItem(make_job()).next_run_time()
    assert result > before


def test_next_run_time_none_when_schedule_exhausted():
    item = JobItem(make_job("0 0 0 1 1 * 2020"))
    assert item.next_run_time() is None


def test_invalid_schedule_raises():
    with pytest.raises(ScheduleError):
        JobItem(make_job("not a cron"))


def test_run_delegates_to_job():
    calls = []
    asyncio.run(JobItem(make_job(calls=calls)).run())
    assert calls == ["ran"]