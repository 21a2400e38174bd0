from datetime import datetime, timedelta, timezone
from itertools import islice

import pytest

from foxtive.cron.schedule import Schedule, ScheduleError

UTC = timezone.utc


def test_every_five_seconds_invariants():
    after = datetime(2024, 1, 1, 0, 0, 3, tzinfo=UTC)
    times = list(islice(Schedule("*/5 * * * * * *").upcoming(after), 4))
    assert len(times) == 4
    assert times[0] > after
    assert all(t.second % 5 == 0 for t in times)
    assert all(b - a == timedelta(seconds=5) for a, b in zip(times, times[1:]))


def test_pinned_daily_time():
    after = datetime(2024, 1, 1, 10, 0, 0, tzinfo=UTC)
    result = Schedule("0 30 9 * * * *").next_after(after)
    assert result == datetime(2024, 1, 2, 9, 30, 0, tzinfo=UTC)


def test_six_fields_accepted_and_every_second():
    after = datetime(2024, 3, 1, 12, 0, 0, tzinfo=UTC)
    assert Schedule("*/1 * * * * *").next_after(after) == after + timedelta(seconds=1)


def test_result_is_strictly_after_and_truncated():
    after = datetime(2024, 3, 1, 12, 0, 0, 500000, tzinfo=UTC)
    result = Schedule("* * * * * *").next_after(after)
    assert result > after
    assert result.microsecond == 0


def test_naive_datetime_treated_as_utc():
    result = Schedule("* * * * * *").next_after(datetime(2024, 3, 1, 12, 0, 0))
    assert result.tzinfo == UTC


def test_weekday_names_range():
    after = datetime(2024, 6, 1, tzinfo=UTC)
    times = list(islice(Schedule("0 0 12 * * Mon-Fri *").upcoming(after), 10))
    assert all(t.weekday() < 5 for t in times)
    assert all(t.hour == 12 and t.minute == 0 and t.second == 0 for t in times)


def test_month_name_list():
    after = datetime(2024, 2, 1, tzinfo=UTC)
    times = list(islice(Schedule("0 0 0 1 Jan,Jul *").upcoming(after), 4))
    assert all(t.month in (1, 7) and t.day == 1 for t in times)
    assert times == sorted(times)


def test_day_of_month_and_week_must_both_match():
    after = datetime(2024, 1, 1, tzinfo=UTC)
    times = list(islice(Schedule("0 0 0 13 * Fri *").upcoming(after), 3))
    assert all(t.day == 13 and t.weekday() == 4 for t in times)


def test_leap_day():
    after = datetime(2021, 1, 1, tzinfo=UTC)
    times = list(islice(Schedule("0 0 0 29 Feb *").upcoming(after), 2))
    assert all(t.month == 2 and t.day == 29 and t.year % 4 == 0 for t in times)


def test_past_year_has_no_next_run():
    schedule = Schedule("0 0 0 1 1 * 2020")
    after = datetime(2021, 1, 1, tzinfo=UTC)
    assert schedule.next_after(after) is None
    assert list(schedule.upcoming(after)) == []


def test_expression_kept():
    assert str(Schedule("0 0 * * * * *")) == "0 0 * * * * *"


@pytest.mark.parametrize(
    "expression",
    [
        "",
        "* * * *",
        "60 * * * * *",
        "* * * * 13 *",
        "*/0 * * * * *",
        "5-2 * * * * *",
        "a * * * * *",
        "* * * * * Funday",
        "1,,2 * * * * *",
        "* * * * * * * *",
    ],
)
def test_invalid_expressions(expression):
    with pytest.raises(ScheduleError):
        Schedule(expression)


def test_schedule_error_is_value_error():
    with pytest.raises(ValueError):
        Schedule("bad")