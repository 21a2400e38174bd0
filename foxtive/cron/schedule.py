"""Parsing of cron expressions and computing their upcoming run times.

An expression has six or seven whitespace-separated fields:
seconds, minutes, hours, day of month, month, day of week and an optional
year. Each field accepts ``*``, ``?``, numbers, names (months and weekdays),
ranges ``a-b``, steps ``*/n``, ``a/n`` and ``a-b/n``, and comma-separated
lists. Day of week runs from 1 (Sunday) to 7 (Saturday). A time matches
only when both the day of month and the day of week match.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterator

_UTC = timezone.utc

_MONTH_NAMES = {
    name: number
    for number, names in enumerate(
        [
            ("JAN", "JANUARY"),
            ("FEB", "FEBRUARY"),
            ("MAR", "MARCH"),
            ("APR", "APRIL"),
            ("MAY",),
            ("JUN", "JUNE"),
            ("JUL", "JULY"),
            ("AUG", "AUGUST"),
            ("SEP", "SEPTEMBER"),
            ("OCT", "OCTOBER"),
            ("NOV", "NOVEMBER"),
            ("DEC", "DECEMBER"),
        ],
        start=1,
    )
    for name in names
}

_WEEKDAY_NAMES = {
    name: number
    for number, names in enumerate(
        [
            ("SUN", "SUNDAY"),
            ("MON", "MONDAY"),
            ("TUE", "TUESDAY"),
            ("WED", "WEDNESDAY"),
            ("THU", "THURSDAY"),
            ("FRI", "FRIDAY"),
            ("SAT", "SATURDAY"),
        ],
        start=1,
    )
    for name in names
}


class ScheduleError(ValueError):
    """Raised for a cron expression that cannot be parsed."""


@dataclass(frozen=True)
class _FieldSpec:
    label: str
    low: int
    high: int
    names: dict[str, int] | None = None


_SPECS = (
    _FieldSpec("seconds", 0, 59),
    _FieldSpec("minutes", 0, 59),
    _FieldSpec("hours", 0, 23),
    _FieldSpec("day of month", 1, 31),
    _FieldSpec("month", 1, 12, _MONTH_NAMES),
    _FieldSpec("day of week", 1, 7, _WEEKDAY_NAMES),
    _FieldSpec("year", 1970, 2100),
)


def _parse_value(text: str, spec: _FieldSpec) -> int:
    if text.isdigit():
        value = int(text)
    elif spec.names is not None and text.upper() in spec.names:
        value = spec.names[text.upper()]
    else:
        raise ScheduleError(f"invalid {spec.label} value: {text!r}")
    if not spec.low <= value <= spec.high:
        raise ScheduleError(
            f"{spec.label} value {value} is outside {spec.low}-{spec.high}"
        )
    return value


def _parse_part(part: str, spec: _FieldSpec) -> range:
    base, has_step, step_text = part.partition("/")
    step = 1
    if has_step:
        if not step_text.isdigit() or int(step_text) == 0:
            raise ScheduleError(f"invalid {spec.label} step: {step_text!r}")
        step = int(step_text)

    if base in ("*", "?"):
        low, high = spec.low, spec.high
    elif "-" in base:
        start, _, end = base.partition("-")
        low, high = _parse_value(start, spec), _parse_value(end, spec)
        if low > high:
            raise ScheduleError(f"invalid {spec.label} range: {base!r}")
    else:
        low = _parse_value(base, spec)
        high = spec.high if has_step else low
    return range(low, high + 1, step)


def _parse_field(text: str, spec: _FieldSpec) -> tuple[int, ...]:
    values: set[int] = set()
    for part in text.split(","):
        if not part:
            raise ScheduleError(f"empty item in {spec.label} field: {text!r}")
        values.update(_parse_part(part, spec))
    return tuple(sorted(values))


def _next_in(values: tuple[int, ...], current: int) -> int | None:
    index = bisect_right(values, current)
    return values[index] if index < len(values) else None


class Schedule:
    """A parsed cron expression, evaluated in UTC."""

    def __init__(self, expression: str) -> None:
        fields = expression.split()
        if len(fields) == len(_SPECS) - 1:
            fields.append("*")
        if len(fields) != len(_SPECS):
            raise ScheduleError(
                f"expected 6 or 7 fields in cron expression, got {len(fields)}: "
                f"{expression!r}"
            )
        self.expression = expression
        (
            self._seconds,
            self._minutes,
            self._hours,
            self._days,
            self._months,
            self._weekdays,
            self._years,
        ) = (_parse_field(text, spec) for text, spec in zip(fields, _SPECS))

    def _day_matches(self, moment: datetime) -> bool:
        weekday = (moment.weekday() + 1) % 7 + 1
        return moment.day in self._days and weekday in self._weekdays

    def next_after(self, after: datetime) -> datetime | None:
        """The first matching time strictly after ``after``, or None.

        A naive ``after`` is taken to be in UTC; the result is always UTC.
        """
        if after.tzinfo is None:
            after = after.replace(tzinfo=_UTC)
        else:
            after = after.astimezone(_UTC)
        moment = after.replace(microsecond=0) + timedelta(seconds=1)
        last_year = self._years[-1]

        while moment.year <= last_year:
            if moment.year not in self._years:
                year = _next_in(self._years, moment.year)
                if year is None:
                    return None
                moment = datetime(year, 1, 1, tzinfo=_UTC)
                continue

            if moment.month not in self._months:
                month = _next_in(self._months, moment.month)
                if month is None:
                    moment = datetime(moment.year + 1, 1, 1, tzinfo=_UTC)
                else:
                    moment = datetime(moment.year, month, 1, tzinfo=_UTC)
                continue

            if not self._day_matches(moment):
                start_of_day = datetime(
                    moment.year, moment.month, moment.day, tzinfo=_UTC
                )
                moment = start_of_day + timedelta(days=1)
                continue

            if moment.hour not in self._hours:
                hour = _next_in(self._hours, moment.hour)
                start = moment.replace(minute=0, second=0)
                if hour is None:
                    moment = start.replace(hour=0) + timedelta(days=1)
                else:
                    moment = start.replace(hour=hour)
                continue

            if moment.minute not in self._minutes:
                minute = _next_in(self._minutes, moment.minute)
                start = moment.replace(second=0)
                if minute is None:
                    moment = start.replace(minute=0) + timedelta(hours=1)
                else:
                    moment = start.replace(minute=minute)
                continue

            if moment.second not in self._seconds:
                second = _next_in(self._seconds, moment.second)
                if second is None:
                    moment = moment.replace(second=0) + timedelta(minutes=1)
                else:
                    moment = moment.replace(second=second)
                continue

            return moment
        return None

    def upcoming(self, after: datetime) -> Iterator[datetime]:
        """Yield every matching time after ``after``, in order."""
        moment = self.next_after(after)
        while moment is not None:
            yield moment
            moment = self.next_after(moment)

    def __str__(self) -> str:
        return self.expression

    def __repr__(self) -> str:
        return f"Schedule({self.expression!r})"