"""A job together with its parsed schedule."""

from __future__ import annotations

from datetime import datetime, timezone

from foxtive.cron.contracts import JobContract
from foxtive.cron.schedule import Schedule


class JobItem:
    """Pairs a job with the schedule parsed from its cron expression.

    Raises ``ScheduleError`` if the job's expression is invalid.
    """

    def __init__(self, job: JobContract) -> None:
        self.schedule = Schedule(job.schedule())
        self.job = job

    def name(self) -> str:
        return self.job.name()

    def next_run_time(self, after: datetime | None = None) -> datetime | None:
        """The next run strictly after ``after`` (default: now), or None."""
        if after is None:
            after = datetime.now(timezone.utc)
        return self.schedule.next_after(after)

    async def run(self) -> None:
        await self.job.run()