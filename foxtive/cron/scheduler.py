"""An asyncio scheduler that runs jobs according to cron expressions."""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable

from foxtive.cron.contracts import JobContract
from foxtive.cron.fn_job import FnJob
from foxtive.cron.job import JobItem

_logger = logging.getLogger(__name__)


class Cron:
    """Runs registered jobs at their scheduled times.

    Each run happens in its own task, so a slow or failing job never holds
    up the others; after every run the job is scheduled again.
    """

    def __init__(self) -> None:
        self._queue: list[tuple[datetime, int, JobItem]] = []
        self._order = itertools.count()
        self._tasks: set[asyncio.Task[None]] = set()

    def _push(self, next_run: datetime, item: JobItem) -> None:
        heapq.heappush(self._queue, (next_run, next(self._order), item))

    def add_job(self, job: JobContract) -> None:
        """Schedule a job; raises ``ScheduleError`` for an invalid expression."""
        item = JobItem(job)
        next_run = item.next_run_time()
        if next_run is not None:
            self._push(next_run, item)

    def add_job_fn(
        self,
        name: str,
        schedule_expr: str,
        func: Callable[[], Awaitable[None]],
    ) -> None:
        """Schedule a coroutine function."""
        self.add_job(FnJob(name, schedule_expr, func))

    def add_blocking_job_fn(
        self, name: str, schedule_expr: str, func: Callable[[], None]
    ) -> None:
        """Schedule a blocking function, run in a worker thread."""
        self.add_job(FnJob.blocking(name, schedule_expr, func))

    @staticmethod
    async def _execute(item: JobItem) -> None:
        name = item.name()
        _logger.info("[%s] Running job", name)
        try:
            await item.run()
        except Exception as exc:
            _logger.error("[%s] Job failed: %r", name, exc)
        else:
            _logger.info("[%s] Job completed", name)

    async def run(self) -> None:
        """Run jobs as they fall due; returns only when no job has a next run."""
        while self._queue:
            next_run, _, item = heapq.heappop(self._queue)

            delay = (next_run - datetime.now(timezone.utc)).total_seconds()
            if delay > 0:
                await asyncio.sleep(delay)

            task = asyncio.create_task(self._execute(item))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

            after = max(datetime.now(timezone.utc), next_run)
            following = item.next_run_time(after)
            if following is not None:
                self._push(following, item)