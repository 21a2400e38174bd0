"""Jobs built from plain functions instead of a JobContract subclass."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

from foxtive.cron.contracts import JobContract


class FnJob(JobContract):
    """A job that runs a coroutine function.

    Use ``FnJob.blocking`` to wrap a synchronous function; it then runs in a
    worker thread so it does not block the event loop.
    """

    def __init__(
        self,
        name: str,
        schedule_expr: str,
        func: Callable[[], Awaitable[None]],
    ) -> None:
        self._name = name
        self._schedule_expr = schedule_expr
        self._func = func

    @classmethod
    def blocking(
        cls, name: str, schedule_expr: str, func: Callable[[], None]
    ) -> FnJob:
        """A job that runs the blocking ``func`` in a worker thread."""

        async def run_in_thread() -> None:
            await asyncio.to_thread(func)

        return cls(name, schedule_expr, run_in_thread)

    async def run(self) -> None:
        await self._func()

    def name(self) -> str:
        return self._name

    def schedule(self) -> str:
        return self._schedule_expr