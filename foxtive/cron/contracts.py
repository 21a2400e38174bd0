"""The interface a schedulable job implements."""

from __future__ import annotations

from abc import ABC, abstractmethod


class JobContract(ABC):
    """A job the scheduler can run according to a cron expression.

    Subclasses provide ``run`` (a coroutine), ``name`` and ``schedule``.
    ``description`` is optional and defaults to None.
    """

    @abstractmethod
    async def run(self) -> None:
        """Do the job's work; raise to report a failure."""

    @abstractmethod
    def name(self) -> str:
        """A name used to identify the job in logs."""

    @abstractmethod
    def schedule(self) -> str:
        """A cron expression such as ``"*/5 * * * * * *"``."""

    def description(self) -> str | None:
        """A short description of what the job does, if any."""
        return None