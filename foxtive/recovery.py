"""Helpers for recovering from application messages raised as errors."""

from __future__ import annotations

from typing import Awaitable, Callable, TypeVar

from foxtive.app_message import AppMessage

T = TypeVar("T")


def recover_from(error: BaseException, handler: Callable[[AppMessage], T]) -> T:
    """Pass an AppMessage error to the handler; re-raise anything else."""
    if isinstance(error, AppMessage):
        return handler(error)
    raise error


async def recover_from_async(
    error: BaseException, handler: Callable[[AppMessage], Awaitable[T]]
) -> T:
    """Await the handler for an AppMessage error; re-raise anything else."""
    if isinstance(error, AppMessage):
        return await handler(error)
    raise error


def error_message(error: BaseException) -> str:
    """The message of an AppMessage, or the error's text otherwise."""
    if isinstance(error, AppMessage):
        return error.message()
    return str(error)