"""Shared utilities."""

from __future__ import annotations

import asyncio
from functools import wraps
from typing import Awaitable, Callable, ParamSpec, TypeVar

_P = ParamSpec("_P")
_R = TypeVar("_R")


def async_threadable(fn: Callable[_P, _R]) -> Callable[_P, Awaitable[_R]]:
    """Decorator that wraps a sync function to run in a thread via asyncio.to_thread.

    The decorated function becomes async. Callers simply ``await func(...)``
    instead of ``await asyncio.to_thread(func, ...)``.
    """

    @wraps(fn)
    async def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        return await asyncio.to_thread(fn, *args, **kwargs)

    return wrapper  # type: ignore[return-value]
