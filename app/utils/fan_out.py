"""Parallel map over independent coroutines with per-item outcomes."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Iterable, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Outcome(Generic[T, R]):
    """Result of running one task of a fan-out.

    Exactly one of ``value``/``error`` is meaningful: ``error`` is set when
    the task failed, otherwise ``value`` holds the task's return value
    (which may legitimately be None).
    """

    item: T
    value: R | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def parallel_map(
    func: Callable[[T], Awaitable[R]],
    items: Iterable[T],
) -> list[Outcome[T, R]]:
    """Run ``func`` on every item concurrently and wait for all of them.

    No concurrency limit, no per-task timeout and no cancellation of
    stragglers: the call returns once every task has finished. A task that
    raises does not affect its siblings; its exception is captured in the
    corresponding outcome.

    Args:
        func: Coroutine function applied to each item.
        items: Inputs; output order follows input order.

    Returns:
        One Outcome per input item.
    """
    items = list(items)
    results = await asyncio.gather(*(func(item) for item in items), return_exceptions=True)

    outcomes: list[Outcome[T, R]] = []
    for item, result in zip(items, results):
        if isinstance(result, BaseException):
            outcomes.append(Outcome(item=item, error=result))
        else:
            outcomes.append(Outcome(item=item, value=result))
    return outcomes
