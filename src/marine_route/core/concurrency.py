"""Settle-all fan-out/fan-in over independent tasks."""
from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Callable, Generic, List, Literal, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Settled(Generic[T]):
    status: Literal["fulfilled", "rejected"]
    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.status == "fulfilled"


def settle(future: "Future[T]") -> Settled[T]:
    """Tag a finished (or cancelled) future; never raises."""
    if future.cancelled():
        return Settled("rejected", error=None)
    err = future.exception()
    if err is not None:
        return Settled("rejected", error=err)
    return Settled("fulfilled", value=future.result())


def settle_all(
    tasks: Sequence[Callable[[], T]],
    max_workers: Optional[int] = None,
) -> List[Settled[T]]:
    """
    Run every task concurrently and wait for all of them to settle.

    Results come back in submission order; one branch failing never cancels
    or blocks the others.
    """
    if not tasks:
        return []
    workers = max_workers or len(tasks)
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="settle") as pool:
        futures = [pool.submit(task) for task in tasks]
        wait(futures)
    return [settle(f) for f in futures]
