"""Explicit cancellation signal for in-flight requests and retry delays.

A single token is passed from the caller down to the transport and to the
delay between attempts. Cancelling it aborts whichever of the two is
currently suspended and prevents any further attempt from starting.

Example:
    ```python
    token = CancellationToken()
    search = asyncio.create_task(client.search_parts(criteria, cancel_token=token))

    # User typed a new query
    token.cancel("superseded by a newer search")
    ```
"""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from parts_sdk.errors.exceptions import RequestCancelledError

T = TypeVar("T")


class CancellationToken:
    """One-shot cancellation signal backed by an ``asyncio.Event``."""

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.reason: str | None = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self, reason: str = "Request cancelled") -> None:
        """Fire the signal. Later calls keep the first reason."""
        if not self._event.is_set():
            self.reason = reason
            self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise RequestCancelledError(self.reason or "Request cancelled")

    async def run(self, awaitable: Awaitable[T]) -> T:
        """Await ``awaitable`` unless the token fires first.

        When the token fires, the pending work is cancelled and
        ``RequestCancelledError`` is raised.
        """
        if self.cancelled:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            self.raise_if_cancelled()

        task = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            done, _ = await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            waiter.cancel()
            if not task.done():
                task.cancel()

        if task in done:
            return task.result()

        await asyncio.gather(task, return_exceptions=True)
        raise RequestCancelledError(self.reason or "Request cancelled")

    async def sleep(self, delay: float) -> None:
        """Sleep for ``delay`` seconds, ending early if the token fires."""
        self.raise_if_cancelled()
        try:
            await asyncio.wait_for(self._event.wait(), timeout=delay)
        except TimeoutError:
            return
        raise RequestCancelledError(self.reason or "Request cancelled")
