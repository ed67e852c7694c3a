# SPDX-License-Identifier: Apache-2.0
"""Shareable cancellation signal with optional deadline.

The signal is set from the event loop (explicit cancel or deadline timer)
and polled from worker threads, so the flag itself is a threading.Event.
Coroutines waiting on the signal are woken through their own loop.
"""

from __future__ import annotations

import asyncio
import logging
import math
import threading
from typing import Any

logger = logging.getLogger(__name__)

DEADLINE_REASON = "deadline"


class CancellationSignal:
    """Process-local token meaning "this operation should stop".

    Any number of observers may poll :attr:`cancelled` or await
    :meth:`wait`. The first call to :meth:`cancel` wins; later calls are
    ignored.
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._reason: str | None = None
        self._waiters: list[tuple[asyncio.AbstractEventLoop, asyncio.Future[None]]] = []
        self._timer: tuple[asyncio.AbstractEventLoop, asyncio.TimerHandle] | None = None

    @classmethod
    def with_deadline(cls, timeout: float) -> CancellationSignal:
        """Create a signal that cancels itself after ``timeout`` seconds.

        Must be called from a running event loop; the timer is scheduled on it.

        Args:
            timeout: Seconds until the signal fires. ``math.inf`` never fires,
                zero fires immediately.

        Returns:
            A new CancellationSignal.

        Raises:
            ValueError: If timeout is negative or NaN.
            RuntimeError: If there is no running event loop.
        """
        if math.isnan(timeout) or timeout < 0:
            raise ValueError(f"timeout must be a non-negative number, got {timeout}")

        signal = cls()
        if timeout == 0:
            signal.cancel(DEADLINE_REASON)
        elif not math.isinf(timeout):
            loop = asyncio.get_running_loop()
            signal._timer = (loop, loop.call_later(timeout, signal.cancel, DEADLINE_REASON))
        return signal

    @property
    def cancelled(self) -> bool:
        """Whether the signal has fired. Safe to read from any thread."""
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        """Reason passed to the winning :meth:`cancel` call, if any."""
        return self._reason

    def cancel(self, reason: str = "cancelled") -> None:
        """Trigger the signal and wake every waiter."""
        with self._lock:
            if self._event.is_set():
                return
            self._reason = reason
            self._event.set()
            waiters, self._waiters = self._waiters, []
            timer, self._timer = self._timer, None

        if timer is not None:
            _disarm(*timer)
        logger.debug("Cancellation signal fired (%s)", reason)

        for loop, future in waiters:
            if loop.is_closed():
                continue
            loop.call_soon_threadsafe(_resolve, future)

    async def wait(self) -> None:
        """Suspend until the signal fires."""
        loop = asyncio.get_running_loop()
        future: asyncio.Future[None] = loop.create_future()
        entry = (loop, future)
        with self._lock:
            if self._event.is_set():
                return
            self._waiters.append(entry)
        try:
            await future
        finally:
            with self._lock:
                if entry in self._waiters:
                    self._waiters.remove(entry)

    def close(self) -> None:
        """Disarm a pending deadline. Does not trigger the signal."""
        with self._lock:
            timer, self._timer = self._timer, None
        if timer is not None:
            _disarm(*timer)

    def __enter__(self) -> CancellationSignal:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        state = f"cancelled={self._reason!r}" if self.cancelled else "active"
        return f"<CancellationSignal {state}>"


def _resolve(future: asyncio.Future[None]) -> None:
    if not future.done():
        future.set_result(None)


def _disarm(loop: asyncio.AbstractEventLoop, timer: asyncio.TimerHandle) -> None:
    # TimerHandle.cancel touches loop state; only the loop thread may call it
    try:
        running = asyncio.get_running_loop()
    except RuntimeError:
        running = None
    if running is loop:
        timer.cancel()
    elif not loop.is_closed():
        loop.call_soon_threadsafe(timer.cancel)
