"""
Cancellable deferred callbacks.

Views use these for cosmetic delays (typing indicator, scan progress).
The owning view cancels everything on teardown so no callback fires
against a closed page.
"""

import asyncio
from typing import Any, Callable, Set

from shambago.common.logger import get_logger

logger = get_logger(__name__)


class DeferredCallbacks:
    """
    Timer callbacks scheduled on the running asyncio loop.
    """

    def __init__(self) -> None:
        self._handles: Set[asyncio.TimerHandle] = set()
        self.closed = False

    @property
    def pending(self) -> int:
        return len(self._handles)

    def schedule(
        self,
        delay: float,
        callback: Callable[..., Any],
        *args: Any,
    ) -> asyncio.TimerHandle:
        """
        Run ``callback(*args)`` after ``delay`` seconds.

        Must be called from inside a running event loop.

        Raises:
            RuntimeError: If already closed or no loop is running.
        """
        if self.closed:
            raise RuntimeError("Deferred callbacks already closed")

        loop = asyncio.get_running_loop()
        handle: asyncio.TimerHandle

        def fire() -> None:
            self._handles.discard(handle)
            callback(*args)

        handle = loop.call_later(delay, fire)
        self._handles.add(handle)
        return handle

    def cancel_all(self, close: bool = False) -> int:
        """
        Cancel every pending callback.

        Args:
            close: Refuse further scheduling afterwards.

        Returns:
            int: Number of callbacks cancelled.
        """
        cancelled = len(self._handles)

        for handle in self._handles:
            handle.cancel()
        self._handles.clear()

        if close:
            self.closed = True

        if cancelled:
            logger.debug(
                "Pending callbacks cancelled",
                extra={"count": cancelled},
            )
        return cancelled
