"""
Tick scheduling for the game clock.

A scheduler hands out cancellable handles for a repeating callback. The
session owns exactly one handle at a time and cancels it when the game
ends or is reset.
"""
import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional


logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]


# ============================================================================
# Interfaces
# ============================================================================

class TickHandle(ABC):
    """Handle to a scheduled repeating callback."""

    @abstractmethod
    def cancel(self) -> None:
        """Stop future ticks. Safe to call more than once."""

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        """Whether the handle has been cancelled."""


class Scheduler(ABC):
    """Source of repeating ticks."""

    @abstractmethod
    def schedule_repeating(
        self, interval: float, callback: TickCallback
    ) -> TickHandle:
        """
        Call ``callback`` every ``interval`` seconds until cancelled.

        Raises:
            ValueError: If interval is not positive.
        """


def _check_interval(interval: float) -> None:
    if interval <= 0:
        raise ValueError(f"Tick interval must be positive, got {interval}")


# ============================================================================
# Manual Scheduler
# ============================================================================

class ManualTickHandle(TickHandle):
    """Handle issued by ManualScheduler."""

    def __init__(self, interval: float, callback: TickCallback) -> None:
        self.interval = interval
        self.callback = callback
        self._pending = 0.0
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def _advance(self, seconds: float) -> None:
        self._pending += seconds
        while self._pending >= self.interval and not self._cancelled:
            self._pending -= self.interval
            self.callback()


class ManualScheduler(Scheduler):
    """
    Scheduler whose clock only moves when ``advance`` is called.

    Used by hosts that drive their own event loop, and by tests. Callbacks
    run synchronously inside ``advance``, so they never overlap game
    operations.
    """

    def __init__(self) -> None:
        self._handles: List[ManualTickHandle] = []

    def schedule_repeating(
        self, interval: float, callback: TickCallback
    ) -> TickHandle:
        _check_interval(interval)
        handle = ManualTickHandle(interval, callback)
        self._handles.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing every tick that falls due."""
        for handle in list(self._handles):
            handle._advance(seconds)
        self._handles = [h for h in self._handles if not h.cancelled]

    @property
    def active_handles(self) -> List[TickHandle]:
        """Handles that have not been cancelled."""
        return [h for h in self._handles if not h.cancelled]


# ============================================================================
# Asyncio Scheduler
# ============================================================================

class AsyncioTickHandle(TickHandle):
    """Handle backed by a chain of ``loop.call_later`` timers."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval: float,
        callback: TickCallback,
    ) -> None:
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._timer: Optional[asyncio.TimerHandle] = None
        self._cancelled = False

    def _schedule_next(self) -> None:
        self._timer = self._loop.call_later(self._interval, self._fire)

    def _fire(self) -> None:
        if self._cancelled:
            return
        self._schedule_next()
        self._callback()

    def cancel(self) -> None:
        self._cancelled = True
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class AsyncioScheduler(Scheduler):
    """
    Scheduler running ticks on an asyncio event loop.

    Ticks run as loop callbacks, so they are serialized with every other
    callback on the same loop.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def schedule_repeating(
        self, interval: float, callback: TickCallback
    ) -> TickHandle:
        _check_interval(interval)
        loop = self._loop or asyncio.get_running_loop()
        handle = AsyncioTickHandle(loop, interval, callback)
        handle._schedule_next()
        logger.debug("Scheduled asyncio tick every %.3fs", interval)
        return handle
