"""Port: Clock — repeating and one-shot timers on the event loop."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class TimerHandle(ABC):
    """Cancelable handle returned by ``ClockPort``."""

    @abstractmethod
    def cancel(self) -> None:
        """Stop the timer. Cancelling twice is harmless."""
        ...

    @property
    @abstractmethod
    def active(self) -> bool:
        """``True`` until the timer was cancelled or a one-shot has fired."""
        ...


class ClockPort(ABC):
    """Contract for scheduling callbacks on the single UI/event thread."""

    @abstractmethod
    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Invoke *callback* every *interval_ms* until cancelled."""
        ...

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Invoke *callback* once after *delay_ms*."""
        ...
