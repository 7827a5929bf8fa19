"""Qt clock — implements ClockPort with ``QTimer``."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer

from clipstack.domain.ports.clock_port import ClockPort, TimerHandle


class QtTimerHandle(TimerHandle):
    """Wraps a ``QTimer`` owned by the clock's parent object."""

    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()


class QtClock(ClockPort):
    """Schedule callbacks on the Qt event loop."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        return self._start(interval_ms, callback, single_shot=False)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        return self._start(delay_ms, callback, single_shot=True)

    def _start(self, ms: int, callback: Callable[[], None], *, single_shot: bool) -> TimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(single_shot)
        timer.setInterval(ms)
        handle = QtTimerHandle(timer)
        if single_shot:
            def fire() -> None:
                handle.cancel()
                callback()

            timer.timeout.connect(fire)
        else:
            timer.timeout.connect(callback)
        timer.start()
        return handle
