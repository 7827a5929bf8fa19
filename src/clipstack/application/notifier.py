"""Single-slot notification sink with a cancel-and-replace hide timer."""

from __future__ import annotations

import logging

from clipstack.domain.ports.clock_port import ClockPort, TimerHandle
from clipstack.domain.ports.notification_port import (
    NotificationDisplayPort,
    NotificationPort,
)

logger = logging.getLogger(__name__)


class Notifier(NotificationPort):
    """Show one notification at a time on an injected display.

    A new ``show`` call while a notification is visible replaces the text
    and restarts the hide countdown.
    """

    def __init__(self, display: NotificationDisplayPort, clock: ClockPort) -> None:
        self._display = display
        self._clock = clock
        self._hide_timer: TimerHandle | None = None
        self._text: str | None = None

    @property
    def text(self) -> str | None:
        """Currently visible text, ``None`` when hidden."""
        return self._text

    def show(self, text: str, duration_ms: int) -> None:
        logger.debug("Notification: %s", text)
        self._cancel_timer()
        self._text = text
        self._display.display(text)
        self._hide_timer = self._clock.call_later(duration_ms, self._on_timeout)

    def cancel(self) -> None:
        """Cancel the pending hide timer and hide immediately."""
        had_timer = self._hide_timer is not None
        self._cancel_timer()
        if had_timer or self._text is not None:
            self._text = None
            self._display.hide()

    def _on_timeout(self) -> None:
        self._hide_timer = None
        self._text = None
        self._display.hide()

    def _cancel_timer(self) -> None:
        if self._hide_timer is None:
            return
        self._hide_timer.cancel()
        self._hide_timer = None
