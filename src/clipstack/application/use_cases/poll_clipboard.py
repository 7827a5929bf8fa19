"""Use Case: Poll the clipboard for new text.

The host offers no change notification, so a repeating timer asks the
ClipboardPort for its text and feeds anything new into the store.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Optional

from clipstack.domain.errors import ClipboardError
from clipstack.domain.models.history import HistoryStore
from clipstack.domain.models.settings import IndicatorSettings
from clipstack.domain.ports.clipboard_port import ClipboardPort
from clipstack.domain.ports.clock_port import ClockPort, TimerHandle
from clipstack.application.use_cases.navigate_history import SelectionController

logger = logging.getLogger(__name__)


class Poller:
    """Drive periodic clipboard reads.

    Only one read is outstanding at a time: a tick that fires while a read
    is in flight is skipped. Each ``start`` bumps a generation counter and
    results belonging to an older generation are dropped, so a slow read
    that completes after ``stop``/``restart`` cannot insert anything.
    """

    def __init__(
        self,
        clock: ClockPort,
        clipboard: ClipboardPort,
        store: HistoryStore,
        selection: SelectionController,
        settings: Callable[[], IndicatorSettings],
    ) -> None:
        self._clock = clock
        self._clipboard = clipboard
        self._store = store
        self._selection = selection
        self._settings = settings
        self._timer: TimerHandle | None = None
        self._interval: int | None = None
        self._generation = 0
        self._in_flight = False

    @property
    def running(self) -> bool:
        return self._timer is not None

    @property
    def interval(self) -> int | None:
        """Interval the running timer was started with."""
        return self._interval

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def start(self) -> None:
        if self._timer is not None:
            return
        self._generation += 1
        # A read issued before this start belongs to the old generation
        self._in_flight = False
        self._interval = self._settings().interval
        self._timer = self._clock.call_every(self._interval, self.poll_once)
        logger.debug("Polling clipboard every %d ms", self._interval)

    def stop(self) -> None:
        if self._timer is None:
            return
        self._timer.cancel()
        self._timer = None
        self._interval = None
        self._generation += 1
        self._in_flight = False

    def restart(self) -> None:
        """Pick up a new interval from the live settings."""
        self.stop()
        self.start()

    def poll_once(self) -> None:
        """Run one poll cycle unless a read is already outstanding."""
        if self._in_flight:
            logger.debug("Previous clipboard read still pending; skipping tick")
            return

        self._in_flight = True
        try:
            self._clipboard.request_text(partial(self._on_text, self._generation))
        except ClipboardError as exc:
            self._in_flight = False
            logger.debug("Clipboard read failed: %s", exc)

    def _on_text(self, generation: int, text: Optional[str]) -> None:
        if generation != self._generation:
            logger.debug("Dropping stale clipboard read")
            return
        self._in_flight = False

        if not text:
            return

        entry, inserted = self._store.add(text)
        if not inserted:
            return
        self._selection.select(entry, auto_set_clipboard=False)
        self._store.evict_oldest(self._settings().history_size)
