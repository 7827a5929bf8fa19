"""Use Case: Select and navigate history entries.

Keeps the radio-group invariant on top of ``HistoryStore`` and mirrors the
selection into the system clipboard through an injected ClipboardPort.
"""

from __future__ import annotations

import logging
from typing import Callable

from clipstack.domain.errors import ClipboardError
from clipstack.domain.models.entry import Entry
from clipstack.domain.models.history import HistoryStore
from clipstack.domain.models.settings import IndicatorSettings
from clipstack.domain.ports.clipboard_port import ClipboardPort
from clipstack.domain.ports.notification_port import NotificationPort
from clipstack.domain.rules.preview import format_label

logger = logging.getLogger(__name__)


class SelectionController:
    """Single-selection policy and cyclic navigation."""

    def __init__(
        self,
        store: HistoryStore,
        clipboard: ClipboardPort,
        settings: Callable[[], IndicatorSettings],
        notifier: NotificationPort | None = None,
    ) -> None:
        self._store = store
        self._clipboard = clipboard
        self._settings = settings
        self._notifier = notifier

    @property
    def current(self) -> Entry | None:
        return self._store.selected

    def select(self, entry: Entry, auto_set_clipboard: bool = True) -> None:
        """Select *entry* and, unless told otherwise, copy it to the clipboard.

        Pass ``auto_set_clipboard=False`` when the content came from the
        clipboard in the first place so the write does not feed back into the
        next poll.
        """
        if entry not in self._store:
            logger.debug("Ignoring selection of an entry that is not stored: %r", entry)
            return
        self._store.select(entry)
        if auto_set_clipboard:
            try:
                self._clipboard.set_text(entry.content)
            except ClipboardError as exc:
                logger.warning("Could not write selection to the clipboard: %s", exc)

    def select_latest(self, auto_set_clipboard: bool = True) -> None:
        """Select the most recent entry; no-op on an empty store."""
        entries = self._store.entries
        if entries:
            self.select(entries[-1], auto_set_clipboard)

    def next(self) -> None:
        """Select the following entry, wrapping to the oldest."""
        self._step(+1)

    def previous(self) -> None:
        """Select the preceding entry, wrapping to the newest."""
        self._step(-1)

    def _step(self, delta: int) -> None:
        entries = self._store.entries
        current = self._store.selected
        if not entries or current is None:
            return

        i = (self._store.index(current) + delta) % len(entries)
        target = entries[i]
        self.select(target)

        if self._notifier is not None:
            settings = self._settings()
            label = format_label(target.content, settings.preview_size)
            self._notifier.show(f"{i + 1} / {len(entries)}: {label}", settings.interval)
