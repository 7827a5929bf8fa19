"""Use Case: Manage History.

CRUD operations on the clipboard history, persisted via RegistryRepositoryPort.
This is the surface the rendering layer and the CLI talk to.
"""

from __future__ import annotations

import logging
from typing import Callable

from clipstack.domain.errors import (
    EntryNotFoundError,
    RegistryLoadError,
    RegistryWriteError,
)
from clipstack.domain.models.entry import Entry
from clipstack.domain.models.history import HistoryListener, HistoryStore
from clipstack.domain.models.settings import IndicatorSettings
from clipstack.domain.ports.notification_port import NotificationPort
from clipstack.domain.ports.registry_repository import RegistryRepositoryPort
from clipstack.domain.rules.constants import HISTORY_CLEARED_MESSAGE
from clipstack.domain.rules.preview import format_label
from clipstack.application.use_cases.navigate_history import SelectionController

logger = logging.getLogger(__name__)


class RegistryWriter(HistoryListener):
    """Write the full content list after every structural mutation.

    Failures are logged; the in-memory store stays authoritative and the
    next mutation retries the write.
    """

    def __init__(self, repository: RegistryRepositoryPort) -> None:
        self._repository = repository
        self.failed = False

    def history_changed(self, contents: list[str]) -> None:
        try:
            self._repository.save(contents)
        except RegistryWriteError as exc:
            logger.warning("Failed to save clipboard history: %s", exc)
            self.failed = True
        else:
            if self.failed:
                logger.info("Clipboard history saved again after earlier failure.")
            self.failed = False


class ManageHistoryUseCase:
    """Load, add, remove and clear history entries."""

    def __init__(
        self,
        store: HistoryStore,
        selection: SelectionController,
        repository: RegistryRepositoryPort,
        settings: Callable[[], IndicatorSettings],
        notifier: NotificationPort | None = None,
    ) -> None:
        self._store = store
        self._selection = selection
        self._repository = repository
        self._settings = settings
        self._notifier = notifier
        self._writer = RegistryWriter(repository)

    # -- Persistence ---------------------------------------------------------

    def load(self) -> list[Entry]:
        """Populate the store from the registry and start persisting changes.

        A missing or corrupt registry is logged and yields an empty history.
        The newest loaded entry is selected without touching the clipboard.
        """
        try:
            contents = self._repository.load()
        except RegistryLoadError as exc:
            logger.info("Starting with empty history: %s", exc)
            contents = []

        for content in contents:
            self._store.add(content)

        self._store.subscribe(self._writer)
        self._store.evict_oldest(self._settings().history_size)
        self._selection.select_latest(auto_set_clipboard=False)
        logger.debug("Loaded %d history entries", len(self._store))
        return list(self._store.entries)

    def detach(self) -> None:
        """Stop persisting store changes."""
        self._store.unsubscribe(self._writer)

    def save(self) -> None:
        """Force a registry write of the current contents."""
        self._writer.history_changed(self._store.contents())

    # -- CRUD ----------------------------------------------------------------

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._store.entries

    def entry_at(self, position: int) -> Entry:
        """Return the entry at 1-based *position*, oldest first."""
        entries = self._store.entries
        if position < 1 or position > len(entries):
            raise EntryNotFoundError(
                f"No entry at index {position} (history has {len(entries)})."
            )
        return entries[position - 1]

    def add(self, content: str) -> tuple[Entry, bool]:
        """Insert *content* as an externally supplied entry.

        Duplicates are left where they are. The store is trimmed to capacity
        afterwards and the first entry of an empty store becomes selected.
        """
        entry, inserted = self._store.add(content)
        if inserted:
            self.evict()
            if self._store.selected is None:
                self._selection.select(entry, auto_set_clipboard=False)
        return entry, inserted

    def remove(self, entry: Entry) -> bool:
        """Remove *entry*; absent entries are ignored.

        Removing the selected entry selects the newest remaining one and
        copies it to the clipboard, otherwise the removed text would be
        captured again on the next poll.

        Returns:
            ``True`` if the removed entry was the selected one.
        """
        was_selected = self._store.remove(entry)
        if was_selected:
            self._selection.select_latest(auto_set_clipboard=True)
        return was_selected

    def select(self, entry: Entry) -> None:
        self._selection.select(entry, auto_set_clipboard=True)

    def clear(self, notify: bool = True) -> None:
        """Remove everything except the selected entry.

        The selected entry stays because the clipboard still holds it and
        the next poll would capture it again anyway.
        """
        self._store.remove_all_except_selected()
        if notify and self._notifier is not None:
            self._notifier.show(HISTORY_CLEARED_MESSAGE, self._settings().interval)

    def evict(self) -> list[Entry]:
        """Trim the store to the live ``history-size``."""
        evicted = self._store.evict_oldest(self._settings().history_size)
        if evicted and self._store.selected is None:
            self._selection.select_latest(auto_set_clipboard=True)
        return evicted

    def label(self, entry: Entry) -> str:
        return format_label(entry.content, self._settings().preview_size)
