"""Clipboard history store with dedup, eviction and selection tracking.

This module belongs to the Domain layer. It only depends on:
- Python stdlib
- Domain entry model

The store is the single owner of entry order. Insertion order is
semantically meaningful: index 0 is the oldest entry, evicted first, and
navigation walks the list in this order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from clipstack.domain.models.entry import Entry

logger = logging.getLogger(__name__)


class HistoryListener:
    """Observer for store events. Override only what you need.

    The rendering layer uses the per-entry callbacks to create and destroy
    menu items; persistence hooks onto ``history_changed``.
    """

    def entry_added(self, entry: Entry) -> None:
        """Called after *entry* was appended to the tail."""

    def entry_removed(self, entry: Entry) -> None:
        """Called once per removed entry, eviction included."""

    def selection_changed(self, entry: Entry | None, previous: Entry | None) -> None:
        """Called when the selected entry changes."""

    def history_changed(self, contents: list[str]) -> None:
        """Called once after every structural mutation with the new content list."""


class HistoryStore:
    """Ordered, deduplicated collection of ``Entry`` objects.

    Provides:
    - Exact-match deduplication on ``add``
    - Oldest-first eviction via repeated single removals
    - O(1) selection bookkeeping (only the old and new entry are touched)
    - Listener notification for every change
    """

    def __init__(self) -> None:
        self._entries: list[Entry] = []
        self._selected: Entry | None = None
        self._listeners: list[HistoryListener] = []

    # -- Listeners -----------------------------------------------------------

    def subscribe(self, listener: HistoryListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: HistoryListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _changed(self) -> None:
        contents = self.contents()
        for listener in list(self._listeners):
            listener.history_changed(contents)

    # -- Queries -------------------------------------------------------------

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Read-only, oldest-first view of the entries."""
        return tuple(self._entries)

    def list(self) -> tuple[Entry, ...]:
        return self.entries

    def contents(self) -> list[str]:
        """Return the content strings in insertion order."""
        return [entry.content for entry in self._entries]

    @property
    def selected(self) -> Entry | None:
        return self._selected

    def find(self, content: str) -> Entry | None:
        """Return the entry holding exactly *content*, if any."""
        for entry in self._entries:
            if entry.content == content:
                return entry
        return None

    def index(self, entry: Entry) -> int:
        """Return the position of *entry* (identity match) or ``-1``."""
        for i, candidate in enumerate(self._entries):
            if candidate is entry:
                return i
        return -1

    def __contains__(self, entry: object) -> bool:
        return isinstance(entry, Entry) and self.index(entry) >= 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(tuple(self._entries))

    # -- Mutations -----------------------------------------------------------

    def add(self, content: str) -> tuple[Entry, bool]:
        """Append *content* unless an entry already holds it.

        An existing entry is returned untouched: it is neither moved to the
        tail nor re-selected.

        Returns:
            ``(entry, inserted)``.
        """
        existing = self.find(content)
        if existing is not None:
            return existing, False

        entry = Entry(content=content)
        self._entries.append(entry)
        for listener in list(self._listeners):
            listener.entry_added(entry)
        self._changed()
        return entry, True

    def remove(self, entry: Entry) -> bool:
        """Remove *entry*; absent entries are ignored.

        Returns:
            ``True`` if the removed entry was the selected one.
        """
        if not self._discard(entry):
            return False
        was_selected = entry.selected
        if was_selected:
            entry.selected = False
        self._changed()
        return was_selected

    def remove_all_except_selected(self) -> None:
        """Drop every entry but the selected one (all of them if none is)."""
        doomed = [entry for entry in self._entries if entry is not self._selected]
        if not doomed:
            return
        for entry in doomed:
            self._discard(entry)
        self._changed()

    def evict_oldest(self, capacity: int) -> list[Entry]:
        """Remove entries from the head until at most *capacity* remain.

        Each entry is removed individually so per-entry listeners run for
        every evicted record.

        Returns:
            The evicted entries, oldest first.
        """
        capacity = max(capacity, 0)
        evicted: list[Entry] = []
        while len(self._entries) > capacity:
            oldest = self._entries[0]
            self._discard(oldest)
            oldest.selected = False
            evicted.append(oldest)
        if evicted:
            logger.debug("Evicted %d entr%s over capacity %d",
                         len(evicted), "y" if len(evicted) == 1 else "ies", capacity)
            self._changed()
        return evicted

    def select(self, entry: Entry | None) -> Entry | None:
        """Make *entry* the single selected entry.

        Only the previously selected entry and *entry* are modified.
        Entries not in the store are ignored.

        Returns:
            The previously selected entry.
        """
        previous = self._selected
        if entry is not None and entry not in self:
            return previous
        if entry is previous:
            return previous

        if previous is not None:
            previous.selected = False
        if entry is not None:
            entry.selected = True
        self._selected = entry

        for listener in list(self._listeners):
            listener.selection_changed(entry, previous)
        return previous

    def _discard(self, entry: Entry) -> bool:
        idx = self.index(entry)
        if idx < 0:
            return False
        del self._entries[idx]
        if entry is self._selected:
            self._selected = None
        for listener in list(self._listeners):
            listener.entry_removed(entry)
        return True
