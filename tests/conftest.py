"""Shared fakes and fixtures for the clipstack test suite.

The fakes stand in for host capabilities (timers, clipboard, on-screen
label, global shortcuts, storage) so the history engine can be driven
deterministically.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest

from clipstack.application.use_cases.manage_history import ManageHistoryUseCase
from clipstack.application.use_cases.navigate_history import SelectionController
from clipstack.domain.errors import (
    ClipboardError,
    RegistryLoadError,
    RegistryWriteError,
)
from clipstack.domain.models.history import HistoryListener, HistoryStore
from clipstack.domain.models.settings import IndicatorSettings
from clipstack.domain.ports.clipboard_port import ClipboardPort, TextCallback
from clipstack.domain.ports.clock_port import ClockPort, TimerHandle
from clipstack.domain.ports.keybinding_port import KeybindingPort
from clipstack.domain.ports.notification_port import (
    NotificationDisplayPort,
    NotificationPort,
)
from clipstack.domain.ports.registry_repository import RegistryRepositoryPort
from clipstack.infrastructure.config.settings_manager import SettingsManager


# ── Clock ─────────────────────────────────────────────────────────────────


class FakeTimer(TimerHandle):
    def __init__(self, due: int, interval: Optional[int], callback: Callable[[], None]) -> None:
        self.due = due
        self.interval = interval
        self.callback = callback
        self._active = True

    def cancel(self) -> None:
        self._active = False

    @property
    def active(self) -> bool:
        return self._active


class FakeClock(ClockPort):
    """Manually advanced clock: nothing fires until :meth:`advance`."""

    def __init__(self) -> None:
        self.now = 0
        self.timers: list[FakeTimer] = []

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        timer = FakeTimer(self.now + interval_ms, interval_ms, callback)
        self.timers.append(timer)
        return timer

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        timer = FakeTimer(self.now + delay_ms, None, callback)
        self.timers.append(timer)
        return timer

    @property
    def active_timers(self) -> list[FakeTimer]:
        return [t for t in self.timers if t.active]

    def advance(self, ms: int) -> None:
        target = self.now + ms
        while True:
            due = [t for t in self.active_timers if t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self.now = timer.due
            if timer.interval is None:
                timer.cancel()
            else:
                timer.due += timer.interval
            timer.callback()
        self.now = target


# ── Clipboard ─────────────────────────────────────────────────────────────


class FakeClipboard(ClipboardPort):
    """Scripted clipboard.

    With ``deferred=True`` reads stay pending until :meth:`complete` is
    called, which simulates a slow selection owner.
    """

    def __init__(self, text: Optional[str] = None, deferred: bool = False) -> None:
        self.text = text
        self.deferred = deferred
        self.fail_reads = False
        self.pending: list[TextCallback] = []
        self.writes: list[str] = []
        self.reads = 0

    def request_text(self, callback: TextCallback) -> None:
        if self.fail_reads:
            raise ClipboardError("clipboard owner vanished")
        self.reads += 1
        if self.deferred:
            self.pending.append(callback)
        else:
            callback(self.text)

    def complete(self, text: Optional[str] = None) -> None:
        callback = self.pending.pop(0)
        callback(self.text if text is None else text)

    def set_text(self, text: str) -> None:
        self.writes.append(text)
        self.text = text


# ── Notifications ─────────────────────────────────────────────────────────


class FakeDisplay(NotificationDisplayPort):
    def __init__(self) -> None:
        self.text: Optional[str] = None
        self.visible = False
        self.shown: list[str] = []

    def display(self, text: str) -> None:
        self.text = text
        self.visible = True
        self.shown.append(text)

    def hide(self) -> None:
        self.visible = False


class RecordingNotifier(NotificationPort):
    def __init__(self) -> None:
        self.messages: list[tuple[str, int]] = []

    def show(self, text: str, duration_ms: int) -> None:
        self.messages.append((text, duration_ms))

    @property
    def last(self) -> Optional[str]:
        return self.messages[-1][0] if self.messages else None


# ── Keybindings ───────────────────────────────────────────────────────────


class FakeKeybindings(KeybindingPort):
    def __init__(self) -> None:
        self.bindings: dict[str, tuple[str, Callable[[], None]]] = {}
        self.refuse: set[str] = set()
        self.unbind_calls = 0

    def bind(self, action: str, accelerator: str, callback: Callable[[], None]) -> bool:
        if action in self.refuse:
            return False
        self.bindings[action] = (accelerator, callback)
        return True

    def unbind_all(self) -> None:
        self.unbind_calls += 1
        self.bindings.clear()

    @property
    def bound_actions(self) -> list[str]:
        return list(self.bindings)

    def press(self, action: str) -> None:
        self.bindings[action][1]()


# ── Storage ───────────────────────────────────────────────────────────────


class MemoryRegistry(RegistryRepositoryPort):
    def __init__(self, contents: Optional[list[str]] = None) -> None:
        self.contents = list(contents) if contents is not None else None
        self.saves: list[list[str]] = []
        self.fail_saves = False

    def save(self, contents: list[str]) -> None:
        if self.fail_saves:
            raise RegistryWriteError("disk full")
        self.saves.append(list(contents))
        self.contents = list(contents)

    def load(self) -> list[str]:
        if self.contents is None:
            raise RegistryLoadError("no registry")
        return list(self.contents)


class EventLog(HistoryListener):
    def __init__(self) -> None:
        self.events: list[tuple] = []

    def entry_added(self, entry):
        self.events.append(("added", entry.content))

    def entry_removed(self, entry):
        self.events.append(("removed", entry.content))

    def selection_changed(self, entry, previous):
        self.events.append(
            ("selected", entry.content if entry else None, previous.content if previous else None)
        )

    def history_changed(self, contents):
        self.events.append(("changed", list(contents)))

    def of(self, kind: str) -> list[tuple]:
        return [e for e in self.events if e[0] == kind]


# ── Fixtures ──────────────────────────────────────────────────────────────


class SettingsBox:
    """Mutable holder so tests can swap settings under a live component."""

    def __init__(self, settings: IndicatorSettings) -> None:
        self.value = settings

    def __call__(self) -> IndicatorSettings:
        return self.value

    def set(self, **changes) -> None:
        self.value = self.value.model_copy(update=changes)


@pytest.fixture()
def settings() -> SettingsBox:
    return SettingsBox(IndicatorSettings())


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def store() -> HistoryStore:
    return HistoryStore()


@pytest.fixture()
def selection(store, clipboard, settings, notifier) -> SelectionController:
    return SelectionController(store, clipboard, settings, notifier)


@pytest.fixture()
def registry() -> MemoryRegistry:
    return MemoryRegistry()


@pytest.fixture()
def history(store, selection, registry, settings, notifier) -> ManageHistoryUseCase:
    return ManageHistoryUseCase(store, selection, registry, settings, notifier)


@pytest.fixture()
def settings_manager(tmp_path: Path) -> SettingsManager:
    return SettingsManager(config_dir=tmp_path / "config")


def fill(store: HistoryStore, *contents: str) -> None:
    """Add *contents* in order and select the newest, like a poll sequence."""
    for content in contents:
        store.add(content)
    if store.entries:
        store.select(store.entries[-1])
