"""Tests for the ClipboardIndicator lifecycle."""

from __future__ import annotations

import pytest

from clipstack.application.indicator import ClipboardIndicator, IndicatorView
from clipstack.domain.models.history import HistoryListener
from clipstack.domain.models.settings import IndicatorSettings
from conftest import FakeDisplay, FakeKeybindings, MemoryRegistry


class RecordingView(IndicatorView):
    def __init__(self) -> None:
        self.toggles = 0
        self.refreshed: list[IndicatorSettings] = []

    def toggle(self) -> None:
        self.toggles += 1

    def refresh_labels(self, settings: IndicatorSettings) -> None:
        self.refreshed.append(settings)


class ListeningView(RecordingView, HistoryListener):
    def __init__(self) -> None:
        super().__init__()
        self.added: list[str] = []

    def entry_added(self, entry) -> None:
        self.added.append(entry.content)


@pytest.fixture()
def keybindings() -> FakeKeybindings:
    return FakeKeybindings()


@pytest.fixture()
def display() -> FakeDisplay:
    return FakeDisplay()


@pytest.fixture()
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture()
def indicator(settings_manager, registry, clipboard, clock, keybindings, display, view):
    return ClipboardIndicator(
        settings_manager, registry, clipboard, clock, keybindings, display, view
    )


def _contents(indicator):
    return [e.content for e in indicator.store.entries]


class TestStart:
    def test_start_restores_registry(self, settings_manager, clipboard, clock,
                                     keybindings, display):
        registry = MemoryRegistry(["a", "b"])
        indicator = ClipboardIndicator(
            settings_manager, registry, clipboard, clock, keybindings, display
        )
        indicator.start()

        assert _contents(indicator) == ["a", "b"]
        assert indicator.store.selected.content == "b"

    def test_start_binds_all_shortcuts(self, indicator, keybindings):
        indicator.start()
        assert sorted(keybindings.bound_actions) == [
            "clear-history",
            "next-entry",
            "previous-entry",
            "toggle-menu",
        ]
        assert keybindings.bindings["next-entry"][0] == "ctrl+f12"

    def test_start_without_keybindings(self, settings_manager, clipboard, clock,
                                       keybindings, display):
        settings_manager.save(IndicatorSettings(enable_keybinding=False))
        indicator = ClipboardIndicator(
            settings_manager, MemoryRegistry(), clipboard, clock, keybindings, display
        )
        indicator.start()
        assert keybindings.bound_actions == []

    def test_refused_binding_is_logged(self, indicator, keybindings, caplog):
        keybindings.refuse.add("toggle-menu")
        indicator.start()
        assert "toggle-menu" not in keybindings.bound_actions
        assert "Could not bind toggle-menu" in caplog.text

    def test_poller_feeds_history(self, indicator, clipboard, clock, registry):
        indicator.start()
        clipboard.text = "copied"
        clock.advance(1000)

        assert _contents(indicator) == ["copied"]
        assert registry.contents == ["copied"]

    def test_start_is_idempotent(self, indicator, clock):
        indicator.start()
        indicator.start()
        assert len(clock.active_timers) == 1


class TestShortcuts:
    @pytest.fixture()
    def started(self, indicator, clipboard, clock):
        indicator.start()
        for text in ("a", "b", "c"):
            clipboard.text = text
            clock.advance(1000)
        return indicator

    def test_next_and_previous(self, started, keybindings, display, clipboard):
        keybindings.press("next-entry")
        assert started.store.selected.content == "a"
        assert clipboard.text == "a"
        assert display.text == "1 / 3: a"

        keybindings.press("previous-entry")
        assert started.store.selected.content == "c"
        assert display.text == "3 / 3: c"

    def test_clear_history(self, started, keybindings, display):
        keybindings.press("clear-history")
        assert _contents(started) == ["c"]
        assert display.text == "Clipboard history cleared"

    def test_toggle_menu(self, started, keybindings, view):
        keybindings.press("toggle-menu")
        keybindings.press("toggle-menu")
        assert view.toggles == 2

    def test_notification_hides_after_interval(self, started, keybindings, display, clock):
        keybindings.press("next-entry")
        clock.advance(1000)
        assert not display.visible


class TestSettingsChanges:
    def test_smaller_history_evicts(self, indicator, settings_manager, clipboard, clock):
        indicator.start()
        for text in ("a", "b", "c"):
            clipboard.text = text
            clock.advance(1000)

        settings_manager.update("history-size", "1")

        assert _contents(indicator) == ["c"]
        assert indicator.settings.history_size == 1

    def test_preview_change_refreshes_labels(self, indicator, settings_manager, view):
        indicator.start()
        settings_manager.update("preview-size", "8")
        assert [s.preview_size for s in view.refreshed] == [8]

    def test_interval_change_restarts_poller(self, indicator, settings_manager, clock,
                                             clipboard):
        indicator.start()
        settings_manager.update("interval", "250")

        assert len(clock.active_timers) == 1
        clock.advance(1000)
        assert clipboard.reads == 4

    def test_disabling_keybindings_unbinds(self, indicator, settings_manager, keybindings):
        indicator.start()
        settings_manager.update("enable-keybinding", "false")
        assert keybindings.bound_actions == []

        settings_manager.update("enable-keybinding", "true")
        assert len(keybindings.bound_actions) == 4

    def test_new_accelerator_is_rebound(self, indicator, settings_manager, keybindings):
        indicator.start()
        settings_manager.update("next-entry", "alt+n")
        assert keybindings.bindings["next-entry"][0] == "alt+n"


class TestDestroy:
    def test_releases_everything(self, indicator, settings_manager, keybindings, clock,
                                 view):
        indicator.start()
        indicator.next_entry()
        indicator.destroy()

        assert clock.active_timers == []
        assert keybindings.bound_actions == []

        settings_manager.update("preview-size", "8")
        assert view.refreshed == []

    def test_no_more_polling_or_saving(self, indicator, clipboard, clock, registry):
        indicator.start()
        indicator.destroy()
        clipboard.text = "after"
        clock.advance(5000)

        assert clipboard.reads == 0
        assert registry.saves == []

    def test_hides_visible_notification(self, indicator, keybindings, display, clipboard,
                                        clock):
        indicator.start()
        clipboard.text = "a"
        clock.advance(1000)
        keybindings.press("next-entry")
        assert display.visible

        indicator.destroy()
        assert not display.visible

    def test_idempotent(self, indicator):
        indicator.start()
        indicator.destroy()
        indicator.destroy()

    def test_destroy_before_start(self, indicator, keybindings):
        indicator.destroy()
        assert keybindings.unbind_calls == 1


class TestViewSubscription:
    @pytest.fixture()
    def listening(self) -> ListeningView:
        return ListeningView()

    def test_attached_view_follows_store(self, indicator, listening, clipboard, clock):
        indicator.attach_view(listening)
        indicator.start()
        clipboard.text = "a"
        clock.advance(1000)
        assert listening.added == ["a"]

    def test_destroy_unsubscribes_view(self, indicator, listening):
        indicator.attach_view(listening)
        indicator.start()
        indicator.destroy()

        indicator.store.add("late")
        indicator.toggle_menu()

        assert listening.added == []
        assert listening.toggles == 0

    def test_replacing_view_drops_old_subscription(self, indicator, listening):
        indicator.attach_view(listening)
        indicator.attach_view(RecordingView())
        indicator.store.add("x")
        assert listening.added == []
