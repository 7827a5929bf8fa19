"""Clipboard indicator — lifecycle owner of the history engine.

One instance is created by the process entry point. It wires the use cases
together, owns the poll timer, the settings subscription and the global
shortcuts, and releases all of them in :meth:`ClipboardIndicator.destroy`.
"""

from __future__ import annotations

import logging
from typing import Callable

from clipstack.domain.models.history import HistoryListener, HistoryStore
from clipstack.domain.models.settings import IndicatorSettings
from clipstack.domain.ports.clipboard_port import ClipboardPort
from clipstack.domain.ports.clock_port import ClockPort
from clipstack.domain.ports.keybinding_port import KeybindingPort
from clipstack.domain.ports.notification_port import NotificationDisplayPort
from clipstack.domain.ports.registry_repository import RegistryRepositoryPort
from clipstack.domain.ports.settings_port import SettingsPort
from clipstack.domain.rules.constants import (
    CLEAR_HISTORY,
    NEXT_ENTRY,
    PREVIOUS_ENTRY,
    TOGGLE_MENU,
)
from clipstack.application.notifier import Notifier
from clipstack.application.use_cases.manage_history import ManageHistoryUseCase
from clipstack.application.use_cases.navigate_history import SelectionController
from clipstack.application.use_cases.poll_clipboard import Poller

logger = logging.getLogger(__name__)


class IndicatorView:
    """Hooks into the rendering layer. The default implementation does nothing."""

    def toggle(self) -> None:
        """Open the history menu if closed, close it if open."""

    def refresh_labels(self, settings: IndicatorSettings) -> None:
        """Re-render entry labels, e.g. after ``preview-size`` changed."""


class ClipboardIndicator:
    """Compose store, selection, poller, notifier and persistence.

    Usage::

        indicator = ClipboardIndicator(settings_port, repository, clipboard,
                                       clock, keybindings, display)
        indicator.start()
        ...
        indicator.destroy()
    """

    def __init__(
        self,
        settings_port: SettingsPort,
        repository: RegistryRepositoryPort,
        clipboard: ClipboardPort,
        clock: ClockPort,
        keybindings: KeybindingPort,
        display: NotificationDisplayPort,
        view: IndicatorView | None = None,
    ) -> None:
        self._settings_port = settings_port
        self._keybindings = keybindings
        self._settings = settings_port.load()
        self._settings_handler_id: int | None = None
        self._started = False
        self.view = IndicatorView()

        self.store = HistoryStore()
        self.notifier = Notifier(display, clock)
        self.selection = SelectionController(
            self.store, clipboard, self._current_settings, self.notifier
        )
        self.history = ManageHistoryUseCase(
            self.store, self.selection, repository, self._current_settings, self.notifier
        )
        self.poller = Poller(
            clock, clipboard, self.store, self.selection, self._current_settings
        )
        if view is not None:
            self.attach_view(view)

    @property
    def settings(self) -> IndicatorSettings:
        return self._settings

    def _current_settings(self) -> IndicatorSettings:
        return self._settings

    def attach_view(self, view: IndicatorView) -> None:
        """Use *view* for menu toggling and label refreshes.

        A view that is also a ``HistoryListener`` follows the store until
        :meth:`destroy`.
        """
        self.detach_view()
        self.view = view
        if isinstance(view, HistoryListener):
            self.store.subscribe(view)

    def detach_view(self) -> None:
        if isinstance(self.view, HistoryListener):
            self.store.unsubscribe(self.view)
        self.view = IndicatorView()

    # -- Lifecycle -----------------------------------------------------------

    def start(self) -> None:
        if self._started:
            return
        self._started = True
        self.history.load()
        self._settings_handler_id = self._settings_port.connect(self._on_settings_changed)
        if self._settings.enable_keybinding:
            self._bind_shortcuts()
        self.poller.start()
        logger.info("Clipboard indicator started with %d entries", len(self.store))

    def destroy(self) -> None:
        """Release timers, shortcuts and subscriptions."""
        self._disconnect_settings()
        self._keybindings.unbind_all()
        self.poller.stop()
        self.notifier.cancel()
        self.detach_view()
        if self._started:
            self.history.detach()
            self._started = False
            logger.info("Clipboard indicator stopped")

    # -- Keybinding callbacks ------------------------------------------------

    def clear_history(self) -> None:
        self.history.clear()

    def previous_entry(self) -> None:
        self.selection.previous()

    def next_entry(self) -> None:
        self.selection.next()

    def toggle_menu(self) -> None:
        self.view.toggle()

    def _shortcut_callbacks(self) -> dict[str, Callable[[], None]]:
        return {
            CLEAR_HISTORY.name: self.clear_history,
            PREVIOUS_ENTRY.name: self.previous_entry,
            NEXT_ENTRY.name: self.next_entry,
            TOGGLE_MENU.name: self.toggle_menu,
        }

    def _bind_shortcuts(self) -> None:
        self._keybindings.unbind_all()
        for action, callback in self._shortcut_callbacks().items():
            accelerator = self._settings.accelerator(action)
            if not self._keybindings.bind(action, accelerator, callback):
                logger.warning("Could not bind %s to %s", action, accelerator)

    # -- Settings ------------------------------------------------------------

    def _on_settings_changed(self, settings: IndicatorSettings) -> None:
        previous, self._settings = self._settings, settings
        logger.debug("Settings changed: %s", settings)

        self.history.evict()
        self.view.refresh_labels(settings)

        if self.poller.running and settings.interval != previous.interval:
            self.poller.restart()

        if settings.enable_keybinding:
            self._bind_shortcuts()
        else:
            self._keybindings.unbind_all()

    def _disconnect_settings(self) -> None:
        if self._settings_handler_id is None:
            return
        self._settings_port.disconnect(self._settings_handler_id)
        self._settings_handler_id = None
