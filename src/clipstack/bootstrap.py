"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
Qt adapters are imported lazily so the CLI works without a display.
"""

from __future__ import annotations

from pathlib import Path

from clipstack.application.indicator import ClipboardIndicator, IndicatorView
from clipstack.application.use_cases.manage_history import ManageHistoryUseCase
from clipstack.application.use_cases.navigate_history import SelectionController
from clipstack.domain.models.history import HistoryStore
from clipstack.domain.models.settings import IndicatorSettings
from clipstack.domain.ports.clipboard_port import ClipboardPort
from clipstack.domain.ports.clock_port import ClockPort
from clipstack.domain.ports.keybinding_port import KeybindingPort
from clipstack.domain.ports.notification_port import NotificationDisplayPort
from clipstack.domain.ports.registry_repository import RegistryRepositoryPort

from clipstack.infrastructure.clipboard.system_clipboard import SystemClipboard
from clipstack.infrastructure.config.settings_manager import SettingsManager
from clipstack.infrastructure.persistence.json_registry import JsonRegistryRepository


class Container:
    """Simple dependency injection container.

    Wires infrastructure implementations to domain ports and provides
    pre-configured use cases.

    Usage::

        container = Container()
        history = container.manage_history()
        history.load()
    """

    def __init__(
        self,
        config_dir: Path | None = None,
        data_dir: Path | None = None,
    ) -> None:
        # -- Infrastructure singletons ---------------------------------------
        self._settings_manager = SettingsManager(config_dir)
        self._repository = JsonRegistryRepository(data_dir)

    # -- Port accessors ------------------------------------------------------

    @property
    def settings_manager(self) -> SettingsManager:
        return self._settings_manager

    @property
    def repository(self) -> RegistryRepositoryPort:
        return self._repository

    @property
    def registry_path(self) -> Path:
        return self._repository.registry_path

    @property
    def user_settings(self) -> IndicatorSettings:
        return self._settings_manager.load()

    # -- Use Case factories --------------------------------------------------

    def manage_history(self, clipboard: ClipboardPort | None = None) -> ManageHistoryUseCase:
        """Create a standalone history use case (no poller, no notifications).

        Used by the CLI to edit the registry while the tray app is not running.
        """
        settings = self._settings_manager.load()
        store = HistoryStore()
        selection = SelectionController(
            store, clipboard or SystemClipboard(), lambda: settings
        )
        return ManageHistoryUseCase(store, selection, self._repository, lambda: settings)

    def indicator(
        self,
        clipboard: ClipboardPort,
        clock: ClockPort,
        keybindings: KeybindingPort,
        display: NotificationDisplayPort,
        view: IndicatorView | None = None,
    ) -> ClipboardIndicator:
        """Create the long-running indicator on the given host adapters."""
        return ClipboardIndicator(
            settings_port=self._settings_manager,
            repository=self._repository,
            clipboard=clipboard,
            clock=clock,
            keybindings=keybindings,
            display=display,
            view=view,
        )

    def qt_indicator(self) -> ClipboardIndicator:
        """Create the indicator on Qt adapters. Requires a running QApplication."""
        from clipstack.infrastructure.clipboard.qt_clipboard import QtClipboard
        from clipstack.infrastructure.keybindings.keyboard_hotkeys import KeyboardHotkeys
        from clipstack.infrastructure.qt.dispatcher import QtDispatcher
        from clipstack.infrastructure.qt.qt_clock import QtClock
        from clipstack.gui.widgets.notification_label import NotificationLabel

        self._dispatcher = QtDispatcher()
        return self.indicator(
            clipboard=QtClipboard(),
            clock=QtClock(),
            keybindings=KeyboardHotkeys(dispatch=self._dispatcher.post),
            display=NotificationLabel(),
        )
