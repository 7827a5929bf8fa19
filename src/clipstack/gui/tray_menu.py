"""Status-area icon and history menu.

The menu is a pure observer of the domain: it creates, updates and
destroys one menu item per history entry in response to ``HistoryStore``
events and forwards clicks to ``ManageHistoryUseCase``.
"""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QCursor, QIcon
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMenu,
    QPushButton,
    QSystemTrayIcon,
    QToolButton,
    QWidget,
    QWidgetAction,
)

from clipstack.application.indicator import IndicatorView
from clipstack.application.use_cases.manage_history import ManageHistoryUseCase
from clipstack.domain.models.entry import Entry
from clipstack.domain.models.history import HistoryListener
from clipstack.domain.models.settings import IndicatorSettings

_SELECTED_MARK = "● "
_UNSELECTED_MARK = "    "


class _EntryItem:
    """Widgets backing one history entry in the menu."""

    def __init__(self, menu: QMenu, entry: Entry) -> None:
        self.entry = entry
        self.widget = QWidget(menu)
        layout = QHBoxLayout(self.widget)
        layout.setContentsMargins(4, 0, 4, 0)

        self.label = QPushButton(self.widget)
        self.label.setFlat(True)
        self.label.setStyleSheet("text-align: left; padding: 4px;")
        layout.addWidget(self.label, 1)

        self.delete_button = QToolButton(self.widget)
        self.delete_button.setIcon(QIcon.fromTheme("edit-delete-symbolic"))
        self.delete_button.setText("✕")
        self.delete_button.setAutoRaise(True)
        self.delete_button.setToolTip("Remove from history")
        layout.addWidget(self.delete_button, 0, Qt.AlignmentFlag.AlignRight)

        self.action = QWidgetAction(menu)
        self.action.setDefaultWidget(self.widget)

    def render(self, label: str, delete_enabled: bool) -> None:
        mark = _SELECTED_MARK if self.entry.selected else _UNSELECTED_MARK
        self.label.setText(mark + label)
        self.delete_button.setVisible(delete_enabled and not self.entry.selected)


class TrayMenu(HistoryListener, IndicatorView):
    """System tray icon whose context menu lists the history."""

    def __init__(
        self,
        history: ManageHistoryUseCase,
        settings: Callable[[], IndicatorSettings],
        on_clear: Callable[[], None],
        on_open_settings: Callable[[], None],
        on_quit: Callable[[], None],
    ) -> None:
        self._history = history
        self._settings = settings
        self._items: dict[int, _EntryItem] = {}

        self.menu = QMenu()
        self._separator = self.menu.addSeparator()

        clear_action = QAction("Clear History", self.menu)
        clear_action.triggered.connect(on_clear)
        self.menu.addAction(clear_action)

        settings_action = QAction("Settings", self.menu)
        settings_action.triggered.connect(on_open_settings)
        self.menu.addAction(settings_action)

        quit_action = QAction("Quit", self.menu)
        quit_action.triggered.connect(on_quit)
        self.menu.addAction(quit_action)

        self.tray = QSystemTrayIcon(QIcon.fromTheme("edit-cut-symbolic"))
        self.tray.setToolTip("Clipboard history")
        self.tray.setContextMenu(self.menu)
        self.tray.activated.connect(self._on_activated)

    def show(self) -> None:
        self.tray.show()

    def hide(self) -> None:
        self.tray.hide()

    @property
    def item_count(self) -> int:
        return len(self._items)

    def item_text(self, entry: Entry) -> str:
        return self._items[id(entry)].label.text()

    # -- HistoryListener -----------------------------------------------------

    def entry_added(self, entry: Entry) -> None:
        item = _EntryItem(self.menu, entry)
        item.label.clicked.connect(lambda: self._on_item_clicked(entry))
        item.delete_button.clicked.connect(lambda: self._history.remove(entry))
        self.menu.insertAction(self._separator, item.action)
        self._items[id(entry)] = item
        self._render(item)

    def entry_removed(self, entry: Entry) -> None:
        item = self._items.pop(id(entry), None)
        if item is None:
            return
        item.label.clicked.disconnect()
        item.delete_button.clicked.disconnect()
        self.menu.removeAction(item.action)
        item.action.deleteLater()

    def selection_changed(self, entry: Entry | None, previous: Entry | None) -> None:
        for changed in (previous, entry):
            if changed is not None and id(changed) in self._items:
                self._render(self._items[id(changed)])

    # -- IndicatorView -------------------------------------------------------

    def toggle(self) -> None:
        if self.menu.isVisible():
            self.menu.close()
        else:
            self.menu.popup(QCursor.pos())

    def refresh_labels(self, settings: IndicatorSettings) -> None:
        for item in self._items.values():
            self._render(item)

    # -- Internals -----------------------------------------------------------

    def _render(self, item: _EntryItem) -> None:
        item.render(self._history.label(item.entry), self._settings().delete_enabled)

    def _on_item_clicked(self, entry: Entry) -> None:
        self.menu.close()
        self._history.select(entry)

    def _on_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            self.toggle()
