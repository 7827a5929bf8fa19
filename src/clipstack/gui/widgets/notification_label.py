"""Frameless notification label shown in the top-right screen corner."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QLabel

from clipstack.domain.ports.notification_port import NotificationDisplayPort

_STYLE = """
QLabel {
    background-color: rgba(30, 33, 48, 230);
    color: #F5F7FF;
    border-radius: 6px;
    padding: 6px 12px;
    font-size: 13px;
}
"""

_MARGIN = 8


class NotificationLabel(NotificationDisplayPort):
    """Render notifications in a top-level ``QLabel``.

    The hide timer lives in ``Notifier``; this class only shows and hides.
    """

    def __init__(self) -> None:
        self._label = QLabel()
        self._label.setWindowFlags(
            Qt.WindowType.ToolTip
            | Qt.WindowType.FramelessWindowHint
            | Qt.WindowType.WindowStaysOnTopHint
        )
        self._label.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating)
        self._label.setStyleSheet(_STYLE)
        self._label.hide()

    @property
    def widget(self) -> QLabel:
        return self._label

    def display(self, text: str) -> None:
        self._label.setText(text)
        self._label.adjustSize()
        screen = QGuiApplication.primaryScreen()
        if screen is not None:
            area = screen.availableGeometry()
            self._label.move(
                area.right() - self._label.width() - _MARGIN,
                area.top() + _MARGIN,
            )
        self._label.show()
        self._label.raise_()

    def hide(self) -> None:
        self._label.hide()
