"""Qt clipboard — implements ClipboardPort on top of ``QClipboard``."""

from __future__ import annotations

from PySide6.QtGui import QClipboard, QGuiApplication

from clipstack.domain.errors import ClipboardError
from clipstack.domain.ports.clipboard_port import ClipboardPort, TextCallback


class QtClipboard(ClipboardPort):
    """Clipboard adapter for the running ``QGuiApplication``.

    Must be used from the GUI thread. ``QClipboard.text`` blocks on the
    selection owner for a short while at most, so reads complete inline.
    """

    def __init__(self, mode: QClipboard.Mode = QClipboard.Mode.Clipboard) -> None:
        self._mode = mode

    def _clipboard(self) -> QClipboard:
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            raise ClipboardError("No QGuiApplication is running.")
        return clipboard

    def request_text(self, callback: TextCallback) -> None:
        text = self._clipboard().text(self._mode)
        callback(text or None)

    def set_text(self, text: str) -> None:
        self._clipboard().setText(text, self._mode)
