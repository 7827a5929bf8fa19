"""Port: Clipboard — read and write the system clipboard text."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

TextCallback = Callable[[Optional[str]], None]


class ClipboardPort(ABC):
    """Contract for clipboard operations.

    Reads are asynchronous: the adapter calls back once with the current
    text, or ``None`` when the clipboard is empty or unreadable. Adapters
    backed by synchronous calls may invoke the callback before returning.
    """

    @abstractmethod
    def request_text(self, callback: TextCallback) -> None:
        """Request the current clipboard text and deliver it to *callback*."""
        ...

    @abstractmethod
    def set_text(self, text: str) -> None:
        """Copy the given text to the system clipboard.

        Raises:
            ClipboardError: If no clipboard backend is available.
        """
        ...
