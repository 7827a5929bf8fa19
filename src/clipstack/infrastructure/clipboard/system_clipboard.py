"""System clipboard — implements ClipboardPort using subprocess."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from dataclasses import dataclass

from clipstack.domain.errors import ClipboardError
from clipstack.domain.ports.clipboard_port import ClipboardPort, TextCallback

logger = logging.getLogger(__name__)

_READ_TIMEOUT_S = 2.0


@dataclass(frozen=True)
class ClipboardBackend:
    """CLI command tokens used to write and read the clipboard."""

    copy: list[str]
    paste: list[str]


def _detect_backend() -> ClipboardBackend:
    """Return the clipboard commands appropriate for this OS.

    Raises:
        ClipboardError: No supported clipboard tool found.
    """
    if sys.platform == "darwin":
        return ClipboardBackend(copy=["pbcopy"], paste=["pbpaste"])

    if sys.platform.startswith("linux"):
        # Prefer wl-clipboard on Wayland, then xclip, then xsel
        for backend in (
            ClipboardBackend(copy=["wl-copy"], paste=["wl-paste", "--no-newline"]),
            ClipboardBackend(
                copy=["xclip", "-selection", "clipboard"],
                paste=["xclip", "-selection", "clipboard", "-o"],
            ),
            ClipboardBackend(
                copy=["xsel", "--clipboard", "--input"],
                paste=["xsel", "--clipboard", "--output"],
            ),
        ):
            if shutil.which(backend.copy[0]):
                return backend
        raise ClipboardError("No clipboard tool found. Install wl-clipboard, xclip or xsel.")

    if sys.platform == "win32":
        return ClipboardBackend(
            copy=["clip"],
            paste=["powershell", "-NoProfile", "-Command", "Get-Clipboard -Raw"],
        )

    raise ClipboardError(f"Unsupported platform: {sys.platform}")


class SystemClipboard(ClipboardPort):
    """Clipboard adapter using OS-level subprocess commands.

    Reads are synchronous, so the callback runs before ``request_text``
    returns.
    """

    def __init__(self, backend: ClipboardBackend | None = None) -> None:
        self._backend = backend

    @property
    def backend(self) -> ClipboardBackend:
        if self._backend is None:
            self._backend = _detect_backend()
        return self._backend

    def request_text(self, callback: TextCallback) -> None:
        """Read clipboard text via subprocess; empty or failed reads give ``None``."""
        try:
            result = subprocess.run(
                self.backend.paste,
                capture_output=True,
                check=True,
                timeout=_READ_TIMEOUT_S,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("Clipboard read failed: %s", exc)
            callback(None)
            return

        text = result.stdout.decode("utf-8", errors="replace")
        callback(text or None)

    def set_text(self, text: str) -> None:
        """Copy text to system clipboard via subprocess."""
        try:
            subprocess.run(
                self.backend.copy,
                input=text.encode("utf-8"),
                check=True,
                capture_output=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ClipboardError(f"Clipboard copy failed: {exc}") from exc
