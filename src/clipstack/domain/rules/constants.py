"""clipstack constants — pure domain values.

These have NO dependency on configuration files or external libraries.
User-tunable values live in ``IndicatorSettings`` and are injected via
``SettingsPort``; the numbers here are only their factory defaults.
"""

from dataclasses import dataclass

APP_NAME = "clipstack"

# ---------------------------------------------------------------------------
# Factory defaults
# ---------------------------------------------------------------------------

DEFAULT_INTERVAL_MS = 1000
DEFAULT_HISTORY_SIZE = 15
DEFAULT_PREVIEW_SIZE = 50

# Polling faster than this only burns CPU on subprocess/IPC round trips.
MIN_INTERVAL_MS = 100

ELLIPSIS = "..."

HISTORY_CLEARED_MESSAGE = "Clipboard history cleared"


# ---------------------------------------------------------------------------
# Keybinding actions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeybindingAction:
    """A named global shortcut and its default accelerator."""

    name: str
    default_accelerator: str


CLEAR_HISTORY = KeybindingAction("clear-history", "ctrl+f10")
PREVIOUS_ENTRY = KeybindingAction("previous-entry", "ctrl+f11")
NEXT_ENTRY = KeybindingAction("next-entry", "ctrl+f12")
TOGGLE_MENU = KeybindingAction("toggle-menu", "ctrl+f9")

KEYBINDING_ACTIONS: tuple[KeybindingAction, ...] = (
    CLEAR_HISTORY,
    PREVIOUS_ENTRY,
    NEXT_ENTRY,
    TOGGLE_MENU,
)
