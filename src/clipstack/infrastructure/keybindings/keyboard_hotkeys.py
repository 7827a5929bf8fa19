"""Global hotkeys — implements KeybindingPort with the ``keyboard`` package.

Accelerators use ``keyboard``'s syntax, e.g. ``ctrl+f12`` or
``ctrl+shift+v``. On Linux the package needs access to ``/dev/input``
(root or the ``input`` group); when it is refused the binding is logged
and skipped.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import keyboard

from clipstack.domain.ports.keybinding_port import KeybindingPort

logger = logging.getLogger(__name__)

Dispatch = Callable[[Callable[[], None]], None]


def _call_now(fn: Callable[[], None]) -> None:
    fn()


class KeyboardHotkeys(KeybindingPort):
    """Bind named actions to system-wide hotkeys.

    ``keyboard`` runs callbacks on its listener thread; pass a *dispatch*
    function (e.g. ``QtDispatcher.post``) to hop back onto the GUI thread.
    """

    def __init__(self, dispatch: Dispatch | None = None) -> None:
        self._dispatch = dispatch or _call_now
        self._handles: dict[str, Any] = {}

    def bind(self, action: str, accelerator: str, callback: Callable[[], None]) -> bool:
        if action in self._handles:
            self._remove(action)
        try:
            handle = keyboard.add_hotkey(accelerator, lambda: self._dispatch(callback))
        except (ImportError, OSError, ValueError) as exc:
            logger.warning("Cannot register hotkey %s for %s: %s", accelerator, action, exc)
            return False
        self._handles[action] = handle
        logger.debug("Bound %s to %s", action, accelerator)
        return True

    def unbind_all(self) -> None:
        for action in list(self._handles):
            self._remove(action)

    @property
    def bound_actions(self) -> list[str]:
        return list(self._handles)

    def _remove(self, action: str) -> None:
        handle = self._handles.pop(action)
        try:
            keyboard.remove_hotkey(handle)
        except (KeyError, ValueError) as exc:
            logger.debug("Hotkey for %s was already gone: %s", action, exc)
