"""Port: Keybindings — global shortcut registration."""

from abc import ABC, abstractmethod
from typing import Callable


class KeybindingPort(ABC):
    """Contract for binding named actions to global accelerators."""

    @abstractmethod
    def bind(self, action: str, accelerator: str, callback: Callable[[], None]) -> bool:
        """Register *callback* for *accelerator* under the *action* name.

        Returns:
            ``False`` if the host refused the binding.
        """
        ...

    @abstractmethod
    def unbind_all(self) -> None:
        """Release every binding made through this adapter."""
        ...

    @property
    @abstractmethod
    def bound_actions(self) -> list[str]:
        """Names of the currently bound actions."""
        ...
