"""Ports: transient on-screen notifications."""

from abc import ABC, abstractmethod


class NotificationPort(ABC):
    """What the core calls to give the user short feedback."""

    @abstractmethod
    def show(self, text: str, duration_ms: int) -> None:
        """Display *text*, replacing any pending notification, and hide it
        after *duration_ms*."""
        ...


class NotificationDisplayPort(ABC):
    """The widget (or log line) that actually renders a notification."""

    @abstractmethod
    def display(self, text: str) -> None:
        ...

    @abstractmethod
    def hide(self) -> None:
        ...
