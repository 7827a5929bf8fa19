"""Port (ABC) for user settings persistence and change notification.

Domain layer interface — infrastructure provides the concrete implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from clipstack.domain.models.settings import IndicatorSettings

SettingsCallback = Callable[[IndicatorSettings], None]


class SettingsPort(ABC):
    """Abstract interface for loading / saving / watching user preferences."""

    @abstractmethod
    def load(self) -> IndicatorSettings:
        """Load persisted user settings (or defaults if none exist)."""

    @abstractmethod
    def save(self, settings: IndicatorSettings) -> None:
        """Persist the given user settings and notify subscribers."""

    @abstractmethod
    def reset_to_defaults(self) -> IndicatorSettings:
        """Delete persisted settings and return factory defaults."""

    @abstractmethod
    def connect(self, callback: SettingsCallback) -> int:
        """Subscribe to changes; returns an id for :meth:`disconnect`."""

    @abstractmethod
    def disconnect(self, handler_id: int) -> None:
        """Drop a subscription. Unknown ids are ignored."""
