"""Domain models — public API.

Provides convenient imports for the most commonly used domain entities.
"""

from clipstack.domain.models.entry import Entry
from clipstack.domain.models.history import HistoryListener, HistoryStore
from clipstack.domain.models.settings import IndicatorSettings

__all__ = [
    "Entry",
    "HistoryListener",
    "HistoryStore",
    "IndicatorSettings",
]
