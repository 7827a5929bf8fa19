"""Infrastructure layer — external framework adapters.

Only the adapters that need no display server are re-exported here; the
Qt adapters are imported explicitly by the GUI composition path.
"""

from clipstack.infrastructure.clipboard.system_clipboard import SystemClipboard
from clipstack.infrastructure.config.settings_manager import SettingsManager
from clipstack.infrastructure.persistence.json_registry import JsonRegistryRepository

__all__ = [
    "SystemClipboard",
    "SettingsManager",
    "JsonRegistryRepository",
]
