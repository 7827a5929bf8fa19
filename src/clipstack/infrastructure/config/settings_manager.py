"""Settings manager — loads/saves IndicatorSettings to OS-appropriate config dir.

Implements ``SettingsPort`` and persists user preferences as JSON to
``~/.config/clipstack/settings.json`` (Linux) or the equivalent platform
directory via ``platformdirs``. Subscribers registered with :meth:`connect`
are told about every effective change, whether it came from :meth:`save`
in this process or from :meth:`reload` after another process edited the file.
"""

from __future__ import annotations

import itertools
import json
import logging
import tempfile
from pathlib import Path
from typing import Any

import platformdirs
from pydantic import ValidationError

from clipstack.domain.errors import ConfigurationError
from clipstack.domain.models.settings import IndicatorSettings
from clipstack.domain.ports.settings_port import SettingsCallback, SettingsPort
from clipstack.domain.rules.constants import APP_NAME

logger = logging.getLogger(__name__)

_SETTINGS_FILENAME = "settings.json"


class SettingsManager(SettingsPort):
    """Concrete implementation of :class:`SettingsPort`.

    Parameters
    ----------
    config_dir : Path | None
        Override the default config directory (useful for testing).
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        self._config_dir = config_dir or Path(platformdirs.user_config_dir(APP_NAME))
        self._settings_path = self._config_dir / _SETTINGS_FILENAME
        self._handlers: dict[int, SettingsCallback] = {}
        self._ids = itertools.count(1)
        self._last: IndicatorSettings | None = None

    # -- Public API ----------------------------------------------------------

    def load(self) -> IndicatorSettings:
        """Load user settings from disk, falling back to defaults."""
        self._last = self._read()
        return self._last

    def save(self, settings: IndicatorSettings) -> None:
        """Persist settings atomically (write to temp, then rename).

        Raises:
            ConfigurationError: The config directory is not writable.
        """
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
            tmp_fd, tmp_path = tempfile.mkstemp(
                dir=self._config_dir,
                suffix=".tmp",
            )
        except OSError as exc:
            raise ConfigurationError(f"Cannot write settings to {self._config_dir}: {exc}") from exc

        try:
            with open(tmp_fd, "w", encoding="utf-8") as fh:
                json.dump(settings.to_file_dict(), fh, indent=2, ensure_ascii=False)
            Path(tmp_path).replace(self._settings_path)
        except OSError as exc:
            Path(tmp_path).unlink(missing_ok=True)
            raise ConfigurationError(f"Cannot write settings {self._settings_path}: {exc}") from exc

        self._publish(settings)

    def reset_to_defaults(self) -> IndicatorSettings:
        """Delete the persisted file and return factory defaults."""
        try:
            self._settings_path.unlink(missing_ok=True)
        except OSError as exc:
            raise ConfigurationError(f"Cannot remove settings {self._settings_path}: {exc}") from exc
        defaults = IndicatorSettings()
        self._publish(defaults)
        return defaults

    def reload(self) -> IndicatorSettings:
        """Re-read the file and notify subscribers if anything changed."""
        settings = self._read()
        self._publish(settings)
        return settings

    def update(self, key: str, value: Any) -> IndicatorSettings:
        """Change one setting by its file key (``history-size``) and save.

        Raises:
            ConfigurationError: Unknown key or invalid value.
        """
        current = self._read()
        data = current.to_file_dict()
        if key not in data:
            raise ConfigurationError(
                f"Unknown setting '{key}'. Valid keys: {', '.join(sorted(data))}"
            )
        data[key] = value
        try:
            updated = IndicatorSettings.model_validate(data)
        except ValidationError as exc:
            message = exc.errors()[0]["msg"]
            raise ConfigurationError(f"Invalid value for '{key}': {message}") from exc
        self.save(updated)
        return updated

    # -- Change notification -------------------------------------------------

    def connect(self, callback: SettingsCallback) -> int:
        handler_id = next(self._ids)
        self._handlers[handler_id] = callback
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        self._handlers.pop(handler_id, None)

    @property
    def settings_path(self) -> Path:
        """Absolute path to the user settings JSON file."""
        return self._settings_path

    # -- Internals -----------------------------------------------------------

    def _read(self) -> IndicatorSettings:
        if not self._settings_path.exists():
            return IndicatorSettings()

        try:
            raw = json.loads(self._settings_path.read_text(encoding="utf-8"))
            return IndicatorSettings.model_validate(raw)
        except (OSError, ValueError) as exc:
            # Corrupted file → return safe defaults
            logger.warning("Ignoring unreadable settings file %s: %s", self._settings_path, exc)
            return IndicatorSettings()

    def _publish(self, settings: IndicatorSettings) -> None:
        if settings == self._last:
            return
        self._last = settings
        for callback in list(self._handlers.values()):
            callback(settings)
