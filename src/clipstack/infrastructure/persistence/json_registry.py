"""JSON registry — implements RegistryRepositoryPort using a JSON file.

The registry is a plain JSON array of strings, oldest first, stored under
the user data directory (``~/.local/share/clipstack/registry.json`` on
Linux) via ``platformdirs``.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import platformdirs
from pydantic import TypeAdapter, ValidationError

from clipstack.domain.errors import RegistryLoadError, RegistryWriteError
from clipstack.domain.ports.registry_repository import RegistryRepositoryPort
from clipstack.domain.rules.constants import APP_NAME

_REGISTRY_FILENAME = "registry.json"

_CONTENTS = TypeAdapter(list[str])


class JsonRegistryRepository(RegistryRepositoryPort):
    """Persist the history contents as a JSON list.

    Parameters
    ----------
    data_dir : Path | None
        Override the default data directory (useful for testing).
    """

    def __init__(self, data_dir: Path | None = None) -> None:
        self._data_dir = data_dir or Path(platformdirs.user_data_dir(APP_NAME))
        self._registry_path = self._data_dir / _REGISTRY_FILENAME

    def save(self, contents: list[str]) -> None:
        """Persist *contents* atomically (write to temp, then rename)."""
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            tmp_fd, tmp_path = tempfile.mkstemp(dir=self._data_dir, suffix=".tmp")
        except OSError as exc:
            raise RegistryWriteError(f"Cannot write registry to {self._data_dir}: {exc}") from exc

        try:
            with open(tmp_fd, "w", encoding="utf-8") as fh:
                json.dump(list(contents), fh, indent=2, ensure_ascii=False)
            Path(tmp_path).replace(self._registry_path)
        except (OSError, ValueError) as exc:
            # ValueError covers lone surrogates that UTF-8 cannot encode
            Path(tmp_path).unlink(missing_ok=True)
            raise RegistryWriteError(f"Cannot write registry {self._registry_path}: {exc}") from exc

    def load(self) -> list[str]:
        """Load the registry, oldest entry first."""
        if not self._registry_path.exists():
            raise RegistryLoadError(f"Registry file not found: {self._registry_path}")

        try:
            raw = self._registry_path.read_text(encoding="utf-8")
            return _CONTENTS.validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            raise RegistryLoadError(
                f"Failed to load registry from {self._registry_path}: {exc}"
            ) from exc

    @property
    def registry_path(self) -> Path:
        """Absolute path to the registry JSON file."""
        return self._registry_path
