"""User preferences model for clipstack.

This module defines the ``IndicatorSettings`` Pydantic model. Keys are
persisted with their hyphenated names (``history-size``) while Python code
uses the attribute names (``history_size``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from clipstack.domain.rules.constants import (
    CLEAR_HISTORY,
    DEFAULT_HISTORY_SIZE,
    DEFAULT_INTERVAL_MS,
    DEFAULT_PREVIEW_SIZE,
    MIN_INTERVAL_MS,
    NEXT_ENTRY,
    PREVIOUS_ENTRY,
    TOGGLE_MENU,
)


class IndicatorSettings(BaseModel):
    """Root user preferences — persisted to ``settings.json``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    interval: int = Field(
        default=DEFAULT_INTERVAL_MS,
        ge=MIN_INTERVAL_MS,
        description="Clipboard poll interval in milliseconds.",
    )
    history_size: int = Field(
        default=DEFAULT_HISTORY_SIZE,
        ge=1,
        alias="history-size",
        description="Maximum number of history entries.",
    )
    preview_size: int = Field(
        default=DEFAULT_PREVIEW_SIZE,
        ge=1,
        alias="preview-size",
        description="Label truncation length in characters.",
    )
    delete_enabled: bool = Field(
        default=True,
        alias="delete-enabled",
        description="Show per-entry delete actions in the menu.",
    )
    enable_keybinding: bool = Field(
        default=True,
        alias="enable-keybinding",
        description="Register the global shortcuts.",
    )

    # -- Keybinding accelerators ---------------------------------------------

    clear_history: str = Field(
        default=CLEAR_HISTORY.default_accelerator,
        alias=CLEAR_HISTORY.name,
    )
    previous_entry: str = Field(
        default=PREVIOUS_ENTRY.default_accelerator,
        alias=PREVIOUS_ENTRY.name,
    )
    next_entry: str = Field(
        default=NEXT_ENTRY.default_accelerator,
        alias=NEXT_ENTRY.name,
    )
    toggle_menu: str = Field(
        default=TOGGLE_MENU.default_accelerator,
        alias=TOGGLE_MENU.name,
    )

    def accelerator(self, action: str) -> str:
        """Return the accelerator bound to the hyphenated *action* name."""
        return getattr(self, action.replace("-", "_"))

    def to_file_dict(self) -> dict[str, object]:
        """Serialize with the hyphenated on-disk key names."""
        return self.model_dump(mode="json", by_alias=True)
