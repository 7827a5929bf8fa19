"""History entry model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    """One clipboard history record.

    ``content`` is frozen once the entry exists; ``selected`` is toggled by
    the ``SelectionController`` and is exclusive across the store.

    Entries are compared by identity inside ``HistoryStore``; two entries
    with equal fields are still distinct records.
    """

    model_config = ConfigDict(validate_assignment=True)

    content: str = Field(..., frozen=True, description="Clipboard text snapshot.")
    selected: bool = Field(default=False, description="Radio-group selection flag.")

    def __repr__(self) -> str:
        preview = self.content if len(self.content) <= 20 else self.content[:20] + "…"
        return f"<Entry({preview!r}, selected={self.selected})>"
