"""Rich formatting utilities for the CLI.

All Rich rendering (tables, panels, syntax) lives here and knows nothing
about domain logic beyond the models it displays.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from clipstack.domain.models.entry import Entry
from clipstack.domain.models.settings import IndicatorSettings
from clipstack.domain.rules.preview import format_label

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "clipstack") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]✗ {message}[/]")


def info_message(message: str) -> None:
    console.print(f"[dim]{message}[/]")


# ---------------------------------------------------------------------------
# History table
# ---------------------------------------------------------------------------


def history_table(entries: Sequence[Entry], preview_size: int, capacity: int) -> None:
    """Print the history, oldest first, marking the selected entry."""
    table = Table(
        title=f"📋 Clipboard history ({len(entries)} / {capacity})",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("#", justify="right", style="bold")
    table.add_column("", width=1)
    table.add_column("Preview", overflow="fold")
    table.add_column("Chars", justify="right", style="dim")

    for i, entry in enumerate(entries, start=1):
        table.add_row(
            str(i),
            "[green]●[/]" if entry.selected else "",
            format_label(entry.content, preview_size),
            str(len(entry.content)),
        )

    console.print(table)


# ---------------------------------------------------------------------------
# Settings rendering
# ---------------------------------------------------------------------------


def settings_panel(settings: IndicatorSettings, title: str = "⚙️  clipstack settings") -> None:
    """Render the active settings as syntax-highlighted JSON."""
    raw_json = json.dumps(settings.to_file_dict(), indent=2, ensure_ascii=False)
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )
