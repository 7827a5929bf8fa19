"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from clipstack.domain.errors import ClipstackError
from clipstack.presentation.cli.formatters import (
    console,
    error_message,
    history_table,
    info_message,
    settings_panel,
    success_panel,
)

app = typer.Typer(
    name="clipstack",
    help="📋 Bounded, deduplicated clipboard history",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Manage clipstack settings",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


def _container(ctx: typer.Context):
    return ctx.obj


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Annotated[
        Optional[Path], typer.Option("--config-dir", help="Directory holding settings.json")
    ] = None,
    data_dir: Annotated[
        Optional[Path], typer.Option("--data-dir", help="Directory holding registry.json")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Clipboard history manager."""
    from clipstack.bootstrap import Container

    _configure_logging(verbose)
    ctx.obj = Container(config_dir=config_dir, data_dir=data_dir)


# ---------------------------------------------------------------------------
# clipstack run
# ---------------------------------------------------------------------------


@app.command()
def run(ctx: typer.Context) -> None:
    """Start the tray indicator and poll the clipboard."""
    from clipstack.gui.app import main as gui_main

    container = _container(ctx)
    code = gui_main(
        config_dir=container.settings_manager.settings_path.parent,
        data_dir=container.registry_path.parent,
    )
    raise typer.Exit(code)


# ---------------------------------------------------------------------------
# History commands
# ---------------------------------------------------------------------------


@app.command("list")
def list_entries(ctx: typer.Context) -> None:
    """Show the stored history, oldest first."""
    container = _container(ctx)
    history = container.manage_history()
    entries = history.load()
    settings = container.user_settings
    if not entries:
        info_message(f"History is empty ({container.registry_path})")
        return
    history_table(entries, settings.preview_size, settings.history_size)


@app.command()
def add(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Text to insert into the history")],
) -> None:
    """Insert TEXT as the newest entry (duplicates are left in place)."""
    history = _container(ctx).manage_history()
    history.load()
    _, inserted = history.add(text)
    if inserted:
        success_panel("Entry added.")
    else:
        info_message("Already in history; nothing changed.")


@app.command()
def remove(
    ctx: typer.Context,
    index: Annotated[int, typer.Argument(help="1-based position as shown by 'list'")],
) -> None:
    """Remove the entry at INDEX."""
    history = _container(ctx).manage_history()
    history.load()
    try:
        entry = history.entry_at(index)
    except ClipstackError as exc:
        error_message(str(exc))
        raise typer.Exit(1) from exc
    history.remove(entry)
    success_panel(f"Removed entry {index}.")


@app.command()
def clear(ctx: typer.Context) -> None:
    """Remove every entry except the selected (newest) one."""
    history = _container(ctx).manage_history()
    history.load()
    history.clear(notify=False)
    success_panel("Clipboard history cleared")


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the registry and settings file locations."""
    container = _container(ctx)
    console.print(f"registry: {container.registry_path}", soft_wrap=True)
    console.print(f"settings: {container.settings_manager.settings_path}", soft_wrap=True)


# ---------------------------------------------------------------------------
# clipstack config ...
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show the active settings."""
    settings_panel(_container(ctx).user_settings)


@config_app.command("set")
def config_set(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Setting name, e.g. history-size")],
    value: Annotated[str, typer.Argument(help="New value")],
) -> None:
    """Change one setting. A running indicator picks it up immediately."""
    try:
        settings = _container(ctx).settings_manager.update(key, value)
    except ClipstackError as exc:
        error_message(str(exc))
        raise typer.Exit(1) from exc
    settings_panel(settings, title=f"✓ {key} updated")


@config_app.command("reset")
def config_reset(ctx: typer.Context) -> None:
    """Restore factory defaults."""
    try:
        settings = _container(ctx).settings_manager.reset_to_defaults()
    except ClipstackError as exc:
        error_message(str(exc))
        raise typer.Exit(1) from exc
    settings_panel(settings, title="Defaults restored")


if __name__ == "__main__":
    app()
