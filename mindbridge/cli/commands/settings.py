"""System settings commands.

Example:
    mindbridge settings show
    mindbridge settings set security sessionTimeout 45
    mindbridge settings set system logLevel debug
"""

import asyncio
from typing import Annotated, Any

import typer
from rich.markup import escape
from rich.table import Table

from mindbridge.admin.schema import (
    CATEGORIES,
    FIELD_BOUNDS,
    FIELD_CHOICES,
    FIELD_UNITS,
    SettingsSnapshot,
    coerce_value,
    field_label,
)
from mindbridge.admin.store import SettingsStore
from mindbridge.api import get_api_client
from mindbridge.cli.utils import console, print_notifications
from mindbridge.exceptions import SettingsValidationError
from mindbridge.notifications import RecordingNotifier

_CATEGORY_TITLES = {
    "notifications": "🔔 Notification Settings",
    "security": "🛡 Security Settings",
    "system": "🖥 System Settings",
}


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "[green]on[/green]" if value else "[dim]off[/dim]"
    return str(value)


def _allowed(field: str) -> str:
    if field in FIELD_BOUNDS:
        lo, hi = FIELD_BOUNDS[field]
        unit = FIELD_UNITS.get(field)
        return f"{lo}-{hi} {unit}" if unit else f"{lo}-{hi}"
    if field in FIELD_CHOICES:
        return "/".join(FIELD_CHOICES[field])
    return "on/off"


def render_settings(snapshot: SettingsSnapshot) -> None:
    """Print one table per settings category."""
    wire = snapshot.to_wire()
    for category in CATEGORIES:
        table = Table(title=_CATEGORY_TITLES[category], show_header=True, title_justify="left")
        table.add_column("Setting", style="cyan")
        table.add_column("Key", style="dim")
        table.add_column("Value", justify="center")
        table.add_column("Allowed", style="dim")
        for field, value in wire[category].items():
            table.add_row(field_label(field), field, _format_value(value), _allowed(field))
        console.print(table)


def show() -> None:
    """Show the current system settings."""
    asyncio.run(_show_settings())


async def _show_settings() -> None:
    notifier = RecordingNotifier()
    client = get_api_client()
    store = SettingsStore(client, notifier)
    try:
        loaded = await store.load()
    finally:
        await client.close()

    print_notifications(notifier)
    if not loaded:
        console.print("[yellow]Showing default settings.[/yellow]")
    render_settings(store.current)
    if not loaded:
        raise typer.Exit(code=1)


def set_setting(
    category: Annotated[str, typer.Argument(help=f"Settings category ({', '.join(CATEGORIES)})")],
    field: Annotated[str, typer.Argument(help="Setting key, e.g. sessionTimeout")],
    value: Annotated[str, typer.Argument(help="New value (on/off, a number, or a choice)")],
) -> None:
    """Change a single setting.

    Numbers are clamped to the setting's allowed range. Nothing is written
    if the current settings cannot be loaded. If the backend rejects the
    change, the settings are reloaded from the backend.
    """
    try:
        coerced = coerce_value(category, field, value)
    except SettingsValidationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    asyncio.run(_set_setting(category, field, coerced))


async def _set_setting(category: str, field: str, value: Any) -> None:
    notifier = RecordingNotifier()
    client = get_api_client()
    store = SettingsStore(client, notifier)
    try:
        if not await store.load():
            print_notifications(notifier)
            console.print("[yellow]Setting not changed.[/yellow]")
            raise typer.Exit(code=1)
        previous = store.get(category, field)
        committed = await store.update_field(category, field, value)
    finally:
        await client.close()

    print_notifications(notifier)
    current = store.get(category, field)
    console.print(
        f"[bold]{category}.{field}[/bold]: {_format_value(previous)} → {_format_value(current)}"
    )
    if not committed:
        raise typer.Exit(code=1)
