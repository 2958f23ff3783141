"""Counselor sessions dashboard commands.

Example:
    mindbridge sessions list
    mindbridge sessions list --tab mood --file ./sessions.json
    mindbridge sessions list --expand 3
"""

from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.panel import Panel

from mindbridge.cli.utils import console
from mindbridge.counselor.sessions import (
    SessionRecord,
    SessionTab,
    SessionView,
    load_sessions,
    mood_type,
    time_ago,
)
from mindbridge.exceptions import SessionDataError
from mindbridge.settings import get_settings


def list_sessions(
    tab: Annotated[
        SessionTab,
        typer.Option("--tab", "-t", help="Which sessions to show"),
    ] = SessionTab.ALL,
    file: Annotated[
        Optional[str],  # noqa: UP007
        typer.Option("--file", "-f", help="Sessions JSON file (default from settings)"),
    ] = None,
    expand: Annotated[
        Optional[str],  # noqa: UP007
        typer.Option("--expand", "-e", help="Session ID to show details for"),
    ] = None,
) -> None:
    """Show active sessions and mood reports."""
    path = file or get_settings().sessions_file
    try:
        records = load_sessions(path)
    except SessionDataError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    view = SessionView(records, tab)
    if expand is not None:
        match = next((r for r in records if str(r.id) == expand), None)
        if match is None:
            console.print(f"[yellow]Session {escape(expand)} not found.[/yellow]")
        else:
            view.toggle(match.id)

    render_view(view)


def render_view(view: SessionView) -> None:
    """Print tab counts followed by one panel per visible session."""
    counts = view.counts()
    tabs = "   ".join(
        f"[bold blue]{t.heading} ({counts[t]})[/bold blue]"
        if t is view.active_tab
        else f"[dim]{t.heading} ({counts[t]})[/dim]"
        for t in SessionTab
    )
    console.print(Panel(tabs, title="Active Sessions", border_style="blue"))

    visible = view.visible()
    if not visible:
        console.print("[dim]No sessions found.[/dim]")
        return

    for record in visible:
        console.print(_session_panel(record, expanded=view.is_expanded(record)))


def _session_panel(record: SessionRecord, expanded: bool) -> Panel:
    status_color = "green" if record.status == "active" else "dim"
    lines = [f"[{status_color}]{escape(record.status_label)}[/{status_color}]"]

    if record.has_chat:
        lines.append(f"💬 {escape(record.last_message or '-')}")
        if record.unread_label:
            lines.append(f"   [blue]{record.unread_label}[/blue]")

    if record.has_mood and record.mood_report:
        report = record.mood_report
        mood = mood_type(report.mood)
        mood_line = f"📊 [{mood.color}]{mood.emoji} {mood.label}[/{mood.color}] Level {report.intensity}"
        if report.notes:
            mood_line += f" - {escape(report.notes)}"
        lines.append(mood_line)
        if report.triggers:
            lines.append("🏷  " + ", ".join(escape(t) for t in report.triggers))

    lines.append(f"[dim]🕒 {time_ago(record.last_activity)}[/dim]")

    body = "\n".join(lines)
    if expanded:
        body += "\n\n" + _details_text(record)

    return Panel(
        body,
        title=f"Anonymous Session #{escape(str(record.id))}",
        title_align="left",
        border_style="blue" if expanded else "grey50",
    )


def _details_text(record: SessionRecord) -> str:
    details = record.details
    rows = [
        ("Tags", ", ".join(details.tags) if details and details.tags else "-"),
        ("Notes", details.session_notes if details and details.session_notes else "-"),
        (
            "Interactions",
            str(details.total_interactions) if details and details.total_interactions is not None else "-",
        ),
        (
            "Avg. response",
            details.average_response_time if details and details.average_response_time else "-",
        ),
        ("Status", details.status_note if details and details.status_note else "-"),
        ("Last activity", record.last_activity.strftime("%Y-%m-%d %H:%M")),
    ]
    return "\n".join(f"[bold]{label}:[/bold] {escape(value)}" for label, value in rows)
