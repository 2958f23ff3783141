"""Shared CLI helpers."""

from rich.console import Console
from rich.markup import escape

from mindbridge.notifications import RecordingNotifier

console = Console()


def print_notifications(notifier: RecordingNotifier) -> None:
    """Render recorded notifications as toast-style lines."""
    for note in notifier.notifications:
        if note.level == "success":
            console.print(f"[green]✔ {escape(note.message)}[/green]")
        else:
            console.print(f"[red]✖ {escape(note.message)}[/red]")
