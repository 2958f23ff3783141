"""CLI entry point and base commands.

Provides the main CLI application with command groups for:
- settings: View and change admin system settings
- sessions: Counselor sessions dashboard
"""

from typing import Annotated

import typer
from rich.panel import Panel

from mindbridge import __version__
from mindbridge.cli.commands import sessions as sessions_commands
from mindbridge.cli.commands import settings as settings_commands
from mindbridge.cli.utils import console
from mindbridge.logging_config import configure_logging

app = typer.Typer(
    name="mindbridge",
    help="Mindbridge staff tooling: system settings and counselor sessions",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure logging before any command runs."""
    configure_logging("DEBUG" if verbose else None)


# Settings sub-command group
settings_app = typer.Typer(
    name="settings",
    help="View and change system settings",
    no_args_is_help=True,
)
app.add_typer(settings_app, name="settings")
settings_app.command("show")(settings_commands.show)
settings_app.command("set")(settings_commands.set_setting)

# Sessions sub-command group
sessions_app = typer.Typer(
    name="sessions",
    help="Counselor sessions dashboard",
    no_args_is_help=True,
)
app.add_typer(sessions_app, name="sessions")
sessions_app.command("list")(sessions_commands.list_sessions)


@app.command()
def version() -> None:
    """Show Mindbridge version information."""
    console.print(
        Panel(
            f"[bold]Mindbridge[/bold] v{__version__}\n"
            "System settings and counselor sessions tooling",
            title="Version",
            border_style="blue",
        )
    )


# Entry point for: python -m mindbridge.cli.main
if __name__ == "__main__":
    app()
