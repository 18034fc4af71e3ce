"""CLI entrypoints for the git simulator."""

from __future__ import annotations

from pathlib import Path

import typer

from gitsim.app import AppConfigError, create_session, initialize_config, read_script
from gitsim.commands.builtins import build_default_command_registry
from gitsim.session import SimulatorSession
from gitsim.util.logging import configure_logging

app = typer.Typer(help="Interactive git command simulator.")

_EXIT_WORDS = {"exit", "quit"}


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Logging level (e.g., DEBUG, INFO, WARNING).",
    ),
) -> None:
    """Configure CLI-level options."""

    configure_logging(log_level)


@app.command()
def init(workspace: Path = typer.Argument(Path("."))) -> None:
    """Write a default simulator configuration into a directory."""

    try:
        config_path = initialize_config(workspace)
    except AppConfigError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1) from exc
    typer.echo(f"Created configuration at {config_path}")


@app.command("run")
def run_command(
    commands: list[str] = typer.Argument(None, help="Command lines to execute in order."),
    workspace: Path = typer.Option(
        Path("."),
        "--workspace",
        "-w",
        help="Directory holding the simulator configuration.",
    ),
    script: Path | None = typer.Option(
        None,
        "--script",
        help="File with one command line per line, run after the arguments.",
    ),
    show_view: bool = typer.Option(
        False,
        "--view",
        help="Print the workspace summary after running.",
    ),
) -> None:
    """Run command lines in a fresh session and print the terminal output."""

    try:
        session = create_session(workspace)
        lines = list(commands or [])
        if script is not None:
            lines.extend(read_script(script))
    except AppConfigError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1) from exc

    for line in lines:
        session.submit(line)
    for output in session.scrollback():
        typer.echo(output)
    if show_view:
        typer.echo("")
        typer.echo(session.view().summary_text())


@app.command("shell")
def shell_command(
    workspace: Path = typer.Option(
        Path("."),
        "--workspace",
        "-w",
        help="Directory holding the simulator configuration.",
    ),
) -> None:
    """Read command lines interactively until exit, quit or end of input."""

    session = _session_or_exit(workspace)
    typer.echo("Git simulator. Type 'exit' to leave.")
    while True:
        try:
            line = typer.prompt("$", default="", show_default=False)
        except typer.Abort:
            break
        if line.strip() in _EXIT_WORDS:
            break
        result = session.submit(line)
        if result is None:
            continue
        for output in result.lines:
            typer.echo(output)


@app.command("view")
def view_command(
    workspace: Path = typer.Option(
        Path("."),
        "--workspace",
        "-w",
        help="Directory holding the simulator configuration.",
    ),
) -> None:
    """Print the workspace summary of a freshly seeded repository."""

    session = _session_or_exit(workspace)
    view = session.view()
    typer.echo(view.summary_text())
    typer.echo("")
    for entry in view.files:
        typer.echo(f"{entry.status.value:<8} {entry.path}")


@app.command("commands")
def commands_command() -> None:
    """List the git subcommands the simulator understands."""

    for handler in build_default_command_registry().list_handlers():
        typer.echo(f"git {handler.name:<12} {handler.description}")


def _session_or_exit(workspace: Path) -> SimulatorSession:
    try:
        return create_session(workspace)
    except AppConfigError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1) from exc
