"""Entry point de la CLI (Typer).

Los comandos solo traducen argumentos y muestran resultados: la validación y
la ejecución viven en `core` y `adapters`. La terminal se obtiene de
`get_terminal()`, que los tests pueden sustituir.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.process_runner import exec_safe
from cli import doctor
from cli.terminal import RichTerminal
from core.config import AppSettings
from core.errors import TermkitError, format_error, wrap_error
from core.interfaces.terminal import MessageLevel, TerminalUI
from core.logging_setup import configure_logging
from core.services.git_clone import git_clone
from core.shell_safety import escape_shell_arg, find_danger, is_valid_git_url

app = typer.Typer(no_args_is_help=True, help="Terminal helpers: banners, safe shell execution and git clones.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def get_terminal() -> TerminalUI:
    return RichTerminal(_console)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def banner(
    title: str = typer.Argument(..., help="Banner title."),
    subtitle: Optional[str] = typer.Option(None, "--subtitle", "-s", help="Dim line below the banner."),
    clear: Optional[bool] = typer.Option(None, "--clear/--no-clear", help="Clear the screen first (default from settings)."),
) -> None:
    """Render a gradient banner."""

    get_terminal().show_banner(title, subtitle, clear_screen=clear)


@app.command()
def check(value: str = typer.Argument(..., help="Text to check (e.g. a path).")) -> None:
    """Check whether VALUE is free of shell metacharacters."""

    terminal = get_terminal()
    danger = find_danger(value)
    if danger is None:
        terminal.show_message(MessageLevel.SUCCESS, f"Shell-safe: {value}")
        return
    terminal.show_message(MessageLevel.ERROR, f"Unsafe ({danger}): {value!r}")
    raise typer.Exit(code=1)


@app.command(name="check-url")
def check_url(url: str = typer.Argument(..., help="Git remote URL.")) -> None:
    """Check whether URL is an accepted git remote."""

    terminal = get_terminal()
    if is_valid_git_url(url):
        terminal.show_message(MessageLevel.SUCCESS, f"Valid git URL: {url}")
        return
    terminal.show_message(MessageLevel.ERROR, f"Invalid git URL: {url}")
    raise typer.Exit(code=1)


@app.command()
def quote(value: str = typer.Argument(..., help="Text to quote.")) -> None:
    """Print VALUE quoted as a single POSIX shell token."""

    typer.echo(escape_shell_arg(value))


@app.command(name="exec")
def exec_command(
    command: str = typer.Argument(..., help="Command line to run with /bin/sh."),
    cwd: Optional[Path] = typer.Option(None, "--cwd", help="Working directory."),
    timeout_ms: Optional[int] = typer.Option(None, "--timeout-ms", min=1, help="Timeout in milliseconds."),
    max_buffer: Optional[int] = typer.Option(None, "--max-buffer", min=1, help="Max captured output (bytes)."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
) -> None:
    """Run COMMAND once, bounded by timeout and output size."""

    settings = AppSettings()
    terminal = get_terminal()

    if not yes and not terminal.confirm(f"Run `{command}`?"):
        terminal.show_message(MessageLevel.WARNING, "Cancelled.")
        raise typer.Exit(code=1)

    try:
        result = asyncio.run(
            exec_safe(
                command,
                cwd=cwd,
                timeout_ms=timeout_ms or settings.exec_timeout_ms,
                max_buffer_bytes=max_buffer or settings.exec_max_buffer_bytes,
            )
        )
    except (TermkitError, OSError) as exc:
        terminal.show_message(MessageLevel.ERROR, format_error(exc))
        raise typer.Exit(code=1)

    if result.stdout:
        typer.echo(result.stdout, nl=False)
    if result.stderr:
        typer.echo(result.stderr, err=True, nl=False)


@app.command()
def clone(
    url: str = typer.Argument(..., help="Repository URL (https or git@host:path.git)."),
    dest: str = typer.Argument(..., help="Destination path."),
    depth: Optional[int] = typer.Option(None, "--depth", help="Shallow clone depth; 0 clones full history."),
    cwd: Optional[Path] = typer.Option(None, "--cwd", help="Directory to run git from."),
) -> None:
    """Clone URL into DEST after validating both."""

    settings = AppSettings()
    terminal = get_terminal()
    progress = terminal.progress()

    progress.start(f"Cloning {url}...")
    try:
        asyncio.run(
            git_clone(
                url,
                dest,
                depth=settings.clone_depth if depth is None else depth,
                cwd=cwd,
            )
        )
    except (TermkitError, OSError) as exc:
        progress.stop("Clone aborted")
        terminal.show_message(MessageLevel.ERROR, wrap_error(exc, "Failed to clone"))
        raise typer.Exit(code=1)

    progress.stop(f"Cloned into {dest}")


def run() -> None:
    app()
