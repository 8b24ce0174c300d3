"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import shutil

import typer
from rich.console import Console
from rich.table import Table

from adapters.process_runner import exec_safe
from core.config import AppSettings, get_user_env_file
from core.domain.models import Result
from core.errors import TermkitError, wrap_error

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_command(command: str, timeout_ms: int) -> Result[str]:
    try:
        result = await exec_safe(command, timeout_ms=timeout_ms)
    except TermkitError as exc:
        return Result.fail(wrap_error(exc, command))
    return Result.ok(result.stdout.strip() or result.stderr.strip())


def _check_shell() -> Result[str]:
    path = shutil.which("sh")
    if path is None:
        return Result.fail("/bin/sh not found on PATH")
    return Result.ok(path)


@app.command()
def run() -> None:
    """Run baseline diagnostics."""

    settings = AppSettings()

    table = Table(title="termkit doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    shell = _check_shell()
    table.add_row("POSIX shell", "OK" if shell.success else "FAIL", shell.data or shell.error or "")

    if shell.success:
        git = asyncio.run(_check_command("git --version", timeout_ms=10_000))
        table.add_row("git", "OK" if git.success else "FAIL", git.data or git.error or "")
    else:
        git = Result[str].fail("skipped (no shell)")
        table.add_row("git", "SKIP", git.error or "")

    # Config
    table.add_row("Timeout", "OK", f"{settings.exec_timeout_ms} ms")
    table.add_row("Max buffer", "OK", f"{settings.exec_max_buffer_bytes} bytes")
    table.add_row("Clone depth", "OK", str(settings.clone_depth) if settings.clone_depth > 0 else "full history")
    table.add_row("User config", "OK", str(get_user_env_file()))

    _console.print(table)

    if not git.success:
        _console.print("\n[yellow]Note:[/yellow] `termkit clone` needs the `git` binary on PATH.")
        raise typer.Exit(code=1)
