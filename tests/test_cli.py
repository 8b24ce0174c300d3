from __future__ import annotations

import pytest
from rich.prompt import Confirm
from typer.testing import CliRunner

from cli import doctor
from cli import main as cli_main
from core.domain.models import Result

runner = CliRunner()


def invoke(*args: str):
    return runner.invoke(cli_main.app, list(args))


def test_quote():
    result = invoke("quote", "it's")
    assert result.exit_code == 0
    assert result.output == "'it'\\''s'\n"


def test_check_safe_value():
    result = invoke("check", "my-project")
    assert result.exit_code == 0
    assert "Shell-safe" in result.output


def test_check_unsafe_value():
    result = invoke("check", "a;b")
    assert result.exit_code == 1
    assert "Unsafe (chaining)" in result.output


def test_check_url():
    assert invoke("check-url", "git@github.com:user/repo.git").exit_code == 0
    result = invoke("check-url", "ftp://example.com/repo")
    assert result.exit_code == 1
    assert "Invalid git URL" in result.output


def test_exec_prints_stdout():
    result = invoke("exec", "printf hello", "--yes")
    assert result.exit_code == 0
    assert "hello" in result.output


def test_exec_failure_is_reported():
    result = invoke("exec", "exit 3", "--yes")
    assert result.exit_code == 1
    assert "Command failed with code 3" in result.output


def test_exec_declined(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(Confirm, "ask", classmethod(lambda cls, *a, **k: False))
    result = invoke("exec", "printf hello")
    assert result.exit_code == 1
    assert "Cancelled." in result.output
    assert "hello" not in result.output


def test_clone_rejects_invalid_url():
    result = invoke("clone", "not-a-url", "dest")
    assert result.exit_code == 1
    assert "Invalid git URL: not-a-url" in result.output


def test_clone_passes_depth(monkeypatch: pytest.MonkeyPatch):
    calls = []

    async def fake_git_clone(url, dest, *, depth, cwd):
        calls.append((url, dest, depth, cwd))

    monkeypatch.setattr(cli_main, "git_clone", fake_git_clone)
    result = invoke("clone", "https://github.com/user/repo", "out", "--depth", "0")
    assert result.exit_code == 0, result.output
    assert calls == [("https://github.com/user/repo", "out", 0, None)]
    assert "Cloned into out" in result.output


def test_clone_uses_default_depth(monkeypatch: pytest.MonkeyPatch):
    calls = []

    async def fake_git_clone(url, dest, *, depth, cwd):
        calls.append(depth)

    monkeypatch.setattr(cli_main, "git_clone", fake_git_clone)
    assert invoke("clone", "https://github.com/user/repo", "out").exit_code == 0
    assert calls == [1]


def test_doctor(monkeypatch: pytest.MonkeyPatch):
    async def fake_check(command: str, timeout_ms: int) -> Result[str]:
        return Result.ok("git version 2.45.0")

    monkeypatch.setattr(doctor, "_check_command", fake_check)
    result = invoke("doctor", "run")
    assert result.exit_code == 0, result.output
    assert "git version 2.45.0" in result.output


def test_doctor_reports_missing_git(monkeypatch: pytest.MonkeyPatch):
    async def fake_check(command: str, timeout_ms: int) -> Result[str]:
        return Result.fail("git --version: Command failed with code 127")

    monkeypatch.setattr(doctor, "_check_command", fake_check)
    result = invoke("doctor", "run")
    assert result.exit_code == 1
    assert "needs the `git` binary" in result.output


def test_banner_without_clearing():
    result = invoke("banner", "Hello", "--subtitle", "tagline", "--no-clear")
    assert result.exit_code == 0
    assert "Hello" in result.output
    assert "tagline" in result.output


def test_exec_empty_command_succeeds():
    result = invoke("exec", "", "--yes")
    assert result.exit_code == 0, result.output
    assert result.exception is None
