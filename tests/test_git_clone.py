from __future__ import annotations

from pathlib import Path

import pytest

from core.domain.models import CloneRequest, ExecutionRequest, ExecutionResult
from core.errors import ExecutionFailure, ValidationFailure
from core.services import git_clone as git_clone_module
from core.services.git_clone import build_clone_command, git_clone

URL = "https://github.com/user/repo.git"


@pytest.fixture
def recorded(monkeypatch: pytest.MonkeyPatch) -> list[ExecutionRequest]:
    calls: list[ExecutionRequest] = []

    async def fake_execute(request: ExecutionRequest) -> ExecutionResult:
        calls.append(request)
        return ExecutionResult()

    monkeypatch.setattr(git_clone_module, "execute", fake_execute)
    return calls


def test_default_depth_is_shallow():
    command = build_clone_command(CloneRequest(repo_url=URL, dest_path="out"))
    assert command == f"git clone --depth 1 '{URL}' 'out'"


def test_depth_zero_clones_full_history():
    command = build_clone_command(CloneRequest(repo_url=URL, dest_path="out", depth=0))
    assert "--depth" not in command
    assert command == f"git clone '{URL}' 'out'"


def test_negative_depth_clones_full_history():
    command = build_clone_command(CloneRequest(repo_url=URL, dest_path="out", depth=-5))
    assert "--depth" not in command


def test_custom_depth():
    command = build_clone_command(CloneRequest(repo_url=URL, dest_path="out", depth=3))
    assert "--depth 3" in command


@pytest.mark.asyncio
async def test_invalid_url_never_spawns(recorded, tmp_path: Path):
    dest = tmp_path / "dest"
    with pytest.raises(ValidationFailure, match="^Invalid git URL: not-a-url$"):
        await git_clone("not-a-url", str(dest))
    assert recorded == []
    assert not dest.exists()


@pytest.mark.asyncio
async def test_url_is_checked_before_path(recorded):
    with pytest.raises(ValidationFailure, match="^Invalid git URL:"):
        await git_clone("ftp://example.com/repo", "bad; path")
    assert recorded == []


@pytest.mark.asyncio
async def test_unsafe_destination_never_spawns(recorded):
    with pytest.raises(ValidationFailure, match="^Invalid destination path: out; rm -rf /$"):
        await git_clone(URL, "out; rm -rf /")
    assert recorded == []


@pytest.mark.asyncio
async def test_valid_clone_delegates_with_cwd(recorded, tmp_path: Path):
    await git_clone(URL, "repo-copy", depth=2, cwd=tmp_path)
    assert len(recorded) == 1
    assert recorded[0].command == f"git clone --depth 2 '{URL}' 'repo-copy'"
    assert recorded[0].cwd == tmp_path


@pytest.mark.asyncio
async def test_execution_failure_propagates_unchanged(monkeypatch: pytest.MonkeyPatch):
    failure = ExecutionFailure("Command exited with status 128: git clone", code=128, stderr="fatal")

    async def failing_execute(request: ExecutionRequest) -> ExecutionResult:
        raise failure

    monkeypatch.setattr(git_clone_module, "execute", failing_execute)
    with pytest.raises(ExecutionFailure) as info:
        await git_clone(URL, "out")
    assert info.value is failure
    assert info.value.code == 128
