"""Clonado de repositorios git.

Operación compuesta: validar -> escapar -> ejecutar. La validación es una
precondición estricta: si la URL o la ruta destino no pasan, no se lanza
ningún proceso.
"""

from __future__ import annotations

import logging
from pathlib import Path

from adapters.process_runner import execute
from core.domain.models import DEFAULT_CLONE_DEPTH, CloneRequest, ExecutionRequest
from core.shell_safety import ensure_shell_safe, ensure_valid_git_url, escape_shell_arg

logger = logging.getLogger(__name__)


def build_clone_command(request: CloneRequest) -> str:
    """Construye `git clone [--depth N] '<url>' '<dest>'`.

    No valida: ver `git_clone`.
    """

    parts = ["git", "clone"]
    if request.shallow:
        parts.append(f"--depth {request.depth}")
    parts.append(escape_shell_arg(request.repo_url))
    parts.append(escape_shell_arg(request.dest_path))
    return " ".join(parts)


async def clone(request: CloneRequest) -> None:
    ensure_valid_git_url(request.repo_url)
    ensure_shell_safe(request.dest_path, label="destination path")

    command = build_clone_command(request)
    logger.info("Cloning %s into %s", request.repo_url, request.dest_path)
    await execute(ExecutionRequest(command=command, cwd=request.cwd))


async def git_clone(
    repo_url: str,
    dest_path: str,
    *,
    depth: int = DEFAULT_CLONE_DEPTH,
    cwd: str | Path | None = None,
) -> None:
    """Clona `repo_url` en `dest_path`.

    Raises:
        ValidationFailure: URL no reconocida o ruta destino insegura.
        ExecutionFailure: git terminó con error (se propaga sin cambios).
    """

    await clone(
        CloneRequest(
            repo_url=repo_url,
            dest_path=dest_path,
            depth=depth,
            cwd=Path(cwd) if cwd is not None else None,
        )
    )
