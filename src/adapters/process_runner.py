"""Ejecución acotada de comandos de shell (asyncio).

Responsabilidad:
- Lanzar exactamente un proceso por llamada con `/bin/sh -c`.
- Limitar duración (`timeout_ms`) y salida combinada (`max_buffer_bytes`).
- Normalizar fallos como `ExecutionFailure`.

No valida ni escapa nada: eso es trabajo de `core.shell_safety`.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import signal
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from core.domain.models import (
    DEFAULT_MAX_BUFFER_BYTES,
    DEFAULT_TIMEOUT_MS,
    ExecutionRequest,
    ExecutionResult,
)
from core.errors import ExecutionFailure, ValidationFailure

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


class OutputLimitExceeded(Exception):
    """La salida combinada superó `max_buffer_bytes`."""


class _OutputBudget:
    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.used = 0

    def consume(self, size: int) -> None:
        self.used += size
        if self.used > self.limit:
            raise OutputLimitExceeded(f"maxBuffer of {self.limit} bytes exceeded")


async def _drain(stream: asyncio.StreamReader | None, sink: bytearray, budget: _OutputBudget) -> None:
    if stream is None:
        return
    while True:
        chunk = await stream.read(_CHUNK_SIZE)
        if not chunk:
            return
        budget.consume(len(chunk))
        sink.extend(chunk)


async def _collect(
    proc: asyncio.subprocess.Process,
    stdout: bytearray,
    stderr: bytearray,
    max_buffer_bytes: int,
) -> int:
    budget = _OutputBudget(max_buffer_bytes)
    readers = [
        asyncio.ensure_future(_drain(proc.stdout, stdout, budget)),
        asyncio.ensure_future(_drain(proc.stderr, stderr, budget)),
    ]
    try:
        await asyncio.gather(*readers)
    except BaseException:
        for reader in readers:
            reader.cancel()
        await asyncio.gather(*readers, return_exceptions=True)
        raise
    return await proc.wait()


async def _kill(proc: asyncio.subprocess.Process) -> None:
    # El hijo lidera su propio grupo: se matan también los nietos, que si no
    # mantendrían abiertas las tuberías. El grupo sobrevive a su líder, así
    # que se envía la señal aunque `sh` ya haya terminado.
    with contextlib.suppress(ProcessLookupError):
        os.killpg(proc.pid, signal.SIGKILL)
    await proc.wait()


def _decode(data: bytearray) -> str:
    return bytes(data).decode("utf-8", errors="replace")


async def execute(request: ExecutionRequest) -> ExecutionResult:
    """Ejecuta `request` y devuelve stdout/stderr si el código es 0.

    Lanza `ExecutionFailure` ante código distinto de 0, timeout o exceso de
    salida. Los errores al crear el proceso (p.ej. `cwd` inexistente) se
    propagan sin envolver.

    Si la tarea que espera se cancela, el proceso hijo se mata antes de
    propagar `CancelledError`.
    """

    logger.debug("Running command: %s (cwd=%s)", request.command, request.cwd or ".")
    proc = await asyncio.create_subprocess_shell(
        request.command,
        cwd=str(request.cwd) if request.cwd is not None else None,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        start_new_session=True,
    )

    stdout = bytearray()
    stderr = bytearray()
    try:
        returncode = await asyncio.wait_for(
            _collect(proc, stdout, stderr, request.max_buffer_bytes),
            timeout=request.timeout_seconds,
        )
    except asyncio.TimeoutError:
        await _kill(proc)
        logger.debug("Command timed out after %d ms: %s", request.timeout_ms, request.command)
        raise ExecutionFailure(
            f"Command timed out after {request.timeout_ms} ms: {request.command}",
            stderr=_decode(stderr),
        ) from None
    except OutputLimitExceeded as exc:
        await _kill(proc)
        logger.debug("Command exceeded output limit: %s", request.command)
        raise ExecutionFailure(f"{exc}: {request.command}", stderr=_decode(stderr)) from None
    except asyncio.CancelledError:
        await _kill(proc)
        raise

    if returncode != 0:
        # Un código negativo indica muerte por señal: no hay código de salida.
        code = returncode if returncode > 0 else None
        logger.debug("Command exited with status %s: %s", returncode, request.command)
        raise ExecutionFailure(
            f"Command exited with status {returncode}: {request.command}",
            code=code,
            stderr=_decode(stderr),
        )

    return ExecutionResult(stdout=_decode(stdout), stderr=_decode(stderr))


async def exec_safe(
    command: str,
    *,
    cwd: str | Path | None = None,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    max_buffer_bytes: int = DEFAULT_MAX_BUFFER_BYTES,
) -> ExecutionResult:
    """Atajo de `execute` a partir de argumentos sueltos.

    Example:
        result = await exec_safe("git status", cwd=project_path)
    """

    try:
        request = ExecutionRequest(
            command=command,
            cwd=Path(cwd) if cwd is not None else None,
            timeout_ms=timeout_ms,
            max_buffer_bytes=max_buffer_bytes,
        )
    except PydanticValidationError as exc:
        details = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors())
        raise ValidationFailure(f"Invalid execution options: {details}") from exc
    return await execute(request)
