"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación en el borde: un timeout negativo o un buffer de 0 bytes se
  rechazan al construir la petición, no al lanzar el proceso.
- Los modelos son inmutables (`frozen`): cada petición vive solo durante una
  operación y nadie la modifica a mitad de camino.

Nota:
- Estos modelos describen *qué* se ejecuta, no *cómo* se ejecuta.
"""

from __future__ import annotations

from pathlib import Path
from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

DEFAULT_TIMEOUT_MS = 120_000
DEFAULT_MAX_BUFFER_BYTES = 10 * 1024 * 1024
DEFAULT_CLONE_DEPTH = 1

T = TypeVar("T")


class ExecutionRequest(BaseModel):
    """Una línea de comando lista para lanzar, con sus límites.

    El comando ya debe venir validado y escapado: el ejecutor no lo inspecciona.
    """

    model_config = ConfigDict(frozen=True)

    command: str = Field(
        ...,
        description="Línea de comando completa (se interpreta con /bin/sh).",
    )
    cwd: Path | None = Field(
        default=None,
        description="Directorio de trabajo; None hereda el del proceso actual.",
    )
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        gt=0,
        description="Tiempo máximo de ejecución en milisegundos.",
    )
    max_buffer_bytes: int = Field(
        default=DEFAULT_MAX_BUFFER_BYTES,
        gt=0,
        description="Máximo combinado de bytes capturados en stdout + stderr.",
    )

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


class ExecutionResult(BaseModel):
    """Salida capturada de un proceso que terminó con código 0."""

    model_config = ConfigDict(frozen=True)

    stdout: str = Field(default="", description="Salida estándar decodificada.")
    stderr: str = Field(default="", description="Salida de error decodificada.")


class CloneRequest(BaseModel):
    """Parámetros de `git clone`.

    `depth <= 0` significa historial completo (sin `--depth`).
    """

    model_config = ConfigDict(frozen=True)

    repo_url: str = Field(..., description="URL remota del repositorio.")
    dest_path: str = Field(..., description="Ruta destino del clon.")
    depth: int = Field(
        default=DEFAULT_CLONE_DEPTH,
        description="Profundidad del clon superficial; 0 o negativo = completo.",
    )
    cwd: Path | None = Field(
        default=None,
        description="Directorio desde el que se lanza git.",
    )

    @property
    def shallow(self) -> bool:
        return self.depth > 0


class Result(BaseModel, Generic[T]):
    """Resultado explícito de una operación que puede fallar.

    Útil en capas de presentación que prefieren inspeccionar un valor en vez
    de capturar excepciones (p.ej. las comprobaciones de `doctor`).
    """

    success: bool = Field(..., description="True si la operación terminó bien.")
    data: T | None = Field(default=None, description="Datos (solo si success).")
    error: str | None = Field(default=None, description="Mensaje (solo si falla).")

    @classmethod
    def ok(cls, data: T) -> "Result[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "Result[T]":
        return cls(success=False, error=error)
