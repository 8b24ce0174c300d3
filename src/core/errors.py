"""Errores del Core y utilidades de formateo.

Taxonomía:
- `ValidationFailure`: la entrada no pasó `is_shell_safe`/`is_valid_git_url`.
  Se lanza antes de crear ningún proceso.
- `ExecutionFailure`: el proceso terminó con código distinto de 0, agotó el
  timeout o superó el buffer de salida.
- Cualquier otra excepción (p.ej. `FileNotFoundError` al lanzar) se propaga
  tal cual; no se envuelve.
"""

from __future__ import annotations


class TermkitError(Exception):
    """Base de los errores propios de termkit."""


class ValidationFailure(TermkitError, ValueError):
    """Entrada rechazada por los validadores de shell."""


class ExecutionFailure(TermkitError, RuntimeError):
    """Un comando terminó mal.

    El mensaje sigue el formato `Command failed with code {code}: {reason}`,
    seguido de una línea nueva y el stderr capturado si no está vacío.
    """

    def __init__(self, reason: str, *, code: int | None = None, stderr: str = "") -> None:
        self.code = code if code else 1
        self.stderr = stderr or ""
        self.reason = reason
        message = f"Command failed with code {self.code}: {reason}"
        if self.stderr:
            message = f"{message}\n{self.stderr}"
        super().__init__(message)


def format_error(error: object, default_message: str = "Unknown error") -> str:
    """Convierte cualquier error en un mensaje legible."""

    if isinstance(error, BaseException):
        return str(error)
    if isinstance(error, str):
        return error
    return default_message


def wrap_error(error: object, context: str) -> str:
    """Antepone contexto al mensaje: `"{context}: {mensaje}"`."""

    return f"{context}: {format_error(error)}"
