"""Contratos de interacción con la terminal.

Por qué Protocol:
- Los comandos reciben la UI como dependencia en vez de escribir en una
  consola global, así se pueden probar sin efectos en la terminal.
- La implementación concreta (Rich) vive en `cli.terminal`.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class MessageLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


@runtime_checkable
class ProgressReporter(Protocol):
    """Indicador de progreso para operaciones largas (típicamente un spinner)."""

    def start(self, message: str) -> None:
        ...

    def stop(self, message: str) -> None:
        ...


@runtime_checkable
class TerminalUI(Protocol):
    """Capacidades mínimas que la CLI necesita de la terminal."""

    def show_banner(self, title: str, subtitle: str | None = None, *, clear_screen: bool | None = None) -> None:
        ...

    def show_message(self, level: MessageLevel, text: str) -> None:
        ...

    def confirm(self, question: str) -> bool:
        ...

    def progress(self) -> ProgressReporter:
        ...
