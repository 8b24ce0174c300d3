"""Spinner de progreso sobre `Console.status`."""

from __future__ import annotations

from rich.console import Console
from rich.status import Status
from rich.text import Text

from core.interfaces.terminal import ProgressReporter


class RichProgressReporter(ProgressReporter):
    """Muestra un spinner entre `start` y `stop`.

    `stop` sin `start` previo solo imprime el mensaje final.
    """

    def __init__(self, console: Console, spinner: str = "dots") -> None:
        self._console = console
        self._spinner = spinner
        self._status: Status | None = None

    def start(self, message: str) -> None:
        if self._status is not None:
            self._status.update(message)
            return
        self._status = self._console.status(message, spinner=self._spinner)
        self._status.start()

    def stop(self, message: str) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None
        self._console.print(Text(f"◇ {message}", style="green"))


def create_progress_reporter(console: Console | None = None) -> ProgressReporter:
    return RichProgressReporter(console or Console())
