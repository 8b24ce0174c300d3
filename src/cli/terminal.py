"""Implementación Rich de `TerminalUI`."""

from __future__ import annotations

from rich.console import Console

from cli import ui_components
from cli.progress import RichProgressReporter
from core.config import AppSettings
from core.interfaces.terminal import MessageLevel, ProgressReporter, TerminalUI

_MESSAGE_RENDERERS = {
    MessageLevel.SUCCESS: ui_components.show_success,
    MessageLevel.ERROR: ui_components.show_error,
    MessageLevel.INFO: ui_components.show_info,
    MessageLevel.WARNING: ui_components.show_warning,
}


class RichTerminal(TerminalUI):
    def __init__(self, console: Console | None = None, settings: AppSettings | None = None) -> None:
        self.console = console or Console()
        self._settings = settings or AppSettings()

    def show_banner(self, title: str, subtitle: str | None = None, *, clear_screen: bool | None = None) -> None:
        ui_components.print_banner(
            self.console,
            ui_components.BannerConfig(
                title=title,
                subtitle=subtitle,
                clear_screen=self._settings.clear_screen if clear_screen is None else clear_screen,
                gradient_colors=self._settings.gradient_colors,
            ),
        )

    def show_message(self, level: MessageLevel, text: str) -> None:
        _MESSAGE_RENDERERS[MessageLevel(level)](self.console, text)

    def confirm(self, question: str) -> bool:
        return ui_components.confirm_action(self.console, question)

    def progress(self) -> ProgressReporter:
        return RichProgressReporter(self.console)
