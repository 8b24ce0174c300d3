"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Todas las funciones reciben la `Console`: en tests se pasa una consola
  que graba (`record=True`) en vez de escribir en la terminal real.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm
from rich.text import Text

from cli.styles import create_gradient
from core.config import DEFAULT_GRADIENT_COLORS


@dataclass(frozen=True)
class BannerConfig:
    """Opciones del banner de bienvenida."""

    title: str
    subtitle: str | None = None
    clear_screen: bool = True
    gradient_colors: tuple[str, ...] = DEFAULT_GRADIENT_COLORS


@dataclass(frozen=True)
class GoodbyeConfig:
    message: str = "Thanks for using our CLI!"
    gradient_colors: tuple[str, ...] = DEFAULT_GRADIENT_COLORS


def print_banner(console: Console, config: BannerConfig) -> None:
    """Imprime el banner: título con degradado en un panel, subtítulo tenue.

    Con `clear_screen=False` no se toca el contenido previo de la terminal
    (modos no interactivos, pipelines).
    """

    if config.clear_screen:
        console.clear()

    gradient = create_gradient(config.gradient_colors)
    title = gradient(config.title)
    title.stylize("bold")
    console.print(Panel(Align.center(title, vertical="middle"), border_style="cyan", padding=(1, 4)))

    if config.subtitle:
        console.print(Text(f"  {config.subtitle}\n", style="dim"))


def show_success(console: Console, message: str) -> None:
    console.print(Text(f"✔ {message}", style="green"))


def show_error(console: Console, message: str) -> None:
    console.print(Text(f"✖ {message}", style="bold red"))


def show_info(console: Console, message: str) -> None:
    console.print(Text(f"● {message}", style="blue"))


def show_warning(console: Console, message: str) -> None:
    console.print(Text(f"▲ {message}", style="yellow"))


def show_separator(console: Console, width: int = 50) -> None:
    console.print()
    console.print(Text("─" * width, style="dim"))
    console.print()


def show_goodbye(console: Console, config: GoodbyeConfig | None = None) -> None:
    config = config or GoodbyeConfig()
    gradient = create_gradient(config.gradient_colors)
    console.print()
    console.print(gradient(f"✨ {config.message}"))


def show_note(console: Console, message: str, title: str | None = None) -> None:
    """Caja con contenido libre, p.ej. "Next steps"."""

    console.print(Panel(Text(message), title=title, border_style="dim", expand=False))


def confirm_action(console: Console, message: str) -> bool:
    """Pregunta sí/no. Cancelar (Ctrl+C) o fin de entrada cuenta como "no"."""

    try:
        return Confirm.ask(message, console=console, default=False)
    except (KeyboardInterrupt, EOFError):
        console.print()
        return False
