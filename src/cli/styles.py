"""Degradados de color sobre Rich.

`create_gradient` devuelve una función `str -> Text` que colorea cada columna
interpolando entre los colores dados, de izquierda a derecha. En textos de
varias líneas todas las líneas comparten la misma escala de columnas, así un
banner se ve como un bloque.
"""

from __future__ import annotations

from typing import Callable, Sequence

from rich.color import Color, blend_rgb
from rich.color_triplet import ColorTriplet
from rich.style import Style
from rich.text import Text

from core.config import DEFAULT_GRADIENT_COLORS

GradientFunction = Callable[[str], Text]


def _color_at(stops: Sequence[ColorTriplet], position: float) -> ColorTriplet:
    if len(stops) == 1:
        return stops[0]
    scaled = position * (len(stops) - 1)
    index = min(int(scaled), len(stops) - 2)
    return blend_rgb(stops[index], stops[index + 1], scaled - index)


def create_gradient(colors: Sequence[str] = DEFAULT_GRADIENT_COLORS) -> GradientFunction:
    """Crea una función de degradado.

    Raises:
        ValueError: si no hay colores.
        rich.color.ColorParseError: si algún color no es válido.
    """

    if not colors:
        raise ValueError("A gradient needs at least one color")
    stops = [Color.parse(color).get_truecolor() for color in colors]

    def apply(value: str) -> Text:
        lines = value.split("\n")
        width = max((len(line) for line in lines), default=0)
        text = Text()
        for line_no, line in enumerate(lines):
            if line_no:
                text.append("\n")
            for column, char in enumerate(line):
                position = column / (width - 1) if width > 1 else 0.0
                style = Style(color=Color.from_triplet(_color_at(stops, position)))
                text.append(char, style=style)
        return text

    return apply


default_gradient: GradientFunction = create_gradient()
