"""Validación y escape de argumentos para la shell POSIX.

Dos mecanismos independientes que se usan juntos:
- Rechazo (`is_shell_safe`, `is_valid_git_url`): listas de patrones.
- Escape (`escape_shell_arg`): comillas simples, un único token siempre.

Limitación conocida: `is_shell_safe` es una lista de patrones prohibidos, no
una gramática de shell. Puede rechazar rutas legítimas (dobles barras
invertidas) y dejar pasar metacaracteres no enumerados. La mitigación real es
el escape más la validación de los parámetros de mayor riesgo (rutas destino).
"""

from __future__ import annotations

import re
from typing import NamedTuple

from core.errors import ValidationFailure


class DangerPattern(NamedTuple):
    name: str
    pattern: re.Pattern[str]


# Basta con que coincida uno. Para añadir una clase nueva, añadir una entrada.
DANGEROUS_PATTERNS: tuple[DangerPattern, ...] = (
    DangerPattern("chaining", re.compile(r"[;&|`$]")),
    DangerPattern("command_substitution", re.compile(r"\$\(")),
    DangerPattern("variable_expansion", re.compile(r"\$\{")),
    DangerPattern("redirection", re.compile(r"[<>]")),
    DangerPattern("grouping", re.compile(r"[(){}]")),
    DangerPattern("escape_run", re.compile(r"\\{2,}")),
    DangerPattern("line_break", re.compile(r"[\r\n]")),
)

GIT_URL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"https?://\S+\.git"),
    re.compile(r"https?://github\.com/\S+"),
    re.compile(r"https?://gitlab\.com/\S+"),
    re.compile(r"https?://bitbucket\.org/\S+"),
    re.compile(r"git@\S+:\S+\.git"),
)


def find_danger(value: str) -> str | None:
    """Devuelve el nombre del primer patrón peligroso encontrado, o None."""

    for danger in DANGEROUS_PATTERNS:
        if danger.pattern.search(value):
            return danger.name
    return None


def is_shell_safe(value: str) -> bool:
    return find_danger(value) is None


def escape_shell_arg(value: str) -> str:
    """Envuelve `value` en comillas simples.

    Cada `'` interna se sustituye por `'\\''` (cerrar, comilla escapada,
    reabrir), así que el resultado es un único token para la shell.
    """

    return "'" + value.replace("'", "'\\''") + "'"


def is_valid_git_url(url: str) -> bool:
    """True si `url` coincide entera con alguna de las formas aceptadas.

    No sustituye a `is_shell_safe`: `\\S` admite `;` y similares.
    """

    return any(pattern.fullmatch(url) for pattern in GIT_URL_PATTERNS)


def ensure_valid_git_url(url: str) -> str:
    if not is_valid_git_url(url):
        raise ValidationFailure(f"Invalid git URL: {url}")
    return url


def ensure_shell_safe(value: str, *, label: str = "argument") -> str:
    if not is_shell_safe(value):
        raise ValidationFailure(f"Invalid {label}: {value}")
    return value
