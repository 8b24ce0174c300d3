"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los defaults de ejecución (timeout, buffer, profundidad de clon) se leen
  de un único sitio.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import DEFAULT_CLONE_DEPTH, DEFAULT_MAX_BUFFER_BYTES, DEFAULT_TIMEOUT_MS

DEFAULT_GRADIENT_COLORS: tuple[str, ...] = ("#00d4ff", "#7c3aed", "#f472b6")


def get_user_config_dir() -> Path:
    """`$XDG_CONFIG_HOME/termkit`, o `~/.config/termkit` si no está definida."""

    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "termkit"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="TERMKIT_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero, luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    exec_timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        gt=0,
        description="Timeout por comando (milisegundos).",
    )
    exec_max_buffer_bytes: int = Field(
        default=DEFAULT_MAX_BUFFER_BYTES,
        gt=0,
        description="Máximo combinado de stdout + stderr capturado (bytes).",
    )
    clone_depth: int = Field(
        default=DEFAULT_CLONE_DEPTH,
        description="Profundidad por defecto de `git clone` (0 = historial completo).",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging de la CLI (DEBUG, INFO, WARNING...).",
    )
    clear_screen: bool = Field(
        default=True,
        description="Limpiar la pantalla antes de mostrar el banner.",
    )
    gradient_colors: tuple[str, ...] = Field(
        default=DEFAULT_GRADIENT_COLORS,
        min_length=1,
        description="Colores hex del degradado del banner (JSON en env).",
    )
