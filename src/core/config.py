"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El motor no lee configuración: recibe base/`char_signed` como argumentos.
  Solo la CLI instancia `AppSettings`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.integer_types import resolve_type

APP_DIR_NAME = "strtoi-generic"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Un único contrato de configuración para la CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="STRTOI_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_base: int = Field(
        default=0,
        description="Base por defecto: 0 (autodetección) o 2..36.",
    )
    default_type: str = Field(
        default="int",
        min_length=1,
        description="Tipo destino por defecto (p.ej. 'int8', 'unsigned long').",
    )
    char_signed: bool = Field(
        default=True,
        description="Signo del `char` plano (depende de la plataforma en C).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging de la CLI.",
    )

    @field_validator("default_base")
    @classmethod
    def _check_base(cls, value: int) -> int:
        if value != 0 and not 2 <= value <= 36:
            raise ValueError("default_base must be 0 or between 2 and 36")
        return value

    @field_validator("default_type")
    @classmethod
    def _check_type(cls, value: str) -> str:
        if not resolve_type(value).supported:
            raise ValueError(f"unsupported default_type: {value!r}")
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"invalid log_level: {value!r}")
        return level
