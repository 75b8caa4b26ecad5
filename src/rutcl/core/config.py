"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los límites de rango del validador son configurables, con los valores
  prácticos por defecto (1.000.000 a 99.999.999).
"""

from __future__ import annotations

import os
import sys
from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rutcl.core.domain.format_style import FormatStyle

# Aunque legalmente podrían existir RUT/RUN fuera de este rango, en la
# práctica no hay identificadores activos por debajo ni por encima.
DEFAULT_RUT_MIN = 1_000_000
DEFAULT_RUT_MAX = 99_999_999


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "rutcl"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "rutcl"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "rutcl"
    return Path.home() / ".config" / "rutcl"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class RutSettings(BaseSettings):
    """Configuración central del paquete.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para servicios y CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="RUTCL_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    rut_min: int = Field(
        default=DEFAULT_RUT_MIN,
        ge=0,
        description="Parte numérica mínima aceptada por validate().",
    )
    rut_max: int = Field(
        default=DEFAULT_RUT_MAX,
        ge=0,
        description="Parte numérica máxima aceptada por validate().",
    )
    default_style: FormatStyle = Field(
        default=FormatStyle.default(),
        description="Estilo de salida de la CLI cuando no se pasa --grouped.",
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "RutSettings":
        if self.rut_min > self.rut_max:
            raise ValueError(f"rut_min ({self.rut_min}) must not exceed rut_max ({self.rut_max})")
        return self


@lru_cache(maxsize=1)
def get_settings() -> RutSettings:
    """Instancia compartida (se lee el entorno una sola vez)."""

    return RutSettings()
