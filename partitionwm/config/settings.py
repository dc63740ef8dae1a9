"""
partitionwm.config.settings - Settings leidos de partitionwm.yaml.

Se leen una sola vez al arrancar (no hay recarga en caliente). Si el
fichero no existe se usan los valores por defecto.

Ejemplo:

    keymap_variant: diagonal        # classic | diagonal
    alert_duration_seconds: 0.5
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from partitionwm.core.errors import ConfigError

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("partitionwm.yaml")


class KeymapVariant(enum.Enum):
    """Keymap completo a partir del que se construye la tabla de bindings."""

    # Cuartos en ctrl+alt+shift + flechas (solo cambian los modificadores)
    CLASSIC = "classic"
    # Cuartos en ctrl+alt+cmd + r/t/f/g (teclas en diagonal)
    DIAGONAL = "diagonal"


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Opciones estaticas.

    Atributos:
        keymap_variant:         Variante de keymap (ver KeymapVariant).
        alert_duration_seconds: Segundos que el overlay muestra el feedback.
    """

    keymap_variant: KeymapVariant = KeymapVariant.DIAGONAL
    alert_duration_seconds: float = 0.5


def _parse_variant(raw: Any) -> KeymapVariant:
    if isinstance(raw, KeymapVariant):
        return raw
    try:
        return KeymapVariant(str(raw).strip().lower())
    except ValueError:
        choices = ", ".join(v.value for v in KeymapVariant)
        raise ConfigError(f"keymap_variant debe ser uno de: {choices} (leido {raw!r})") from None


def _parse_duration(raw: Any) -> float:
    if isinstance(raw, bool):
        raise ConfigError(f"alert_duration_seconds debe ser un numero (leido {raw!r})")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"alert_duration_seconds debe ser un numero (leido {raw!r})") from None
    if not math.isfinite(value):
        raise ConfigError(f"alert_duration_seconds debe ser finito (leido {value})")
    if value < 0:
        raise ConfigError(f"alert_duration_seconds no puede ser negativo (leido {value})")
    return value


def settings_from_mapping(data: Mapping[str, Any]) -> Settings:
    """Construye Settings desde un mapping; las claves ausentes toman el valor por defecto."""
    defaults = Settings()
    unknown = set(data) - {"keymap_variant", "alert_duration_seconds"}
    if unknown:
        log.warning("Settings desconocidos ignorados: %s", ", ".join(sorted(unknown)))

    return Settings(
        keymap_variant=_parse_variant(data.get("keymap_variant", defaults.keymap_variant)),
        alert_duration_seconds=_parse_duration(
            data.get("alert_duration_seconds", defaults.alert_duration_seconds)
        ),
    )


def load_settings(path: Path | None = None) -> Settings:
    """
    Carga los settings de un fichero YAML.

    Args:
        path: Fichero de settings; por defecto partitionwm.yaml en el
              directorio de trabajo.

    Raises:
        ConfigError: Si el fichero no se puede leer, no es YAML valido o
                     contiene valores invalidos.
    """
    path = path or DEFAULT_CONFIG_PATH
    if not path.exists():
        log.info("No existe %s, se usan los valores por defecto", path)
        return Settings()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"No se puede leer {path}: {exc}") from exc

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"No se puede parsear {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{path} debe contener un mapping en el nivel superior")

    settings = settings_from_mapping(data)
    log.info(
        "Settings cargados de %s: keymap=%s alerta=%.2fs",
        path,
        settings.keymap_variant.value,
        settings.alert_duration_seconds,
    )
    return settings
