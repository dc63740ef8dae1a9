"""
partitionwm.tiling.feedback - Etiquetas de feedback para el usuario.

Convierte una particion o un desplazamiento de ventana en un texto
corto que el overlay de alertas muestra en pantalla, y calcula donde
colocar ese overlay (el host solo lo dibuja en el origen recibido).
"""

from __future__ import annotations

import logging

from partitionwm.tiling.frame import Frame, Number, Point

log = logging.getLogger(__name__)


# ============================================================================
# Etiquetas de particion: fraccion, mini-rejilla y flecha
# ============================================================================
MAXIMIZED_LABEL = "↖↑↗\n←◼→\n↙↓↘"
SCREEN_MARKER = "\U0001f4fa"
POINTER_MARKER = "\U0001f42d"

_PARTITION_LABELS: dict[str, str] = {
    "up":           "½\n◼◼\n◻◻\n↑",
    "down":         "½\n◻◻\n◼◼\n↓",
    "left":         "½\n◼◻\n◼◻\n←",
    "right":        "½\n◻◼\n◻◼\n→",

    "topLeft":      "¼\n◼◻\n◻◻\n↖",
    "topRight":     "¼\n◻◼\n◻◻\n↗",
    "bottomLeft":   "¼\n◻◻\n◼◻\n↙",
    "bottomRight":  "¼\n◻◻\n◻◼\n↘",

    "centre":       "↘↓↙\n→⧈←\n↗↑↖",

    "leftThird":    "⅓\n◼◻◻\n◼◻◻\n←",
    "centreThird":  "⅓\n◻◼◻\n◻◼◻\n→←",
    "rightThird":   "⅓\n◻◻◼\n◻◻◼\n→",

    "left2Thirds":  "⅔\n◼◼◻\n◼◼◻\n←",
    "right2Thirds": "⅔\n◻◼◼\n◻◼◼\n→",

    "topLeftSix":   "⅙\n◼◻◻\n◻◻◻\n↖",
    "topCentreSix": "⅙\n◻◼◻\n◻◻◻\n↑",
    "topRightSix":  "⅙\n◻◻◼\n◻◻◻\n↗",
    "botLeftSix":   "⅙\n◻◻◻\n◼◻◻\n↙",
    "botCentreSix": "⅙\n◻◻◻\n◻◼◻\n↓",
    "botRightSix":  "⅙\n◻◻◻\n◻◻◼\n↘",
}


def partition_label(name: object) -> str:
    """
    Etiqueta de una particion (acepta Partition o su nombre).

    Si la particion no tiene etiqueta se devuelve el nombre tal cual;
    nunca lanza excepcion.
    """
    key = getattr(name, "value", name)
    label = _PARTITION_LABELS.get(key) if isinstance(key, str) else None
    if label is None:
        return str(key)
    return label


# ============================================================================
# Direccion de un desplazamiento (espacio global, Y hacia abajo)
# ============================================================================
# Indexado por [signo(dy) + 1][signo(dx) + 1]
_COMPASS: tuple[tuple[str, str, str], ...] = (
    ("up-left", "up", "up-right"),
    ("left", "no movement", "right"),
    ("down-left", "down", "down-right"),
)


def _sign(value: Number) -> int:
    return (value > 0) - (value < 0)


def direction_label(dx: Number, dy: Number) -> str:
    """
    Direccion de brujula de un desplazamiento (dx, dy).

    Ejemplos:
        direction_label(120, -40) -> "up-right"
        direction_label(0, 0)     -> "no movement"
    """
    return _COMPASS[_sign(dy) + 1][_sign(dx) + 1]


def change_direction(new: Frame, old: Frame) -> str:
    """Direccion del cambio de origen entre dos frames."""
    return direction_label(new.x - old.x, new.y - old.y)


def screen_move_message(direction: str) -> str:
    """Mensaje del overlay al mover una ventana de pantalla."""
    return f"{SCREEN_MARKER}\n{direction}"


# ============================================================================
# Posicion del overlay
# ============================================================================

def centered_origin(area: Frame, alert_size: tuple[Number, Number]) -> Point:
    """Origen que centra un overlay de tamano *alert_size* en *area*."""
    return pointer_origin(area.center, alert_size)


def pointer_origin(pointer: Point, alert_size: tuple[Number, Number]) -> Point:
    """Origen que centra un overlay sobre un punto (p.ej. el puntero)."""
    width, height = alert_size
    return Point(pointer.x - width / 2, pointer.y - height / 2)
