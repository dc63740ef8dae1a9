"""
partitionwm.tiling.migration - Planificador de cambio de pantalla.

Calcula el frame de una ventana al moverla a otra pantalla:

    1. Destino: la primera pantalla (en orden de enumeracion del host)
       cuyo identificador no es el de la pantalla actual.
    2. Si la ventana esta "maximizada" (mismo ancho y alto que el area
       visible de su pantalla) y se pide mantenerlo, ocupa toda el area
       visible del destino.
    3. Si no, se coloca en el origen visible del destino encogiendose
       lo necesario para no salirse de el.

Todo el calculo se hace en el espacio global.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from partitionwm.core.errors import NoOtherScreensError
from partitionwm.tiling.feedback import change_direction
from partitionwm.tiling.frame import Frame
from partitionwm.tiling.screen import Screen

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MigrationPlan:
    """
    Resultado de planificar un cambio de pantalla.

    Atributos:
        source:      Pantalla de origen.
        destination: Pantalla destino elegida.
        frame:       Nuevo frame de la ventana (espacio global).
        direction:   Etiqueta de brujula del desplazamiento (solo feedback).
        maximized:   True si se conservo el estado maximizado.
    """

    source: Screen
    destination: Screen
    frame: Frame
    direction: str
    maximized: bool


def select_destination(current: Screen, candidates: Sequence[Screen]) -> Screen:
    """
    Elige la pantalla destino: la primera distinta de *current*.

    Raises:
        NoOtherScreensError: Si hay menos de dos pantallas o ninguna
                             tiene un identificador distinto.
    """
    if len(candidates) < 2:
        raise NoOtherScreensError(f"Solo hay {len(candidates)} pantalla(s)")

    for screen in candidates:
        if screen.identifier != current.identifier:
            return screen

    raise NoOtherScreensError(
        f"Ninguna pantalla distinta de {current.identifier!r}"
    )


def is_maximized(window_frame: Frame, screen: Screen) -> bool:
    """True si la ventana mide exactamente lo mismo que el area visible."""
    return window_frame.same_size(screen.visible_frame)


def plan(
    window_frame: Frame,
    current: Screen,
    candidates: Sequence[Screen],
    keep_maximized: bool = False,
) -> MigrationPlan:
    """
    Planifica el movimiento de una ventana a otra pantalla.

    Funcion pura: no toca ninguna ventana.

    Args:
        window_frame:   Frame actual de la ventana (espacio global).
        current:        Pantalla donde esta la ventana.
        candidates:     Todas las pantallas, en orden de enumeracion.
        keep_maximized: Conservar el estado maximizado en el destino.

    Returns:
        MigrationPlan con el frame nuevo y la etiqueta de direccion.

    Raises:
        NoOtherScreensError: Si no hay otra pantalla a la que ir.
    """
    destination = select_destination(current, candidates)
    target = destination.visible_frame

    maximized = keep_maximized and is_maximized(window_frame, current)
    if maximized:
        frame = target
    else:
        # Encoger para caber en el destino
        frame = Frame(
            target.x,
            target.y,
            min(window_frame.w, target.w),
            min(window_frame.h, target.h),
        )

    direction = change_direction(frame, window_frame)

    log.debug(
        "plan: %s -> %s | %s -> %s (%s%s)",
        current.identifier,
        destination.identifier,
        window_frame,
        frame,
        direction,
        ", maximizada" if maximized else "",
    )

    return MigrationPlan(
        source=current,
        destination=destination,
        frame=frame,
        direction=direction,
        maximized=maximized,
    )
