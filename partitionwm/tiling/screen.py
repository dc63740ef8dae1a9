"""
partitionwm.tiling.screen - Pantallas del escritorio virtual.

Una Screen describe un monitor conectado: su area total y su area
visible (descontando barras del sistema). Los frames estan siempre en
el espacio global; pueden tener origen negativo respecto al primario.
"""

from __future__ import annotations

from dataclasses import dataclass

from partitionwm.tiling.frame import Frame, Number


@dataclass(frozen=True, slots=True)
class Screen:
    """
    Representa un monitor fisico conectado al sistema.

    Atributos:
        identifier:    Identificador estable del dispositivo (ej. r'\\\\.\\DISPLAY1').
        frame:         Area total del monitor (resolucion completa).
        visible_frame: Area visible (descontando taskbar y barras).
        is_primary:    True si es el monitor principal.
    """

    identifier: str
    frame: Frame
    visible_frame: Frame
    is_primary: bool = False

    def __str__(self) -> str:
        marker = " (primario)" if self.is_primary else ""
        return f"Screen({self.identifier}{marker} total={self.frame} visible={self.visible_frame})"


def primary_height(screens: list[Screen]) -> Number:
    """
    Alto total del monitor primario, referencia del espacio invertido.

    Si ninguna pantalla se marca como primaria se usa la primera de la
    lista (el orden de enumeracion del host pone el primario delante).
    """
    if not screens:
        raise ValueError("No hay pantallas")
    for screen in screens:
        if screen.is_primary:
            return screen.frame.h
    return screens[0].frame.h
