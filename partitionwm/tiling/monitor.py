"""
partitionwm.tiling.monitor - Deteccion de pantallas en Windows.

Usa win32api de pywin32 para enumerar los monitores y obtener su area
total y su area de trabajo (descontando la taskbar y otras barras del
sistema). Solo se importa desde el host de Windows.
"""

from __future__ import annotations

import logging

import win32api
import win32con

from partitionwm.tiling.frame import Frame
from partitionwm.tiling.screen import Screen

log = logging.getLogger(__name__)


def _screen_from_info(info: dict) -> Screen:
    # info['Monitor'] = (left, top, right, bottom) - area total
    # info['Work']    = (left, top, right, bottom) - area de trabajo
    # info['Device']  = nombre del dispositivo
    # info['Flags']   = 1 si es primario
    return Screen(
        identifier=info["Device"],
        frame=Frame.from_ltrb(*info["Monitor"]),
        visible_frame=Frame.from_ltrb(*info["Work"]),
        is_primary=bool(info["Flags"] & win32con.MONITORINFOF_PRIMARY),
    )


def get_screens() -> list[Screen]:
    """
    Enumera todas las pantallas conectadas al sistema.

    Se consulta en cada accion: las pantallas pueden cambiar (hot-plug,
    cambio de resolucion) entre dos pulsaciones.

    Returns:
        Lista de Screen ordenada: la primaria primero, luego por nombre.
    """
    screens: list[Screen] = []

    for hmonitor, _hdc, _rect in win32api.EnumDisplayMonitors(None, None):
        try:
            info = win32api.GetMonitorInfo(hmonitor)
        except win32api.error:
            log.warning("No se pudo obtener info del monitor %s", hmonitor)
            continue

        screen = _screen_from_info(info)
        screens.append(screen)
        log.debug("Pantalla detectada: %s", screen)

    # Ordenar: primaria primero, luego por nombre
    screens.sort(key=lambda s: (not s.is_primary, s.identifier))
    return screens


def get_window_screen(hwnd: int) -> Screen:
    """
    Pantalla en la que esta la ventana (la mas cercana si esta fuera).
    """
    hmonitor = win32api.MonitorFromWindow(hwnd, win32con.MONITOR_DEFAULTTONEAREST)
    return _screen_from_info(win32api.GetMonitorInfo(hmonitor))


def get_cursor_pos() -> tuple[int, int]:
    """Posicion del puntero en coordenadas globales."""
    return win32api.GetCursorPos()
