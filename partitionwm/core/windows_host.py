"""
partitionwm.core.windows_host - Host implementation for Windows.

Wires the abstract Host interface to user32 (via core.win32), pywin32
(monitor enumeration, cursor position), RegisterHotKey (HotkeyManager)
and the Tk alert overlay. Windows uses one coordinate space for all of
these: origin at the top-left of the primary monitor, Y down.
"""

from __future__ import annotations

import logging

from partitionwm.core import win32
from partitionwm.core.alert import AlertOverlay
from partitionwm.core.combo_parser import KeyChord
from partitionwm.core.host import ChordHandler, Host
from partitionwm.core.keybinds import HotkeyManager
from partitionwm.core.window import Window
from partitionwm.tiling.frame import CoordinateSpace, Point
from partitionwm.tiling.monitor import get_cursor_pos, get_screens
from partitionwm.tiling.screen import Screen

log = logging.getLogger(__name__)

# Foreground windows that are the desktop itself, not an application
_DESKTOP_CLASSES = frozenset({"Progman", "WorkerW", "Shell_TrayWnd", "Shell_SecondaryTrayWnd"})


class WindowsHost(Host):
    """Host backed by the Win32 API."""

    frame_space = CoordinateSpace.GLOBAL
    overlay_space = CoordinateSpace.GLOBAL

    def __init__(
        self,
        hotkeys: HotkeyManager | None = None,
        overlay: AlertOverlay | None = None,
    ) -> None:
        self._hotkeys = hotkeys or HotkeyManager()
        self._overlay = overlay or AlertOverlay()

    @property
    def hotkeys(self) -> HotkeyManager:
        return self._hotkeys

    @property
    def overlay(self) -> AlertOverlay:
        return self._overlay

    # ------------------------------------------------------------------
    # Windows and screens
    # ------------------------------------------------------------------
    def focused_window(self) -> Window | None:
        hwnd = win32.get_foreground_window()
        if not hwnd or not win32.is_window_valid(hwnd):
            return None
        if hwnd in (win32.get_shell_window(), win32.get_desktop_window()):
            return None
        if win32.get_class_name(hwnd) in _DESKTOP_CLASSES:
            log.debug("Foreground is the desktop (%#010x)", hwnd)
            return None
        return Window(hwnd)

    def screens(self) -> list[Screen]:
        return get_screens()

    def pointer_location(self) -> Point:
        x, y = get_cursor_pos()
        return Point(x, y)

    # ------------------------------------------------------------------
    # Chords
    # ------------------------------------------------------------------
    def register_chord(
        self, chord: KeyChord, handler: ChordHandler, description: str = ""
    ) -> int | None:
        return self._hotkeys.register(chord, handler, description)

    def unregister_chord(self, handle: int) -> None:
        self._hotkeys.unregister(handle)

    # ------------------------------------------------------------------
    # Alerts
    # ------------------------------------------------------------------
    def measure_alert(self, text: str) -> tuple[float, float]:
        return self._overlay.measure(text)

    def show_alert(self, text: str, origin: Point, duration: float) -> None:
        self._overlay.show(text, origin.x, origin.y, duration)

    def close(self) -> None:
        """Release every hotkey and the overlay."""
        self._hotkeys.unregister_all()
        self._overlay.close()
