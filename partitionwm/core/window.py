"""
partitionwm.core.window - Live handle to a Win32 top-level window.

Each Window wraps an HWND. Geometry is read from the OS on every call
so a Window never reports stale data; the handle itself is cheap and
created fresh for every key action.
"""

from __future__ import annotations

import logging

from partitionwm.core import win32
from partitionwm.core.host import HostWindow
from partitionwm.tiling.frame import Frame
from partitionwm.tiling.monitor import get_window_screen
from partitionwm.tiling.screen import Screen

log = logging.getLogger(__name__)


class Window(HostWindow):
    """
    A single top-level window on the system.

    Equality and hashing are based solely on the HWND value.
    """

    __slots__ = ("_hwnd",)

    def __init__(self, hwnd: int) -> None:
        self._hwnd = hwnd

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------
    @property
    def is_valid(self) -> bool:
        """True if the underlying OS window still exists."""
        return win32.is_window_valid(self._hwnd)

    @property
    def title(self) -> str:
        return win32.get_window_text(self._hwnd)

    # ------------------------------------------------------------------
    # HostWindow
    # ------------------------------------------------------------------
    def frame(self) -> Frame:
        """
        Current window rect, global coordinates.

        A maximized window reports a rect larger than the work area by its
        invisible resize border; it occupies exactly the visible frame of
        its screen, so that is what it reports here.
        """
        if win32.is_window_zoomed(self._hwnd):
            return self.screen().visible_frame
        return Frame.from_ltrb(*win32.get_window_rect(self._hwnd))

    def screen(self) -> Screen:
        return get_window_screen(self._hwnd)

    def set_frame(self, frame: Frame) -> bool:
        """
        Reposition and resize the window.

        A maximized or minimized window ignores SetWindowPos geometry
        until it is restored, so restore it first.
        """
        if win32.is_window_zoomed(self._hwnd) or win32.is_window_iconic(self._hwnd):
            win32.show_window(self._hwnd, win32.SW_RESTORE)

        target = frame.rounded()
        ok = win32.set_window_pos(self._hwnd, target.x, target.y, target.w, target.h)
        if not ok:
            log.warning("SetWindowPos failed for %r -> %s", self, frame)
        return ok

    def maximize(self) -> bool:
        return win32.show_window(self._hwnd, win32.SW_MAXIMIZE)

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Window):
            return self._hwnd == other._hwnd
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._hwnd)

    def __repr__(self) -> str:
        title = self.title if self.is_valid else "<destroyed>"
        return f"Window(hwnd={self._hwnd:#010x}, title={title!r})"
