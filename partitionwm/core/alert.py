"""
partitionwm.core.alert - Transient text overlay built on Tk.

Each alert is a borderless, topmost Toplevel placed at an origin chosen
by the caller and destroyed after its duration. Tk windows live on the
event-loop thread, so the Win32 message loop dispatches their messages
and calls pump() to flush Tk's idle work.
"""

from __future__ import annotations

import logging
import tkinter as tk
import tkinter.font as tkfont

log = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "Segoe UI Symbol"
DEFAULT_FONT_SIZE = 30
DEFAULT_PADDING = 24

_BACKGROUND = "#1e1e1e"
_FOREGROUND = "#f0f0f0"
_ALPHA = 0.85


class AlertOverlay:
    """Shows short multi-line messages for a fixed time."""

    def __init__(
        self,
        font_family: str = DEFAULT_FONT_FAMILY,
        font_size: int = DEFAULT_FONT_SIZE,
        padding: int = DEFAULT_PADDING,
    ) -> None:
        self._font_family = font_family
        self._font_size = font_size
        self._padding = padding
        self._root: tk.Tk | None = None
        self._font: tkfont.Font | None = None
        self._open: set[tk.Toplevel] = set()

    def _ensure_root(self) -> tk.Tk:
        if self._root is None:
            self._root = tk.Tk()
            self._root.withdraw()
            self._font = tkfont.Font(
                self._root, family=self._font_family, size=self._font_size
            )
            log.debug("Alert overlay root created")
        return self._root

    def measure(self, text: str) -> tuple[int, int]:
        """(width, height) in pixels of the alert for *text*."""
        self._ensure_root()
        assert self._font is not None
        lines = text.split("\n") or [""]
        width = max(self._font.measure(line) for line in lines)
        height = self._font.metrics("linespace") * len(lines)
        return width + 2 * self._padding, height + 2 * self._padding

    def show(self, text: str, x: float, y: float, duration: float) -> None:
        """Show *text* with its top-left corner at (x, y) for *duration* seconds."""
        root = self._ensure_root()

        top = tk.Toplevel(root)
        top.overrideredirect(True)
        top.attributes("-topmost", True)
        top.attributes("-alpha", _ALPHA)
        top.configure(background=_BACKGROUND)

        label = tk.Label(
            top,
            text=text,
            font=self._font,
            justify="center",
            foreground=_FOREGROUND,
            background=_BACKGROUND,
            padx=self._padding,
            pady=self._padding,
            borderwidth=0,
        )
        label.pack()

        top.geometry(f"+{int(round(x))}+{int(round(y))}")
        top.update_idletasks()
        self._open.add(top)

        top.after(max(1, int(duration * 1000)), lambda: self._close(top))

    def _close(self, top: tk.Toplevel) -> None:
        self._open.discard(top)
        try:
            top.destroy()
        except tk.TclError:
            log.debug("Alert already destroyed")

    def pump(self) -> None:
        """Process pending Tk events without blocking."""
        if self._root is None:
            return
        try:
            self._root.update()
        except tk.TclError:
            log.warning("Alert overlay root is gone", exc_info=True)
            self._root = None

    def close(self) -> None:
        """Destroy every open alert and the Tk root."""
        for top in list(self._open):
            self._close(top)
        if self._root is not None:
            self._root.destroy()
            self._root = None
            self._font = None
