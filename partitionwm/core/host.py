"""
partitionwm.core.host - Interface to the host window system.

The tiling core never calls the OS directly. Everything it needs from
the desktop (focused window, screens, pointer, hotkeys, alert overlay)
goes through a Host. WindowsHost is the production implementation;
tests use an in-memory fake.

Window and screen state is always queried fresh: nothing returned by
a Host should be cached across key actions.
"""

from __future__ import annotations

import abc
from collections.abc import Callable
from typing import Any

from partitionwm.core.combo_parser import KeyChord
from partitionwm.tiling.frame import CoordinateSpace, Frame, Point
from partitionwm.tiling.screen import Screen

# Handlers are called with no arguments on the host's event thread
ChordHandler = Callable[[], None]


class HostWindow(abc.ABC):
    """A live handle to a top-level window."""

    @abc.abstractmethod
    def frame(self) -> Frame:
        """Current frame, in the host's frame space."""

    @abc.abstractmethod
    def screen(self) -> Screen:
        """The screen the window is currently on."""

    @abc.abstractmethod
    def set_frame(self, frame: Frame) -> bool:
        """Move and resize the window. *frame* is in the host's frame space."""

    @abc.abstractmethod
    def maximize(self) -> bool:
        """Maximize the window with the host's own primitive."""


class Host(abc.ABC):
    """Capabilities the tiling core consumes."""

    # Space expected by HostWindow.frame() / set_frame()
    frame_space: CoordinateSpace = CoordinateSpace.GLOBAL

    # Space expected by show_alert() origins
    overlay_space: CoordinateSpace = CoordinateSpace.GLOBAL

    @abc.abstractmethod
    def focused_window(self) -> HostWindow | None:
        """The focused window, or None."""

    @abc.abstractmethod
    def screens(self) -> list[Screen]:
        """All connected screens in stable order, primary first."""

    @abc.abstractmethod
    def pointer_location(self) -> Point:
        """Pointer position in the global space."""

    @abc.abstractmethod
    def register_chord(self, chord: KeyChord, handler: ChordHandler, description: str = "") -> Any:
        """
        Bind *handler* to *chord*.

        Returns an opaque handle for unregister_chord(), or None if the
        host refused the chord.
        """

    @abc.abstractmethod
    def unregister_chord(self, handle: Any) -> None:
        """Release a chord previously returned by register_chord()."""

    @abc.abstractmethod
    def measure_alert(self, text: str) -> tuple[float, float]:
        """(width, height) the overlay would take to show *text*."""

    @abc.abstractmethod
    def show_alert(self, text: str, origin: Point, duration: float) -> None:
        """Show a transient overlay at *origin* (overlay space) for *duration* seconds."""
