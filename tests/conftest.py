from __future__ import annotations

from typing import Any

import pytest

from partitionwm.config.settings import Settings
from partitionwm.core.actions import ActionRunner
from partitionwm.core.combo_parser import KeyChord
from partitionwm.core.host import ChordHandler, Host, HostWindow
from partitionwm.tiling.frame import CoordinateSpace, Frame, Point
from partitionwm.tiling.screen import Screen


def make_screen(identifier: str, x: int, y: int, w: int, h: int, *, primary: bool = False, menu: int = 0) -> Screen:
    """Screen whose visible frame drops *menu* points from the top."""
    frame = Frame(x, y, w, h)
    return Screen(
        identifier=identifier,
        frame=frame,
        visible_frame=Frame(x, y + menu, w, h - menu),
        is_primary=primary,
    )


class FakeWindow(HostWindow):
    def __init__(self, frame: Frame, screen: Screen) -> None:
        self._frame = frame
        self._screen = screen
        self.set_frames: list[Frame] = []
        self.maximized = False

    def frame(self) -> Frame:
        return self._frame

    def screen(self) -> Screen:
        return self._screen

    def set_frame(self, frame: Frame) -> bool:
        self.set_frames.append(frame)
        self._frame = frame
        return True

    def maximize(self) -> bool:
        self.maximized = True
        return True


class FakeHost(Host):
    def __init__(
        self,
        screens: list[Screen],
        window: FakeWindow | None = None,
        *,
        frame_space: CoordinateSpace = CoordinateSpace.GLOBAL,
        overlay_space: CoordinateSpace = CoordinateSpace.GLOBAL,
        alert_size: tuple[float, float] = (100, 60),
    ) -> None:
        self._screens = screens
        self.window = window
        self.frame_space = frame_space
        self.overlay_space = overlay_space
        self.alert_size = alert_size
        self.pointer = Point(0, 0)
        self.alerts: list[tuple[str, Point, float]] = []
        self.chords: dict[int, tuple[KeyChord, ChordHandler, str]] = {}
        self.refused: set[KeyChord] = set()
        self._next_handle = 1

    def focused_window(self) -> FakeWindow | None:
        return self.window

    def screens(self) -> list[Screen]:
        return list(self._screens)

    def pointer_location(self) -> Point:
        return self.pointer

    def register_chord(self, chord: KeyChord, handler: ChordHandler, description: str = "") -> Any:
        if chord in self.refused:
            return None
        handle = self._next_handle
        self._next_handle += 1
        self.chords[handle] = (chord, handler, description)
        return handle

    def unregister_chord(self, handle: Any) -> None:
        del self.chords[handle]

    def measure_alert(self, text: str) -> tuple[float, float]:
        return self.alert_size

    def show_alert(self, text: str, origin: Point, duration: float) -> None:
        self.alerts.append((text, origin, duration))

    def press(self, chord: KeyChord) -> None:
        for registered, handler, _desc in self.chords.values():
            if registered == chord:
                handler()
                return
        raise AssertionError(f"Chord {chord} not registered")

    @property
    def alert_texts(self) -> list[str]:
        return [text for text, _origin, _duration in self.alerts]


@pytest.fixture
def primary() -> Screen:
    return make_screen("DISPLAY1", 0, 0, 1000, 800, primary=True)


@pytest.fixture
def secondary() -> Screen:
    return make_screen("DISPLAY2", 1000, -200, 1200, 900)


@pytest.fixture
def settings() -> Settings:
    return Settings(alert_duration_seconds=0.5)


@pytest.fixture
def host(primary: Screen, secondary: Screen) -> FakeHost:
    window = FakeWindow(Frame(100, 100, 400, 300), primary)
    return FakeHost([primary, secondary], window)


@pytest.fixture
def runner(host: FakeHost, settings: Settings) -> ActionRunner:
    return ActionRunner(host, settings)
