"""
partitionwm.core.actions - Key actions and the runner that applies them.

An action is a small immutable value holding its parameters (a
partition, a keep-maximized flag). When its chord fires the
ActionRunner executes one bounded sequence against the host:

    query focused window -> query screens -> compute frame
    -> apply frame -> show feedback

Recoverable failures (no window, no other screen, unknown partition)
are reported through the same alert overlay as successful moves.
Nothing raised by an action escapes run(): an exception leaking into
the host's event loop would take every other binding down with it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from partitionwm.config.settings import Settings
from partitionwm.core.errors import NoFocusedWindowError, NoScreensError, PartitionWMError
from partitionwm.core.host import Host, HostWindow
from partitionwm.tiling.feedback import (
    MAXIMIZED_LABEL,
    POINTER_MARKER,
    centered_origin,
    partition_label,
    pointer_origin,
    screen_move_message,
)
from partitionwm.tiling.frame import CoordinateSpace, Frame, Number, Point
from partitionwm.tiling.migration import plan
from partitionwm.tiling.partitions import Partition, resolve
from partitionwm.tiling.screen import Screen, primary_height

log = logging.getLogger(__name__)

# The pointer marker only needs a glance
POINTER_ALERT_DURATION = 0.25


# ============================================================================
# Action values
# ============================================================================
@dataclass(frozen=True, slots=True)
class MoveToPartition:
    """Put the focused window into a partition of its current screen."""

    partition: Partition | str

    @property
    def description(self) -> str:
        name = getattr(self.partition, "value", self.partition)
        return f"Move window to {name}"


@dataclass(frozen=True, slots=True)
class Maximize:
    """Maximize the focused window."""

    @property
    def description(self) -> str:
        return "Maximize window"


@dataclass(frozen=True, slots=True)
class MoveToScreen:
    """Move the focused window to the next screen."""

    keep_maximized: bool = False

    @property
    def description(self) -> str:
        if self.keep_maximized:
            return "Move window to next screen (keep maximized)"
        return "Move window to next screen"


@dataclass(frozen=True, slots=True)
class RevealPointer:
    """Flash a marker over the mouse pointer."""

    @property
    def description(self) -> str:
        return "Reveal mouse pointer"


Action = MoveToPartition | Maximize | MoveToScreen | RevealPointer


# ============================================================================
# ActionRunner
# ============================================================================
class ActionRunner:
    """
    Applies actions against a Host.

    Holds no window or screen state: every run() queries the host again.
    """

    def __init__(self, host: Host, settings: Settings) -> None:
        self._host = host
        self._settings = settings

    @property
    def host(self) -> Host:
        return self._host

    def run(self, action: Action) -> bool:
        """
        Execute *action* to completion.

        Returns:
            True if the action was applied, False if it was aborted.
            Never raises.
        """
        log.debug("Running action: %s", action.description)
        try:
            self._apply(action)
        except PartitionWMError as exc:
            log.info("%s aborted: %s", action.description, exc)
            self._alert(exc.feedback)
            return False
        except Exception:
            log.exception("Error running action: %s", action.description)
            return False
        return True

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def _apply(self, action: Action) -> None:
        if isinstance(action, MoveToPartition):
            self._move_to_partition(action)
        elif isinstance(action, Maximize):
            self._maximize()
        elif isinstance(action, MoveToScreen):
            self._move_to_screen(action)
        elif isinstance(action, RevealPointer):
            self._reveal_pointer()
        else:
            raise TypeError(f"Unsupported action: {action!r}")

    def _move_to_partition(self, action: MoveToPartition) -> None:
        window = self._focused_window()
        screen = window.screen()
        ref_height = self._primary_height()

        target = resolve(screen.visible_frame, action.partition)

        self._alert(partition_label(action.partition), screen)
        window.set_frame(self._to_host(target, ref_height))
        log.info("MOVE %s -> %s on %s", action.partition, target, screen.identifier)

    def _maximize(self) -> None:
        window = self._focused_window()
        self._alert(MAXIMIZED_LABEL, window.screen())
        window.maximize()
        log.info("MAXIMIZE")

    def _move_to_screen(self, action: MoveToScreen) -> None:
        window = self._focused_window(feedback="No window for current application")
        current = window.screen()
        screens = self._host.screens()
        ref_height = self._primary_height(screens)

        old_frame = window.frame().to_space(
            self._host.frame_space, CoordinateSpace.GLOBAL, ref_height
        )
        migration = plan(old_frame, current, screens, action.keep_maximized)

        message = screen_move_message(migration.direction)
        self._alert(message, migration.source)
        self._alert(message, migration.destination)

        window.set_frame(self._to_host(migration.frame, ref_height))
        log.info(
            "MOVE TO SCREEN %s -> %s | %s -> %s (%s)",
            migration.source.identifier,
            migration.destination.identifier,
            old_frame,
            migration.frame,
            migration.direction,
        )

    def _reveal_pointer(self) -> None:
        pointer = self._host.pointer_location()
        size = self._host.measure_alert(POINTER_MARKER)
        origin = pointer_origin(pointer, size)
        self._host.show_alert(
            POINTER_MARKER,
            self._to_overlay(origin, size, self._primary_height()),
            POINTER_ALERT_DURATION,
        )
        log.debug("Pointer revealed at (%s, %s)", pointer.x, pointer.y)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _focused_window(self, feedback: str | None = None) -> HostWindow:
        window = self._host.focused_window()
        if window is None:
            raise NoFocusedWindowError("No focused window", feedback=feedback)
        return window

    def _primary_height(self, screens: list[Screen] | None = None) -> Number:
        if screens is None:
            screens = self._host.screens()
        if not screens:
            raise NoScreensError("Host reported no screens")
        return primary_height(screens)

    def _to_host(self, frame: Frame, ref_height: Number) -> Frame:
        """Global frame -> host frame space."""
        return frame.to_space(CoordinateSpace.GLOBAL, self._host.frame_space, ref_height)

    def _to_overlay(self, origin: Point, size: tuple[Number, Number], ref_height: Number) -> Point:
        """Global overlay origin -> host overlay space."""
        width, height = size
        box = Frame(origin.x, origin.y, width, height)
        return box.to_space(
            CoordinateSpace.GLOBAL, self._host.overlay_space, ref_height
        ).origin

    def _alert(self, text: str, screen: Screen | None = None) -> None:
        """Show *text* centred on *screen* (first screen if None)."""
        try:
            screens = self._host.screens()
            if not screens:
                log.warning("No screen to show alert: %s", text)
                return
            area = (screen or screens[0]).visible_frame
            size = self._host.measure_alert(text)
            origin = centered_origin(area, size)
            self._host.show_alert(
                text,
                self._to_overlay(origin, size, primary_height(screens)),
                self._settings.alert_duration_seconds,
            )
        except Exception:
            # Feedback must never break the action itself
            log.warning("Alert failed: %r", text, exc_info=True)
