"""
partitionwm.core.keybinds - Global hotkeys via RegisterHotKey.

Chords are registered as system-wide hotkeys and reach us as WM_HOTKEY
messages in the EventLoop, which hands the hotkey id to dispatch().

The HotkeyManager:
    1. Translates a KeyChord into (modifiers, vk) and registers it.
    2. Keeps each callback alive until the hotkey is unregistered.
    3. Runs callbacks synchronously; an exception in one is logged and
       never reaches the message loop.

Typical use:
    hk = HotkeyManager()
    hk_id = hk.register(KeyChord.of("left", "ctrl", "alt"), callback)
    # ... the message loop calls hk.dispatch(wParam) on WM_HOTKEY ...
    hk.unregister_all()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from partitionwm.core import win32
from partitionwm.core.combo_parser import KeyChord, chord_to_hotkey, combo_to_str

log = logging.getLogger(__name__)


# Type for hotkey callbacks: called with no arguments
HotkeyCallback = Callable[[], None]


@dataclass(frozen=True, slots=True)
class Hotkey:
    """Represents a registered hotkey binding."""

    id: int
    chord: KeyChord
    modifiers: int
    vk: int
    callback: HotkeyCallback
    description: str


class HotkeyManager:
    """
    Manages system-wide hotkeys.

    Each hotkey gets a unique ID via RegisterHotKey. When the message
    loop receives WM_HOTKEY, dispatch() looks the ID up and runs the
    callback.
    """

    def __init__(self) -> None:
        # hotkey_id -> Hotkey
        self._hotkeys: dict[int, Hotkey] = {}
        # Auto-incrementing ID counter (starting at 1)
        self._next_id: int = 1

    @property
    def count(self) -> int:
        """Number of registered hotkeys."""
        return len(self._hotkeys)

    @property
    def hotkeys(self) -> list[Hotkey]:
        """List of all registered hotkeys."""
        return list(self._hotkeys.values())

    def register(
        self,
        chord: KeyChord,
        callback: HotkeyCallback,
        description: str = "",
    ) -> int | None:
        """
        Register a global hotkey for *chord*.

        Auto-repeat is suppressed (MOD_NOREPEAT): holding a chord down
        fires its action once.

        Args:
            chord:       The key chord to register.
            callback:    Function to call when the hotkey is pressed.
            description: Human-readable description for logging/debug.

        Returns:
            The hotkey ID if registered successfully, None on failure
            (usually another application already owns the chord).
        """
        modifiers, vk = chord_to_hotkey(chord)
        hotkey_id = self._next_id

        if not win32.register_hotkey(hotkey_id, modifiers | win32.MOD_NOREPEAT, vk):
            log.error(
                "Failed to register hotkey: %s (%s)",
                combo_to_str(modifiers, vk),
                description,
            )
            return None

        self._hotkeys[hotkey_id] = Hotkey(
            id=hotkey_id,
            chord=chord,
            modifiers=modifiers,
            vk=vk,
            callback=callback,
            description=description,
        )
        self._next_id += 1

        log.debug(
            "Hotkey registered: id=%d %s  %s",
            hotkey_id,
            combo_to_str(modifiers, vk),
            description,
        )
        return hotkey_id

    def unregister(self, hotkey_id: int) -> bool:
        """Unregister a hotkey by its ID."""
        hotkey = self._hotkeys.pop(hotkey_id, None)
        if hotkey is None:
            return False

        win32.unregister_hotkey(hotkey_id)
        log.debug("Hotkey unregistered: id=%d %s", hotkey_id, hotkey.description)
        return True

    def unregister_all(self) -> None:
        """Unregister all hotkeys. Call this on shutdown."""
        for hotkey_id in list(self._hotkeys.keys()):
            win32.unregister_hotkey(hotkey_id)
        count = len(self._hotkeys)
        self._hotkeys.clear()
        log.info("All hotkeys unregistered (%d total)", count)

    def dispatch(self, hotkey_id: int) -> bool:
        """
        Dispatch a WM_HOTKEY event to the appropriate callback.

        Args:
            hotkey_id: The wParam from WM_HOTKEY (the registered ID).

        Returns:
            True if a callback was found and executed.
        """
        hotkey = self._hotkeys.get(hotkey_id)
        if hotkey is None:
            log.warning("Unknown hotkey id: %d", hotkey_id)
            return False

        log.debug("Hotkey dispatched: %s (%s)", hotkey.chord, hotkey.description)
        try:
            hotkey.callback()
        except Exception:
            log.exception(
                "Error in hotkey callback: %s", hotkey.description
            )

        return True

    def dump_state(self) -> str:
        """Return a formatted string of all registered hotkeys."""
        lines = [
            f"=== HotkeyManager: {len(self._hotkeys)} hotkeys ===",
            "",
        ]
        for hk in self._hotkeys.values():
            lines.append(
                f"  id={hk.id:3d}  {combo_to_str(hk.modifiers, hk.vk):<24s}  {hk.description}"
            )
        return "\n".join(lines)
