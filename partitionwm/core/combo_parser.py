"""
partitionwm.core.combo_parser - Parser de combos de teclado.

Convierte strings legibles como "ctrl+alt+cmd+left" en KeyChord, y un
KeyChord en los argumentos (modifiers, vk) que necesita RegisterHotKey /
HotkeyManager.register().

Caracteristicas:
    - Aliases: cmd = command = win = super, ctrl = control, alt = option.
    - Teclas de puntuacion por simbolo o por nombre: "," == "comma".
    - Case-insensitive: "Ctrl+Alt+R" == "ctrl+alt+r".
    - El orden de los modificadores no importa.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from partitionwm.core import keycodes
from partitionwm.core.errors import PartitionWMError

log = logging.getLogger(__name__)


# ============================================================================
# Modifier vocabulary
# ============================================================================
CONTROL = "control"
ALT = "alt"
COMMAND = "command"
SHIFT = "shift"

# Display order, also used when formatting a chord
MODIFIERS: tuple[str, ...] = (CONTROL, ALT, COMMAND, SHIFT)

_MODIFIER_ALIASES: dict[str, str] = {
    "ctrl": CONTROL,
    "control": CONTROL,
    "alt": ALT,
    "option": ALT,
    "menu": ALT,
    "cmd": COMMAND,
    "command": COMMAND,
    "win": COMMAND,
    "windows": COMMAND,
    "super": COMMAND,
    "shift": SHIFT,
}

_MODIFIER_FLAGS: dict[str, int] = {
    CONTROL: keycodes.MOD_CONTROL,
    ALT: keycodes.MOD_ALT,
    COMMAND: keycodes.MOD_WIN,
    SHIFT: keycodes.MOD_SHIFT,
}

# Symbol -> key name
_KEY_ALIASES: dict[str, str] = {
    ",": "comma",
    ".": "period",
    "/": "slash",
    ";": "semicolon",
    "'": "quote",
    "`": "backquote",
    "=": "equals",
    "-": "minus",
    "[": "bracketleft",
    "]": "bracketright",
    "\\": "backslash",
    "keypad+": "add",
    "keypad-": "subtract",
    "keypad.": "decimal",
    "keypad*": "multiply",
    "keypad/": "divide",
    "del": "delete",
    "ins": "insert",
    "pgup": "pageup",
    "pgdn": "pagedown",
}
for _i in range(10):
    _KEY_ALIASES[f"keypad{_i}"] = f"numpad{_i}"


class ComboParseError(PartitionWMError, ValueError):
    """Raised when a combo string cannot be parsed."""

    feedback = "Invalid key combo"


@dataclass(frozen=True, slots=True)
class KeyChord:
    """
    A key plus a set of modifiers.

    Both fields hold canonical names: the key is a name from the VK map
    ("left", "r", "numpad7") and modifiers come from MODIFIERS.
    """

    key: str
    modifiers: frozenset[str]

    @classmethod
    def of(cls, key: str, *modifiers: str) -> KeyChord:
        """Build a chord from a key and modifier names (aliases allowed)."""
        return parse_combo("+".join((*modifiers, key)))

    def __str__(self) -> str:
        ordered = [m for m in MODIFIERS if m in self.modifiers]
        return "+".join((*ordered, self.key))


# ============================================================================
# Public API
# ============================================================================

def parse_combo(combo: str) -> KeyChord:
    """
    Parse a keyboard combo string into a KeyChord.

    Args:
        combo: Human-readable combo like "ctrl+alt+cmd+left", "alt+,",
               "ctrl+alt+shift+up". Case-insensitive. Parts separated by '+'.

    Returns:
        The canonical KeyChord.

    Raises:
        ComboParseError: If the combo is empty, has no key part, contains
                         unknown tokens, or has duplicate modifiers.
    """
    if not combo or not combo.strip():
        raise ComboParseError("Empty combo string")

    text = combo.strip().lower()

    # A trailing '+' belongs to the key: "ctrl+alt+keypad+"
    tail: str | None = None
    if text.endswith("+"):
        text, _, last = text[:-1].rpartition("+")
        tail = last.strip() + "+"

    parts = [p.strip() for p in text.split("+")]
    parts = [p for p in parts if p]  # remove empty from "ctrl + + q"
    if tail is not None:
        parts.append(tail)

    if not parts:
        raise ComboParseError(f"No valid parts in combo: {combo!r}")

    modifiers: set[str] = set()
    key: str | None = None

    for part in parts:
        if part in _MODIFIER_ALIASES:
            canonical = _MODIFIER_ALIASES[part]
            if canonical in modifiers:
                raise ComboParseError(
                    f"Duplicate modifier {part!r} in combo: {combo!r}"
                )
            modifiers.add(canonical)
            continue

        name = _KEY_ALIASES.get(part, part)
        if name not in keycodes.VK_MAP:
            raise ComboParseError(
                f"Unknown key or modifier: {part!r} in combo: {combo!r}"
            )
        if key is not None:
            raise ComboParseError(
                f"Multiple key parts in combo: {combo!r}. "
                f"Only one non-modifier key is allowed."
            )
        key = name

    if key is None:
        raise ComboParseError(
            f"No key found in combo: {combo!r}. "
            f"A combo must have exactly one non-modifier key."
        )

    return KeyChord(key=key, modifiers=frozenset(modifiers))


def chord_to_hotkey(chord: KeyChord) -> tuple[int, int]:
    """
    Convert a KeyChord into (modifiers_flags, virtual_key_code).

    Raises:
        ComboParseError: If the chord holds a name outside the vocabulary.
    """
    modifiers = 0
    for name in chord.modifiers:
        flag = _MODIFIER_FLAGS.get(name)
        if flag is None:
            raise ComboParseError(f"Unknown modifier {name!r} in chord {chord}")
        modifiers |= flag

    vk = keycodes.VK_MAP.get(chord.key)
    if vk is None:
        raise ComboParseError(f"Unknown key {chord.key!r} in chord {chord}")

    return modifiers, vk


def combo_to_str(modifiers: int, vk: int) -> str:
    """
    Convert (modifiers, vk) back to a human-readable string.

    Useful for logging and error messages.
    """
    parts: list[str] = []
    if modifiers & keycodes.MOD_CONTROL:
        parts.append("Ctrl")
    if modifiers & keycodes.MOD_ALT:
        parts.append("Alt")
    if modifiers & keycodes.MOD_WIN:
        parts.append("Win")
    if modifiers & keycodes.MOD_SHIFT:
        parts.append("Shift")

    # Reverse-lookup VK name
    vk_name = None
    for name, code in keycodes.VK_MAP.items():
        if code == vk:
            vk_name = name.upper() if len(name) == 1 else name.capitalize()
            break

    if vk_name is None:
        vk_name = f"0x{vk:02X}"

    parts.append(vk_name)
    return "+".join(parts)
