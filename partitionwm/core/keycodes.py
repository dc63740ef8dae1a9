"""
partitionwm.core.keycodes - Win32 modifier flags and virtual key codes.

Plain constants shared by the combo parser and the ctypes bindings.
Kept apart from win32.py so that chords can be parsed and validated
without loading user32.
"""

from __future__ import annotations

# Modifier keys for RegisterHotKey
MOD_ALT = 0x0001
MOD_CONTROL = 0x0002
MOD_SHIFT = 0x0004
MOD_WIN = 0x0008
MOD_NOREPEAT = 0x4000

# Special keys
VK_RETURN = 0x0D
VK_SPACE = 0x20
VK_TAB = 0x09
VK_ESCAPE = 0x1B
VK_LEFT = 0x25
VK_UP = 0x26
VK_RIGHT = 0x27
VK_DOWN = 0x28

# Numpad
VK_NUMPAD0 = 0x60
VK_MULTIPLY = 0x6A
VK_ADD = 0x6B
VK_SUBTRACT = 0x6D
VK_DECIMAL = 0x6E
VK_DIVIDE = 0x6F


def _build_vk_map() -> dict[str, int]:
    """Key name -> VK code."""
    vk_map: dict[str, int] = {}

    # Letters A-Z (VK 0x41 - 0x5A)
    for i in range(26):
        vk_map[chr(ord("a") + i)] = 0x41 + i

    # Digits 0-9 (VK 0x30 - 0x39)
    for i in range(10):
        vk_map[str(i)] = 0x30 + i

    # Function keys F1-F24
    for i in range(1, 25):
        vk_map[f"f{i}"] = 0x70 + (i - 1)  # VK_F1 = 0x70

    # Numpad digits
    for i in range(10):
        vk_map[f"numpad{i}"] = VK_NUMPAD0 + i

    vk_map.update(
        {
            "return": VK_RETURN,
            "enter": VK_RETURN,
            "escape": VK_ESCAPE,
            "esc": VK_ESCAPE,
            "space": VK_SPACE,
            "tab": VK_TAB,
            "backspace": 0x08,
            "delete": 0x2E,
            "insert": 0x2D,
            "home": 0x24,
            "end": 0x23,
            "pageup": 0x21,
            "pagedown": 0x22,
            # Arrow keys
            "left": VK_LEFT,
            "up": VK_UP,
            "right": VK_RIGHT,
            "down": VK_DOWN,
            # Numpad operators
            "multiply": VK_MULTIPLY,
            "add": VK_ADD,
            "subtract": VK_SUBTRACT,
            "decimal": VK_DECIMAL,
            "divide": VK_DIVIDE,
            # OEM keys (US layout)
            "semicolon": 0xBA,
            "equals": 0xBB,
            "comma": 0xBC,
            "minus": 0xBD,
            "period": 0xBE,
            "slash": 0xBF,
            "backquote": 0xC0,
            "bracketleft": 0xDB,
            "backslash": 0xDC,
            "bracketright": 0xDD,
            "quote": 0xDE,
        }
    )
    return vk_map


VK_MAP: dict[str, int] = _build_vk_map()
