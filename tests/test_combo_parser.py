import pytest

from partitionwm.core import keycodes
from partitionwm.core.combo_parser import (
    ALT,
    COMMAND,
    CONTROL,
    SHIFT,
    ComboParseError,
    KeyChord,
    chord_to_hotkey,
    combo_to_str,
    parse_combo,
)
from partitionwm.core.errors import PartitionWMError


def test_parse_full_chord():
    chord = parse_combo("ctrl+alt+cmd+left")
    assert chord == KeyChord("left", frozenset({CONTROL, ALT, COMMAND}))


def test_modifier_aliases_and_order():
    assert parse_combo("Win+Option+Control+R") == parse_combo("ctrl+alt+cmd+r")
    assert parse_combo("super+shift+a") == parse_combo("shift+command+a")


@pytest.mark.parametrize(
    "combo, key",
    [
        ("ctrl+,", "comma"),
        ("ctrl+.", "period"),
        ("ctrl+/", "slash"),
        ("ctrl+;", "semicolon"),
        ("ctrl+'", "quote"),
        ("ctrl+keypad+", "add"),
        ("ctrl+keypad-", "subtract"),
        ("ctrl+keypad.", "decimal"),
        ("ctrl+keypad7", "numpad7"),
    ],
)
def test_symbol_keys(combo, key):
    assert parse_combo(combo).key == key


def test_spaces_are_ignored():
    assert parse_combo(" ctrl + alt + up ") == KeyChord("up", frozenset({CONTROL, ALT}))


@pytest.mark.parametrize(
    "combo",
    ["", "   ", "ctrl+alt", "ctrl+ctrl+a", "ctrl+a+b", "ctrl+nosuchkey", "hyper+a"],
)
def test_invalid_combos(combo):
    with pytest.raises(ComboParseError):
        parse_combo(combo)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_combo("ctrl+")
    assert issubclass(ComboParseError, PartitionWMError)


def test_chord_of_and_str():
    chord = KeyChord.of("left", "shift", "cmd", "alt", "ctrl")
    assert str(chord) == "control+alt+command+shift+left"
    assert KeyChord.of("r", "ctrl", "alt", "cmd") == parse_combo("ctrl+alt+cmd+r")


def test_chord_to_hotkey():
    mods, vk = chord_to_hotkey(parse_combo("ctrl+alt+cmd+left"))
    assert mods == keycodes.MOD_CONTROL | keycodes.MOD_ALT | keycodes.MOD_WIN
    assert vk == keycodes.VK_LEFT

    mods, vk = chord_to_hotkey(parse_combo("shift+a"))
    assert mods == keycodes.MOD_SHIFT
    assert vk == 0x41


def test_chord_to_hotkey_rejects_foreign_names():
    with pytest.raises(ComboParseError):
        chord_to_hotkey(KeyChord("left", frozenset({"hyper"})))
    with pytest.raises(ComboParseError):
        chord_to_hotkey(KeyChord("nosuchkey", frozenset({SHIFT})))


def test_combo_to_str():
    assert combo_to_str(keycodes.MOD_CONTROL | keycodes.MOD_WIN, keycodes.VK_LEFT) == "Ctrl+Win+Left"
    assert combo_to_str(keycodes.MOD_ALT, 0x41) == "Alt+A"
