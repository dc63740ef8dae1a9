import pytest

from partitionwm.config.keymaps import (
    ALT_MOVE_MODS,
    MOVE_MODS,
    SCREEN_MODS,
    Binding,
    BindingTable,
    build_binding_table,
)
from partitionwm.config.settings import KeymapVariant, Settings
from partitionwm.core.actions import Maximize, MoveToPartition, MoveToScreen, RevealPointer
from partitionwm.core.combo_parser import KeyChord
from partitionwm.tiling.partitions import Partition


@pytest.fixture
def diagonal():
    return build_binding_table(Settings(keymap_variant=KeymapVariant.DIAGONAL))


@pytest.fixture
def classic():
    return build_binding_table(Settings(keymap_variant=KeymapVariant.CLASSIC))


def move(name):
    return MoveToPartition(Partition(name))


def test_diagonal_quarters_use_letter_keys(diagonal):
    assert diagonal.variant is KeymapVariant.DIAGONAL
    assert diagonal.chords_for(move("topLeft")) == (KeyChord.of("r", *MOVE_MODS),)
    assert diagonal.chords_for(move("topRight")) == (KeyChord.of("t", *MOVE_MODS),)
    assert diagonal.chords_for(move("bottomLeft")) == (KeyChord.of("f", *MOVE_MODS),)
    assert diagonal.chords_for(move("bottomRight")) == (KeyChord.of("g", *MOVE_MODS),)


def test_classic_quarters_use_shifted_arrows(classic):
    assert classic.action_for(KeyChord.of("left", *ALT_MOVE_MODS)) == move("topLeft")
    assert classic.action_for(KeyChord.of("up", *ALT_MOVE_MODS)) == move("topRight")
    assert classic.action_for(KeyChord.of("down", *ALT_MOVE_MODS)) == move("bottomLeft")
    assert classic.action_for(KeyChord.of("right", *ALT_MOVE_MODS)) == move("bottomRight")
    assert classic.action_for(KeyChord.of("r", *MOVE_MODS)) is None


def test_halves_on_arrows(diagonal):
    assert diagonal.action_for(KeyChord.of("up", *MOVE_MODS)) == move("up")
    assert diagonal.action_for(KeyChord.of("left", *MOVE_MODS)) == move("left")


def test_actions_with_several_chords(diagonal):
    assert diagonal.chords_for(move("leftThird")) == (
        KeyChord.of(",", *MOVE_MODS),
        KeyChord.of("keypad1", *MOVE_MODS),
    )
    assert diagonal.chords_for(Maximize()) == (
        KeyChord.of("m", *MOVE_MODS),
        KeyChord.of("keypad+", *MOVE_MODS),
    )
    assert diagonal.chords_for(move("botRightSix")) == (
        KeyChord.of("l", *MOVE_MODS),
        KeyChord.of("keypad6", *MOVE_MODS),
    )


def test_every_partition_is_bound(diagonal, classic):
    for table in (diagonal, classic):
        for partition in Partition:
            assert table.chords_for(MoveToPartition(partition)), partition


def test_screen_moves(diagonal):
    assert diagonal.chords_for(MoveToScreen()) == (
        KeyChord.of("left", *SCREEN_MODS),
        KeyChord.of("right", *SCREEN_MODS),
    )
    assert diagonal.chords_for(MoveToScreen(keep_maximized=True)) == (
        KeyChord.of("left", *ALT_MOVE_MODS),
        KeyChord.of("right", *ALT_MOVE_MODS),
    )
    assert diagonal.chords_for(RevealPointer()) == (KeyChord.of("p", *MOVE_MODS),)
    assert diagonal.conflicts == ()


def test_classic_conflicts_keep_first_declaration(classic):
    chords = {c.chord for c in classic.conflicts}
    assert chords == {
        KeyChord.of("left", *ALT_MOVE_MODS),
        KeyChord.of("right", *ALT_MOVE_MODS),
    }
    for conflict in classic.conflicts:
        assert isinstance(conflict.kept, MoveToPartition)
        assert conflict.dropped == MoveToScreen(keep_maximized=True)
    assert classic.chords_for(MoveToScreen(keep_maximized=True)) == ()


def test_chord_maps_to_exactly_one_action(diagonal, classic):
    for table in (diagonal, classic):
        chords = [b.chord for b in table]
        assert len(chords) == len(set(chords))


def test_table_sizes(diagonal, classic):
    assert len(diagonal) == 39
    assert len(classic) == 37


def test_table_is_read_only(diagonal):
    with pytest.raises(TypeError):
        diagonal.by_action[Maximize()] = ()
    with pytest.raises(AttributeError):
        diagonal.extra = 1


def test_duplicate_chord_rejected():
    chord = KeyChord.of("a", "ctrl")
    with pytest.raises(ValueError):
        BindingTable((Binding(chord, Maximize()), Binding(chord, RevealPointer())))


def test_dump_state_lists_conflicts(classic):
    dump = classic.dump_state()
    assert "classic" in dump
    assert "Move window to next screen (keep maximized)" in dump
