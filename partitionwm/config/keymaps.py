"""
partitionwm.config.keymaps - Definicion de keybindings.

Construye la tabla de bindings (accion -> chords) a partir de los
settings. Se construye una sola vez al arrancar y es inmutable.

    Mitades (Ctrl + Alt + Cmd):
        Up / Down / Left / Right        -> mitad superior/inferior/izq/der

    Cuartos, keymap "diagonal" (Ctrl + Alt + Cmd):
        R / T / F / G                   -> TL / TR / BL / BR
    Cuartos, keymap "classic" (Ctrl + Alt + Shift):
        Left / Up / Down / Right        -> TL / TR / BL / BR

    Tercios (Ctrl + Alt + Cmd):
        , (Num1) . (Num2) / (Num3)      -> tercio izq / centro / der
        ; (Num0) ' (Num.)               -> dos tercios izq / der

    Sextos (Ctrl + Alt + Cmd):
        U I O (Num7 Num8 Num9)          -> fila superior
        J K L (Num4 Num5 Num6)          -> fila inferior

    Ventana (Ctrl + Alt + Cmd):
        C (Num-)                        -> centro
        M (Num+)                        -> maximizar
        P                               -> mostrar el puntero

    Pantallas:
        Ctrl + Alt + Left/Right         -> siguiente pantalla
        Ctrl + Alt + Shift + Left/Right -> siguiente pantalla, mantener maximizada

Un chord solo puede tener una accion: si una declaracion posterior
repite un chord ya usado, gana la primera y el conflicto queda
registrado (en "classic" los cuartos ocupan Ctrl+Alt+Shift+Left/Right).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from types import MappingProxyType

from partitionwm.config.settings import KeymapVariant, Settings
from partitionwm.core.actions import (
    Action,
    Maximize,
    MoveToPartition,
    MoveToScreen,
    RevealPointer,
)
from partitionwm.core.combo_parser import KeyChord
from partitionwm.tiling.partitions import Partition

log = logging.getLogger(__name__)


# Conjuntos de modificadores
MOVE_MODS: tuple[str, ...] = ("ctrl", "alt", "cmd")
ALT_MOVE_MODS: tuple[str, ...] = ("ctrl", "alt", "shift")
SCREEN_MODS: tuple[str, ...] = ("ctrl", "alt")


@dataclass(frozen=True, slots=True)
class Binding:
    """Un chord vinculado a una accion."""

    chord: KeyChord
    action: Action


@dataclass(frozen=True, slots=True)
class Conflict:
    """Chord declarado dos veces: *kept* conserva el chord, *dropped* no."""

    chord: KeyChord
    kept: Action
    dropped: Action


class BindingTable:
    """
    Tabla inmutable de bindings.

    Una accion puede tener varios chords (tecla principal + tecla del
    teclado numerico); un chord solo dispara una accion.
    """

    __slots__ = ("_bindings", "_by_chord", "_by_action", "_conflicts", "_variant")

    def __init__(
        self,
        bindings: tuple[Binding, ...],
        conflicts: tuple[Conflict, ...] = (),
        variant: KeymapVariant | None = None,
    ) -> None:
        by_action: dict[Action, list[KeyChord]] = {}
        by_chord: dict[KeyChord, Action] = {}
        for binding in bindings:
            if binding.chord in by_chord:
                raise ValueError(f"Chord duplicado en la tabla: {binding.chord}")
            by_chord[binding.chord] = binding.action
            by_action.setdefault(binding.action, []).append(binding.chord)

        self._bindings = bindings
        self._by_chord = MappingProxyType(by_chord)
        self._by_action = MappingProxyType(
            {action: tuple(chords) for action, chords in by_action.items()}
        )
        self._conflicts = conflicts
        self._variant = variant

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------
    @property
    def variant(self) -> KeymapVariant | None:
        return self._variant

    @property
    def bindings(self) -> tuple[Binding, ...]:
        """Bindings en orden de declaracion."""
        return self._bindings

    @property
    def by_action(self) -> MappingProxyType[Action, tuple[KeyChord, ...]]:
        """Accion -> chords, en orden de declaracion."""
        return self._by_action

    @property
    def conflicts(self) -> tuple[Conflict, ...]:
        return self._conflicts

    @property
    def actions(self) -> list[Action]:
        return list(self._by_action)

    def chords_for(self, action: Action) -> tuple[KeyChord, ...]:
        return self._by_action.get(action, ())

    def action_for(self, chord: KeyChord) -> Action | None:
        return self._by_chord.get(chord)

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[Binding]:
        return iter(self._bindings)

    def dump_state(self) -> str:
        """Tabla formateada para depuracion."""
        variant = self._variant.value if self._variant else "custom"
        lines = [
            f"=== BindingTable ({variant}): {len(self._bindings)} chords, "
            f"{len(self._by_action)} actions ===",
            "",
        ]
        for action, chords in self._by_action.items():
            keys = ", ".join(str(c) for c in chords)
            lines.append(f"  {action.description:<48s} {keys}")
        for conflict in self._conflicts:
            lines.append(
                f"  ! {conflict.chord}: {conflict.dropped.description} "
                f"(ocupado por {conflict.kept.description})"
            )
        return "\n".join(lines)


# ============================================================================
# Construccion
# ============================================================================

def build_binding_table(settings: Settings) -> BindingTable:
    """
    Construye la tabla de bindings para la variante de keymap activa.

    Args:
        settings: Settings leidos al arrancar.

    Returns:
        BindingTable inmutable.
    """
    bindings: list[Binding] = []
    by_chord: dict[KeyChord, Action] = {}
    conflicts: list[Conflict] = []

    def _bind(keys: str | tuple[str, ...], modifiers: tuple[str, ...], action: Action) -> None:
        if isinstance(keys, str):
            keys = (keys,)
        for key in keys:
            chord = KeyChord.of(key, *modifiers)
            kept = by_chord.get(chord)
            if kept is not None:
                log.warning(
                    "Chord %s ya vinculado a %r, se ignora %r",
                    chord,
                    kept.description,
                    action.description,
                )
                conflicts.append(Conflict(chord=chord, kept=kept, dropped=action))
                continue
            by_chord[chord] = action
            bindings.append(Binding(chord=chord, action=action))

    def _move(keys: str | tuple[str, ...], partition: Partition) -> None:
        _bind(keys, MOVE_MODS, MoveToPartition(partition))

    # ------------------------------------------------------------------
    # Cuartos: dependen de la variante
    # ------------------------------------------------------------------
    if settings.keymap_variant == KeymapVariant.CLASSIC:
        _bind("left", ALT_MOVE_MODS, MoveToPartition(Partition.TOP_LEFT))
        _bind("up", ALT_MOVE_MODS, MoveToPartition(Partition.TOP_RIGHT))
        _bind("down", ALT_MOVE_MODS, MoveToPartition(Partition.BOTTOM_LEFT))
        _bind("right", ALT_MOVE_MODS, MoveToPartition(Partition.BOTTOM_RIGHT))
    else:
        # Las teclas R T F G forman un rombo: flechas diagonales
        _move("r", Partition.TOP_LEFT)
        _move("t", Partition.TOP_RIGHT)
        _move("f", Partition.BOTTOM_LEFT)
        _move("g", Partition.BOTTOM_RIGHT)

    # ------------------------------------------------------------------
    # Mitades
    # ------------------------------------------------------------------
    _move("up", Partition.UP)
    _move("down", Partition.DOWN)
    _move("left", Partition.LEFT)
    _move("right", Partition.RIGHT)

    # ------------------------------------------------------------------
    # Tercios
    # ------------------------------------------------------------------
    _move((",", "keypad1"), Partition.LEFT_THIRD)
    _move((".", "keypad2"), Partition.CENTRE_THIRD)
    _move(("/", "keypad3"), Partition.RIGHT_THIRD)
    _move((";", "keypad0"), Partition.LEFT_TWO_THIRDS)
    _move(("'", "keypad."), Partition.RIGHT_TWO_THIRDS)

    # ------------------------------------------------------------------
    # Sextos
    # ------------------------------------------------------------------
    _move(("u", "keypad7"), Partition.TOP_LEFT_SIX)
    _move(("i", "keypad8"), Partition.TOP_CENTRE_SIX)
    _move(("o", "keypad9"), Partition.TOP_RIGHT_SIX)
    _move(("j", "keypad4"), Partition.BOT_LEFT_SIX)
    _move(("k", "keypad5"), Partition.BOT_CENTRE_SIX)
    _move(("l", "keypad6"), Partition.BOT_RIGHT_SIX)

    # ------------------------------------------------------------------
    # Ventana
    # ------------------------------------------------------------------
    _move(("c", "keypad-"), Partition.CENTRE)
    _bind(("m", "keypad+"), MOVE_MODS, Maximize())
    _bind("p", MOVE_MODS, RevealPointer())

    # ------------------------------------------------------------------
    # Pantallas
    # ------------------------------------------------------------------
    _bind(("left", "right"), SCREEN_MODS, MoveToScreen(keep_maximized=False))
    _bind(("left", "right"), ALT_MOVE_MODS, MoveToScreen(keep_maximized=True))

    table = BindingTable(
        tuple(bindings),
        conflicts=tuple(conflicts),
        variant=settings.keymap_variant,
    )
    log.info(
        "Keymap %s: %d chords, %d acciones, %d conflictos",
        settings.keymap_variant.value,
        len(table),
        len(table.by_action),
        len(conflicts),
    )
    return table
