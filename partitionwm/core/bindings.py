"""
partitionwm.core.bindings - Binding registry with an explicit lifecycle.

The BindingRegistry connects a BindingTable to a Host: start() registers
every chord and keeps the returned handles (and the handler callables)
alive for as long as the registry is held; stop() releases them.

Usage:
    registry = BindingRegistry(table, host, runner)
    registry.start()
    # ... host event loop runs, chords fire runner.run(action) ...
    registry.stop()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Any

from partitionwm.config.keymaps import BindingTable
from partitionwm.core.actions import Action, ActionRunner
from partitionwm.core.combo_parser import KeyChord
from partitionwm.core.host import ChordHandler, Host

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegisteredChord:
    """A chord currently registered with the host."""

    chord: KeyChord
    action: Action
    handler: ChordHandler
    handle: Any


class BindingRegistry:
    """
    Owns the host registrations for a BindingTable.

    The table itself is immutable; the registry only tracks which
    chords are live on the host.
    """

    def __init__(self, table: BindingTable, host: Host, runner: ActionRunner) -> None:
        self._table = table
        self._host = host
        self._runner = runner
        self._registered: list[RegisteredChord] = []
        self._failed: list[KeyChord] = []
        self._active: bool = False

    @property
    def table(self) -> BindingTable:
        return self._table

    @property
    def active(self) -> bool:
        return self._active

    @property
    def count(self) -> int:
        """Number of chords live on the host."""
        return len(self._registered)

    @property
    def registered(self) -> list[RegisteredChord]:
        return list(self._registered)

    @property
    def failed(self) -> list[KeyChord]:
        """Chords the host refused during the last start()."""
        return list(self._failed)

    def start(self) -> int:
        """
        Register every chord of the table with the host.

        Calling start() on an active registry does nothing.

        Returns:
            Number of chords registered.
        """
        if self._active:
            log.debug("BindingRegistry already active")
            return len(self._registered)

        self._failed.clear()
        for binding in self._table:
            handler = partial(self._runner.run, binding.action)
            try:
                handle = self._host.register_chord(
                    binding.chord, handler, binding.action.description
                )
            except Exception:
                log.exception("Error registering chord %s", binding.chord)
                handle = None

            if handle is None:
                log.error(
                    "Chord not registered: %s (%s)",
                    binding.chord,
                    binding.action.description,
                )
                self._failed.append(binding.chord)
                continue

            self._registered.append(
                RegisteredChord(
                    chord=binding.chord,
                    action=binding.action,
                    handler=handler,
                    handle=handle,
                )
            )

        self._active = True
        log.info(
            "Bindings started: %d registered, %d failed",
            len(self._registered),
            len(self._failed),
        )
        return len(self._registered)

    def stop(self) -> None:
        """Unregister every chord. Safe to call more than once."""
        if not self._active:
            return

        for entry in self._registered:
            try:
                self._host.unregister_chord(entry.handle)
            except Exception:
                log.exception("Error unregistering chord %s", entry.chord)

        count = len(self._registered)
        self._registered.clear()
        self._active = False
        log.info("Bindings stopped (%d released)", count)

    def dump_state(self) -> str:
        """Return a formatted string of all live chords."""
        lines = [
            f"=== BindingRegistry: {len(self._registered)} chords "
            f"({'active' if self._active else 'stopped'}) ===",
            "",
        ]
        for entry in self._registered:
            lines.append(f"  {str(entry.chord):<28s} {entry.action.description}")
        for chord in self._failed:
            lines.append(f"  {str(chord):<28s} <not registered>")
        return "\n".join(lines)
