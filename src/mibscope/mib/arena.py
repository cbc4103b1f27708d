"""Mutable record storage owned by the index builder.

Parsers that link rows across tables (CDF, PLF, CVE, TXP) write into the
arena; nothing else does. ``freeze`` turns the arena into a ``MibIndex``
once every table has been applied.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace

from mibscope.mib.models import MibIndex, ParamDef, ParamEntry, TcEntry, TelemetryEntry


@dataclass(eq=False)
class EntrySlot[E: (TcEntry, TelemetryEntry)]:
    """A record header plus the parameter list still being appended to."""

    entry: E
    params: list[ParamEntry] = field(default_factory=list)

    def freeze(self) -> E:
        return replace(self.entry, params=tuple(self.params))


@dataclass
class MibArena:
    """Builder-owned maps of slots, keyed the way the tables reference them."""

    commands: dict[str, EntrySlot[TcEntry]] = field(default_factory=dict)
    command_names: dict[str, EntrySlot[TcEntry]] = field(default_factory=dict)
    telemetry: dict[str, EntrySlot[TelemetryEntry]] = field(default_factory=dict)
    param_defs: dict[str, ParamDef] = field(default_factory=dict)

    def add_command(self, entry: TcEntry) -> None:
        """Register a command; a repeated id or name replaces the older slot."""
        slot = EntrySlot(entry)
        self.commands[entry.id] = slot
        if entry.name:
            self.command_names[entry.name] = slot

    def add_telemetry(self, entry: TelemetryEntry) -> None:
        self.telemetry[entry.sid] = EntrySlot(entry)

    def add_param_defs(self, defs: Mapping[str, ParamDef]) -> None:
        """Merge PCF definitions; the first definition of an id is kept."""
        for param_id, definition in defs.items():
            self.param_defs.setdefault(param_id, definition)

    def freeze(self) -> MibIndex:
        frozen: dict[int, TcEntry] = {}

        def _command(slot: EntrySlot[TcEntry]) -> TcEntry:
            # id and name maps may share a slot; both must expose one object
            key = id(slot)
            if key not in frozen:
                frozen[key] = slot.freeze()
            return frozen[key]

        return MibIndex(
            tc_by_id={tc_id: _command(slot) for tc_id, slot in self.commands.items()},
            tc_by_name={name: _command(slot) for name, slot in self.command_names.items()},
            telemetry_by_sid={sid: slot.freeze() for sid, slot in self.telemetry.items()},
        )


def attach_enumerations(
    slots: Iterable[EntrySlot[TcEntry]] | Iterable[EntrySlot[TelemetryEntry]],
    labels_by_key: Mapping[str, Iterable[str]],
    key_of: Callable[[ParamEntry], str | None],
) -> int:
    """Replace the enumerations of every parameter whose key has a label set.

    Returns the number of parameters updated.
    """
    updated = 0
    for slot in slots:
        for position, param in enumerate(slot.params):
            key = key_of(param)
            if not key or key not in labels_by_key:
                continue
            labels = tuple(sorted(set(labels_by_key[key])))
            slot.params[position] = replace(param, enumerations=labels)
            updated += 1
    return updated
