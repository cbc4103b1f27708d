"""Table parsers.

Two families:

- Row parsers (CCF, PID, PCF, CVP, and the label collectors for CVE/TXP)
  are pure: lines in, records or lookup maps out.
- Linking parsers (CDF, PLF, CVE, TXP) resolve a foreign key against the
  builder's ``MibArena`` and append parameters or attach enumerations.
  References to unknown records are dropped.

No parser raises on malformed input; a row that cannot be decoded is
skipped.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Flag

import structlog

from mibscope.mib.arena import MibArena, attach_enumerations
from mibscope.mib.models import ParamDef, ParamEntry, TcEntry, TelemetryEntry
from mibscope.mib.tables import (
    CcfRow,
    CdfRow,
    CveRow,
    CvpRow,
    PcfRow,
    PidRow,
    PlfRow,
    TxpRow,
)
from mibscope.mib.tokenizer import iter_table_rows

log = structlog.get_logger()

Lines = Iterable[str | None]


class TxpTarget(Flag):
    """Records that receive TXP text labels."""

    NONE = 0
    TELEMETRY = 1  # telemetry params whose enum_set_id is the TXP key
    COMMANDS = 2  # command params whose param_id is the TXP key
    ALL = TELEMETRY | COMMANDS

    @classmethod
    def from_name(cls, name: str) -> TxpTarget:
        """Map a config value (telemetry, commands, all, none) to a flag."""
        try:
            return {
                "telemetry": cls.TELEMETRY,
                "commands": cls.COMMANDS,
                "all": cls.ALL,
                "none": cls.NONE,
            }[name.lower()]
        except KeyError:
            raise ValueError(f"Unknown TXP target: {name!r}") from None


# =============================================================================
# Row parsers
# =============================================================================


def parse_ccf_lines(lines: Lines, source_path: str) -> list[TcEntry]:
    """One ``TcEntry`` per CCF row with a non-empty id, in file order."""
    entries: list[TcEntry] = []
    for line_number, cols in iter_table_rows(lines):
        row = CcfRow.decode(cols)
        if row is None:
            continue
        entries.append(
            TcEntry(
                id=row.id,
                name=row.name,
                description=row.description,
                header=row.header,
                service_type=row.service_type,
                sub_service=row.sub_service,
                apid=row.apid,
                source_path=source_path,
                source_line=line_number,
            )
        )
    return entries


def parse_pid_lines(lines: Lines, source_path: str) -> list[TelemetryEntry]:
    """One ``TelemetryEntry`` per PID row with a SID, in file order."""
    entries: list[TelemetryEntry] = []
    for line_number, cols in iter_table_rows(lines):
        row = PidRow.decode(cols)
        if row is None:
            continue
        entries.append(
            TelemetryEntry(
                sid=row.sid,
                service=row.service,
                sub_service=row.sub_service,
                description=row.description,
                source_path=source_path,
                source_line=line_number,
            )
        )
    return entries


def parse_pcf_lines(lines: Lines) -> dict[str, ParamDef]:
    """Parameter definitions by id. The first row for an id wins."""
    defs: dict[str, ParamDef] = {}
    for _, cols in iter_table_rows(lines):
        row = PcfRow.decode(cols)
        if row is None or row.param_id in defs:
            continue
        defs[row.param_id] = ParamDef(
            param_id=row.param_id,
            name=row.name,
            enum_set_id=row.enum_set_id,
        )
    return defs


def parse_cvp_lines(lines: Lines) -> dict[str, frozenset[str]]:
    """Value-set ids associated with each command id."""
    values: dict[str, set[str]] = {}
    for _, cols in iter_table_rows(lines):
        row = CvpRow.decode(cols)
        if row is None:
            continue
        values.setdefault(row.tc_id, set()).add(row.value_id)
    return {tc_id: frozenset(ids) for tc_id, ids in values.items()}


def collect_cve_labels(lines: Lines) -> dict[str, set[str]]:
    """Enumeration labels per value id.

    Every value id seen gets an entry, even when none of its rows is an
    ``E`` row; such ids map to an empty set.
    """
    labels: dict[str, set[str]] = {}
    for _, cols in iter_table_rows(lines):
        row = CveRow.decode(cols)
        if row is None:
            continue
        bucket = labels.setdefault(row.value_id, set())
        if row.label:
            bucket.add(row.label)
    return labels


def collect_txp_labels(lines: Lines) -> dict[str, set[str]]:
    """Text labels per TXP key."""
    labels: dict[str, set[str]] = {}
    for _, cols in iter_table_rows(lines):
        row = TxpRow.decode(cols)
        if row is None:
            continue
        labels.setdefault(row.key, set()).add(row.label)
    return labels


# =============================================================================
# Linking parsers
# =============================================================================


def parse_cdf_lines(lines: Lines, arena: MibArena) -> int:
    """Append CDF parameters to their commands. Returns parameters added."""
    added = 0
    dangling = 0
    for _, cols in iter_table_rows(lines):
        row = CdfRow.decode(cols)
        if row is None:
            continue
        slot = arena.commands.get(row.tc_id)
        if slot is None:
            dangling += 1
            continue
        slot.params.append(
            ParamEntry(
                name=row.name,
                kind=row.kind,
                bit_length=row.bit_length,
                bit_offset=row.bit_offset,
                param_id=row.param_id,
                raw=tuple(cols),
            )
        )
        added += 1
    if dangling:
        log.debug("cdf_dangling_rows", count=dangling)
    return added


def parse_plf_lines(
    lines: Lines,
    arena: MibArena,
    param_defs: Mapping[str, ParamDef] | None = None,
) -> int:
    """Append PLF parameters to their telemetry packets.

    Names come from ``param_defs``, defaulting to the arena's PCF
    definitions; a parameter without a definition (or with an empty name)
    is named by its id.
    """
    defs = arena.param_defs if param_defs is None else param_defs
    added = 0
    dangling = 0
    for _, cols in iter_table_rows(lines):
        row = PlfRow.decode(cols)
        if row is None:
            continue
        slot = arena.telemetry.get(row.sid)
        if slot is None:
            dangling += 1
            continue
        definition = defs.get(row.param_id)
        slot.params.append(
            ParamEntry(
                name=(definition.name if definition else None) or row.param_id,
                kind="P",
                param_id=row.param_id,
                enum_set_id=definition.enum_set_id if definition else None,
                raw=tuple(cols),
            )
        )
        added += 1
    if dangling:
        log.debug("plf_dangling_rows", count=dangling)
    return added


def parse_cve_lines(lines: Lines, arena: MibArena) -> int:
    """Attach CVE enumeration labels to command parameters by param id."""
    labels = collect_cve_labels(lines)
    if not labels:
        return 0
    return attach_enumerations(arena.commands.values(), labels, lambda p: p.param_id)


def parse_txp_lines(lines: Lines, arena: MibArena, targets: TxpTarget = TxpTarget.ALL) -> int:
    """Attach TXP labels using each selected strategy, telemetry first."""
    labels = collect_txp_labels(lines)
    if not labels:
        return 0
    updated = 0
    if TxpTarget.TELEMETRY in targets:
        updated += attach_enumerations(arena.telemetry.values(), labels, lambda p: p.enum_set_id)
    if TxpTarget.COMMANDS in targets:
        updated += attach_enumerations(arena.commands.values(), labels, lambda p: p.param_id)
    return updated
