"""MIB index builder.

The single place where tables are cross-linked. Tables are applied in a
fixed order because later tables resolve keys created by earlier ones:

    CCF -> CDF -> PID -> PCF -> PLF -> CVE -> CVP -> TXP

Files of the same kind are applied in the order given. The builder owns
every record until it returns; the returned ``MibIndex`` is frozen.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import structlog

from mibscope.mib.arena import MibArena
from mibscope.mib.models import MibIndex
from mibscope.mib.parsers import (
    TxpTarget,
    parse_ccf_lines,
    parse_cdf_lines,
    parse_cve_lines,
    parse_cvp_lines,
    parse_pcf_lines,
    parse_pid_lines,
    parse_plf_lines,
    parse_txp_lines,
)

log = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class DatFile:
    """One table file as handed to the builder: where it came from and its lines."""

    path: str
    lines: Sequence[str] = field(default_factory=tuple)


def build_mib_index_from_lines(
    ccf: Iterable[DatFile],
    cdf: Iterable[DatFile] = (),
    pid: Iterable[DatFile] = (),
    plf: Iterable[DatFile] = (),
    pcf: Iterable[DatFile] = (),
    cve: Iterable[DatFile] = (),
    cvp: Iterable[DatFile] = (),
    txp: Iterable[DatFile] = (),
    *,
    txp_targets: TxpTarget = TxpTarget.ALL,
) -> MibIndex:
    """Parse and cross-link every table file into a ``MibIndex``.

    Args:
        ccf: Command definition files.
        cdf: Command parameter files.
        pid: Telemetry packet files.
        plf: Telemetry parameter location files.
        pcf: Parameter definition files (names for PLF parameters).
        cve: Calibration value files (command parameter enumerations).
        cvp: Command-value association files. Parsed, not attached.
        txp: Text value files (enumerations, see ``txp_targets``).
        txp_targets: Which records receive TXP labels.

    Returns:
        The frozen index. Deterministic for a fixed file and line order.
    """
    arena = MibArena()

    ccf_files = list(ccf)
    for dat in ccf_files:
        for entry in parse_ccf_lines(dat.lines, dat.path):
            arena.add_command(entry)

    cdf_files = list(cdf)
    params_added = sum(parse_cdf_lines(dat.lines, arena) for dat in cdf_files)

    pid_files = list(pid)
    for dat in pid_files:
        for telemetry in parse_pid_lines(dat.lines, dat.path):
            arena.add_telemetry(telemetry)

    pcf_files = list(pcf)
    for dat in pcf_files:
        arena.add_param_defs(parse_pcf_lines(dat.lines))

    plf_files = list(plf)
    locations_added = sum(parse_plf_lines(dat.lines, arena) for dat in plf_files)

    cve_files = list(cve)
    enumerated = sum(parse_cve_lines(dat.lines, arena) for dat in cve_files)

    # Command/value-set associations have no consumer; parse for the record only.
    cvp_files = list(cvp)
    associations = sum(len(parse_cvp_lines(dat.lines)) for dat in cvp_files)

    txp_files = list(txp)
    enumerated += sum(parse_txp_lines(dat.lines, arena, txp_targets) for dat in txp_files)

    index = arena.freeze()
    log.info(
        "mib_index_built",
        files={
            "ccf": len(ccf_files),
            "cdf": len(cdf_files),
            "pid": len(pid_files),
            "pcf": len(pcf_files),
            "plf": len(plf_files),
            "cve": len(cve_files),
            "cvp": len(cvp_files),
            "txp": len(txp_files),
        },
        commands=len(index.tc_by_id),
        named_commands=len(index.tc_by_name),
        telemetry=len(index.telemetry_by_sid),
        command_params=params_added,
        telemetry_params=locations_added,
        param_defs=len(arena.param_defs),
        enumerated_params=enumerated,
        cvp_commands=associations,
    )
    return index
