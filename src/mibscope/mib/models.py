"""Records exposed by a built MIB index.

Every record is frozen. Parsers create them, the builder replaces parameter
tuples and enumerations while it owns them, and the finished ``MibIndex``
hands out read-only views only.

Optional text fields keep the table's textual form: a column that exists
but is empty stays ``""``; a column the row is too short to have is
``None``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType


class TableKind(StrEnum):
    """The eight SCOS-2000 ASCII table kinds understood by mibscope."""

    CCF = "ccf"  # command definitions
    CDF = "cdf"  # command parameters
    PID = "pid"  # telemetry packet definitions
    PLF = "plf"  # telemetry parameter locations
    PCF = "pcf"  # parameter definitions
    CVE = "cve"  # calibration / enumeration values
    CVP = "cvp"  # command-value associations
    TXP = "txp"  # telemetry text values

    @property
    def file_names(self) -> tuple[str, str]:
        """Accepted file names, lower and upper case."""
        return f"{self.value}.dat", f"{self.value.upper()}.DAT"


@dataclass(frozen=True, slots=True)
class ParamEntry:
    """One parameter of a telecommand or a telemetry packet."""

    name: str
    kind: str | None = None
    bit_length: str | None = None
    bit_offset: str | None = None
    param_id: str | None = None
    enum_set_id: str | None = None
    raw: tuple[str, ...] = ()
    enumerations: tuple[str, ...] | None = None

    @property
    def identifier(self) -> str:
        """Key used in command lines: the parameter id, else its name."""
        return self.param_id or self.name


@dataclass(frozen=True, slots=True)
class TcEntry:
    """A telecommand: one CCF row plus its CDF parameters."""

    id: str
    source_path: str
    source_line: int
    name: str | None = None
    description: str | None = None
    header: str | None = None
    service_type: str | None = None
    sub_service: str | None = None
    apid: str | None = None
    params: tuple[ParamEntry, ...] = ()

    @property
    def label(self) -> str:
        return f"{self.id} ({self.name})" if self.name else self.id


@dataclass(frozen=True, slots=True)
class TelemetryEntry:
    """A telemetry packet: one PID row plus its PLF parameters."""

    sid: str
    source_path: str
    source_line: int
    service: str | None = None
    sub_service: str | None = None
    description: str | None = None
    params: tuple[ParamEntry, ...] = ()


@dataclass(frozen=True, slots=True)
class ParamDef:
    """PCF projection used to name telemetry parameters."""

    param_id: str
    name: str | None = None
    enum_set_id: str | None = None


def _frozen_map[K, V](data: Mapping[K, V] | None) -> Mapping[K, V]:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True, slots=True)
class MibIndex:
    """Cross-linked lookup tables built from one set of MIB files.

    ``tc_by_name`` only holds commands with a non-empty name. Built once,
    never updated; rebuild from scratch when the inputs change.
    """

    tc_by_id: Mapping[str, TcEntry] = field(default_factory=dict)
    tc_by_name: Mapping[str, TcEntry] = field(default_factory=dict)
    telemetry_by_sid: Mapping[str, TelemetryEntry] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tc_by_id", _frozen_map(self.tc_by_id))
        object.__setattr__(self, "tc_by_name", _frozen_map(self.tc_by_name))
        object.__setattr__(self, "telemetry_by_sid", _frozen_map(self.telemetry_by_sid))

    @property
    def commands(self) -> tuple[TcEntry, ...]:
        """Commands in id insertion order."""
        return tuple(self.tc_by_id.values())

    @property
    def telemetry(self) -> tuple[TelemetryEntry, ...]:
        return tuple(self.telemetry_by_sid.values())

    @property
    def is_empty(self) -> bool:
        return not self.tc_by_id and not self.telemetry_by_sid
