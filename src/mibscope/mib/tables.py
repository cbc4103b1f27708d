"""Fixed-arity row structs, one per table kind.

Each struct names the columns mibscope uses and knows the minimum number of
columns a row needs. ``decode`` returns ``None`` for rows that are too short
or whose key column is empty; callers skip those rows. Columns past the end
of a row decode as ``None``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar


def column(cols: Sequence[str], index: int) -> str | None:
    """Column ``index`` of a tokenized row, or ``None`` if the row is shorter."""
    return cols[index] if index < len(cols) else None


@dataclass(frozen=True, slots=True)
class CcfRow:
    """Command definition: id, name, description, header, type, subtype, apid."""

    MIN_COLUMNS: ClassVar[int] = 1

    id: str
    name: str | None
    description: str | None
    header: str | None
    service_type: str | None
    sub_service: str | None
    apid: str | None

    @classmethod
    def decode(cls, cols: Sequence[str]) -> CcfRow | None:
        if len(cols) < cls.MIN_COLUMNS or not cols[0]:
            return None
        return cls(
            id=cols[0],
            name=column(cols, 1),
            description=column(cols, 2),
            header=column(cols, 5),
            service_type=column(cols, 6),
            sub_service=column(cols, 7),
            apid=column(cols, 8),
        )


@dataclass(frozen=True, slots=True)
class CdfRow:
    """Command parameter detail, keyed by the owning command id."""

    MIN_COLUMNS: ClassVar[int] = 1

    tc_id: str
    kind: str | None
    name: str
    bit_length: str | None
    bit_offset: str | None
    param_id: str | None

    @classmethod
    def decode(cls, cols: Sequence[str]) -> CdfRow | None:
        if len(cols) < cls.MIN_COLUMNS or not cols[0]:
            return None
        return cls(
            tc_id=cols[0],
            kind=column(cols, 1),
            name=column(cols, 2) or "",
            bit_length=column(cols, 3),
            bit_offset=column(cols, 4),
            param_id=column(cols, 6),
        )


@dataclass(frozen=True, slots=True)
class PidRow:
    """Telemetry packet identification, keyed by SID in column 5."""

    MIN_COLUMNS: ClassVar[int] = 6

    service: str
    sub_service: str
    sid: str
    description: str | None

    @classmethod
    def decode(cls, cols: Sequence[str]) -> PidRow | None:
        if len(cols) < cls.MIN_COLUMNS or not cols[5]:
            return None
        return cls(
            service=cols[0],
            sub_service=cols[1],
            sid=cols[5],
            description=column(cols, 6),
        )


@dataclass(frozen=True, slots=True)
class PlfRow:
    """Parameter location inside a telemetry packet."""

    MIN_COLUMNS: ClassVar[int] = 2

    param_id: str
    sid: str

    @classmethod
    def decode(cls, cols: Sequence[str]) -> PlfRow | None:
        if len(cols) < cls.MIN_COLUMNS or not cols[0] or not cols[1]:
            return None
        return cls(param_id=cols[0], sid=cols[1])


@dataclass(frozen=True, slots=True)
class PcfRow:
    """Parameter definition; column 11 links to a text-value set."""

    MIN_COLUMNS: ClassVar[int] = 1

    param_id: str
    name: str | None
    enum_set_id: str | None

    @classmethod
    def decode(cls, cols: Sequence[str]) -> PcfRow | None:
        if len(cols) < cls.MIN_COLUMNS or not cols[0]:
            return None
        return cls(param_id=cols[0], name=column(cols, 1), enum_set_id=column(cols, 11))


@dataclass(frozen=True, slots=True)
class CveRow:
    """Calibration value; only type ``E`` rows carry an enumeration label."""

    MIN_COLUMNS: ClassVar[int] = 2

    value_id: str
    value_type: str | None
    value_range: str | None

    @classmethod
    def decode(cls, cols: Sequence[str]) -> CveRow | None:
        if len(cols) < cls.MIN_COLUMNS or not cols[1]:
            return None
        return cls(value_id=cols[1], value_type=column(cols, 2), value_range=column(cols, 3))

    @property
    def label(self) -> str | None:
        if self.value_type == "E" and self.value_range:
            return self.value_range
        return None


@dataclass(frozen=True, slots=True)
class CvpRow:
    """Association between a command and a value set."""

    MIN_COLUMNS: ClassVar[int] = 3

    tc_id: str
    value_id: str

    @classmethod
    def decode(cls, cols: Sequence[str]) -> CvpRow | None:
        if len(cols) < cls.MIN_COLUMNS or not cols[0] or not cols[2]:
            return None
        return cls(tc_id=cols[0], value_id=cols[2])


@dataclass(frozen=True, slots=True)
class TxpRow:
    """Text value: the key is column 0, the label is the last column."""

    MIN_COLUMNS: ClassVar[int] = 1

    key: str
    label: str

    @classmethod
    def decode(cls, cols: Sequence[str]) -> TxpRow | None:
        if len(cols) < cls.MIN_COLUMNS or not cols[0] or not cols[-1]:
            return None
        return cls(key=cols[0], label=cols[-1])
