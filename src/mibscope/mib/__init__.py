"""MIB module - SCOS-2000 ASCII table parsing and cross-linking.

Public API:
- build_mib_index_from_lines: parse and link all table kinds
- DatFile: (path, lines) input unit
- MibIndex, TcEntry, TelemetryEntry, ParamEntry, ParamDef: frozen records
- TableKind, TxpTarget: table kinds and TXP enrichment strategies
"""

from mibscope.mib.builder import DatFile, build_mib_index_from_lines
from mibscope.mib.models import (
    MibIndex,
    ParamDef,
    ParamEntry,
    TableKind,
    TcEntry,
    TelemetryEntry,
)
from mibscope.mib.parsers import TxpTarget
from mibscope.mib.tokenizer import is_comment_line, split_dat_line, split_text_lines

__all__ = [
    "DatFile",
    "build_mib_index_from_lines",
    "MibIndex",
    "ParamDef",
    "ParamEntry",
    "TableKind",
    "TcEntry",
    "TelemetryEntry",
    "TxpTarget",
    "is_comment_line",
    "split_dat_line",
    "split_text_lines",
]
