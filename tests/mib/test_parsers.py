"""Tests for the per-table parsers."""

import pytest

from mibscope.mib.arena import MibArena
from mibscope.mib.models import ParamDef, ParamEntry, TcEntry, TelemetryEntry
from mibscope.mib.parsers import (
    TxpTarget,
    collect_cve_labels,
    collect_txp_labels,
    parse_ccf_lines,
    parse_cdf_lines,
    parse_cve_lines,
    parse_cvp_lines,
    parse_pcf_lines,
    parse_pid_lines,
    parse_plf_lines,
    parse_txp_lines,
)


def _row(*cols: str) -> str:
    return "\t".join(cols)


def _arena_with_command(tc_id: str = "TC_A", *params: ParamEntry) -> MibArena:
    arena = MibArena()
    arena.add_command(TcEntry(id=tc_id, source_path="ccf.dat", source_line=1))
    arena.commands[tc_id].params.extend(params)
    return arena


class TestParseCcfLines:
    def test_one_entry_per_data_row(self) -> None:
        lines = ["# header", _row("TC_A", "DEPLOY"), "", _row("TC_B")]

        entries = parse_ccf_lines(lines, "/mib/ccf.dat")

        assert [e.id for e in entries] == ["TC_A", "TC_B"]
        assert [e.source_line for e in entries] == [2, 4]
        assert all(e.source_path == "/mib/ccf.dat" for e in entries)

    def test_rows_without_id_are_skipped(self) -> None:
        entries = parse_ccf_lines([_row("", "NAMELESS"), _row("TC_A")], "ccf.dat")

        assert [e.id for e in entries] == ["TC_A"]

    def test_entries_start_without_params(self) -> None:
        (entry,) = parse_ccf_lines([_row("TC_A", "DEPLOY", "Deploy")], "ccf.dat")

        assert entry.params == ()
        assert entry.description == "Deploy"
        assert entry.header is None


class TestParsePidLines:
    def test_short_rows_are_skipped(self) -> None:
        lines = [_row("3", "25", "0"), _row("3", "25", "0", "0", "0", "1001", "HK")]

        entries = parse_pid_lines(lines, "pid.dat")

        assert entries == [
            TelemetryEntry(
                sid="1001",
                service="3",
                sub_service="25",
                description="HK",
                source_path="pid.dat",
                source_line=2,
            )
        ]


class TestParsePcfLines:
    def test_first_definition_wins(self) -> None:
        lines = [_row("PT_TEMP", "FIRST"), _row("PT_TEMP", "SECOND")]

        defs = parse_pcf_lines(lines)

        assert defs == {"PT_TEMP": ParamDef(param_id="PT_TEMP", name="FIRST", enum_set_id=None)}


class TestParseCvpLines:
    def test_groups_value_ids_per_command(self) -> None:
        lines = [_row("TC_A", "1", "CAL1"), _row("TC_A", "2", "CAL2"), _row("TC_B", "1", "CAL1")]

        assert parse_cvp_lines(lines) == {
            "TC_A": frozenset({"CAL1", "CAL2"}),
            "TC_B": frozenset({"CAL1"}),
        }


class TestLabelCollectors:
    def test_cve_value_ids_without_enumerations_get_empty_sets(self) -> None:
        lines = [_row("C", "P_MODE", "E", "SAFE"), _row("C", "P_GAIN", "R", "0..10")]

        labels = collect_cve_labels(lines)

        assert labels == {"P_MODE": {"SAFE"}, "P_GAIN": set()}

    def test_txp_labels_are_deduplicated_per_key(self) -> None:
        lines = [_row("TXT_1", "0", "COLD"), _row("TXT_1", "9", "COLD"), _row("TXT_2", "1", "ON")]

        assert collect_txp_labels(lines) == {"TXT_1": {"COLD"}, "TXT_2": {"ON"}}


class TestParseCdfLines:
    def test_appends_params_in_row_order(self) -> None:
        arena = _arena_with_command()
        lines = [_row("TC_A", "E", "MODE", "8", "16", "", "P_MODE"), _row("TC_A", "A", "SPARE")]

        added = parse_cdf_lines(lines, arena)

        assert added == 2
        params = arena.commands["TC_A"].params
        assert [p.name for p in params] == ["MODE", "SPARE"]
        assert params[0].param_id == "P_MODE"
        assert params[0].raw == ("TC_A", "E", "MODE", "8", "16", "", "P_MODE")
        assert params[1].bit_length is None

    def test_unknown_command_rows_are_dropped(self) -> None:
        arena = _arena_with_command()

        added = parse_cdf_lines([_row("TC_X", "E", "MODE")], arena)

        assert added == 0
        assert arena.commands["TC_A"].params == []


class TestParsePlfLines:
    def test_names_from_pcf_or_param_id(self) -> None:
        arena = MibArena()
        arena.add_telemetry(TelemetryEntry(sid="1001", source_path="pid.dat", source_line=1))
        arena.add_param_defs({"PT_TEMP": ParamDef("PT_TEMP", "BATT_TEMP", "TXT_1")})

        added = parse_plf_lines([_row("PT_TEMP", "1001"), _row("PT_RAW", "1001")], arena)

        assert added == 2
        temp, raw = arena.telemetry["1001"].params
        assert (temp.name, temp.kind, temp.enum_set_id) == ("BATT_TEMP", "P", "TXT_1")
        assert (raw.name, raw.param_id, raw.enum_set_id) == ("PT_RAW", "PT_RAW", None)

    def test_explicit_defs_override_arena(self) -> None:
        arena = MibArena()
        arena.add_telemetry(TelemetryEntry(sid="1001", source_path="pid.dat", source_line=1))
        arena.add_param_defs({"PT_TEMP": ParamDef("PT_TEMP", "ARENA_NAME")})

        parse_plf_lines(
            [_row("PT_TEMP", "1001")],
            arena,
            param_defs={"PT_TEMP": ParamDef("PT_TEMP", "GIVEN_NAME")},
        )

        assert arena.telemetry["1001"].params[0].name == "GIVEN_NAME"

    def test_empty_pcf_name_falls_back_to_id(self) -> None:
        arena = MibArena()
        arena.add_telemetry(TelemetryEntry(sid="1001", source_path="pid.dat", source_line=1))
        arena.add_param_defs({"PT_TEMP": ParamDef("PT_TEMP", "")})

        parse_plf_lines([_row("PT_TEMP", "1001")], arena)

        assert arena.telemetry["1001"].params[0].name == "PT_TEMP"

    def test_unknown_sid_is_dropped(self) -> None:
        arena = MibArena()

        assert parse_plf_lines([_row("PT_TEMP", "9999")], arena) == 0


class TestParseCveLines:
    def test_attaches_sorted_labels_by_param_id(self) -> None:
        arena = _arena_with_command("TC_A", ParamEntry(name="MODE", param_id="P_MODE"))
        lines = [_row("C", "P_MODE", "E", "SAFE"), _row("C", "P_MODE", "E", "NOMINAL")]

        updated = parse_cve_lines(lines, arena)

        assert updated == 1
        assert arena.commands["TC_A"].params[0].enumerations == ("NOMINAL", "SAFE")

    def test_value_id_without_enumerations_attaches_empty_tuple(self) -> None:
        arena = _arena_with_command("TC_A", ParamEntry(name="GAIN", param_id="P_GAIN"))

        parse_cve_lines([_row("C", "P_GAIN", "R", "0..10")], arena)

        assert arena.commands["TC_A"].params[0].enumerations == ()


class TestParseTxpLines:
    @pytest.fixture
    def arena(self) -> MibArena:
        arena = _arena_with_command("TC_A", ParamEntry(name="SWITCH", param_id="TXT_1"))
        arena.add_telemetry(TelemetryEntry(sid="1001", source_path="pid.dat", source_line=1))
        arena.telemetry["1001"].params.append(
            ParamEntry(name="BATT_TEMP", kind="P", param_id="PT_TEMP", enum_set_id="TXT_1")
        )
        return arena

    @pytest.mark.parametrize(
        ("targets", "telemetry_labels", "command_labels"),
        [
            (TxpTarget.ALL, ("COLD", "HOT"), ("COLD", "HOT")),
            (TxpTarget.TELEMETRY, ("COLD", "HOT"), None),
            (TxpTarget.COMMANDS, None, ("COLD", "HOT")),
            (TxpTarget.NONE, None, None),
        ],
    )
    def test_strategies_are_independent(
        self,
        arena: MibArena,
        targets: TxpTarget,
        telemetry_labels: tuple[str, ...] | None,
        command_labels: tuple[str, ...] | None,
    ) -> None:
        lines = [_row("TXT_1", "0", "0", "HOT"), _row("TXT_1", "1", "1", "COLD")]

        parse_txp_lines(lines, arena, targets)

        assert arena.telemetry["1001"].params[0].enumerations == telemetry_labels
        assert arena.commands["TC_A"].params[0].enumerations == command_labels

    def test_later_enrichment_overwrites_earlier(self, arena: MibArena) -> None:
        parse_cve_lines([_row("C", "TXT_1", "E", "FROM_CVE")], arena)

        parse_txp_lines([_row("TXT_1", "0", "FROM_TXP")], arena, TxpTarget.COMMANDS)

        assert arena.commands["TC_A"].params[0].enumerations == ("FROM_TXP",)


class TestTxpTargetFromName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("telemetry", TxpTarget.TELEMETRY),
            ("commands", TxpTarget.COMMANDS),
            ("ALL", TxpTarget.ALL),
            ("none", TxpTarget.NONE),
        ],
    )
    def test_known_names(self, name: str, expected: TxpTarget) -> None:
        assert TxpTarget.from_name(name) is expected

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown TXP target"):
            TxpTarget.from_name("packets")
