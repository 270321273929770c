"""
Tests for the lc3disasm Command-Line Tool
=========================================

Covers listing output, options, environment configuration and exit codes.
"""

import json
import logging

import pytest
from click.testing import CliRunner

from lc3_disasm.cli.errors import ExitCode
from lc3_disasm.cli.lc3disasm import main

PROGRAM = bytes([
    0x30, 0x00,   # .ORIG x3000
    0x10, 0x66,   # ADD R0, R1, #6
    0x0D, 0xFE,   # BRnz 0x3000
    0xF0, 0x25,   # TRAP 0x25
])

CLEAN_ENV = {
    "LC3_DISASM_EXTENSIONS": None,
    "LC3_DISASM_COMMENTS": None,
    "LC3_DISASM_WORDS": None,
    "LC3_DISASM_HEADER": None,
    "LC3_DISASM_STRICT": None,
}


@pytest.fixture
def program(tmp_path):
    path = tmp_path / "prog.obj"
    path.write_bytes(PROGRAM)
    return path


def run(*args, env=None):
    runner = CliRunner()
    environment = dict(CLEAN_ENV)
    environment.update(env or {})
    return runner.invoke(main, [str(a) for a in args], env=environment)


class TestCLI:
    """Tests for the lc3disasm command."""

    def test_cli_help(self):
        result = run("--help")

        assert result.exit_code == 0
        assert "Disassemble an LC-3 object file" in result.output

    def test_cli_version(self):
        result = run("--version")

        assert result.exit_code == 0
        assert "lc3disasm" in result.output

    def test_cli_basic_disassembly(self, program):
        result = run(program)

        assert result.exit_code == 0
        assert "0x3000: ADD R0, R1, #6" in result.output
        assert "0x3001: BRnz 0x3000" in result.output
        assert "0x3002: TRAP 0x25" in result.output

    def test_cli_lines_in_address_order(self, program):
        result = run(program, "--no-header")

        assert result.output.splitlines() == [
            "0x3000: ADD R0, R1, #6",
            "0x3001: BRnz 0x3000",
            "0x3002: TRAP 0x25",
        ]

    def test_cli_header(self, program):
        result = run(program)

        assert "; Disassembly of prog.obj" in result.output
        assert "; Origin: 0x3000" in result.output
        assert "; Words: 3" in result.output

    def test_cli_count(self, program):
        result = run(program, "--no-header", "--count", "1")

        assert result.output.splitlines() == ["0x3000: ADD R0, R1, #6"]

    def test_cli_words(self, program):
        result = run(program, "--words")

        assert "0x3000: 1066  ADD R0, R1, #6" in result.output

    def test_cli_comments(self, program):
        result = run(program, "--comments")

        assert "; HALT" in result.output
        assert "; -2" in result.output

    def test_cli_extensions(self, tmp_path):
        path = tmp_path / "ext.obj"
        path.write_bytes(bytes([0x30, 0x00, 0xD2, 0xE9]))

        assert "0x3000: RES" in run(path).output
        assert "0x3000: CLR R1" in run(path, "--extensions").output

    def test_cli_json(self, program):
        result = run(program, "--json")

        assert result.exit_code == 0
        records = json.loads(result.output)
        assert [r["text"] for r in records] == [
            "ADD R0, R1, #6",
            "BRnz 0x3000",
            "TRAP 0x25",
        ]
        assert records[1]["target"] == "0x3000"

    def test_cli_output_file(self, program, tmp_path):
        out = tmp_path / "listing.asm"

        result = run(program, "-o", out)

        assert result.exit_code == 0
        assert "0x3002: TRAP 0x25" in out.read_text(encoding="utf-8")

    def test_cli_truncated_warns(self, tmp_path):
        path = tmp_path / "wrap.obj"
        path.write_bytes(bytes([0xFF, 0xFF, 0x11, 0x11, 0x22, 0x22]))

        result = run(path)

        assert result.exit_code == 0
        assert "0xFFFF: ADD R0, R4, R1" in result.output
        assert "; Truncated: 1 word(s)" in result.output

    def test_cli_truncation_reported_once(self, tmp_path, caplog):
        """Dropped words are logged by the loader and not echoed again."""
        path = tmp_path / "wrap.obj"
        path.write_bytes(bytes([0xFF, 0xFF, 0x11, 0x11, 0x22, 0x22]))

        with caplog.at_level(logging.WARNING, logger="lc3_disasm.objfile.loader"):
            result = run(path)

        assert result.exit_code == 0
        assert "Warning:" not in result.output
        assert result.output.count("; Truncated:") == 1
        overflow = [
            r for r in caplog.records
            if r.name == "lc3_disasm.objfile.loader" and "dropped" in r.getMessage()
        ]
        assert len(overflow) == 1

    def test_cli_empty_image_no_header(self, tmp_path):
        """An origin-only file with no header produces no output at all."""
        path = tmp_path / "empty.obj"
        path.write_bytes(bytes([0x30, 0x00]))

        result = run(path, "--no-header")

        assert result.exit_code == 0
        assert result.output == ""

    def test_cli_empty_image_header_only(self, tmp_path):
        path = tmp_path / "empty.obj"
        path.write_bytes(bytes([0x30, 0x00]))

        result = run(path)

        assert result.exit_code == 0
        assert "; Words: 0" in result.output
        assert "0x3000:" not in result.output

    def test_cli_trailing_bytes_header(self, tmp_path):
        path = tmp_path / "odd.obj"
        path.write_bytes(bytes([0x30, 0x00, 0x10, 0x66, 0x56]))

        result = run(path)

        assert result.exit_code == 0
        assert "; Trailing bytes: 1" in result.output
        assert "0x3000: ADD R0, R1, #6" in result.output

    def test_cli_no_trailing_bytes_line_when_aligned(self, program):
        result = run(program)

        assert "; Trailing bytes" not in result.output

    def test_cli_truncated_strict(self, tmp_path):
        path = tmp_path / "wrap.obj"
        path.write_bytes(bytes([0xFF, 0xFF, 0x11, 0x11, 0x22, 0x22]))

        result = run(path, "--strict")

        assert result.exit_code == ExitCode.LOAD_ERROR
        assert "Load error" in result.output

    def test_cli_too_short(self, tmp_path):
        path = tmp_path / "short.obj"
        path.write_bytes(b"\x30")

        result = run(path)

        assert result.exit_code == ExitCode.LOAD_ERROR
        assert "too short" in result.output

    def test_cli_missing_file(self, tmp_path):
        result = run(tmp_path / "missing.obj")

        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_cli_env_disables_header(self, program):
        result = run(program, env={"LC3_DISASM_HEADER": "0"})

        assert "; Disassembly" not in result.output
        assert result.output.startswith("0x3000: ")

    def test_cli_flag_overrides_env(self, program):
        result = run(program, "--header", env={"LC3_DISASM_HEADER": "0"})

        assert "; Disassembly of prog.obj" in result.output
