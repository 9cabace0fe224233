import io
import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rummiset.cli import EXIT_INVALID, EXIT_MALFORMED, EXIT_VALID, main, run_loop
from rummiset.rules import Ruleset


def test_valid_sequence_from_arguments(capsys):
    code = main(["r5", "r6", "r7", "r8"])
    assert code == EXIT_VALID
    assert capsys.readouterr().out.strip() == "Valid"


def test_quoted_sequence_and_explanation(capsys):
    code = main(["--explain", "r6 r7 c r9 r10"])
    assert code == EXIT_INVALID
    out = capsys.readouterr().out.strip()
    assert out.startswith("Invalid: ")
    assert "not allowed" in out


def test_malformed_argument_reports_error(capsys):
    code = main(["r5", "x6", "r7"])
    assert code == EXIT_MALFORMED
    assert capsys.readouterr().out.startswith("Error: ")


def test_group_size_option(capsys):
    assert main(["--max-group-size", "3", "r7", "u7", "a7", "o7"]) == EXIT_INVALID
    assert main(["r7", "u7", "a7", "o7"]) == EXIT_VALID
    with pytest.raises(SystemExit):
        main(["--max-group-size", "5", "r7", "u7", "a7"])


def test_read_loop_reports_each_line_and_stops_on_quit(capsys):
    stream = io.StringIO("r5 r6 r7\n\nu9 u8 u7\nr14 r15\nQUIT\nr1 r2 r3\n")
    checked = run_loop(stream, Ruleset())
    assert checked == 3
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Valid"
    assert lines[1] == "Invalid"
    assert lines[2].startswith("Error: ")
    assert len(lines) == 3


def test_read_loop_stops_at_end_of_input(capsys):
    checked = run_loop(io.StringIO("a7 r7 m r7 a7"), Ruleset(), explain=True)
    assert checked == 1
    assert capsys.readouterr().out.strip() == "Valid"


def test_main_reads_stdin_without_tiles(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("r8 j u8\nr8 j r9\n"))
    assert main(["--explain"]) == EXIT_VALID
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Valid"
    assert lines[1].startswith("Invalid: ")
