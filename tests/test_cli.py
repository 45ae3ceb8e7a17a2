import io

import pytest

from swordgen.cli import main, resolve_depth, run
from swordgen.errors import ExitCode
from swordgen.generator import estimate_lines


def _run(argv, stdin_text=""):
    stdin, stdout, stderr = io.StringIO(stdin_text), io.StringIO(), io.StringIO()
    code = run(argv, stdin, stdout, stderr)
    return code, stdout.getvalue(), stderr.getvalue()


def test_quiet_words_to_stdout():
    code, out, err = _run(["-w", "a,b", "-q"])
    assert code == ExitCode.OK
    assert out == "a\nb\naa\nab\nba\nbb\n"
    assert err == ""


def test_line_count_matches_estimate():
    code, out, _ = _run(["-w", "x,y,z", "-q"])
    assert code == 0
    assert len(out.splitlines()) == estimate_lines(3, 3)


def test_depth_limits_output():
    _, out, _ = _run(["-w", "p,q,r", "-d", "1", "-q"])
    assert out.splitlines() == ["p", "q", "r"]


def test_output_file_matches_stdout_output(tmp_path):
    target = tmp_path / "list.txt"
    code, out, _ = _run(["-w", "cat,dog", "-o", str(target), "-q"])
    assert code == 0
    assert out == ""
    _, expected, _ = _run(["-w", "cat,dog", "-q"])
    assert target.read_text(encoding="utf-8") == expected


def test_input_file(tmp_path):
    source = tmp_path / "words.txt"
    source.write_text("one\n\ntwo\r\n", encoding="utf-8")
    _, from_file, _ = _run(["-f", str(source), "-q"])
    _, from_string, _ = _run(["-w", "one,two", "-q"])
    assert from_file == from_string


def test_verbose_messages():
    code, out, _ = _run(["-w", "a,b"])
    assert code == 0
    assert out.startswith("Input: 'a,b'\nOutput: STDOUT\n")
    assert "Creating wordlist...\n" in out
    assert out.endswith("Wordlist generation complete.\n")


def test_dry_run_creates_empty_file(tmp_path):
    target = tmp_path / "out.txt"
    code, out, _ = _run(["-w", "a,b", "-e", "-q", "-o", str(target)])
    assert code == 0
    assert out == "Dry run detected, exiting...\n"
    assert target.read_text() == ""


def test_missing_input_file(tmp_path):
    code, out, err = _run(["-f", str(tmp_path / "absent.txt"), "-q"])
    assert code == ExitCode.NOINPUT
    assert err.startswith("Error: cannot open")
    assert out == ""


def test_uncreatable_output(tmp_path):
    code, _, err = _run(["-w", "a", "-q", "-o", str(tmp_path / "no" / "dir" / "x.txt")])
    assert code == ExitCode.CANTCREAT
    assert err.startswith("Error creating output file:")


def test_usage_error():
    code, out, err = _run(["--nope"])
    assert code == ExitCode.USAGE
    assert err == "Unknown option: --nope\nType 'swg -h' for help\n"
    assert out == ""


def test_help_and_version():
    code, out, _ = _run([])
    assert code == 0
    assert "Usage: swg [args]" in out
    code, out, _ = _run(["--version"])
    assert code == 0
    assert out == "0.2.7b\n"


def test_huge_estimate_declined():
    code, out, err = _run(["-w", "0,1,2,3,4,5,6,7,8,9", "-d", "9", "-q"], stdin_text="n\n")
    assert code == 0
    assert "Proceed anyway? (y/N): " in out
    assert err == "Aborted by user.\n"


def test_main_accepts_argv(capsys):
    assert main(["-w", "z", "-q"]) == 0
    assert capsys.readouterr().out == "z\n"


@pytest.mark.parametrize(
    "requested,count,expected",
    [(0, 4, 4), (2, 4, 2), (9, 4, 4), (4, 4, 4)],
)
def test_resolve_depth_values(requested, count, expected):
    assert resolve_depth(requested, count, True, io.StringIO(), io.StringIO()) == expected


def test_resolve_depth_capping_warns():
    stdout, stderr = io.StringIO(), io.StringIO()
    assert resolve_depth(7, 3, False, stdout, stderr) == 3
    assert "requested depth (7) is bigger than total word count (3)" in stderr.getvalue()
    assert stdout.getvalue() == "Max depth: 3 (capped)\n"


def test_resolve_depth_quiet_is_silent():
    stdout, stderr = io.StringIO(), io.StringIO()
    assert resolve_depth(0, 5, True, stdout, stderr) == 5
    assert stdout.getvalue() == ""
    assert stderr.getvalue() == ""