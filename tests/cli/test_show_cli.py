from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

from shunt.cli import show as cli_show


ROOT = Path(__file__).resolve().parents[2]


def test_cli_show_prints_all_renderings(capsys) -> None:
    rc = cli_show.main(["a", "+", "b", "*", "c"])
    captured = capsys.readouterr()

    lines = captured.out.splitlines()
    assert rc == 0
    assert captured.err == ""
    assert len(lines) == 2 + 12
    assert lines[0] == "{a+{b*c}}"
    assert lines[1] == "a + b * c"
    assert lines[2] == "a +      "
    assert lines[3] == "    b * c"


def test_cli_show_joins_words_with_spaces(capsys) -> None:
    rc = cli_show.main(["f", "(x", "+", "1)"])
    lines = capsys.readouterr().out.splitlines()

    assert rc == 0
    assert lines[0] == "{f ({x+1})}"
    assert lines[1] == "f (x + 1)"


def test_cli_show_operator_words_are_not_options(capsys) -> None:
    rc = cli_show.main(["a", "->", "b", "-|", "c"])
    lines = capsys.readouterr().out.splitlines()

    assert rc == 0
    assert lines[0] == "{{a->b}-|c}"


def test_cli_show_json(capsys) -> None:
    rc = cli_show.main(["--json", "f", "1"])
    lines = capsys.readouterr().out.splitlines()

    assert rc == 0
    assert len(lines) == 15
    assert json.loads(lines[-1]) == {
        "node": "Application",
        "callee": {"node": "Identifier", "name": "f"},
        "args": [{"node": "NumberLit", "value": 1}],
    }


def test_cli_show_error_has_no_stdout(capsys) -> None:
    rc = cli_show.main(["(a", "+", "b"])
    captured = capsys.readouterr()

    assert rc == 1
    assert captured.out == ""
    assert captured.err.startswith("ERROR: Expected closing parenthesis but found end of input")


def test_cli_show_tokenize_error(capsys) -> None:
    rc = cli_show.main(["a", "\\", "b"])
    captured = capsys.readouterr()

    assert rc == 1
    assert captured.out == ""
    assert "'\\\\'" in captured.err


def test_cli_show_strict_nonassoc(capsys) -> None:
    assert cli_show.main(["a", "<", "b", "<", "c"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "{a<{b<c}}"

    rc = cli_show.main(["--strict-nonassoc", "a", "<", "b", "<", "c"])
    captured = capsys.readouterr()
    assert rc == 1
    assert captured.out == ""
    assert "non-associative" in captured.err


def test_cli_show_writes_trace(tmp_path: Path, capsys) -> None:
    trace_path = tmp_path / "trace.jsonl"

    rc = cli_show.main(["--trace", str(trace_path), "x", "*", "2"])
    capsys.readouterr()

    assert rc == 0
    records = [json.loads(line) for line in trace_path.read_text(encoding="utf-8").splitlines()]
    assert records[0]["kind"] == "enter"
    assert records[-1]["kind"] == "leave"
    assert "reduce" in {record["kind"] for record in records}


def test_cli_show_writes_trace_on_error(tmp_path: Path, capsys) -> None:
    trace_path = tmp_path / "trace.jsonl"

    rc = cli_show.main(["--trace", str(trace_path), "x", "*"])
    capsys.readouterr()

    assert rc == 1
    assert trace_path.exists()


def test_cli_show_unwritable_trace_warns(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")

    rc = cli_show.main(["--trace", str(blocker / "trace.jsonl"), "x"])
    captured = capsys.readouterr()

    assert rc == 0
    assert captured.err.startswith("WARNING: parse trace logging failed")
    assert len(captured.out.splitlines()) == 14


def test_cli_show_module_entrypoint() -> None:
    result = subprocess.run(
        [sys.executable, "-m", "shunt.cli.show", ")"],
        capture_output=True,
        text=True,
        check=False,
        cwd=ROOT,
    )
    assert result.returncode == 1
    assert result.stdout == ""
    assert "Unbalanced expression" in result.stderr


def test_cli_show_long_number_literal(capsys) -> None:
    digits = "1" * 5000

    rc = cli_show.main(["f", digits, "+", "1"])
    captured = capsys.readouterr()

    assert rc == 0
    assert captured.err == ""
    assert captured.out.splitlines()[1] == f"f {digits} + 1"
