"""Tests for the hjson-props CLI."""

import io
import logging
import sys

import pytest

from hjson_props.cli import build_parser, run


# ---------------------------------------------------------------------------
# build_parser
# ---------------------------------------------------------------------------

def test_parser_files():
    args = build_parser().parse_args(["a.hjson", "b.hjson"])
    assert args.files == ["a.hjson", "b.hjson"]
    assert args.encoding == "utf-8"
    assert args.verbose is False

def test_parser_options():
    args = build_parser().parse_args(["-v", "--encoding", "latin-1", "a.hjson"])
    assert (args.verbose, args.encoding, args.files) == (True, "latin-1", ["a.hjson"])
    assert build_parser().parse_args(["--encoding=ascii", "a.hjson"]).encoding == "ascii"

@pytest.mark.parametrize("argv", [
    [],
    ["--bogus", "a.hjson"],
    ["a.hjson", "--encoding"],
    ["--encoding=", "a.hjson"],
    ["--encoding", "no-such-codec", "a.hjson"],
])
def test_run_usage_errors(argv):
    out, err = io.StringIO(), io.StringIO()
    assert run(argv, out, err) == 1
    assert "usage" in err.getvalue()
    assert out.getvalue() == ""

def test_run_help():
    out, err = io.StringIO(), io.StringIO()
    assert run(["--help"], out, err) == 0
    assert "FILE" in out.getvalue()


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------

def test_run_prints_properties(tmp_path):
    path = tmp_path / "app.hjson"
    path.write_text("db: {\n  host: localhost\n  ports: [5432, 5433]\n}\n", encoding="utf-8")
    out, err = io.StringIO(), io.StringIO()
    assert run([str(path)], out, err) == 0
    assert out.getvalue().splitlines() == [
        "db.host=localhost",
        "db.ports[0]=5432",
        "db.ports[1]=5433",
    ]
    assert err.getvalue() == ""

def test_run_reports_failures_and_continues(tmp_path):
    good = tmp_path / "good.hjson"
    good.write_text('{"a": 1}', encoding="utf-8")
    out, err = io.StringIO(), io.StringIO()
    assert run([str(tmp_path / "missing.hjson"), str(good)], out, err) == 2
    assert "missing.hjson" in err.getvalue()
    assert out.getvalue() == "a=1\n"

def test_run_reads_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO('{"x": true}'))
    out, err = io.StringIO(), io.StringIO()
    assert run(["-"], out, err) == 0
    assert out.getvalue() == "x=true\n"


def test_main_exit_code(monkeypatch, tmp_path):
    from hjson_props.cli import main
    path = tmp_path / "c.hjson"
    path.write_text('{"k": "v"}', encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["hjson-props", str(path)])
    with pytest.raises(SystemExit) as info:
        main()
    assert info.value.code == 0


def test_run_out_of_range_number_does_not_stop_later_files(tmp_path):
    bad = tmp_path / "bad.hjson"
    bad.write_text("a: 1e400\n", encoding="utf-8")
    good = tmp_path / "good.hjson"
    good.write_text("b: 1\n", encoding="utf-8")
    out, err = io.StringIO(), io.StringIO()
    assert run([str(bad), str(good)], out, err) == 2
    assert "bad.hjson" in err.getvalue()
    assert out.getvalue() == "b=1\n"


def test_run_logs_loaded_files_at_debug(tmp_path, caplog):
    path = tmp_path / "d.hjson"
    path.write_text("k: v\n", encoding="utf-8")
    caplog.set_level(logging.DEBUG, logger="hjson_props")
    assert run([str(path)], io.StringIO(), io.StringIO()) == 0
    cli_records = [r for r in caplog.records if r.name == "hjson_props.cli"]
    assert cli_records
    assert all(r.levelno == logging.DEBUG for r in cli_records)
