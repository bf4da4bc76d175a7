import subprocess
import sys

import pytest

import flexaxis
from flexaxis.__main__ import USAGE, main
from flexaxis.config import g
from flexaxis.types import Color
from flexaxis.utils import find, log_error, make_default, split_value, to_hex


def test_func():
    assert make_default(None, 3) == 3
    assert make_default(0, 3) == 0
    assert find(["a", "x", "y"], lambda k: k in ("x", "y")) == "x"
    assert find([], bool) is None


def test_regex():
    assert split_value("  4px   center\t2px ") == ["4px", "center", "2px"]
    assert split_value("") == []


def test_colors():
    assert to_hex(Color("red")) == "#ff0000"
    assert to_hex(Color(255, 0, 255, 64)) == "#ff00ff40"
    assert to_hex((0, 0, 0, 0)) == "#00000000"


def test_log_error(tmp_path, monkeypatch, caplog):
    log_file = tmp_path / "error.log"
    monkeypatch.setitem(g, "error_log", str(log_file))
    log_error("one", 2)
    log_error("three")
    assert log_file.read_text("utf-8") == "one 2\nthree\n"
    assert [r.message for r in caplog.records] == ["one 2", "three"]


def test_set_config(monkeypatch):
    monkeypatch.setitem(g, "strict", g["strict"])
    flexaxis.set_config(strict=True)
    assert g["strict"] is True
    with pytest.raises(KeyError):
        flexaxis.set_config(stric=True)


def test_cli():
    assert main([]) == USAGE
    assert main(["x=center", "--help"]) == USAGE
    assert main(["z=1"]) == USAGE
    assert main(["y=stretch", "x=4px center"]) == (
        "display: flex; flex-direction: column; align-items: center; "
        "justify-content: stretch; padding: 0 4px"
    )
    assert main(["--html", "x", "debug"]) == (
        '<div style="outline: 2px dashed #ff00ff40; '
        "box-shadow: inset 0 0 20px 7px #ff00ff40; "
        'display: flex; flex-direction: row; padding: 0"></div>'
    )
    assert main(["x=center", "flex"]) == USAGE
    assert main(["x=center", "flex=1"]).startswith("flex: 1; display: flex;")


def test_cli_stdout():
    result = subprocess.run(
        [sys.executable, "-m", "flexaxis", "x=center", "y=stretch"],
        capture_output=True,
        text=True,
        check=True,
    )
    assert result.stdout == (
        "display: flex; flex-direction: row; align-items: stretch; "
        "justify-content: center; padding: 0\n"
    )
