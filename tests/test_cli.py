"""
Tests for the command line entry point.

Usage:
    pytest tests/test_cli.py
"""

import json

import pytest

from labyrinth.cli import main, parse_args


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run every CLI test in an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_parse_defaults():
    args = parse_args([])
    assert args.algorithm is None
    assert args.width is None
    assert args.delay is None
    assert not args.quiet


@pytest.mark.parametrize("algorithm", ["depth-first", "breath-first"])
def test_run_reaches_end(algorithm, capsys):
    code = main([algorithm, "-w", "5", "-H", "4", "-d", "0", "--seed", "1", "--quiet"])
    out = capsys.readouterr().out
    assert code == 0
    assert f"{algorithm}: reached (4, 3)" in out


def test_frames_are_drawn(capsys):
    code = main(["depth-first", "-w", "3", "-H", "2", "-d", "0", "--seed", "2"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("tick 0:\n")
    assert "tick 1:" in out
    assert "\x1b[" in out


def test_unknown_algorithm(capsys):
    code = main(["sideways", "-d", "0", "--quiet"])
    assert code == 1
    assert "Unknown algorithm" in capsys.readouterr().err


def test_invalid_width(capsys):
    code = main(["depth-first", "-w", "0", "--quiet"])
    assert code == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_step_limit_is_an_error(capsys):
    code = main(["breath-first", "-w", "10", "-H", "10", "-d", "0", "--seed", "3",
                 "--quiet", "--max-steps", "2"])
    assert code == 1
    assert "Step limit" in capsys.readouterr().err


def test_list(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "depth-first" in out
    assert "breath-first" in out


def test_save_writes_settings(workdir):
    code = main(["breath-first", "-w", "4", "-H", "3", "-d", "0", "--quiet", "--save"])
    assert code == 0
    settings = json.loads((workdir / "config.json").read_text(encoding="utf-8"))
    assert settings["algorithm_name"] == "breath-first"
    assert settings["width"] == 4
    assert settings["height"] == 3


def test_saved_settings_are_defaults(workdir, capsys):
    (workdir / "config.json").write_text(json.dumps({
        "algorithm_name": "breath-first",
        "width": 3,
        "height": 3,
        "delay_ms": 0,
    }), encoding="utf-8")
    assert main(["--quiet", "--seed", "5"]) == 0
    assert "breath-first: reached (2, 2)" in capsys.readouterr().out


def test_debug_saves_snapshot(workdir, capsys):
    code = main(["depth-first", "-w", "4", "-H", "4", "-d", "0", "--quiet", "--debug"])
    assert code == 0
    assert "Snapshot saved" in capsys.readouterr().out
    assert list((workdir / "debug").glob("frame_*.png"))


def test_list_marks_default(capsys):
    assert main(["--list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert any(line.startswith("* depth-first") for line in lines)
    assert any(line.startswith("  breath-first") for line in lines)


def test_mistyped_saved_width_falls_back(workdir, capsys):
    (workdir / "config.json").write_text(json.dumps({
        "algorithm_name": "breath-first",
        "width": "5",
        "height": 3,
    }), encoding="utf-8")
    code = main(["-d", "0", "--quiet", "--seed", "1"])
    assert code == 0
    assert "breath-first: reached (39, 2)" in capsys.readouterr().out


def test_null_saved_delay_falls_back(workdir, capsys):
    (workdir / "config.json").write_text(json.dumps({
        "delay_ms": None,
        "width": 2,
        "height": 1,
    }), encoding="utf-8")
    code = main(["depth-first", "--quiet"])
    assert code == 0
    assert "reached (1, 0)" in capsys.readouterr().out


def test_checkout_entry_point_uses_cli():
    import main as entry_point
    assert entry_point.main is main
