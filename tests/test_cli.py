"""
Tests for the command line entry point.
"""

import json
import logging

import pytest
import yaml
from primer.cli import main


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.getLogger("primer").handlers.clear()


def test_list(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "console" in out
    assert "Primitive vs Reference Types" in out
    assert len(out.splitlines()) == 5


def test_run_lesson_text(capsys):
    """Text output streams every printed line to stdout."""
    assert main(["console"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[:3] == ["100", "Hello from script.js", "Values: 20 hello true 100"]
    assert "  Step 1: Connecting..." in lines
    assert any(line.startswith("Loop Timer: ") for line in lines)
    assert "\x1b[" not in out


def test_color(capsys):
    main(["console", "--color"])
    assert "\x1b[33mWarning: API response slow\x1b[0m" in capsys.readouterr().out


def test_unknown_lesson(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["nope"])
    assert exc_info.value.code == 2
    assert "Unknown lesson 'nope'" in capsys.readouterr().err


def test_json_output_file(tmp_path):
    path = tmp_path / "transcript.json"
    assert main(["variables", "--format", "json", "--output", str(path)]) == 0
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["records"][0]["unit"] == "variables/basic-declarations"


def test_yaml_stdout(capsys):
    assert main(["variables", "-f", "yaml"]) == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["records"][0]["text"] == "The first and last name is: John Doe"


def test_config_file(tmp_path, capsys):
    config = tmp_path / "primer.yaml"
    config.write_text("lessons: [data-types]\nformat: json\n", encoding="utf-8")
    assert main(["--config", str(config)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert {r["unit"].split("/")[0] for r in data["records"]} == {"data-types"}


def test_command_line_overrides_config(tmp_path, capsys):
    config = tmp_path / "primer.yaml"
    config.write_text("format: json\n", encoding="utf-8")
    assert main(["--config", str(config), "--format", "text", "variables"]) == 0
    assert capsys.readouterr().out.startswith("The first and last name is: John Doe\n")


def test_bad_config(tmp_path, capsys):
    config = tmp_path / "primer.yaml"
    config.write_text("colour: true\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(config)])
    assert exc_info.value.code == 2
    assert "Unknown configuration key" in capsys.readouterr().err


def test_report(capsys):
    assert main(["console", "--report"]) == 0
    err = capsys.readouterr().err
    assert "Records: " in err
    assert "Tables: 1" in err
    assert "WARNING" not in err
