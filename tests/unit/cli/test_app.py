# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Unit tests for the flagwright console command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from flagwright import __version__
from flagwright.cli import app
from flagwright.cli.commands import usage as usage_command

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = [pytest.mark.unit, pytest.mark.cli]


def test_main_prints_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert app.main(["--version"]) == 0
    assert capsys.readouterr().out == f"flagwright {__version__}\n"


def test_main_requires_command() -> None:
    with pytest.raises(SystemExit):
        _ = app.main([])


def test_main_unknown_command() -> None:
    with pytest.raises(SystemExit):
        _ = app.main(["unknown"])


def test_main_fails_when_handler_missing(monkeypatch: pytest.MonkeyPatch, definition_file: Path) -> None:
    monkeypatch.setattr(app, "_command_handlers", dict)
    with pytest.raises(SystemExit):
        _ = app.main(["usage", str(definition_file)])


def test_parse_prints_flags_as_json(definition_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = app.main(["parse", str(definition_file), "-v", "--name", "demo", "-n5", "--lines", "3-1", "a.txt"])
    assert exit_code == 0
    flags = json.loads(capsys.readouterr().out)
    assert flags["verbose"] is True
    assert flags["v"] is True
    assert flags["name"] == flags["N"] == "demo"
    assert flags["count"] == flags["n"] == 5
    assert flags["lines"] == [3, 2, 1]
    assert flags["help"] is None
    assert flags["_"] == ["a.txt"]


def test_parse_drops_leading_separator(definition_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert app.main(["parse", str(definition_file), "--", "--name", "demo"]) == 0
    assert json.loads(capsys.readouterr().out)["name"] == "demo"


def test_parse_prints_text_lines(definition_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert app.main(["parse", "--format", "text", str(definition_file), "--name", "demo", "-t", "a", "-t", "b"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "name=demo" in lines
    assert "verbose=false" in lines
    assert "tag=[a, b]" in lines
    assert "help=" in lines
    assert "_=[]" in lines


def test_parse_reports_parse_error(definition_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert app.main(["parse", str(definition_file), "--bogus"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "[flagwright] FW202 Unknown option: bogus"


def test_parse_reports_missing_required_option(definition_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert app.main(["parse", str(definition_file)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("[flagwright] FW220 \nOptions:")
    assert "(required)" in err


def test_parse_help_suppresses_errors(definition_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert app.main(["parse", str(definition_file), "--bogus", "--help"]) == 0
    assert json.loads(capsys.readouterr().out)["help"] is True


def test_schema_error_exits_with_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"x": {"type": "bogus"}}), encoding="utf-8")
    assert app.main(["parse", str(path)]) == 2
    assert capsys.readouterr().err.startswith("[flagwright] FW110 Invalid definition:")


def test_duplicate_spelling_exits_with_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "dup.json"
    path.write_text(json.dumps({"a": {"alias": ["x"]}, "b": {"alias": ["x"]}}), encoding="utf-8")
    assert app.main(["usage", str(path)]) == 2
    assert "FW111" in capsys.readouterr().err


def test_non_mapping_definition_exits_with_two(
    monkeypatch: pytest.MonkeyPatch, definition_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(usage_command, "load_definition_file", lambda _path: ["verbose"])
    assert app.main(["usage", str(definition_file)]) == 2
    assert capsys.readouterr().err.startswith("[flagwright] FW115 Definition must be a mapping")


def test_missing_definition_file_exits_with_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert app.main(["parse", str(tmp_path / "absent.json")]) == 2
    assert capsys.readouterr().err.startswith("[flagwright] FW114 Unable to load definition")


def test_usage_prints_plain_text(definition_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert app.main(["usage", str(definition_file), "--usage-line", "tool [options]", "--color", "never"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Usage: tool [options]\n\nOptions:\n\n")
    assert "  -v, --verbose" in out
    assert "\u001b[" not in out


def test_usage_can_force_colour(definition_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert app.main(["usage", str(definition_file), "--color", "always"]) == 0
    assert "\u001b[32m" in capsys.readouterr().out


def test_json_debug_logging_goes_to_stderr(definition_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    argv = ["parse", "--log-format", "json", "--log-level", "debug", str(definition_file), "--name", "demo"]
    assert app.main(argv) == 0
    captured = capsys.readouterr()
    assert json.loads(captured.out)["name"] == "demo"
    records = [json.loads(line) for line in captured.err.splitlines() if line]
    assert {record["component"] for record in records} >= {"definition", "parser"}
