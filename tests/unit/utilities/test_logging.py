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


"""Unit tests for structured logging."""

from __future__ import annotations

import json
import logging

import pytest

from flagwright import parse
from flagwright._internal.logging_utils import LOG_LEVELS, configure_logging, structured_extra
from flagwright.core.model_types import LogComponent, LogFormat

pytestmark = pytest.mark.unit


def test_configure_logging_json_emits_structured_logs(capsys: pytest.CaptureFixture[str]) -> None:
    _ = configure_logging("json")
    logger = logging.getLogger("flagwright")
    logger.info(
        "hello",
        extra=structured_extra(
            LogComponent.PARSER,
            option="count",
            error_code="FW210",
            counts={"errors": 1},
            help_requested=False,
        ),
    )

    def _raise_logging_failure() -> None:
        message = "boom"
        raise RuntimeError(message)

    try:
        _raise_logging_failure()
    except RuntimeError:
        logger.exception("broken")
    captured = capsys.readouterr()
    lines = [line for line in captured.err.strip().splitlines() if line]
    payload = json.loads(lines[-2])
    assert payload["message"] == "hello"
    assert payload["level"] == "info"
    assert payload["logger"] == "flagwright"
    assert payload["component"] == "parser"
    assert payload["option"] == "count"
    assert payload["error_code"] == "FW210"
    assert payload["counts"] == {"errors": 1}
    assert payload["help_requested"] is False

    exception_payload = json.loads(lines[-1])
    assert exception_payload["message"] == "broken"
    assert "exc_info" in exception_payload


def test_configure_logging_respects_level(capsys: pytest.CaptureFixture[str]) -> None:
    assert LOG_LEVELS == ("debug", "info", "warning", "error")
    config = configure_logging("text", log_level="warning")
    assert config.level == logging.WARNING
    logger = logging.getLogger("flagwright.parser")
    logger.info("hidden")
    logger.warning("shown")
    captured = capsys.readouterr()
    assert "hidden" not in captured.err
    assert "[WARNING] shown" in captured.err


def test_configure_logging_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLAGWRIGHT_LOG_FORMAT", "json")
    monkeypatch.setenv("FLAGWRIGHT_LOG_LEVEL", "debug")
    config = configure_logging()
    assert config.format is LogFormat.JSON
    assert config.level == logging.DEBUG
    assert config.level_name == "debug"


def test_explicit_arguments_override_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLAGWRIGHT_LOG_FORMAT", "json")
    config = configure_logging(LogFormat.TEXT, log_level="error")
    assert config.format is LogFormat.TEXT
    assert config.level == logging.ERROR


def test_structured_extra_drops_empty_fields() -> None:
    extra = structured_extra(LogComponent.USAGE, counts={}, details={})
    assert extra == {"component": LogComponent.USAGE}


def test_parse_emits_debug_records(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="flagwright")
    _ = parse({"verbose": {"type": "boolean"}}, {"argv": ["--bogus"]})
    components = {getattr(record, "component", None) for record in caplog.records}
    assert LogComponent.DEFINITION in components
    assert LogComponent.PARSER in components
    summary = next(
        record
        for record in caplog.records
        if getattr(record, "component", None) == LogComponent.PARSER and getattr(record, "counts", None)
    )
    assert summary.counts == {"tokens": 1, "options": 1, "errors": 1}  # type: ignore[attr-defined]


def test_structured_extra_drops_missing_token() -> None:
    assert "token" not in structured_extra(LogComponent.PARSER, token=None)
    assert structured_extra(LogComponent.PARSER, token="-x")["token"] == "-x"


def test_recorded_parse_errors_carry_the_offending_token(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="flagwright")
    argv = ["-vq", "--count", "abc", "--name", "a", "--name", "b"]
    _ = parse({"count": {"type": "number"}, "name": {}}, {"argv": argv})
    tokens = [
        getattr(record, "token", None)
        for record in caplog.records
        if record.getMessage().startswith("Recorded ")
    ]
    assert tokens == ["-vq", "-vq", "abc", "b"]
