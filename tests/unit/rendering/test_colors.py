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


"""Unit tests for terminal colour detection and the ANSI palette."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from flagwright.rendering.colors import Palette, resolve_color, terminal_supports_color

if TYPE_CHECKING:
    from collections.abc import Iterator

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _clear_probe_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("NO_COLOR", raising=False)
    terminal_supports_color.cache_clear()
    yield
    terminal_supports_color.cache_clear()


def _fake_isatty(ttys: set[int], calls: list[int]) -> object:
    def isatty(fd: int) -> bool:
        calls.append(fd)
        return fd in ttys

    return isatty


def test_colour_enabled_when_stdout_and_stderr_are_terminals(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []
    monkeypatch.setattr("flagwright.rendering.colors.os.isatty", _fake_isatty({1, 2}, calls))
    assert terminal_supports_color() is True


def test_colour_disabled_when_stderr_is_redirected(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []
    monkeypatch.setattr("flagwright.rendering.colors.os.isatty", _fake_isatty({1}, calls))
    assert terminal_supports_color() is False


def test_no_color_environment_disables_colour(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []
    monkeypatch.setattr("flagwright.rendering.colors.os.isatty", _fake_isatty({1, 2}, calls))
    monkeypatch.setenv("NO_COLOR", "1")
    assert terminal_supports_color() is False
    assert calls == []


def test_probe_runs_once_per_process(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []
    monkeypatch.setattr("flagwright.rendering.colors.os.isatty", _fake_isatty({1, 2}, calls))
    assert terminal_supports_color() is True
    assert terminal_supports_color() is True
    assert calls == [1, 2]


def test_resolve_color_honours_forced_modes(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("flagwright.rendering.colors.terminal_supports_color", lambda: True)
    assert resolve_color(None) is True
    assert resolve_color(False) is False
    assert resolve_color(True) is True


def test_palette_wraps_text_only_when_enabled() -> None:
    assert Palette(enabled=False).green("x") == "x"
    assert Palette(enabled=True).green("x") == "\u001b[32mx\u001b[0m"
    assert Palette(enabled=True).gray("x") == "\u001b[90mx\u001b[0m"
    assert Palette(enabled=True).yellow("x") == "\u001b[33mx\u001b[0m"
