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


"""Unit tests for shared enumerations."""

from __future__ import annotations

import pytest

from flagwright.core.model_types import ColorMode, LogFormat, OptionType, OutputFormat

pytestmark = pytest.mark.unit


def test_enums_accept_case_insensitive_values() -> None:
    assert OptionType.from_str(" Number ") is OptionType.NUMBER
    assert ColorMode.from_str("ALWAYS") is ColorMode.ALWAYS
    assert LogFormat.from_str("Json") is LogFormat.JSON
    assert OutputFormat.from_str("text") is OutputFormat.TEXT


@pytest.mark.parametrize(
    ("enum_type", "label"),
    [(OptionType, "option type"), (ColorMode, "colour mode"), (LogFormat, "log format")],
)
def test_enums_reject_unknown_values(enum_type: type[OptionType | ColorMode | LogFormat], label: str) -> None:
    with pytest.raises(ValueError, match=f"Unknown {label} 'bogus'"):
        _ = enum_type.from_str("bogus")


def test_flag_option_types() -> None:
    assert {option_type for option_type in OptionType if option_type.is_flag} == {OptionType.BOOLEAN, OptionType.HELP}


def test_colour_mode_tristate() -> None:
    assert ColorMode.AUTO.as_tristate() is None
    assert ColorMode.ALWAYS.as_tristate() is True
    assert ColorMode.NEVER.as_tristate() is False
