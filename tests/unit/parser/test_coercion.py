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


"""Unit tests for integer coercion of ``number`` values."""

from __future__ import annotations

import pytest

from flagwright.parser.coercion import parse_integer

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("  7", 7),
        ("-3", -3),
        ("+8", 8),
        ("12px", 12),
        ("3.9", 3),
        ("0x10", 0),
        ("007", 7),
    ],
)
def test_parse_integer_reads_leading_digits(text: str, expected: int) -> None:
    assert parse_integer(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "- 3", "px12", "+"])
def test_parse_integer_rejects_non_numbers(text: str) -> None:
    assert parse_integer(text) is None
