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


"""Unit tests for ``range`` value expansion."""

from __future__ import annotations

import pytest

from flagwright.parser.ranges import expand_range

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("1,4-6", [1, 4, 5, 6]),
        ("3-5", [3, 4, 5]),
        ("5-3", [5, 4, 3]),
        ("3-3", [3]),
        ("7", [7]),
        ("10-8,2", [10, 9, 8, 2]),
        ("1-", [1]),
        ("1 - 3", [1, 3]),
        ("abc", []),
        (["1-2", "5"], [1, 2, 5]),
    ],
)
def test_expand_range(value: object, expected: list[int]) -> None:
    assert expand_range(value) == expected
