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

"""Expansion of ``range`` option values such as ``1,4-6`` into integer lists."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Final

_RANGE_ITEM: Final[re.Pattern[str]] = re.compile(r"[0-9]+-[0-9]+|[0-9]+")


def expand_range(value: object) -> list[int]:
    """Expand raw range values into a flat list of integers.

    All values are joined with commas and scanned for ``low-high`` pairs and
    bare integers; anything else is ignored. Pairs expand inclusively and count
    downwards when ``low > high``.

    Args:
        value: A single raw value or a sequence of them (``multiple`` options).

    Returns:
        Integers in the order they were written. Input without any integer
        yields an empty list.
    """
    if isinstance(value, Sequence) and not isinstance(value, str):
        joined = ",".join(str(item) for item in value)
    else:
        joined = str(value)
    numbers: list[int] = []
    for match in _RANGE_ITEM.finditer(joined):
        low_text, separator, high_text = match.group().partition("-")
        low = int(low_text)
        if not separator:
            numbers.append(low)
            continue
        high = int(high_text)
        step = 1 if low <= high else -1
        numbers.extend(range(low, high + step, step))
    return numbers


__all__ = ["expand_range"]
