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

"""Value coercion for ``number`` options."""

from __future__ import annotations

import re
from typing import Final

_LEADING_INTEGER: Final[re.Pattern[str]] = re.compile(r"\s*([+-]?[0-9]+)")


def parse_integer(text: str) -> int | None:
    """Parse the leading base-10 integer of ``text``.

    Leading whitespace and a sign are accepted and anything after the digits
    is ignored, so ``"12px"`` yields ``12`` and ``"3.9"`` yields ``3``.

    Args:
        text: Raw value token.

    Returns:
        The parsed integer, or ``None`` when ``text`` does not start with one.
    """
    match = _LEADING_INTEGER.match(text)
    if match is None:
        return None
    return int(match.group(1))


__all__ = ["parse_integer"]
