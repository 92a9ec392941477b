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

"""ANSI colouring for usage text and terminal capability detection."""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass
from typing import Final

_RESET: Final[str] = "\u001b[0m"
GRAY: Final[int] = 90
GREEN: Final[int] = 32
YELLOW: Final[int] = 33


@functools.cache
def terminal_supports_color() -> bool:
    """Return True when stdout and stderr are both terminals and ``NO_COLOR`` is unset.

    The probe runs once per process.
    """
    if os.environ.get("NO_COLOR") is not None:
        return False
    try:
        return os.isatty(1) and os.isatty(2)
    except OSError:
        return False


def resolve_color(colors: bool | None) -> bool:
    """Resolve the colour tri-state; ``None`` auto-detects from the terminal."""
    if colors is None:
        return terminal_supports_color()
    return colors


@dataclass(frozen=True, slots=True)
class Palette:
    """Wraps text in ANSI colour codes, or returns it untouched when disabled."""

    enabled: bool

    def paint(self, text: str, code: int) -> str:
        if not self.enabled:
            return text
        return f"\u001b[{code}m{text}{_RESET}"

    def gray(self, text: str) -> str:
        return self.paint(text, GRAY)

    def green(self, text: str) -> str:
        return self.paint(text, GREEN)

    def yellow(self, text: str) -> str:
        return self.paint(text, YELLOW)


__all__ = ["Palette", "resolve_color", "terminal_supports_color"]
