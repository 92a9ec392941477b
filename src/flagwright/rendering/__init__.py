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

"""Usage text rendering for definition tables."""

from __future__ import annotations

from .colors import Palette, resolve_color, terminal_supports_color
from .render import format_spellings, format_usage, short_spelling, usage

__all__ = [
    "Palette",
    "format_spellings",
    "format_usage",
    "resolve_color",
    "short_spelling",
    "terminal_supports_color",
    "usage",
]
