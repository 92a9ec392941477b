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


"""Rendering helpers for parsed flags."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from flagwright.core.type_aliases import Flags


def stringify(value: object) -> str:
    """Render a flag value for text output.

    ``None`` becomes an empty string and booleans are lowercased. Mappings and
    sequences are rendered recursively in brace and bracket form.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str | int | float):
        return str(value)
    if isinstance(value, Mapping):
        mapping = cast("Mapping[object, object]", value)
        items = [f"{key}: {stringify(val)}" for key, val in mapping.items()]
        return "{" + ", ".join(items) + "}"
    if isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray):
        sequence = cast("Sequence[object]", value)
        return "[" + ", ".join(stringify(item) for item in sequence) + "]"
    return str(value)


def render_flags_text(flags: Flags) -> list[str]:
    """Return one ``key=value`` line per entry of ``flags``, in insertion order."""
    return [f"{key}={stringify(value)}" for key, value in flags.items()]


__all__ = ["render_flags_text", "stringify"]
