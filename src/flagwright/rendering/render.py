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

"""Two-column usage text rendered from a definition table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from flagwright._internal.logging_utils import structured_extra
from flagwright.core.model_types import ColorMode, LogComponent
from flagwright.core.type_aliases import RawDefinition
from flagwright.definition.models import validate_usage_options
from flagwright.definition.normalizer import normalize_definition

from .colors import Palette, resolve_color

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from flagwright.definition.models import OptionDefinition

logger: logging.Logger = logging.getLogger("flagwright.rendering")

OPTIONS_HEADER: Final[str] = "Options:"
COLUMN_GAP: Final[int] = 4


def short_spelling(name: str, aliases: Sequence[str]) -> str:
    """Return the shortest non-empty spelling of an option.

    An alias wins only when it is strictly shorter than the best spelling so
    far, so ties keep the canonical name.
    """
    shortest = name
    for alias in aliases:
        if alias and len(alias) < len(shortest):
            shortest = alias
    return shortest


def format_spellings(option: OptionDefinition) -> str:
    """Render ``  -<short>, --<long>...`` for one option.

    When an alias is the short spelling, the canonical name is the only long
    spelling; otherwise every non-empty alias is listed.
    """
    short = short_spelling(option.name, option.aliases)
    longs = [option.name] if short != option.name else [alias for alias in option.aliases if alias]
    return "  -" + short + "".join(f", --{spelling}" for spelling in longs)


def _format_description(option: OptionDefinition, palette: Palette) -> str:
    parts: list[str] = []
    if option.description:
        parts.append(palette.gray(option.description))
    if option.require:
        parts.append(palette.yellow("(required)"))
    return " ".join(parts)


def format_usage(options: Iterable[OptionDefinition], usage_line: str | None = None, *, colors: bool) -> str:
    """Render usage text for normalized options.

    Args:
        options: Option definitions in display order.
        usage_line: Optional text shown after ``Usage:``.
        colors: Whether to emit ANSI colour codes.

    Returns:
        The usage text. Column widths ignore colour codes.
    """
    palette = Palette(enabled=colors)
    rows = [(format_spellings(option), _format_description(option, palette)) for option in options]
    width = max([len(OPTIONS_HEADER), *(len(spellings) for spellings, _ in rows)])

    lines = [OPTIONS_HEADER, ""]
    for spellings, description in rows:
        if description:
            padding = " " * (width - len(spellings) + COLUMN_GAP)
            lines.append(f"{palette.green(spellings)}{padding}{description}")
        else:
            lines.append(palette.green(spellings))
    header = f"Usage: {usage_line}\n\n" if usage_line else "\n"
    return header + "\n".join(lines)


def usage(
    definition: RawDefinition,
    usage_line: str | None = None,
    *,
    colors: bool | ColorMode | None = None,
) -> str:
    """Render help text for a definition table.

    Args:
        definition: Mapping of option name to declared properties.
        usage_line: Optional text shown after ``Usage:``.
        colors: ``True``/``False`` (or ``ColorMode.ALWAYS``/``NEVER``) to force
            colours, ``None`` or ``ColorMode.AUTO`` to enable them only when
            stdout and stderr are terminals.

    Returns:
        The rendered usage text.

    Raises:
        DefinitionSchemaError: If the definition does not match the option schema.
        UsageOptionsError: If ``colors`` is not a supported value.
    """
    lookup = normalize_definition(definition)
    settings = validate_usage_options({"colors": colors})
    enabled = resolve_color(settings.colors)
    logger.debug(
        "Rendering usage for %d option(s)",
        len(lookup),
        extra=structured_extra(LogComponent.USAGE, details={"colors": enabled}),
    )
    return format_usage(lookup, usage_line, colors=enabled)


__all__ = ["format_spellings", "format_usage", "short_spelling", "usage"]
