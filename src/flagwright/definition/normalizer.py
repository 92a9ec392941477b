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

"""Expansion of a definition table into the lookup structure used by the tokenizer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from flagwright._internal.logging_utils import structured_extra
from flagwright.core.model_types import LogComponent, OptionType
from flagwright.core.type_aliases import Flags, OptionName, Spelling

from .models import DuplicateOptionError, OptionDefinition, option_from_model, validate_definition

if TYPE_CHECKING:
    from collections.abc import Iterator

logger: logging.Logger = logging.getLogger("flagwright.definition")


def _default_options() -> dict[OptionName, OptionDefinition]:
    return {}


def _default_spellings() -> dict[Spelling, OptionName]:
    return {}


@dataclass(slots=True)
class LookupTable:
    """Option definitions indexed by canonical name, plus every accepted spelling.

    Every spelling (name or alias) maps to a canonical name, and each canonical
    name owns exactly one ``OptionDefinition``, so all spellings of an option
    resolve to the same record.

    Attributes:
        options: Option definitions keyed by canonical name, in declaration order.
        spellings: Canonical name for every accepted spelling.
    """

    options: dict[OptionName, OptionDefinition] = field(default_factory=_default_options)
    spellings: dict[Spelling, OptionName] = field(default_factory=_default_spellings)

    def register(self, option: OptionDefinition) -> None:
        """Add ``option`` and all of its spellings.

        Raises:
            DuplicateOptionError: If any spelling is already registered.
        """
        for spelling in option.spellings:
            existing = self.spellings.get(Spelling(spelling))
            if existing is not None:
                raise DuplicateOptionError(spelling, option=option.name, existing=existing)
            self.spellings[Spelling(spelling)] = option.name
        self.options[option.name] = option

    def resolve(self, spelling: str) -> OptionDefinition | None:
        """Return the option accepting ``spelling``, or ``None`` when unknown."""
        name = self.spellings.get(Spelling(spelling))
        if name is None:
            return None
        return self.options[name]

    def option(self, name: OptionName) -> OptionDefinition:
        """Return the option registered under canonical ``name``."""
        return self.options[name]

    def __iter__(self) -> Iterator[OptionDefinition]:
        return iter(self.options.values())

    def __len__(self) -> int:
        return len(self.options)

    def seed_flags(self) -> Flags:
        """Return the initial flag values for boolean options.

        Boolean options start at their declared default, or ``False`` when no
        default is declared. Other option types are left unset.
        """
        seeds: Flags = {}
        for option in self.options.values():
            if option.type is OptionType.BOOLEAN:
                seeds[option.name] = False if option.default is None else option.default
        return seeds


def normalize_definition(definition: object) -> LookupTable:
    """Validate a raw definition table and expand it into a ``LookupTable``.

    Args:
        definition: Mapping of option name to declared properties. It is never
            mutated.

    Returns:
        LookupTable covering every option name and alias.

    Raises:
        DefinitionSchemaError: If the table does not match the option schema.
        DefinitionTypeError: If ``definition`` is not a mapping.
        DuplicateOptionError: If a name or alias is declared more than once.
    """
    lookup = LookupTable()
    for name, model in validate_definition(definition).items():
        lookup.register(option_from_model(name, model))
    logger.debug(
        "Normalized %d option(s) with %d spelling(s)",
        len(lookup.options),
        len(lookup.spellings),
        extra=structured_extra(
            LogComponent.DEFINITION,
            counts={"options": len(lookup.options), "spellings": len(lookup.spellings)},
        ),
    )
    return lookup


__all__ = ["LookupTable", "normalize_definition"]
