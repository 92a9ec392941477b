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

"""Definition table models and schema validation.

This module defines the Pydantic models used to validate a raw definition
table (option name -> declared properties) and the invocation options of
``parse`` and ``usage``, together with the frozen ``OptionDefinition``
dataclass used at runtime. Schema violations are programmer errors: they are
raised as exceptions before any argument token is looked at.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    RootModel,
    StringConstraints,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from flagwright._internal.exceptions import FlagwrightTypeError, FlagwrightValidationError
from flagwright.core.model_types import ColorMode, OptionType
from flagwright.core.type_aliases import FlagValue, OptionName


class DefinitionSchemaError(FlagwrightValidationError):
    """Raised when a definition table does not match the option schema."""

    def __init__(self, error: ValidationError) -> None:
        """Initialize the exception with the underlying validation error.

        Args:
            error: The Pydantic validation error describing the violations.
        """
        self.error = error
        super().__init__(f"Invalid definition: {error}")


class DefinitionTypeError(FlagwrightTypeError):
    """Raised when a definition table is not a mapping of option names."""

    def __init__(self, definition: object) -> None:
        self.received = type(definition).__name__
        super().__init__(f"Definition must be a mapping of option names, got {self.received}")


class DuplicateOptionError(FlagwrightValidationError):
    """Raised when an option name or alias is declared more than once."""

    def __init__(self, spelling: str, *, option: str, existing: str) -> None:
        """Initialize the exception with the colliding spelling.

        Args:
            spelling: The name or alias that was registered twice.
            option: The option whose declaration triggered the collision.
            existing: The option that already owns the spelling.
        """
        self.spelling = spelling
        self.option = option
        self.existing = existing
        super().__init__(f"Option '{option}' redeclares '{spelling}', already used by option '{existing}'")


class ParseOptionsError(FlagwrightValidationError):
    """Raised when the options passed to ``parse`` are malformed."""

    def __init__(self, error: ValidationError) -> None:
        """Initialize the exception with the underlying validation error.

        Args:
            error: The Pydantic validation error describing the violations.
        """
        self.error = error
        super().__init__(f"Invalid options argument: {error}")


class UsageOptionsError(FlagwrightValidationError):
    """Raised when the options passed to ``usage`` are malformed."""

    def __init__(self, error: ValidationError) -> None:
        """Initialize the exception with the underlying validation error.

        Args:
            error: The Pydantic validation error describing the violations.
        """
        self.error = error
        super().__init__(f"Invalid options argument: {error}")


@dataclass(slots=True, frozen=True)
class OptionDefinition:
    """Normalized, per-option record used by the tokenizer and usage renderer.

    Attributes:
        name: Canonical option name (the key in the definition table).
        type: Declared option type.
        aliases: Alternate spellings, in declaration order.
        default: Value used when the option receives no value; ``None`` when absent.
        require: Whether the option must resolve to a value.
        multiple: Whether repeated values accumulate into a list.
        valid: Allowed values, or ``None`` when unrestricted.
        description: Help text shown by the usage renderer.
    """

    name: OptionName
    type: OptionType = OptionType.STRING
    aliases: tuple[str, ...] = ()
    default: FlagValue = None
    require: bool = False
    multiple: bool = False
    valid: tuple[FlagValue, ...] | None = None
    description: str | None = None

    @property
    def spellings(self) -> tuple[str, ...]:
        """Return every accepted spelling, the canonical name first."""
        return (self.name, *self.aliases)

    @property
    def takes_value(self) -> bool:
        """Return True when the option consumes a value token."""
        return not self.type.is_flag


OptionKey = Annotated[str, StringConstraints(min_length=1)]


class OptionSpecModel(BaseModel):
    """Pydantic model for the declared properties of a single option.

    Attributes:
        type: Option type; ``string`` when omitted.
        alias: Alternate spellings. A single string is accepted and wrapped.
        default: Default value, any shape.
        require: Whether the option must resolve to a value.
        multiple: Whether repeated values accumulate.
        valid: Allowed values. A single scalar is accepted and wrapped.
        description: Help text for the usage renderer.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: OptionType = OptionType.STRING
    alias: tuple[str, ...] = ()
    default: Any = None
    require: bool = False
    multiple: bool = False
    valid: tuple[Any, ...] | None = None
    description: str | None = None

    @field_validator("alias", "valid", mode="before")
    @classmethod
    def _wrap_single(cls, value: object, info: ValidationInfo) -> object:
        if value is None:
            return () if info.field_name == "alias" else None
        if isinstance(value, (list, tuple)):
            return value
        return (value,)


class DefinitionModel(RootModel[dict[OptionKey, OptionSpecModel]]):
    """Pydantic root model for a complete definition table."""


class ParseOptions(BaseModel):
    """Invocation options accepted by ``parse``.

    Attributes:
        argv: Explicit argument tokens. ``None`` selects the process arguments.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    argv: tuple[str, ...] | None = None


class UsageOptions(BaseModel):
    """Invocation options accepted by ``usage``.

    Attributes:
        colors: ``True``/``False`` to force colours, ``None`` to auto-detect.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    colors: bool | None = None

    @field_validator("colors", mode="before")
    @classmethod
    def _coerce_color_mode(cls, value: object) -> object:
        if isinstance(value, ColorMode):
            return value.as_tristate()
        if isinstance(value, str) and value.strip().lower() in {mode.value for mode in ColorMode}:
            return ColorMode.from_str(value).as_tristate()
        return value


def validate_definition(definition: object) -> dict[OptionName, OptionSpecModel]:
    """Validate a raw definition table against the option schema.

    The table is deep-copied first, so validated models never share mutable
    defaults or ``valid`` members with the caller's table.

    Args:
        definition: Raw mapping of option name to declared properties.

    Returns:
        Validated option models keyed by option name, in declaration order.

    Raises:
        DefinitionTypeError: If ``definition`` is not a mapping.
        DefinitionSchemaError: If the table does not match the schema.
    """
    if not isinstance(definition, Mapping):
        raise DefinitionTypeError(definition)
    snapshot = copy.deepcopy(definition)
    try:
        model = DefinitionModel.model_validate(snapshot)
    except ValidationError as exc:
        raise DefinitionSchemaError(exc) from exc
    return {OptionName(name): spec for name, spec in model.root.items()}


def option_from_model(name: OptionName, model: OptionSpecModel) -> OptionDefinition:
    """Convert a validated option model into its runtime ``OptionDefinition``.

    Args:
        name: Canonical option name.
        model: Validated option properties.

    Returns:
        OptionDefinition stamped with ``name``.
    """
    return OptionDefinition(
        name=name,
        type=model.type,
        aliases=model.alias,
        default=model.default,
        require=model.require,
        multiple=model.multiple,
        valid=model.valid,
        description=model.description,
    )


def validate_parse_options(options: ParseOptions | Mapping[str, object] | None) -> ParseOptions:
    """Return validated ``ParseOptions`` for a ``parse`` invocation.

    Raises:
        ParseOptionsError: If ``options`` carries unknown keys or a malformed argv.
    """
    if options is None:
        return ParseOptions()
    if isinstance(options, ParseOptions):
        return options
    try:
        return ParseOptions.model_validate(options)
    except ValidationError as exc:
        raise ParseOptionsError(exc) from exc


def validate_usage_options(options: UsageOptions | Mapping[str, object] | None) -> UsageOptions:
    """Return validated ``UsageOptions`` for a ``usage`` invocation.

    Raises:
        UsageOptionsError: If ``options`` carries unknown keys or a malformed colour mode.
    """
    if options is None:
        return UsageOptions()
    if isinstance(options, UsageOptions):
        return options
    try:
        return UsageOptions.model_validate(options)
    except ValidationError as exc:
        raise UsageOptionsError(exc) from exc


__all__ = [
    "DefinitionModel",
    "DefinitionSchemaError",
    "DefinitionTypeError",
    "DuplicateOptionError",
    "OptionDefinition",
    "OptionSpecModel",
    "ParseOptions",
    "ParseOptionsError",
    "UsageOptions",
    "UsageOptionsError",
    "option_from_model",
    "validate_definition",
    "validate_parse_options",
    "validate_usage_options",
]
