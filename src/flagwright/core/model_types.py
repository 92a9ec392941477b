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

# pylint: disable=too-many-ancestors

"""Enumerations shared across flagwright.

This module defines:

- Option types accepted in definition tables
- Parse error categories
- Colour modes for usage rendering
- Logging formats and components
- Output formats of the console command
"""

from __future__ import annotations

from flagwright.compat import StrEnum


class OptionType(StrEnum):
    """Kinds of options a definition table may declare.

    Attributes:
        BOOLEAN: Flag set to ``True`` when present; never consumes a value.
        HELP: Boolean flag that also latches the help request.
        STRING: Consumes the next value token verbatim.
        NUMBER: Consumes the next value token as a base-10 integer.
        RANGE: Consumes values such as ``1,3-5`` and expands them to integers.
    """

    BOOLEAN = "boolean"
    HELP = "help"
    STRING = "string"
    NUMBER = "number"
    RANGE = "range"

    @classmethod
    def from_str(cls, raw: str) -> OptionType:
        """Create an OptionType enum from a string value.

        Args:
            raw: String representation of the option type.

        Returns:
            OptionType enum value.

        Raises:
            ValueError: If the string does not match any OptionType value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown option type '{raw}'"
            raise ValueError(msg) from exc

    @property
    def is_flag(self) -> bool:
        """Return True for option types that never consume a value token."""
        return self in {OptionType.BOOLEAN, OptionType.HELP}


class ErrorKind(StrEnum):
    """Categories of parse errors returned by ``parse``.

    Attributes:
        SYNTAX: Malformed or unknown option spellings and value-count problems.
        VALUE: A value token that failed coercion or validation.
        USAGE: A required option left without a value.
    """

    SYNTAX = "syntax"
    VALUE = "value"
    USAGE = "usage"


class ColorMode(StrEnum):
    """Colour selection for usage rendering."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def from_str(cls, raw: str) -> ColorMode:
        """Create a ColorMode enum from a string value.

        Args:
            raw: String representation of the colour mode.

        Returns:
            ColorMode enum value.

        Raises:
            ValueError: If the string does not match any ColorMode value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown colour mode '{raw}'"
            raise ValueError(msg) from exc

    def as_tristate(self) -> bool | None:
        """Return ``True``/``False`` for forced modes and ``None`` for auto-detection."""
        if self is ColorMode.ALWAYS:
            return True
        if self is ColorMode.NEVER:
            return False
        return None


class LogFormat(StrEnum):
    """Logging output formats."""

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Logical components that emit structured log records."""

    DEFINITION = "definition"
    PARSER = "parser"
    USAGE = "usage"
    CLI = "cli"


class OutputFormat(StrEnum):
    """Formats used by the console command to print parsed flags."""

    JSON = "json"
    TEXT = "text"

    @classmethod
    def from_str(cls, raw: str) -> OutputFormat:
        """Create an OutputFormat enum from a string value.

        Args:
            raw: String representation of the output format.

        Returns:
            OutputFormat enum value.

        Raises:
            ValueError: If the string does not match any OutputFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown output format '{raw}'"
            raise ValueError(msg) from exc


__all__ = [
    "ColorMode",
    "ErrorKind",
    "LogComponent",
    "LogFormat",
    "OptionType",
    "OutputFormat",
]
