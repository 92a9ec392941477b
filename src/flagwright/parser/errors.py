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

"""Parse errors reported for invalid argument tokens.

Unlike schema errors, parse errors are data: the tokenizer records them and
keeps scanning, and ``parse`` returns (rather than raises) the one selected by
``select_reported_error``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from flagwright._internal.exceptions import FlagwrightError
from flagwright.core.model_types import ErrorKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from flagwright.core.type_aliases import FlagValue


class ParseError(FlagwrightError):
    """Base class for errors found while tokenizing argument tokens.

    Attributes:
        kind: Error category shared by every instance of the class.
        option: Canonical option name involved, when one is known.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.SYNTAX

    def __init__(self, message: str, *, option: str | None = None) -> None:
        self.option = option
        super().__init__(message)

    @property
    def message(self) -> str:
        """Return the human-readable error message."""
        return str(self)


class EmptyOptionError(ParseError):
    """A bare ``-`` or ``--`` token."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid empty '{token}' option")


class UnknownOptionError(ParseError):
    """A spelling that matches no declared option or alias."""

    def __init__(self, spelling: str) -> None:
        self.spelling = spelling
        super().__init__(f"Unknown option: {spelling}")


class MissingValueError(ParseError):
    """A key token arrived while another option was still waiting for its value."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Invalid option: {option} missing value", option=option)


class MultipleValuesError(ParseError):
    """A second value for an option that does not accept multiple values."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Multiple values are not allowed for option: {option}", option=option)


class NonNumericValueError(ParseError):
    """A value for a ``number`` option that is not a base-10 integer."""

    kind = ErrorKind.VALUE

    def __init__(self, option: str, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid value (non-number) for option: {option}", option=option)


class InvalidValueError(ParseError):
    """A value outside the option's ``valid`` set."""

    kind = ErrorKind.VALUE

    def __init__(self, option: str, value: FlagValue) -> None:
        self.value = value
        super().__init__(f"Invalid value for option: {option}", option=option)


class MissingRequiredOptionError(ParseError):
    """A required option left without a value after default fallback.

    The message is the rendered usage text of the whole definition, so a
    command-line tool can print it as-is.
    """

    kind = ErrorKind.USAGE

    def __init__(self, option: str, usage_text: str) -> None:
        super().__init__(usage_text, option=option)


def select_reported_error(errors: Sequence[ParseError], *, help_requested: bool) -> ParseError | None:
    """Choose the error, if any, that a parse reports to its caller.

    Only the first recorded error is surfaced, and a help request suppresses
    every error so users asking for help are never blocked by invalid input.

    Args:
        errors: Errors in the order they were recorded.
        help_requested: Whether a ``help`` option appeared in the arguments.

    Returns:
        The first error, or ``None`` when there is none or help was requested.
    """
    if help_requested or not errors:
        return None
    return errors[0]


__all__ = [
    "EmptyOptionError",
    "InvalidValueError",
    "MissingRequiredOptionError",
    "MissingValueError",
    "MultipleValuesError",
    "NonNumericValueError",
    "ParseError",
    "UnknownOptionError",
    "select_reported_error",
]
