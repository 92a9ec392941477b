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

"""Stable error code registry used across flagwright."""

from __future__ import annotations

from typing import TYPE_CHECKING, NewType

from flagwright.definition.loader import DefinitionFileError
from flagwright.definition.models import (
    DefinitionSchemaError,
    DefinitionTypeError,
    DuplicateOptionError,
    ParseOptionsError,
    UsageOptionsError,
)
from flagwright.parser.errors import (
    EmptyOptionError,
    InvalidValueError,
    MissingRequiredOptionError,
    MissingValueError,
    MultipleValuesError,
    NonNumericValueError,
    ParseError,
    UnknownOptionError,
)

from .exceptions import FlagwrightError, FlagwrightTypeError, FlagwrightValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    FlagwrightError: ErrorCode("FW000"),
    FlagwrightValidationError: ErrorCode("FW100"),
    FlagwrightTypeError: ErrorCode("FW101"),
    DefinitionSchemaError: ErrorCode("FW110"),
    DuplicateOptionError: ErrorCode("FW111"),
    ParseOptionsError: ErrorCode("FW112"),
    UsageOptionsError: ErrorCode("FW113"),
    DefinitionFileError: ErrorCode("FW114"),
    DefinitionTypeError: ErrorCode("FW115"),
    ParseError: ErrorCode("FW200"),
    EmptyOptionError: ErrorCode("FW201"),
    UnknownOptionError: ErrorCode("FW202"),
    MissingValueError: ErrorCode("FW203"),
    MultipleValuesError: ErrorCode("FW204"),
    NonNumericValueError: ErrorCode("FW210"),
    InvalidValueError: ErrorCode("FW211"),
    MissingRequiredOptionError: ErrorCode("FW220"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured flagwright exception.

    Args:
        exc: Exception instance raised or returned by flagwright code paths.

    Returns:
        Error code mapped from the exception's class hierarchy.
    """
    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("FW000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a stable mapping of fully-qualified exception names to error codes.

    Used by tests and documentation checks.

    Returns:
        Mapping of `<module>.<ExceptionName>` strings to error codes.
    """
    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
