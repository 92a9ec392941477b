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

"""Public exception types raised or returned by flagwright."""

from __future__ import annotations

from flagwright._internal.exceptions import FlagwrightError, FlagwrightTypeError, FlagwrightValidationError
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

__all__ = [
    "DefinitionFileError",
    "DefinitionSchemaError",
    "DefinitionTypeError",
    "DuplicateOptionError",
    "EmptyOptionError",
    "FlagwrightError",
    "FlagwrightTypeError",
    "FlagwrightValidationError",
    "InvalidValueError",
    "MissingRequiredOptionError",
    "MissingValueError",
    "MultipleValuesError",
    "NonNumericValueError",
    "ParseError",
    "ParseOptionsError",
    "UnknownOptionError",
    "UsageOptionsError",
]
