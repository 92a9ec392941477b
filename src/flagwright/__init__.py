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

"""flagwright - declarative command-line argument parsing.

Describe the accepted options once, as a table of names, aliases, types,
defaults and constraints, then parse argument tokens into a mapping of typed
values:

    >>> definition = {"count": {"type": "number", "alias": ["n"]}}
    >>> parse(definition, {"argv": ["-n5"]})
    {'_': [], 'count': 5, 'n': 5}
"""

from __future__ import annotations

from flagwright.exceptions import (
    DefinitionSchemaError,
    DefinitionTypeError,
    DuplicateOptionError,
    EmptyOptionError,
    FlagwrightError,
    FlagwrightTypeError,
    FlagwrightValidationError,
    InvalidValueError,
    MissingRequiredOptionError,
    MissingValueError,
    MultipleValuesError,
    NonNumericValueError,
    ParseError,
    ParseOptionsError,
    UnknownOptionError,
)

from .core.model_types import ColorMode, ErrorKind, OptionType
from .definition import LookupTable, OptionDefinition, ParseOptions, normalize_definition
from .parser import parse, parse_or_raise, select_reported_error
from .rendering import usage

__all__ = [
    "ColorMode",
    "DefinitionSchemaError",
    "DefinitionTypeError",
    "DuplicateOptionError",
    "EmptyOptionError",
    "ErrorKind",
    "FlagwrightError",
    "FlagwrightTypeError",
    "FlagwrightValidationError",
    "InvalidValueError",
    "LookupTable",
    "MissingRequiredOptionError",
    "MissingValueError",
    "MultipleValuesError",
    "NonNumericValueError",
    "OptionDefinition",
    "OptionType",
    "ParseError",
    "ParseOptions",
    "ParseOptionsError",
    "UnknownOptionError",
    "__version__",
    "normalize_definition",
    "parse",
    "parse_or_raise",
    "select_reported_error",
    "usage",
]

__version__ = "0.1.0"
