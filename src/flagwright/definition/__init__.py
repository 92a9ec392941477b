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

"""Definition table validation and normalization."""

from __future__ import annotations

from .loader import DefinitionFileError, load_definition_file
from .models import (
    DefinitionModel,
    DefinitionSchemaError,
    DefinitionTypeError,
    DuplicateOptionError,
    OptionDefinition,
    OptionSpecModel,
    ParseOptions,
    ParseOptionsError,
    UsageOptions,
    UsageOptionsError,
    validate_definition,
    validate_parse_options,
    validate_usage_options,
)
from .normalizer import LookupTable, normalize_definition

__all__ = [
    "DefinitionFileError",
    "DefinitionModel",
    "DefinitionSchemaError",
    "DefinitionTypeError",
    "DuplicateOptionError",
    "LookupTable",
    "OptionDefinition",
    "OptionSpecModel",
    "ParseOptions",
    "ParseOptionsError",
    "UsageOptions",
    "UsageOptionsError",
    "load_definition_file",
    "normalize_definition",
    "validate_definition",
    "validate_parse_options",
    "validate_usage_options",
]
