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

"""Argument tokenizing, value binding and parse-error reporting."""

from __future__ import annotations

from .errors import (
    EmptyOptionError,
    InvalidValueError,
    MissingRequiredOptionError,
    MissingValueError,
    MultipleValuesError,
    NonNumericValueError,
    ParseError,
    UnknownOptionError,
    select_reported_error,
)
from .ranges import expand_range
from .state import AwaitingValue, NoPendingOption, PendingState, Transition, step_key_token, step_value_token
from .tokenizer import ParseState, finalize_flags, parse, parse_or_raise, tokenize

__all__ = [
    "AwaitingValue",
    "EmptyOptionError",
    "InvalidValueError",
    "MissingRequiredOptionError",
    "MissingValueError",
    "MultipleValuesError",
    "NoPendingOption",
    "NonNumericValueError",
    "ParseError",
    "ParseState",
    "PendingState",
    "Transition",
    "UnknownOptionError",
    "expand_range",
    "finalize_flags",
    "parse",
    "parse_or_raise",
    "select_reported_error",
    "step_key_token",
    "step_value_token",
    "tokenize",
]
