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

"""Root exception classes shared by every flagwright subpackage.

Programmer errors in a definition table or invocation options are raised.
Problems with argument tokens are returned as ``ParseError`` instances
instead, so callers can tell the two families apart by base class.
"""

from __future__ import annotations

__all__ = ["FlagwrightError", "FlagwrightTypeError", "FlagwrightValidationError"]


class FlagwrightError(Exception):
    """Root of every exception flagwright raises or returns."""


class FlagwrightValidationError(FlagwrightError, ValueError):
    """A definition table, option set or definition file has invalid content."""


class FlagwrightTypeError(FlagwrightError, TypeError):
    """A definition table or option set is not the container type flagwright expects."""
