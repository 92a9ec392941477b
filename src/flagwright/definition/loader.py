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

"""Loading definition tables stored as JSON documents."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, cast

from flagwright._internal.exceptions import FlagwrightValidationError
from flagwright._internal.logging_utils import structured_extra
from flagwright.core.model_types import LogComponent

if TYPE_CHECKING:
    from pathlib import Path

logger: logging.Logger = logging.getLogger("flagwright.definition")


class DefinitionFileError(FlagwrightValidationError):
    """Raised when a definition file cannot be read or is not a JSON object."""

    def __init__(self, path: Path, error: Exception | str) -> None:
        """Initialize the exception with the file path and underlying problem.

        Args:
            path: The definition file that could not be loaded.
            error: The underlying exception or a description of the problem.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to load definition from {path}: {error}")


def load_definition_file(path: Path) -> dict[str, object]:
    """Read a JSON definition table from ``path``.

    Only the document shape is checked here; option properties are validated
    by ``normalize_definition``.

    Args:
        path: Location of the JSON document.

    Returns:
        The decoded definition table.

    Raises:
        DefinitionFileError: If the file is unreadable, not JSON, or not a JSON object.
    """
    try:
        payload: object = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise DefinitionFileError(path, exc) from exc
    if not isinstance(payload, dict):
        raise DefinitionFileError(path, "top-level JSON value must be an object")
    logger.debug(
        "Loaded definition file %s",
        path,
        extra=structured_extra(LogComponent.DEFINITION, details={"path": str(path)}),
    )
    return cast("dict[str, object]", payload)


__all__ = ["DefinitionFileError", "load_definition_file"]
