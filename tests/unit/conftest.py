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


"""Shared fixtures for unit tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def tool_definition() -> dict[str, dict[str, object]]:
    """Provide a definition table exercising every option type."""
    return {
        "verbose": {"type": "boolean", "alias": ["v"], "description": "Print progress"},
        "count": {"type": "number", "alias": ["n"], "default": 1},
        "name": {"type": "string", "alias": "N", "require": True, "description": "Target name"},
        "lines": {"type": "range", "alias": ["l"]},
        "tag": {"multiple": True, "alias": ["t"]},
        "mode": {"valid": ["fast", "safe"]},
        "help": {"type": "help", "alias": ["h"]},
    }


@pytest.fixture
def definition_file(tmp_path: Path, tool_definition: dict[str, dict[str, object]]) -> Path:
    """Write ``tool_definition`` to a JSON file and return its path."""
    path = tmp_path / "definition.json"
    path.write_text(json.dumps(tool_definition), encoding="utf-8")
    return path
