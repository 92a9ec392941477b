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


"""``flagwright usage``: render help text for a definition file."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

from flagwright.cli.helpers import echo, register_argument
from flagwright.core.model_types import ColorMode
from flagwright.definition import load_definition_file
from flagwright.rendering import usage

if TYPE_CHECKING:
    from collections.abc import Sequence

    from flagwright.cli.types import SubparserCollection


def register_usage_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Register ``flagwright usage``.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
        parents: Shared parent parsers carrying global options.
    """
    usage_parser = subparsers.add_parser(
        "usage",
        help="Render usage text for a JSON definition file",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )
    register_argument(
        usage_parser,
        "definition",
        type=Path,
        help="Path to a JSON document mapping option names to their properties.",
    )
    register_argument(
        usage_parser,
        "--usage-line",
        default=None,
        help="Text shown after 'Usage:' at the top of the output.",
    )
    register_argument(
        usage_parser,
        "--color",
        choices=[mode.value for mode in ColorMode],
        default=ColorMode.AUTO.value,
        help="Colour the output; 'auto' colours only when stdout and stderr are terminals.",
    )


def execute_usage(args: argparse.Namespace) -> int:
    """Execute ``flagwright usage``.

    Args:
        args: Parsed CLI namespace.

    Returns:
        ``0`` once the usage text is printed.
    """
    definition = load_definition_file(args.definition)
    echo(usage(definition, args.usage_line, colors=ColorMode.from_str(args.color)))
    return 0


__all__ = ["execute_usage", "register_usage_command"]
