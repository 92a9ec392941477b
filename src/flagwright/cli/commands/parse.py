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


"""``flagwright parse``: parse argument tokens against a definition file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from flagwright._internal.error_codes import error_code_for
from flagwright._internal.logging_utils import structured_extra
from flagwright.cli.helpers import echo, passthrough_tokens, register_argument, render_flags_text
from flagwright.core.model_types import LogComponent, OutputFormat
from flagwright.definition import ParseOptions, load_definition_file
from flagwright.json import dump_json
from flagwright.parser import ParseError, parse

if TYPE_CHECKING:
    from collections.abc import Sequence

    from flagwright.cli.types import SubparserCollection

logger: logging.Logger = logging.getLogger("flagwright.cli")


def register_parse_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Register ``flagwright parse``.

    Options of the command itself must precede DEFINITION; every token after
    it is handed to the parser untouched.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
        parents: Shared parent parsers carrying global options.
    """
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse argument tokens against a JSON definition file",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )
    register_argument(
        parse_parser,
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.JSON.value,
        help="Output format for the parsed flags.",
    )
    register_argument(
        parse_parser,
        "definition",
        type=Path,
        help="Path to a JSON document mapping option names to their properties.",
    )
    register_argument(
        parse_parser,
        "args",
        nargs=argparse.REMAINDER,
        default=[],
        help="Argument tokens to parse (an optional leading '--' is dropped).",
    )


def execute_parse(args: argparse.Namespace) -> int:
    """Execute ``flagwright parse``.

    Args:
        args: Parsed CLI namespace.

    Returns:
        ``0`` when the tokens parse, ``1`` when a parse error is reported.
    """
    definition = load_definition_file(args.definition)
    tokens = passthrough_tokens(args.args)
    result = parse(definition, ParseOptions(argv=tuple(tokens)))
    if isinstance(result, ParseError):
        code = error_code_for(result)
        logger.debug(
            "Parse failed with %s",
            code,
            extra=structured_extra(
                LogComponent.CLI,
                option=result.option,
                error_code=code,
                details={"kind": result.kind.value},
            ),
        )
        echo(f"[flagwright] {code} {result.message}", err=True)
        return 1
    if OutputFormat.from_str(args.format) is OutputFormat.TEXT:
        for line in render_flags_text(result):
            echo(line)
    else:
        echo(dump_json(result))
    return 0


__all__ = ["execute_parse", "register_parse_command"]
