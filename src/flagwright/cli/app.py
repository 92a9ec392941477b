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


"""CLI entry point and orchestration for flagwright commands."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from contextlib import suppress
from typing import TYPE_CHECKING, Final

from flagwright import __version__
from flagwright._internal.error_codes import error_code_for
from flagwright._internal.exceptions import FlagwrightTypeError, FlagwrightValidationError
from flagwright._internal.logging_utils import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra
from flagwright.cli.commands import parse as parse_command
from flagwright.cli.commands import usage as usage_command
from flagwright.cli.helpers import echo as _echo
from flagwright.cli.helpers import register_argument as _register_argument
from flagwright.core.model_types import LogComponent

if TYPE_CHECKING:
    from flagwright.cli.types import SubparserCollection

logger: logging.Logger = logging.getLogger("flagwright.cli")

FLAGWRIGHT_VERSION: Final[str] = __version__

CommandHandler = Callable[[argparse.Namespace], int]


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the flagwright command-line interface.

    Parses command-line arguments, configures logging, and dispatches to the
    selected command handler. Definition problems (unreadable files, schema
    violations, duplicate spellings, non-mapping tables) are reported on stderr with their error
    code.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: ``0`` on success, ``1`` when a parse error is reported and ``2``
            for definition problems.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        _echo(f"flagwright {FLAGWRIGHT_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    _initialize_logging(args.log_format, args.log_level)
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    try:
        return handler(args)
    except (FlagwrightTypeError, FlagwrightValidationError) as exc:
        code = error_code_for(exc)
        logger.debug(
            "Command %s rejected its definition",
            args.command,
            extra=structured_extra(LogComponent.CLI, error_code=code),
        )
        _echo(f"[flagwright] {code} {exc}", err=True)
        return 2


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with global options and subcommands.

    Returns:
        argparse.ArgumentParser: Fully configured argument parser.
    """
    common = argparse.ArgumentParser(add_help=False)
    _register_argument(
        common,
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Select logging output format (defaults to $FLAGWRIGHT_LOG_FORMAT, then text).",
    )
    _register_argument(
        common,
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Set verbosity of logged events (defaults to $FLAGWRIGHT_LOG_LEVEL, then info).",
    )
    parser = argparse.ArgumentParser(
        prog="flagwright",
        parents=[common],
        description="Parse command-line arguments against declarative option definitions.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the flagwright version and exit.",
    )
    subparsers: SubparserCollection = parser.add_subparsers(dest="command")

    parents = [common]
    parse_command.register_parse_command(subparsers, parents=parents)
    usage_command.register_usage_command(subparsers, parents=parents)
    return parser


def _initialize_logging(log_format: str | None, log_level: str | None) -> None:
    """Initialize logging for the CLI; failures leave logging unconfigured.

    Args:
        log_format: Logging format string (``text`` or ``json``), or None for the environment default.
        log_level: Logging level string (e.g. ``info``, ``debug``), or None for the environment default.
    """
    with suppress(Exception):  # best-effort logger init
        _ = configure_logging(log_format, log_level=log_level)


def _command_handlers() -> dict[str, CommandHandler]:
    """Return a mapping of command names to their handler functions."""
    return {
        "parse": parse_command.execute_parse,
        "usage": usage_command.execute_usage,
    }


__all__ = ["main"]
