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

"""Argument tokenizer and binder.

``parse`` turns a definition table and a flat list of argument tokens into a
mapping of option names (and aliases) to typed values:

1. The definition is normalized into a ``LookupTable``.
2. Each token is classified as a key token (``-x``, ``-abc``, ``--name``) or a
   value token and fed to the pending-option state machine.
3. A final pass over the declared options expands ranges, applies defaults,
   enforces ``require`` and copies every value to the option's aliases.
4. ``select_reported_error`` decides whether the flags or an error is returned.
"""

from __future__ import annotations

import logging
import sys
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, cast

from flagwright._internal.logging_utils import structured_extra
from flagwright.compat import Self, assert_never
from flagwright.core.model_types import LogComponent, OptionType
from flagwright.core.type_aliases import POSITIONAL_KEY, FlagValue, Flags, RawDefinition
from flagwright.definition.models import ParseOptions, validate_parse_options
from flagwright.definition.normalizer import normalize_definition
from flagwright.rendering.render import format_usage

from .errors import MissingRequiredOptionError, MultipleValuesError, ParseError, select_reported_error
from .ranges import expand_range
from .state import (
    NO_PENDING,
    BindValue,
    Effect,
    InsertValueToken,
    PendingState,
    RecordError,
    RequestHelp,
    SetFlag,
    step_key_token,
    step_value_token,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from flagwright.definition.normalizer import LookupTable

logger: logging.Logger = logging.getLogger("flagwright.parser")


@dataclass(frozen=True, slots=True)
class Token:
    """An argument token and whether it names options or carries a value."""

    text: str
    is_key: bool

    @classmethod
    def classify(cls, text: str) -> Token:
        """Classify ``text``: tokens starting with ``-`` are key tokens."""
        return cls(text=text, is_key=text.startswith("-"))


def _default_errors() -> list[ParseError]:
    return []


@dataclass(slots=True)
class ParseState:
    """Mutable state of a single ``parse`` call.

    Attributes:
        pending: Option awaiting its value, if any.
        flags: Values collected so far, keyed by canonical name and ``_``.
        errors: Errors in the order they were recorded.
        help_requested: Latched when a ``help`` option is seen.
    """

    pending: PendingState = NO_PENDING
    flags: Flags = field(default_factory=dict)
    errors: list[ParseError] = field(default_factory=_default_errors)
    help_requested: bool = False

    @classmethod
    def start(cls, lookup: LookupTable) -> Self:
        """Return a fresh state seeded with boolean defaults and no positionals."""
        flags = lookup.seed_flags()
        flags[POSITIONAL_KEY] = []
        return cls(flags=flags)

    def record(self, error: ParseError, *, token: str | None = None) -> None:
        """Append ``error``; tokenization continues regardless.

        ``token`` is the argument token being processed, when there is one.
        """
        self.errors.append(error)
        logger.debug(
            "Recorded %s error: %s",
            error.kind,
            error,
            extra=structured_extra(LogComponent.PARSER, option=error.option, token=token),
        )


def _bind_value(state: ParseState, effect: BindValue, token: Token) -> None:
    destination = effect.destination
    if destination not in state.flags:
        state.flags[destination] = [effect.value] if effect.accumulate else effect.value
        return
    if effect.accumulate:
        cast("list[FlagValue]", state.flags[destination]).append(effect.value)
        return
    state.record(MultipleValuesError(destination), token=token.text)


def _apply_effect(state: ParseState, effect: Effect, token: Token, queue: deque[Token]) -> None:
    match effect:
        case SetFlag(option=option, value=value):
            state.flags[option] = value
        case RequestHelp():
            state.help_requested = True
        case BindValue():
            _bind_value(state, effect, token)
        case RecordError(error=error):
            state.record(error, token=token.text)
        case InsertValueToken(text=text):
            queue.appendleft(Token(text=text, is_key=False))
        case _:
            assert_never(effect)


def tokenize(lookup: LookupTable, argv: Iterable[str]) -> ParseState:
    """Run the state machine over ``argv``.

    Args:
        lookup: Normalized definition.
        argv: Argument tokens; the iterable is copied, never modified.

    Returns:
        The parse state after the last token, before the final pass.
    """
    state = ParseState.start(lookup)
    queue: deque[Token] = deque(Token.classify(text) for text in argv)
    while queue:
        token = queue.popleft()
        if token.is_key:
            transition = step_key_token(state.pending, token.text, lookup)
        else:
            transition = step_value_token(state.pending, token.text, lookup)
        state.pending = transition.pending
        for effect in transition.effects:
            _apply_effect(state, effect, token, queue)
    return state


def finalize_flags(lookup: LookupTable, state: ParseState) -> None:
    """Resolve the final value of every declared option.

    For each option, in declaration order: ``range`` values are expanded,
    unset values fall back to the declared default, a ``require``d option that
    is still unset records a usage error, and the value is copied to every
    alias. A ``require``d option with a default therefore never fails.

    Args:
        lookup: Normalized definition.
        state: State produced by ``tokenize``; updated in place.
    """
    for option in lookup:
        value = state.flags.get(option.name)
        if option.type is OptionType.RANGE and value:
            value = expand_range(value)
        if value is None:
            value = option.default
        if option.require and value is None:
            usage_text = format_usage(lookup, colors=False)
            state.record(MissingRequiredOptionError(option.name, usage_text))
        state.flags[option.name] = value
        for alias in option.aliases:
            state.flags[alias] = value


def resolve_argv(options: ParseOptions) -> list[str]:
    """Return the tokens to parse: ``options.argv`` or the process arguments."""
    if options.argv is not None:
        return list(options.argv)
    return sys.argv[1:]


def parse(
    definition: RawDefinition,
    options: ParseOptions | Mapping[str, Sequence[str] | None] | None = None,
) -> Flags | ParseError:
    """Parse argument tokens against a definition table.

    Args:
        definition: Mapping of option name to declared properties (``type``,
            ``alias``, ``default``, ``require``, ``multiple``, ``valid``,
            ``description``). It is never mutated.
        options: ``{"argv": [...]}`` to parse explicit tokens. Without ``argv``
            the process arguments (``sys.argv[1:]``) are parsed.

    Returns:
        The flags mapping (every option name and alias, plus ``_`` holding
        unclaimed positional values), or the first ``ParseError`` recorded.
        When a ``help`` option is present, errors are discarded and the flags
        are always returned.

    Raises:
        DefinitionSchemaError: If the definition does not match the option schema.
        DuplicateOptionError: If a name or alias is declared more than once.
        ParseOptionsError: If ``options`` is malformed.
    """
    lookup = normalize_definition(definition)
    argv = resolve_argv(validate_parse_options(options))
    state = tokenize(lookup, argv)
    finalize_flags(lookup, state)
    reported = select_reported_error(state.errors, help_requested=state.help_requested)
    logger.debug(
        "Parsed %d token(s) against %d option(s) with %d error(s)",
        len(argv),
        len(lookup),
        len(state.errors),
        extra=structured_extra(
            LogComponent.PARSER,
            counts={"tokens": len(argv), "options": len(lookup), "errors": len(state.errors)},
            help_requested=state.help_requested,
        ),
    )
    if reported is not None:
        return reported
    return state.flags


def parse_or_raise(
    definition: RawDefinition,
    options: ParseOptions | Mapping[str, Sequence[str] | None] | None = None,
) -> Flags:
    """Parse like ``parse`` but raise the reported ``ParseError`` instead of returning it.

    Raises:
        ParseError: The first recorded error when no help was requested.
    """
    result = parse(definition, options)
    if isinstance(result, ParseError):
        raise result
    return result


__all__ = [
    "ParseState",
    "Token",
    "finalize_flags",
    "parse",
    "parse_or_raise",
    "resolve_argv",
    "tokenize",
]
