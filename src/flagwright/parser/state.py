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

"""Pending-option state machine driving the tokenizer.

At most one option awaits a value at any time. The transition functions in
this module are pure: given the pending state and one argument token they
return the next pending state plus a tuple of effects, and the tokenizer is
responsible for applying those effects to the parse state. This keeps every
tokenization rule testable without running a full parse.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, TypeAlias

from flagwright.core.model_types import OptionType
from flagwright.core.type_aliases import POSITIONAL_KEY, FlagValue, OptionName

from .coercion import parse_integer
from .errors import (
    EmptyOptionError,
    InvalidValueError,
    MissingValueError,
    NonNumericValueError,
    ParseError,
    UnknownOptionError,
)

if TYPE_CHECKING:
    from flagwright.definition.normalizer import LookupTable


@dataclass(frozen=True, slots=True)
class NoPendingOption:
    """No option is waiting for a value."""


@dataclass(frozen=True, slots=True)
class AwaitingValue:
    """``option`` consumes the next value token."""

    option: OptionName


PendingState: TypeAlias = NoPendingOption | AwaitingValue

NO_PENDING: Final[NoPendingOption] = NoPendingOption()


@dataclass(frozen=True, slots=True)
class SetFlag:
    """Store ``value`` for a flag option."""

    option: OptionName
    value: FlagValue = True


@dataclass(frozen=True, slots=True)
class RequestHelp:
    """Latch the help request, suppressing every error of the parse."""


@dataclass(frozen=True, slots=True)
class BindValue:
    """Bind a value token to ``destination``.

    ``accumulate`` selects list accumulation (positionals and ``multiple``
    options) over a single scalar value.
    """

    destination: str
    value: FlagValue
    accumulate: bool


@dataclass(frozen=True, slots=True)
class RecordError:
    """Append ``error`` to the parse errors; scanning continues."""

    error: ParseError


@dataclass(frozen=True, slots=True)
class InsertValueToken:
    """Process ``text`` as a value token right after the current token."""

    text: str


Effect: TypeAlias = SetFlag | RequestHelp | BindValue | RecordError | InsertValueToken


@dataclass(frozen=True, slots=True)
class Transition:
    """Result of feeding one token to the state machine."""

    pending: PendingState
    effects: tuple[Effect, ...] = ()


def step_key_token(pending: PendingState, token: str, lookup: LookupTable) -> Transition:
    """Process a key token (``--name`` or a short cluster such as ``-abc``).

    Args:
        pending: Current pending state.
        token: Raw token, starting with ``-``.
        lookup: Lookup table resolving spellings to options.

    Returns:
        The next pending state and the effects of the token.
    """
    body = token[1:]
    if not body:
        return Transition(pending, (RecordError(EmptyOptionError("-")),))
    if body == "-":
        return Transition(pending, (RecordError(EmptyOptionError("--")),))

    long_form = body.startswith("-")
    spellings = [body[1:]] if long_form else list(body)
    effects: list[Effect] = []
    for index, spelling in enumerate(spellings):
        if isinstance(pending, AwaitingValue):
            effects.append(RecordError(MissingValueError(pending.option)))
            continue
        option = lookup.resolve(spelling)
        if option is None:
            effects.append(RecordError(UnknownOptionError(spelling)))
            continue
        if not option.takes_value:
            effects.append(SetFlag(option.name))
            if option.type is OptionType.HELP:
                effects.append(RequestHelp())
            continue
        pending = AwaitingValue(option.name)
        suffix = body[index + 1 :]
        if option.type is OptionType.NUMBER and not long_form and suffix:
            effects.append(InsertValueToken(suffix))
            break
    return Transition(pending, tuple(effects))


def step_value_token(pending: PendingState, token: str, lookup: LookupTable) -> Transition:
    """Process a value token, binding it to the pending option or to positionals.

    The pending option is cleared whether the value is accepted or rejected.

    Args:
        pending: Current pending state.
        token: Raw token.
        lookup: Lookup table resolving the pending option.

    Returns:
        ``NO_PENDING`` and the effects of the token.
    """
    if isinstance(pending, NoPendingOption):
        return Transition(NO_PENDING, (BindValue(POSITIONAL_KEY, token, accumulate=True),))

    option = lookup.option(pending.option)
    value: FlagValue = token
    if option.type is OptionType.NUMBER:
        value = parse_integer(token)
        if value is None:
            return Transition(NO_PENDING, (RecordError(NonNumericValueError(option.name, token)),))
    if option.valid is not None and value not in option.valid:
        return Transition(NO_PENDING, (RecordError(InvalidValueError(option.name, value)),))
    return Transition(NO_PENDING, (BindValue(option.name, value, accumulate=option.multiple),))


__all__ = [
    "NO_PENDING",
    "AwaitingValue",
    "BindValue",
    "Effect",
    "InsertValueToken",
    "NoPendingOption",
    "PendingState",
    "RecordError",
    "RequestHelp",
    "SetFlag",
    "Transition",
    "step_key_token",
    "step_value_token",
]
