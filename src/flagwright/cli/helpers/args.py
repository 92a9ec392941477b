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

# ruff: noqa: ANN401

"""Argument parser helpers used across CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from flagwright._internal.utils import consume

if TYPE_CHECKING:
    import argparse
    from collections.abc import Sequence


class ArgumentRegistrar(Protocol):
    """Protocol matching ``argparse.ArgumentParser.add_argument`` and argument groups."""

    def add_argument(
        self,
        *args: Any,
        **kwargs: Any,
    ) -> argparse.Action:
        """Expose ``ArgumentParser.add_argument`` so helpers can operate generically.

        Args:
            *args: Positional argument configuration passed through to ``add_argument``.
            **kwargs: Keyword options forwarded to ``add_argument``.

        Returns:
            argparse.Action: The action object created for the registered argument.
        """
        ...  # pragma: no cover


def register_argument(
    registrar: ArgumentRegistrar,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Register an argument on a parser/argument group, discarding the action handle.

    Args:
        registrar: Parser or argument group on which to register the option.
        *args: Positional flags and option strings forwarded to ``add_argument``.
        **kwargs: Keyword options forwarded to ``add_argument``.
    """
    consume(registrar.add_argument(*args, **kwargs))


def passthrough_tokens(raw: Sequence[str]) -> list[str]:
    """Return the argument tokens captured after the definition path.

    A leading ``--`` separator is dropped; every other token, including later
    ``--`` tokens, is passed through untouched.
    """
    tokens = list(raw)
    if tokens and tokens[0] == "--":
        return tokens[1:]
    return tokens


__all__ = ["ArgumentRegistrar", "passthrough_tokens", "register_argument"]
