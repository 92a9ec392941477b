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


"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "boolean_definitions",
    "option_names",
    "value_tokens",
]


def option_names() -> st.SearchStrategy[str]:
    """Return a strategy for long option names (two or more lowercase letters)."""
    return st.from_regex(r"[a-z]{2,8}", fullmatch=True)


def value_tokens(max_size: int = 6) -> st.SearchStrategy[list[str]]:
    """Return lists of tokens that can never be mistaken for key tokens.

    Args:
        max_size: Maximum number of tokens per list.

    Returns:
        Hypothesis strategy producing lists of non-empty strings without a
        leading ``-``.
    """
    token = st.text(min_size=1, max_size=10).filter(lambda text: not text.startswith("-"))
    return st.lists(token, max_size=max_size)


def boolean_definitions(max_size: int = 4) -> st.SearchStrategy[dict[str, dict[str, object]]]:
    """Definitions of boolean options, each with a distinct one-letter alias.

    Args:
        max_size: Maximum number of options.

    Returns:
        Hypothesis strategy producing definition tables.
    """
    names = st.lists(option_names(), min_size=1, max_size=max_size, unique=True)
    return names.map(
        lambda items: {
            name: {"type": "boolean", "alias": [chr(ord("A") + index)]} for index, name in enumerate(items)
        },
    )
