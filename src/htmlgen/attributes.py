# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Iterable, Iterator

import re

from htmlgen.errors import InvalidInputError
from htmlgen.escaping import escape_attribute

_INVALID_NAME = re.compile(r"[\s\"'>/=\x00-\x1f\x7f]")


class Attributes:
    """Attribute names mapped to values, rendered in the order they were first set.

    Setting a name that is already present replaces its value and keeps its
    original position.
    """

    _values: dict[str, str]
    _reserved: frozenset[str]

    def __init__(self, reserved: Iterable[str] = ()) -> None:
        self._values = {}
        self._reserved = frozenset(reserved)

    def set(self, key: str, value: str) -> None:
        if not isinstance(key, str):
            raise InvalidInputError(f"Attribute name must be a string, not {type(key).__name__}")
        if not isinstance(value, str):
            raise InvalidInputError(
                f"Attribute {key!r} must be a string, not {type(value).__name__}",
            )
        if not key or _INVALID_NAME.search(key):
            raise InvalidInputError(f"Invalid attribute name {key!r}")
        if key in self._reserved:
            raise InvalidInputError(f"Attribute {key!r} is set by the element itself")

        self._values[key] = value

    def render(self) -> str:
        return "".join(f' {key}="{escape_attribute(value)}"' for key, value in self._values.items())

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Attributes({self._values!r})"


__all__ = ["Attributes"]
