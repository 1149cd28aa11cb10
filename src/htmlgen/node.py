# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from typing import ClassVar, Self

import abc

from htmlgen.attributes import Attributes
from htmlgen.errors import InvalidInputError


class Node(abc.ABC):
    """Anything that can render itself to an HTML fragment.

    Rendering is a pure function of the node's state: it can be called any
    number of times and never raises once the node has been constructed.
    """

    # Attribute names the element writes itself, which callers may not set.
    intrinsic: ClassVar[tuple[str, ...]] = ()

    attributes: Attributes
    _owner: Node | None

    def __init__(self) -> None:
        self.attributes = Attributes(self.intrinsic)
        self._owner = None

    @abc.abstractmethod
    def render(self) -> str:
        pass

    def with_attribute(self, key: str, value: str) -> Self:
        self.attributes.set(key, value)
        return self

    def adopt(self, child: Node) -> None:
        """Take exclusive ownership of a node about to become one of our children.

        A node belongs to at most one parent, and never to itself or one of its
        own descendants, so the tree stays acyclic and rendering stays finite.
        """
        if child._owner is not None:  # noqa: SLF001
            raise InvalidInputError(f"{type(child).__name__} already belongs to another element")

        ancestor: Node | None = self
        while ancestor is not None:
            if ancestor is child:
                raise InvalidInputError(f"{type(child).__name__} cannot contain itself")
            ancestor = ancestor._owner  # noqa: SLF001

        child._owner = self  # noqa: SLF001

    def __str__(self) -> str:
        return self.render()


class HeadNode(Node, abc.ABC):  # pylint: disable=too-few-public-methods
    """Content that belongs inside <head>."""


class BodyNode(Node, abc.ABC):  # pylint: disable=too-few-public-methods
    """Content that belongs inside <body> or a container."""


__all__ = ["BodyNode", "HeadNode", "Node"]
