# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Iterable
from typing import Self

import abc
import enum

from htmlgen.content import (
    Header,
    Image,
    ItemList,
    Link,
    ListType,
    Paragraph,
    Preformatted,
    Raw,
    Text,
)
from htmlgen.errors import InvalidInputError
from htmlgen.node import BodyNode


class ContainerType(enum.StrEnum):
    ADDRESS = "address"
    ARTICLE = "article"
    ASIDE = "aside"
    DIV = "div"
    FOOTER = "footer"
    HEADER = "header"
    MAIN = "main"
    NAV = "nav"
    SECTION = "section"
    ORDERED_LIST = "ol"
    UNORDERED_LIST = "ul"

    @property
    def wraps_items(self) -> bool:
        return self in (ContainerType.ORDERED_LIST, ContainerType.UNORDERED_LIST)


class HtmlContainer(abc.ABC):
    """Builder calls shared by everything that holds body content.

    Every ``add_*`` call builds its element first, so invalid input raises
    before anything is appended, then returns the builder for chaining.
    """

    @abc.abstractmethod
    def add_html(self, node: BodyNode) -> Self:
        pass

    def add_header(self, level: int, text: str) -> Self:
        return self.add_html(Header(level, text))

    def add_paragraph(self, text: str) -> Self:
        return self.add_html(Paragraph(text))

    def add_link(self, href: str, text: str) -> Self:
        return self.add_html(Link(href, text))

    def add_image(self, src: str, alt: str) -> Self:
        return self.add_html(Image(src, alt))

    def add_list(self, list_type: ListType | str, items: Iterable[str]) -> Self:
        return self.add_html(ItemList(list_type, items))

    def add_text(self, text: str) -> Self:
        return self.add_html(Text(text))

    def add_raw(self, markup: str) -> Self:
        return self.add_html(Raw(markup))

    def add_preformatted(self, text: str) -> Self:
        return self.add_html(Preformatted(text))

    def add_container(self, container: Container) -> Self:
        return self.add_html(container)


class Container(BodyNode, HtmlContainer):
    container_type: ContainerType
    children: list[BodyNode]

    def __init__(self, container_type: ContainerType | str) -> None:
        super().__init__()

        try:
            self.container_type = ContainerType(container_type)
        except ValueError as exp:
            raise InvalidInputError(f"Unknown container type {container_type!r}") from exp

        self.children = []

    def add_html(self, node: BodyNode) -> Self:
        self.adopt(node)
        self.children.append(node)
        return self

    def render(self) -> str:
        tag = self.container_type.value

        if self.container_type.wraps_items:
            content = "".join(f"<li>{child.render()}</li>" for child in self.children)
        else:
            content = "".join(child.render() for child in self.children)

        return f"<{tag}{self.attributes.render()}>{content}</{tag}>"


__all__ = ["Container", "ContainerType", "HtmlContainer"]
