# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from typing import Self

from htmlgen.containers import HtmlContainer
from htmlgen.content import HeadLink, Meta, Script, Style, Title
from htmlgen.errors import InvalidInputError
from htmlgen.node import BodyNode, HeadNode, Node


class Page(Node, HtmlContainer):
    """A whole HTML document, built up by chaining ``add_*`` calls.

    Head-scoped calls append to ``head`` and everything from
    :class:`~htmlgen.containers.HtmlContainer` appends to ``body``::

        html = (
            Page()
            .add_title("My Page")
            .add_header(1, "Main Content:")
            .add_container(
                Container(ContainerType.ARTICLE)
                .add_header(2, "Hello, World")
                .add_paragraph("This is a simple HTML demo"),
            )
            .render()
        )
    """

    head: list[HeadNode]
    body: list[BodyNode]

    def __init__(self) -> None:
        super().__init__()
        self.head = []
        self.body = []

    def add_head_html(self, node: HeadNode) -> Self:
        self.adopt(node)
        self.head.append(node)
        return self

    def add_title(self, text: str) -> Self:
        return self.add_head_html(Title(text))

    def add_meta(self, name: str, content: str) -> Self:
        return self.add_head_html(Meta(name, content))

    def add_head_link(self, rel: str, href: str) -> Self:
        return self.add_head_html(HeadLink(rel, href))

    def add_stylesheet(self, href: str) -> Self:
        return self.add_head_link("stylesheet", href)

    def add_style(self, css: str) -> Self:
        return self.add_head_html(Style(css))

    def add_script(self, src: str) -> Self:
        return self.add_head_html(Script(src))

    def add_html(self, node: BodyNode) -> Self:
        self.adopt(node)
        self.body.append(node)
        return self

    def with_attribute(self, key: str, value: str) -> Self:
        raise InvalidInputError("The <html> element does not take attributes")

    def render(self) -> str:
        head = "".join(node.render() for node in self.head)
        body = "".join(node.render() for node in self.body)

        return (
            "<!DOCTYPE html>"
            "<html>"
            f"<head>{head}</head>"
            f"<body>{body}</body>"
            "</html>"
        )


__all__ = ["Page"]
