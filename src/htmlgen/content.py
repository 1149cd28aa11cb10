# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Iterable
from typing import Self

import enum

from htmlgen.attributes import Attributes
from htmlgen.errors import InvalidInputError
from htmlgen.escaping import escape_attribute, escape_text
from htmlgen.node import BodyNode, HeadNode

MIN_HEADER_LEVEL = 1
MAX_HEADER_LEVEL = 6


def _string(value: object, field: str) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"{field} must be a string, not {type(value).__name__}")
    return value


def _tag(
    tag: str,
    intrinsic: dict[str, str],
    attributes: Attributes,
    content: str | None = None,
) -> str:
    """Build one element; a content of None marks a void element."""
    attrs = "".join(f' {key}="{escape_attribute(value)}"' for key, value in intrinsic.items())
    opening = f"<{tag}{attrs}{attributes.render()}>"

    if content is None:
        return opening

    return f"{opening}{content}</{tag}>"


class ListType(enum.StrEnum):
    ORDERED = "ol"
    UNORDERED = "ul"


# Head content


class Title(HeadNode):
    text: str

    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = _string(text, "title")

    def render(self) -> str:
        return _tag("title", {}, self.attributes, escape_text(self.text))


class Meta(HeadNode):
    intrinsic = ("name", "content")

    name: str
    content: str

    def __init__(self, name: str, content: str) -> None:
        super().__init__()
        self.name = _string(name, "meta name")
        self.content = _string(content, "meta content")

    def render(self) -> str:
        return _tag("meta", {"name": self.name, "content": self.content}, self.attributes)


class HeadLink(HeadNode):
    intrinsic = ("rel", "href")

    rel: str
    href: str

    def __init__(self, rel: str, href: str) -> None:
        super().__init__()
        self.rel = _string(rel, "link rel")
        self.href = _string(href, "link href")

    def render(self) -> str:
        return _tag("link", {"rel": self.rel, "href": self.href}, self.attributes)


class Style(HeadNode):
    """Inline CSS; the stylesheet text is emitted as given."""

    css: str

    def __init__(self, css: str) -> None:
        super().__init__()
        self.css = _string(css, "style")

    def render(self) -> str:
        return _tag("style", {}, self.attributes, self.css)


class Script(HeadNode):
    intrinsic = ("src",)

    src: str

    def __init__(self, src: str) -> None:
        super().__init__()
        self.src = _string(src, "script src")

    def render(self) -> str:
        return _tag("script", {"src": self.src}, self.attributes, "")


# Body content


class Header(BodyNode):
    level: int
    text: str

    def __init__(self, level: int, text: str) -> None:
        super().__init__()

        # bool is an int subclass, but True is not a heading level.
        if (
            not isinstance(level, int)
            or isinstance(level, bool)
            or not MIN_HEADER_LEVEL <= level <= MAX_HEADER_LEVEL
        ):
            raise InvalidInputError(
                f"Header level must be {MIN_HEADER_LEVEL}-{MAX_HEADER_LEVEL}, got {level!r}",
            )

        self.level = level
        self.text = _string(text, "header")

    def render(self) -> str:
        return _tag(f"h{self.level}", {}, self.attributes, escape_text(self.text))


class Paragraph(BodyNode):
    text: str

    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = _string(text, "paragraph")

    def render(self) -> str:
        return _tag("p", {}, self.attributes, escape_text(self.text))


class Link(BodyNode):
    intrinsic = ("href",)

    href: str
    text: str

    def __init__(self, href: str, text: str) -> None:
        super().__init__()
        self.href = _string(href, "link href")
        self.text = _string(text, "link text")

    def render(self) -> str:
        return _tag("a", {"href": self.href}, self.attributes, escape_text(self.text))


class Image(BodyNode):
    intrinsic = ("src", "alt")

    src: str
    alt: str

    def __init__(self, src: str, alt: str) -> None:
        super().__init__()
        self.src = _string(src, "image src")
        self.alt = _string(alt, "image alt")

    def render(self) -> str:
        return _tag("img", {"src": self.src, "alt": self.alt}, self.attributes)


class ItemList(BodyNode):
    list_type: ListType
    items: tuple[str, ...]

    def __init__(self, list_type: ListType | str, items: Iterable[str]) -> None:
        super().__init__()

        try:
            self.list_type = ListType(list_type)
        except ValueError as exp:
            raise InvalidInputError(f"Unknown list type {list_type!r}") from exp

        if isinstance(items, str):
            raise InvalidInputError("List items must be a sequence of strings, not a string")

        self.items = tuple(_string(item, "list item") for item in items)

    def render(self) -> str:
        items = "".join(f"<li>{escape_text(item)}</li>" for item in self.items)
        return _tag(self.list_type.value, {}, self.attributes, items)


class Text(BodyNode):
    """Escaped text with no surrounding tag."""

    text: str

    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = _string(text, "text")

    def with_attribute(self, key: str, value: str) -> Self:
        raise InvalidInputError("Bare text has no tag to carry attributes")

    def render(self) -> str:
        return escape_text(self.text)


class Raw(BodyNode):
    """Markup passed through untouched; the caller vouches for it."""

    markup: str

    def __init__(self, markup: str) -> None:
        super().__init__()
        self.markup = _string(markup, "raw markup")

    def with_attribute(self, key: str, value: str) -> Self:
        raise InvalidInputError("Raw markup has no tag to carry attributes")

    def render(self) -> str:
        return self.markup


class Preformatted(BodyNode):
    text: str

    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = _string(text, "preformatted text")

    def render(self) -> str:
        return _tag("pre", {}, self.attributes, self.text)


__all__ = [
    "MAX_HEADER_LEVEL",
    "MIN_HEADER_LEVEL",
    "HeadLink",
    "Header",
    "Image",
    "ItemList",
    "Link",
    "ListType",
    "Meta",
    "Paragraph",
    "Preformatted",
    "Raw",
    "Script",
    "Style",
    "Text",
    "Title",
]
