# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Build HTML documents by chaining ``add_*`` calls, then render them to a string."""

from __future__ import annotations as _future_annotations

from htmlgen.attributes import Attributes
from htmlgen.containers import Container, ContainerType, HtmlContainer
from htmlgen.content import (
    Header,
    HeadLink,
    Image,
    ItemList,
    Link,
    ListType,
    Meta,
    Paragraph,
    Preformatted,
    Raw,
    Script,
    Style,
    Text,
    Title,
)
from htmlgen.errors import InvalidInputError
from htmlgen.escaping import escape_attribute, escape_text
from htmlgen.node import BodyNode, HeadNode, Node
from htmlgen.page import Page

__all__ = [
    "Attributes",
    "BodyNode",
    "Container",
    "ContainerType",
    "HeadLink",
    "HeadNode",
    "Header",
    "HtmlContainer",
    "Image",
    "InvalidInputError",
    "ItemList",
    "Link",
    "ListType",
    "Meta",
    "Node",
    "Page",
    "Paragraph",
    "Preformatted",
    "Raw",
    "Script",
    "Style",
    "Text",
    "Title",
    "escape_attribute",
    "escape_text",
]
