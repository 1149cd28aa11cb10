# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Sequence
from typing import Any

import argparse
import os
import pathlib
import sys

from dotenv import load_dotenv

from htmlgen import logger as htmlgen_logger
from htmlgen.content import ListType
from htmlgen.errors import InvalidInputError
from htmlgen.page import Page


class _BodyContent(argparse.Action):  # pylint: disable=too-few-public-methods
    """Collect body flags into one list so they keep their command line order."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: str | Sequence[Any] | None,
        option_string: str | None = None,
    ) -> None:
        content = list(getattr(namespace, "content", None) or [])
        content.append((self.dest, values if isinstance(values, list) else [values]))
        namespace.content = content


def build_parser() -> argparse.ArgumentParser:
    stylesheet = os.environ.get("HTMLGEN_STYLESHEET")

    parser = argparse.ArgumentParser(prog="htmlgen", description="Build an HTML page.")
    parser.add_argument("--title", default=os.environ.get("HTMLGEN_TITLE"))
    parser.add_argument(
        "--stylesheet",
        action="append",
        default=[stylesheet] if stylesheet else [],
    )
    parser.add_argument(
        "--output",
        "-o",
        type=pathlib.Path,
        default=os.environ.get("HTMLGEN_OUTPUT"),
    )
    parser.add_argument("--pretty-logs", action="store_true", default=False)

    body = parser.add_argument_group("body content", "rendered in the order given")
    body.add_argument("--header", nargs=2, metavar=("LEVEL", "TEXT"), action=_BodyContent)
    body.add_argument("--paragraph", metavar="TEXT", action=_BodyContent)
    body.add_argument("--link", nargs=2, metavar=("HREF", "TEXT"), action=_BodyContent)
    body.add_argument("--image", nargs=2, metavar=("SRC", "ALT"), action=_BodyContent)
    body.add_argument("--item", metavar="TEXT", action=_BodyContent)
    body.add_argument("--raw", metavar="MARKUP", action=_BodyContent)
    parser.set_defaults(content=[])

    return parser


def build_page(args: argparse.Namespace) -> Page:
    page = Page()

    if args.title is not None:
        page.add_title(args.title)
    for href in args.stylesheet:
        page.add_stylesheet(href)

    items: list[str] = []
    for kind, values in args.content:
        if kind == "item":
            items.extend(values)
            continue

        if items:
            page.add_list(ListType.UNORDERED, items)
            items = []

        match kind:
            case "header":
                level, text = values
                try:
                    number = int(level)
                except ValueError as exp:
                    raise InvalidInputError(f"Header level {level!r} is not a number") from exp
                page.add_header(number, text)
            case "paragraph":
                page.add_paragraph(*values)
            case "link":
                page.add_link(*values)
            case "image":
                page.add_image(*values)
            case "raw":
                page.add_raw(*values)

    if items:
        page.add_list(ListType.UNORDERED, items)

    return page


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()

    args = build_parser().parse_args(argv)
    logger = htmlgen_logger.configure(pretty=args.pretty_logs).getChild("cli")

    try:
        page = build_page(args)
    except InvalidInputError:
        logger.exception("Invalid page content")
        return 2

    # Both destinations get the same bytes, ending in a newline.
    html = page.render() + "\n"

    if args.output is None:
        sys.stdout.write(html)
    else:
        args.output.write_text(html, encoding="utf-8")
        logger.info("Wrote page to %s", args.output, extra={"bytes": len(html.encode("utf-8"))})

    return 0


if __name__ == "__main__":
    sys.exit(main())
