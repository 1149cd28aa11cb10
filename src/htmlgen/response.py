# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

import logging

import aiohttp.web
import brotli  # type: ignore[import-untyped]

from htmlgen.page import Page

_LOGGER = logging.getLogger("htmlgen.response")


def page_response(
    page: Page,
    request: aiohttp.web.BaseRequest,
    *,
    status: int = 200,
) -> aiohttp.web.Response:
    """Render a page into a response for an aiohttp handler.

    The body is brotli compressed when the client accepts it.
    """
    content = page.render().encode("utf-8")

    headers = {
        "Content-Type": "text/html; charset=utf-8",
        "Cache-Control": "must-revalidate, no-cache, no-store, private",
        "Vary": "accept-encoding",
    }

    if _accepts_brotli(request.headers.get("Accept-Encoding", "")):
        content = brotli.compress(content)
        headers["Content-Encoding"] = "br"

    _LOGGER.debug(
        "Rendered page for %s %s",
        request.method,
        request.path,
        extra={"status": status, "bytes": len(content)},
    )

    return aiohttp.web.Response(body=content, status=status, headers=headers)


def _accepts_brotli(accept_encoding: str) -> bool:
    for entry in accept_encoding.split(","):
        coding, *params = (part.strip() for part in entry.split(";"))
        if coding.lower() != "br":
            continue

        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    return float(value) > 0
                except ValueError:
                    return False

        return True

    return False


__all__ = ["page_response"]
