# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

import html

# Single quotes are left as they are.
_ATTRIBUTE_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"})


def escape_text(text: str) -> str:
    """Escape text placed between tags."""
    return html.escape(text, quote=False)


def escape_attribute(value: str) -> str:
    """Escape a value placed inside a double-quoted attribute."""
    return value.translate(_ATTRIBUTE_ESCAPES)


__all__ = ["escape_attribute", "escape_text"]
