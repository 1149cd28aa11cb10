# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations


class InvalidInputError(ValueError):
    """A builder call was given a value it cannot represent.

    Raised by the call that receives the value, before the tree is changed.
    """


__all__ = ["InvalidInputError"]
