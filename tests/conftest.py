# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from collections.abc import Iterator

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_htmlgen_logger() -> Iterator[None]:
    logger = logging.getLogger("htmlgen")
    handlers = list(logger.handlers)
    level = logger.level

    yield

    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("HTMLGEN_TITLE", "HTMLGEN_STYLESHEET", "HTMLGEN_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
