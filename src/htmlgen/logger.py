# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from types import TracebackType
from typing import Any

import logging
import traceback

from pythonjsonlogger.json import JsonFormatter as _JsonFormatter

_SysExcInfoType = (
    tuple[type[BaseException], BaseException, TracebackType | None] | tuple[None, None, None]
)


class JsonFormatter(_JsonFormatter):
    """JSON log lines with exceptions expanded into a structured chain."""

    def formatException(self, ei: _SysExcInfoType) -> dict[str, Any] | None:  # type: ignore[override]
        _, exc_value, _ = ei
        if exc_value is None:
            return None

        return describe_exception(exc_value)


def describe_exception(exc: BaseException) -> dict[str, Any]:
    trace = traceback.extract_tb(exc.__traceback__)

    return {
        "type": type(exc).__name__,
        "message": str(exc),
        "traceback": [
            {
                "source": f"{frame.filename}:{frame.lineno}",
                "method": frame.name,
                "code": frame.line,
            }
            for frame in reversed(trace)
        ],
        "cause": describe_exception(exc.__cause__) if exc.__cause__ else None,
    }


def configure(*, pretty: bool = False, level: int = logging.INFO) -> logging.Logger:
    """Send the ``htmlgen`` logger hierarchy to stderr as JSON."""
    logger = logging.getLogger("htmlgen")
    for existing in list(logger.handlers):
        if isinstance(existing.formatter, JsonFormatter):
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter(json_indent=2 if pretty else None))
    handler.setLevel(level)

    logger.addHandler(handler)
    logger.setLevel(level)

    return logger


__all__ = ["JsonFormatter", "configure", "describe_exception"]
