# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2023 sardonicism-04
from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

# Module exports
from .formatters import WordsApiLoggingFormatter, format_exception, paint

if TYPE_CHECKING:
    from collections.abc import Iterable


def setup_logging(
    level: int = logging.INFO, *, loggers: Iterable[str] = ("wordsapi",)
) -> logging.Handler:
    """
    Attach a colored stream handler to each of the named loggers

    :param level: The level to set on each logger
    :type level: ``int``

    :param loggers: The names of the loggers to configure
    :type loggers: ``Iterable[str]``

    :returns: The handler that was attached
    """
    if os.name == "nt":
        os.system("color")  # Enable ANSI escapes on win32

    handler = logging.StreamHandler()
    handler.setFormatter(WordsApiLoggingFormatter())

    for name in loggers:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.addHandler(handler)

    return handler
