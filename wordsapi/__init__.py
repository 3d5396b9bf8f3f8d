# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2023 sardonicism-04
from .exceptions import (
    ConfigError,
    SearchNotImplemented,
    UnknownAttribute,
    WordsApiException,
)
from .service import BASE, WordService
from .tools import setup_logging
from .types.config import WordsApiConfig, load_config
from .word import Word

__version__ = "1.0.0"

__all__ = (
    "BASE",
    "ConfigError",
    "SearchNotImplemented",
    "UnknownAttribute",
    "Word",
    "WordService",
    "WordsApiConfig",
    "WordsApiException",
    "load_config",
    "setup_logging",
)
