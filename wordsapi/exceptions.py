# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2023 sardonicism-04
class WordsApiException(Exception):
    """The base class that all wordsapi-related exceptions derive from"""


class UnknownAttribute(WordsApiException, ValueError):
    """Raised when an attribute outside of the known set is requested"""

    def __init__(self, attribute: str):
        self.attribute = attribute

    def __str__(self):
        return f"Unknown attribute: {self.attribute}"


class SearchNotImplemented(WordsApiException, NotImplementedError):
    """Raised when searching, which is not supported yet"""

    def __str__(self):
        return "search method not implemented yet"


class ConfigError(WordsApiException):
    """Raised when a configuration is missing required values"""

    def __init__(self, key: str):
        self.key = key

    def __str__(self):
        return f"Missing or invalid configuration value `{self.key}`"
