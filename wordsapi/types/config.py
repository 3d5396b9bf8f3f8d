# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2023 sardonicism-04
from __future__ import annotations

import os
from typing import Any, TypedDict

import toml
from typing_extensions import NotRequired

from wordsapi.exceptions import ConfigError


class WordsApiConfig(TypedDict):
    api_key: str
    timeout: NotRequired[float]
    base_url: NotRequired[str]
    ssl: NotRequired[bool]


def load_config(path: str | os.PathLike[str] = "config.toml") -> WordsApiConfig:
    """
    Load a WordsAPI configuration from a TOML file

    The ``[wordsapi]`` table is used when present, otherwise the
    top level of the file is.

    :param path: The path of the TOML file
    :type path: ``str | os.PathLike[str]``

    :raises ConfigError: If ``api_key`` is missing or empty
    """
    with open(path, "r") as file:
        data: dict[str, Any] = toml.load(file)

    section = data.get("wordsapi", data)
    if not isinstance(section.get("api_key"), str) or not section["api_key"]:
        raise ConfigError("api_key")

    return WordsApiConfig(**section)
