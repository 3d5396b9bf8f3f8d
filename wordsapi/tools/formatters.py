# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2023 sardonicism-04
import copy
import traceback
from logging import Formatter, LogRecord


def format_exception(exc: BaseException) -> str:
    """Render an exception with its traceback, for logging"""
    return "".join(
        traceback.format_exception(type(exc), exc, exc.__traceback__)
    ).rstrip()


def paint(rgb: tuple[int, int, int], text: str) -> str:
    """Wrap `text` in a 24-bit ANSI foreground color, followed by a reset"""
    return "\033[38;2;{};{};{}m{}\033[0m".format(*rgb, text)


class WordsApiLoggingFormatter(Formatter):
    TIME = (92, 207, 230)
    MESSAGE = (112, 122, 140)
    NAME = (162, 155, 254)
    LEVELS = {
        "DEBUG": (92, 103, 115),
        "INFO": (186, 230, 126),
        "WARNING": (255, 230, 179),
        "ERROR": (255, 167, 89),
        "CRITICAL": (255, 51, 51),
    }

    def __init__(self, **kwargs):
        kwargs["style"] = "{"
        kwargs.setdefault(
            "fmt", "[{asctime}] [{levelname} {name} {funcName}] {message}"
        )
        kwargs["datefmt"] = paint(self.TIME, "%d-%m-%Y %H:%M:%S")
        super().__init__(**kwargs)

    def format(self, record: LogRecord):
        # Color a copy, other handlers may share the record
        record = copy.copy(record)
        record.msg = paint(self.MESSAGE, record.getMessage())
        record.args = None
        record.name = paint(self.NAME, record.name)
        if record.levelname in self.LEVELS:
            record.levelname = paint(self.LEVELS[record.levelname], record.levelname)
        return super().format(record)
