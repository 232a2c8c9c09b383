"""Terminal logging for the ``configster`` tool."""

from __future__ import annotations

import logging
import time
from typing import IO

import click

__all__ = [
    "ClickFormatter",
    "ClickHandler",
    "setup_logging",
]


def default_time_formatter(t: float) -> str:
    tm = time.localtime(t)
    return f"{tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d}"


class ClickFormatter(logging.Formatter):
    """Formats log records like ``app 12:34:56 WARNING: message``.

    Every line of a multi-line message gets the prefix. Colors are only emitted when the output
    stream supports them, which is decided by `click.echo`.
    """

    def __init__(self, app_name: str | None = "configster", show_time: bool = True):
        super().__init__()
        self.app_name = app_name
        self.show_time = show_time

    def format(self, record: logging.LogRecord) -> str:
        parts: list[str] = []
        if self.app_name:
            parts.append(f"{click.style(self.app_name, fg='blue')} ")
        if self.show_time:
            parts.append(f"{click.style(default_time_formatter(record.created), fg='green')} ")

        prefix = "".join(parts)

        msg = record.getMessage()
        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"

        formatted_lines: list[str] = []

        for line in msg.splitlines():
            if record.levelno <= logging.DEBUG:
                formatted_lines.append(prefix + click.style(f"DEBUG: {line}", fg="cyan"))
            elif record.levelno >= logging.ERROR:
                formatted_lines.append(prefix + click.style(f"ERROR: {line}", fg="red"))
            elif record.levelno >= logging.WARNING:
                formatted_lines.append(prefix + click.style(f"WARNING: {line}", fg="yellow"))
            else:
                formatted_lines.append(prefix + line)
        return "\n".join(formatted_lines)


class ClickHandler(logging.Handler):
    """Writes log records using `click.echo`, to stderr unless another stream is given."""

    def __init__(self, file: IO[str] | None = None):
        super().__init__()
        self.file = file

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            click.echo(msg, file=self.file, err=self.file is None)
        except Exception:
            self.handleError(record)


def setup_logging(verbose: bool = False, file: IO[str] | None = None) -> ClickHandler:
    """Route the ``configster`` loggers to the terminal.

    Replaces a handler installed by a previous call, so calling this repeatedly is safe. Records
    are not passed on to the root logger, which would print them a second time.
    """
    package_logger = logging.getLogger("configster")
    for handler in list(package_logger.handlers):
        if isinstance(handler, ClickHandler):
            package_logger.removeHandler(handler)

    handler = ClickHandler(file)
    handler.setFormatter(ClickFormatter())
    package_logger.addHandler(handler)
    package_logger.propagate = False
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return handler
