# Source Tracking
"""
Keeps track of the file a config was read from, so that parsed options can point back to the
line they were defined on.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any

from . import report

__all__ = [
    "SourceFile",
    "SourceLocation",
    "read_file",
    "from_content",
]

logger = logging.getLogger(__name__)

_RE_NEWLINE = re.compile(r"\n")


@dataclass(frozen=True, repr=False)
class SourceFile:
    """A config file together with its content.

    The content is kept so that diagnostics can show the lines surrounding an option.
    """

    user_path: Path
    """The path to the file as given by the user."""

    absolute_path: Path
    """The absolute path to the file."""

    newlines: tuple[int, ...]
    """The indices of all newlines in the file."""

    content: str
    """The content of the file."""

    def __str__(self) -> str:
        return f"{self.user_path}"

    def __repr__(self) -> str:
        if self.user_path == self.absolute_path:
            return f"{self.user_path}"
        else:
            return f"{self.user_path}({self.absolute_path})"

    def text_lines(self, start_line: int, end_line: int) -> str:
        """The text of the lines ``start_line`` up to and including ``end_line``.

        Line numbers start at 1 and are clamped to the lines present in the file. The trailing
        newline of the last line is not included.
        """
        start_line -= 1
        end_line -= 1

        start = 0 if start_line <= 0 else self.newlines[start_line - 1] + 1
        end = len(self.content) if end_line >= len(self.newlines) else self.newlines[end_line]

        return self.content[start:end]

    @property
    def line_count(self) -> int:
        """Number of lines, not counting the empty remainder after a trailing newline."""
        if self.newlines and self.newlines[-1] == len(self.content) - 1:
            return len(self.newlines)
        return len(self.newlines) + 1


@dataclass(frozen=True, repr=False)
class SourceLocation:
    """The line an option was defined on."""

    line: int
    """Line number, starting at 1."""

    file: SourceFile | None = None
    """The file containing the line, if the text was read from or annotated with a file."""

    def __str__(self) -> str:
        if self.file is None:
            return f"line {self.line}"
        return f"{self.file}:{self.line}"

    def __repr__(self) -> str:
        if self.file is None:
            return f"line {self.line}"
        return f"{self.file!r}:{self.line}"

    @property
    def text(self) -> str | None:
        """The full text of the line, without its line ending."""
        if self.file is None:
            return None
        return self.file.text_lines(self.line, self.line).rstrip("\r")


def read_file(
    path: PathLike[Any] | str,
    *,
    relative_to: PathLike[Any] | str | None = None,
    encoding: str = "utf-8-sig",
) -> SourceFile:
    """Read a config file.

    :param path: The path to the file to read.

    :param relative_to: The path to resolve relative paths against. If not given, the current
        working directory is used.

    :param encoding: The encoding of the file. The default accepts UTF-8 with or without a
        byte order mark and drops the mark.

    :raises report.ConfigNotFound: If the file does not exist.

    :raises report.ConfigReadFailure: If the file exists but cannot be read or decoded.

    :returns: A `SourceFile` holding the file's content.
    """
    user_path, absolute_path = _resolve_path(path, relative_to)

    try:
        content = absolute_path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise report.ConfigNotFound(user_path, "no such file") from exc
    except UnicodeDecodeError as exc:
        raise report.ConfigReadFailure(user_path, f"not valid {encoding}: {exc.reason}") from exc
    except OSError as exc:
        raise report.ConfigReadFailure(user_path, exc.strerror or str(exc)) from exc

    logger.debug("read %d characters from %s", len(content), user_path)

    return _from_content(absolute_path, content, user_path=user_path)


def from_content(
    content: str,
    path: PathLike[Any] | str,
    *,
    relative_to: PathLike[Any] | str | None = None,
) -> SourceFile:
    """Annotate an existing string with the path it was read from.

    :param content: The config text.

    :param path: The path to the file the string was read from.

    :param relative_to: The path to resolve relative paths against. If not given, the current
        working directory is used.

    :returns: A `SourceFile` holding the given content.
    """
    user_path, absolute_path = _resolve_path(path, relative_to)

    return _from_content(absolute_path, content, user_path=user_path)


def _resolve_path(
    path: PathLike[Any] | str, relative_to: PathLike[Any] | str | None
) -> tuple[Path, Path]:
    user_path = Path(path)
    if relative_to is not None:
        relative_to = Path(relative_to)
        absolute_path = (relative_to / user_path).absolute()
    else:
        absolute_path = user_path.absolute()
    return (user_path, absolute_path)


def _from_content(
    absolute_path: Path,
    content: str,
    *,
    user_path: Path | None = None,
) -> SourceFile:
    if user_path is None:
        user_path = absolute_path

    newlines = tuple(match.start() for match in _RE_NEWLINE.finditer(content))

    return SourceFile(
        user_path=user_path,
        absolute_path=absolute_path,
        newlines=newlines,
        content=content,
    )
