from __future__ import annotations

import logging
import re
from os import PathLike
from typing import Any, Iterator

from ._values import OptionRecord, Value
from .source import SourceFile, SourceLocation, read_file

__all__ = [
    "split_value",
    "parse_line",
    "iter_records",
    "parse",
    "parse_file",
]

logger = logging.getLogger(__name__)

_LINE_END_RE = re.compile(r"\r?\n")
_WHITESPACE_RE = re.compile(r"\s")


def _check_delimiter(delimiter: str) -> None:
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")


def split_value(expression: str, delimiter: str = ",") -> Value:
    """Split the text following an option's ``=`` into the primary value and its attributes.

    Every field is trimmed. Empty fields are kept, so a leading delimiter results in an empty
    primary value and a trailing delimiter in an empty last attribute. Only an empty expression
    results in an empty `Value`.
    """
    _check_delimiter(delimiter)
    return _split_value(expression, delimiter)


def _split_value(expression: str, delimiter: str) -> Value:
    expression = expression.strip()
    if not expression:
        return Value()

    primary, *attributes = (field.strip() for field in expression.split(delimiter))
    return Value(primary=primary, attributes=tuple(attributes))


def parse_line(
    line: str, delimiter: str = ",", *, location: SourceLocation | None = None
) -> OptionRecord | None:
    """Parse a single line of a config file.

    :returns: The option defined on the line or ``None`` for blank lines, comments and lines that
        do not name an option.
    """
    _check_delimiter(delimiter)
    return _parse_line(line, delimiter, location)


def _parse_line(line: str, delimiter: str, location: SourceLocation | None) -> OptionRecord | None:
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    option, sep, expression = line.partition("=")
    option = option.strip()

    if not option:
        logger.debug("%s: ignoring value without an option name", location or "<input>")
        return None

    if _WHITESPACE_RE.search(option):
        logger.debug("%s: option name %r contains whitespace", location or "<input>", option)

    value = _split_value(expression, delimiter) if sep else Value()

    return OptionRecord(option=option, value=value, location=location)


def iter_records(
    text: str, delimiter: str = ",", *, source: SourceFile | None = None
) -> Iterator[OptionRecord]:
    """Parse config text into option records, one line at a time.

    Blank lines and lines starting with ``#`` are skipped. Records are produced in the order of
    the lines defining them, duplicates included.

    :param source: The file the text was read from. When given, the records' locations refer to
        it.
    """
    _check_delimiter(delimiter)

    for line_nr, line in enumerate(_LINE_END_RE.split(text), 1):
        record = _parse_line(line, delimiter, SourceLocation(line=line_nr, file=source))
        if record is not None:
            yield record


def parse(
    text: str, delimiter: str = ",", *, source: SourceFile | None = None
) -> list[OptionRecord]:
    """Parse config text into a list of option records.

    This never fails for any text. See `iter_records` for details.
    """
    return list(iter_records(text, delimiter, source=source))


def parse_file(
    path: PathLike[Any] | str,
    delimiter: str = ",",
    *,
    relative_to: PathLike[Any] | str | None = None,
    encoding: str = "utf-8-sig",
) -> list[OptionRecord]:
    """Read and parse a config file.

    :raises report.ConfigNotFound: If the file does not exist.
    :raises report.ConfigReadFailure: If the file cannot be read or decoded.
    """
    _check_delimiter(delimiter)

    source = read_file(path, relative_to=relative_to, encoding=encoding)
    records = parse(source.content, delimiter, source=source)
    logger.debug("parsed %d options from %s", len(records), source)
    return records
