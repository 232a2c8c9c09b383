# Line Oriented Config Files
"""
Parses config files made of ``option = primary, attribute, ...`` lines into `OptionRecord`
values.
"""
from __future__ import annotations

from ._parser import iter_records, parse, parse_file, parse_line, split_value
from ._values import OptionRecord, Value
from .report import ConfigFileError, ConfigNotFound, ConfigReadFailure
from .source import SourceFile, SourceLocation, from_content, read_file

__version__ = "0.1.0"

__all__ = [
    "get_version",
    "Value",
    "OptionRecord",
    "parse",
    "iter_records",
    "parse_line",
    "split_value",
    "parse_file",
    # from .source
    "SourceFile",
    "SourceLocation",
    "read_file",
    "from_content",
    # from .report
    "ConfigFileError",
    "ConfigNotFound",
    "ConfigReadFailure",
]


def get_version() -> str:
    """Returns the library version."""
    return __version__
