"""Errors and diagnostics for config files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .source import SourceFile, SourceLocation

__all__ = [
    "ConfigFileError",
    "ConfigNotFound",
    "ConfigReadFailure",
    "Report",
]


@dataclass
class ConfigFileError(Exception):
    """A config file could not be read.

    The parser itself never fails on the content of a config file, so this is only raised when
    accessing the file.
    """

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class ConfigNotFound(ConfigFileError):
    """The config file does not exist."""


class ConfigReadFailure(ConfigFileError):
    """The config file exists but could not be read or decoded."""


@dataclass(eq=False)
class Report:
    """Shows a message together with the config lines it refers to."""

    locations: list[SourceLocation]

    message: str

    context: int = 1
    """Number of lines shown before and after each location."""

    def __str__(self) -> str:
        out = [f"{self.message}\n"]

        for file, lines in self._group_by_file():
            if file is None:
                out.append(f"at {', '.join(f'line {line}' for line in lines)}\n")
                continue

            out.append(f"{file}:\n")

            max_line = min(file.line_count, max(lines) + self.context)
            line_digits = max(len(str(max_line)), 2)

            for chunk_index, (chunk_start, chunk_end) in enumerate(self._chunks(lines)):
                context_start_line = max(1, chunk_start - self.context)
                context_end_line = min(file.line_count, chunk_end + self.context)

                if chunk_index > 0:
                    out.append(f"{' ':{line_digits}} :\n")

                text = file.text_lines(context_start_line, context_end_line)
                for line_nr, line in enumerate(text.split("\n"), context_start_line):
                    line = line.rstrip("\r")
                    marker = ">" if line_nr in lines else "|"
                    out.append(f"{line_nr:{line_digits}} {marker} {line}\n")

        return "".join(out)

    def _group_by_file(self) -> list[tuple[SourceFile | None, list[int]]]:
        by_file: dict[SourceFile | None, list[int]] = {}
        for location in self.locations:
            by_file.setdefault(location.file, []).append(location.line)
        return [(file, sorted(set(lines))) for file, lines in by_file.items()]

    def _chunks(self, lines: list[int]) -> list[tuple[int, int]]:
        # merge lines whose context would overlap or touch
        chunks: list[tuple[int, int]] = []
        for line in lines:
            if chunks and chunks[-1][1] + 2 * self.context + 1 >= line:
                chunks[-1] = (chunks[-1][0], line)
            else:
                chunks.append((line, line))
        return chunks
