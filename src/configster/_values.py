from __future__ import annotations

from dataclasses import dataclass, field

from .source import SourceLocation

__all__ = [
    "Value",
    "OptionRecord",
]


@dataclass(frozen=True)
class Value:
    """The value of an option, split on the delimiter."""

    primary: str = ""
    """First field following the ``=``.

    Empty when the option has no value.
    """

    attributes: tuple[str, ...] = ()
    """Remaining delimiter separated fields, in file order.

    Empty fields are kept as empty strings, e.g. ``a,,b`` gives the attributes ``("", "b")``.
    """

    @property
    def is_empty(self) -> bool:
        return not self.primary and not self.attributes

    @property
    def fields(self) -> tuple[str, ...]:
        """The primary value followed by all attributes."""
        if self.is_empty:
            return ()
        return (self.primary, *self.attributes)


@dataclass(frozen=True)
class OptionRecord:
    """A single option within a config file."""

    option: str
    """Name of the option.

    The part of the line preceding the first ``=``, or the whole line for options without a value.
    """

    value: Value = Value()

    location: SourceLocation | None = field(default=None, compare=False)
    """Where the option was defined. Not part of the record's identity."""

    @property
    def primary(self) -> str:
        return self.value.primary

    @property
    def attributes(self) -> tuple[str, ...]:
        return self.value.attributes
