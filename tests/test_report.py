from __future__ import annotations

from textwrap import dedent

from configster import SourceLocation, from_content, parse
from configster.report import ConfigNotFound, Report

EXAMPLE = "a = 1\nb = 2\nc = 3\nd = 4\n"


def test_single_location():
    source = from_content(EXAMPLE, "test_input.conf")
    records = parse(source.content, source=source)
    assert records[1].location is not None

    report = Report([records[1].location], "defined here")

    assert str(report) == dedent(
        """\
        defined here
        test_input.conf:
         1 | a = 1
         2 > b = 2
         3 | c = 3
        """
    )


def test_separate_chunks():
    source = from_content(EXAMPLE, "test_input.conf")
    records = parse(source.content, source=source)

    report = Report(
        [record.location for record in records if record.location and record.option in "ac"],
        "duplicated",
        context=0,
    )

    assert str(report) == dedent(
        """\
        duplicated
        test_input.conf:
         1 > a = 1
           :
         3 > c = 3
        """
    )


def test_merged_chunks():
    source = from_content(EXAMPLE, "test_input.conf")
    records = parse(source.content, source=source)

    report = Report(
        [record.location for record in records if record.location and record.option in "ad"],
        "here",
    )

    assert str(report) == (
        "here\n"
        "test_input.conf:\n"
        " 1 > a = 1\n"
        " 2 | b = 2\n"
        " 3 | c = 3\n"
        " 4 > d = 4\n"
    )


def test_no_line_after_trailing_newline():
    source = from_content("a = 1\n", "x.conf")
    records = parse(source.content, source=source)
    assert records[0].location is not None

    assert str(Report([records[0].location], "m")) == "m\nx.conf:\n 1 > a = 1\n"


def test_without_file():
    report = Report([SourceLocation(3), SourceLocation(1)], "somewhere")

    assert str(report) == "somewhere\nat line 1, line 3\n"


def test_error_message():
    error = ConfigNotFound("test.conf", "no such file")  # type: ignore
    assert str(error) == "test.conf: no such file"
