from __future__ import annotations

import logging
from typing import Iterator

import pytest
from click.testing import CliRunner
from configster import get_version
from configster.cli import main

from tests.test_utils import with_temp_file

EXAMPLE_FILE_CONTENT = """\
option = Blue, light, shiny
max_users = 30
# comment
DelayOff
"""


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    package_logger = logging.getLogger("configster")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def test_print_records():
    runner = CliRunner()
    with with_temp_file(EXAMPLE_FILE_CONTENT) as path:
        result = runner.invoke(main, [str(path)])

    assert result.exit_code == 0, result.output
    assert result.output == (
        "Option:'option' | value 'Blue'\n"
        "attr:'light'\n"
        "attr:'shiny'\n"
        "\n"
        "Option:'max_users' | value '30'\n"
        "\n"
        "Option:'DelayOff' | value ''\n"
        "\n"
    )


def test_locations():
    runner = CliRunner()
    with with_temp_file(EXAMPLE_FILE_CONTENT) as path:
        result = runner.invoke(main, ["--locations", str(path)])

    assert result.exit_code == 0, result.output
    assert f"{path}:4: Option:'DelayOff' | value ''\n" in result.output


def test_show_lines():
    runner = CliRunner()
    with with_temp_file(EXAMPLE_FILE_CONTENT) as path:
        result = runner.invoke(main, ["--show-lines", str(path)])

    assert result.exit_code == 0, result.output
    assert "max_users defined here:\n" in result.output
    assert " 2 > max_users = 30\n" in result.output


def test_delimiter():
    runner = CliRunner()
    with with_temp_file("path = /usr/bin:/bin\n") as path:
        result = runner.invoke(main, ["-d", ":", str(path)])
        from_env = runner.invoke(main, [str(path)], env={"CONFIGSTER_DELIMITER": ":"})

    assert result.exit_code == 0, result.output
    assert result.output == "Option:'path' | value '/usr/bin'\nattr:'/bin'\n\n"
    assert from_env.output == result.output


def test_invalid_delimiter():
    runner = CliRunner()
    with with_temp_file(EXAMPLE_FILE_CONTENT) as path:
        result = runner.invoke(main, ["-d", ",,", str(path)])

    assert result.exit_code == 2
    assert "single character" in result.output


def test_missing_file():
    runner = CliRunner()
    result = runner.invoke(main, ["does-not-exist.conf"])

    assert result.exit_code == 1
    assert "ERROR: does-not-exist.conf: no such file" in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert result.output == f"configster, version {get_version()}\n"
