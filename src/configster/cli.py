from __future__ import annotations

import logging

import click

from . import get_version, parse_file
from ._values import OptionRecord
from .log import setup_logging
from .report import ConfigFileError, Report

logger = logging.getLogger(__name__)


def format_record(record: OptionRecord, locations: bool = False) -> str:
    lines: list[str] = []
    prefix = f"{record.location}: " if locations and record.location is not None else ""
    lines.append(f"{prefix}Option:'{record.option}' | value '{record.primary}'")
    for attribute in record.attributes:
        lines.append(f"attr:'{attribute}'")
    return "\n".join(lines)


@click.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option(
    "-d",
    "--delimiter",
    default=",",
    show_default=True,
    envvar="CONFIGSTER_DELIMITER",
    help="Character separating the primary value from its attributes.",
)
@click.option("--locations", is_flag=True, help="Prefix every option with FILE:LINE.")
@click.option("--show-lines", is_flag=True, help="Show the config lines defining each option.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug output.")
@click.version_option(get_version(), prog_name="configster")
def main(file: str, delimiter: str, locations: bool, show_lines: bool, verbose: bool):
    """Parse a config FILE and print its options."""
    setup_logging(verbose)

    if len(delimiter) != 1:
        raise click.BadParameter("must be a single character", param_hint="--delimiter")

    try:
        records = parse_file(file, delimiter)
    except ConfigFileError as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    for record in records:
        click.echo(format_record(record, locations))
        if show_lines and record.location is not None:
            report = Report([record.location], f"{record.option} defined here:", context=0)
            click.echo(str(report), nl=False)
        click.echo()

    logger.debug("%d options", len(records))


if __name__ == "__main__":
    main()
