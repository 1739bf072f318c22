import sys

import click
import structlog
from pydantic import ValidationError

from seqrecords.generics import index, render, reverse
from seqrecords.logs import configure_logger
from seqrecords.records import DnaRecord, SequenceRecord

logger = structlog.get_logger("cli")


@click.group()
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.option(
    "-v",
    "--verbose",
    "verbosity",
    count=True,
    help="Log more details. Repeat for debug output.",
)
def entry(no_color: bool, verbosity: int) -> None:
    """Build and inspect validated sequence records."""
    configure_logger(verbosity, no_color)


def record_options(func):
    """Add the options and argument that describe a record to a command."""
    func = click.argument("sequence")(func)
    func = click.option(
        "--adapter",
        default=None,
        help="An adapter sequence. Makes the record a DNA record.",
    )(func)
    func = click.option(
        "--alphabet",
        default=None,
        help="The symbols the sequence may use, eg. ACGT.",
    )(func)
    func = click.option("--name", required=True, help="The record name.")(func)

    return func


def build_record(
    name: str,
    alphabet: str | None,
    adapter: str | None,
    sequence: str,
) -> SequenceRecord | DnaRecord:
    """Build a record from command line values or exit if it is invalid."""
    if adapter is None and alphabet is None:
        raise click.UsageError("--alphabet is required unless --adapter is given.")

    try:
        if adapter is None:
            return SequenceRecord.create(name, alphabet, sequence)

        return DnaRecord.create(name, sequence, adapter, alphabet=alphabet)

    except ValidationError as e:
        for error in e.errors():
            logger.error(
                "Invalid record.",
                msg=error["msg"],
                loc=error["loc"],
                type=error["type"],
            )

        sys.exit(1)


@entry.command(name="render")
@record_options
def render_command(
    name: str, alphabet: str | None, adapter: str | None, sequence: str
) -> None:
    """Show a summary of a record."""
    click.echo(render(build_record(name, alphabet, adapter, sequence)))


@entry.command(name="reverse")
@record_options
def reverse_command(
    name: str, alphabet: str | None, adapter: str | None, sequence: str
) -> None:
    """Show a summary of a reversed record."""
    click.echo(render(reverse(build_record(name, alphabet, adapter, sequence))))


@entry.command(name="index", context_settings={"ignore_unknown_options": True})
@click.argument("start", type=int)
@click.argument("stop", type=int)
@record_options
def index_command(
    start: int,
    stop: int,
    name: str,
    alphabet: str | None,
    adapter: str | None,
    sequence: str,
) -> None:
    """Show a summary of the symbols from START up to, not including, STOP.

    Positions are 0-based.
    """
    record = build_record(name, alphabet, adapter, sequence)

    try:
        selected = index(record, start, stop)
    except IndexError as e:
        logger.error("Could not select range.", error=str(e))
        sys.exit(1)

    click.echo(render(selected))
