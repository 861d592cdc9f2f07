"""icaltext CLI - inspect and normalize iCalendar text."""

import json
import logging
import sys

import click

from .adapters.ics_file import IcsFileReader, IcsFileWriter
from .config import Config, load_config
from .core.date import Date
from .core.errors import ICalError
from .core.folding import ParseMode, fold, split_content_lines
from .core.property import Property

logger = logging.getLogger(__name__)


def _read_input(stream) -> str:
    # Binary read keeps CRLF intact for strict parsing
    return stream.read().decode("utf-8")


def _fail(e: ICalError) -> None:
    click.echo(f"Error: {e}", err=True)
    if e.text:
        click.echo(f"Input: {e.text!r}", err=True)
    sys.exit(1)


def _property_dict(prop: Property | Date) -> dict:
    data = {
        "name": prop.name,
        "parameters": [[p.name, p.value] for p in prop.parameters],
        "value": prop.value,
    }
    if isinstance(prop, Date):
        data["date"] = _date_dict(prop)
    return data


def _date_dict(date: Date) -> dict:
    return {
        "year": date.year,
        "month": date.month,
        "day": date.day,
        "hour": date.hour,
        "minute": date.minute,
        "second": date.second,
        "is_utc": date.is_utc,
        "date_only": date.date_only,
    }


def _format_date(date: Date) -> str:
    if date.date_only:
        return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"
    utc = " UTC" if date.is_utc else ""
    return (
        f"{date.year:04d}-{date.month:02d}-{date.day:02d} "
        f"{date.hour:02d}:{date.minute:02d}:{date.second:02d}{utc}"
    )


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--strict/--loose", default=None, help="Override the configured parse mode")
@click.pass_context
def main(ctx: click.Context, debug: bool, strict: bool | None):
    """icaltext - iCalendar property and date parsing."""
    config = load_config()
    if strict is not None:
        config.parse_mode = ParseMode.STRICT if strict else ParseMode.LOOSE

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else config.log_level,
    )
    logger.debug(f"Parse mode: {config.parse_mode.value}")
    ctx.obj = config


@main.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.pass_obj
def unfold(config: Config, source):
    """Print each unfolded content line."""
    try:
        lines = split_content_lines(_read_input(source), config.parse_mode)
    except ICalError as e:
        _fail(e)

    for line in lines:
        click.echo(line)


@main.command("fold")
@click.argument("source", type=click.File("rb"), default="-")
def fold_lines(source):
    """Fold each input line to the 75 character limit."""
    for line in _read_input(source).splitlines():
        click.echo(fold(line))


@main.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def props(config: Config, source, as_json: bool):
    """List the properties of an iCalendar file."""
    try:
        properties = IcsFileReader(config).read_text(_read_input(source))
    except ICalError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps([_property_dict(p) for p in properties], indent=2))
        return

    for prop in properties:
        params = "".join(f" {p.name}={p.value}" for p in prop.parameters)
        click.echo(f"{prop.name}{params}: {prop.value}")
        if isinstance(prop, Date):
            click.echo(f"  -> {_format_date(prop)}")


@main.command()
@click.argument("text")
@click.option("--name", "-n", default="DTSTART", help="Property name for a bare value")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def date(config: Config, text: str, name: str, as_json: bool):
    """Parse a date value (20250115T093000Z) or a whole date property line."""
    line = text if ":" in text else f"{name}:{text}"
    try:
        parsed = Date.parse(line, config.parse_mode)
    except ICalError as e:
        _fail(e)

    if as_json:
        click.echo(json.dumps(_date_dict(parsed), indent=2))
    else:
        click.echo(f"{parsed.name}: {_format_date(parsed)}")


@main.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.pass_obj
def normalize(config: Config, source):
    """Re-serialize every content line with quoted parameters and folding."""
    try:
        properties = IcsFileReader(config).read_text(_read_input(source))
    except ICalError as e:
        _fail(e)

    click.echo(IcsFileWriter().render(properties), nl=False)
