"""CLI entry point using Click."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

import click
import yaml

from termchart import __version__
from termchart.charts import CHARTS
from termchart.config import load_config
from termchart.core.cursor import flatten
from termchart.errors import ChartError, ConfigurationError

logger = logging.getLogger(__name__)


def parse_option(pair: str) -> tuple[str, Any]:
    """Split ``key=value``; the value is read as a YAML scalar or sequence."""
    key, sep, raw = pair.partition("=")
    if not sep or not key.strip():
        raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--option")
    try:
        value = yaml.safe_load(raw)
    except yaml.YAMLError:
        value = raw
    # Glyphs such as "# " read as YAML comments; keep them verbatim.
    if value is None and raw.strip().lower() not in ("null", "~"):
        value = raw
    return key.strip(), value


def load_dataset(text: str, name: str = "<stdin>") -> list[Any]:
    """Parse a JSON or YAML dataset: a list of items, or ``{"data": [...]}``."""
    try:
        data = json.loads(text) if name.endswith(".json") else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot parse dataset {name}: {e}") from e
    if isinstance(data, dict) and "data" in data:
        data = data["data"]
    if not isinstance(data, list):
        raise ConfigurationError(f"Dataset {name} must be a list of items")
    return data


@click.command()
@click.argument("chart", required=False, type=click.Choice(sorted(CHARTS)))
@click.argument("datafile", required=False, type=click.File("r", encoding="utf-8"))
@click.option("--option", "-o", "option_pairs", multiple=True, metavar="KEY=VALUE",
              help="Chart option override (repeatable)")
@click.option("--width", type=int, help="Terminal width used for size defaults")
@click.option("--height", type=int, help="Terminal height used for size defaults")
@click.option("--flatten", "flat", is_flag=True, help="Resolve cursor movement into plain lines")
@click.option("--plain", is_flag=True, help="With --flatten, drop color codes too")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--version", is_flag=True, help="Show version and exit")
def main(
    chart: str | None,
    datafile: Any,
    option_pairs: tuple[str, ...],
    width: int | None,
    height: int | None,
    flat: bool,
    plain: bool,
    debug: bool,
    version: bool,
) -> None:
    """Termchart - draw CHART from DATAFILE (JSON or YAML, '-' for stdin)."""
    if version:
        click.echo(f"termchart {__version__}")
        return
    if chart is None:
        raise click.UsageError("Missing argument 'CHART'.")
    if datafile is None:
        datafile = click.get_text_stream("stdin")

    # Build CLI args dict
    cli_args: dict[str, Any] = {}
    if width is not None:
        cli_args["width"] = width
    if height is not None:
        cli_args["height"] = height
    if debug:
        cli_args["debug"] = True

    # Load configuration
    config = load_config(cli_args=cli_args)
    if config.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    options = config.chart_options(chart)
    options.update(parse_option(pair) for pair in option_pairs)
    logger.debug("rendering %s with options %r", chart, options)

    try:
        data = load_dataset(datafile.read(), getattr(datafile, "name", "<stdin>"))
        output = CHARTS[chart](data, options, terminal_size=config.terminal_size())
    except ChartError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if flat:
        output = flatten(output, plain=plain)
    click.echo(output)
