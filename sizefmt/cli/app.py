from __future__ import annotations

import logging
from dataclasses import replace
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from result import Err

from sizefmt.config.defaults import default_config
from sizefmt.config.loader import load_config, sample_config_json
from sizefmt.config.schema import resolve_prefixes, resolve_separator
from sizefmt.services.summary import render_comparison, render_values

console = Console()
logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def run(
    values: Annotated[list[int] | None, typer.Argument(help="Magnitudes to format.")] = None,
    prefixes: Annotated[
        str | None, typer.Option("--prefixes", "-p", help="Prefix table: si, binary or a custom table name.")
    ] = None,
    precision: Annotated[int | None, typer.Option("--precision", "-P", help="Max fractional digits.")] = None,
    separator: Annotated[
        str | None, typer.Option("--separator", "-s", help="Decimal separator: point, comma or one character.")
    ] = None,
    suffix: Annotated[str | None, typer.Option("--suffix", "-u", help="Unit appended after the prefix.")] = None,
    width: Annotated[int | None, typer.Option("--width", "-w", help="Bit width of the magnitudes.")] = None,
    compare: Annotated[bool, typer.Option("--compare", "-c", help="Show every prefix table side by side.")] = False,
    sample_config: Annotated[bool, typer.Option("--sample-config", help="Print sample config JSON.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    _setup_logging(verbose)

    if sample_config:
        console.print(sample_config_json(), markup=False, highlight=False)
        raise typer.Exit(0)

    config_result = load_config()
    if isinstance(config_result, Err):
        console.print(f"[yellow]{escape(config_result.unwrap_err())} Using defaults.[/]")
        config = default_config()
    else:
        config = config_result.unwrap()

    overrides: dict[str, object] = {}
    if prefixes is not None:
        overrides["prefixes"] = prefixes
    if precision is not None:
        overrides["precision"] = max(0, precision)
    if separator is not None:
        overrides["separator"] = separator
    if suffix is not None:
        overrides["suffix"] = suffix
    if width is not None:
        overrides["width"] = max(1, width)
    if overrides:
        config = replace(config, **overrides)
    logger.debug("Effective config: %s", config.to_dict())

    separator_result = resolve_separator(config.separator)
    if isinstance(separator_result, Err):
        console.print(f"[red]{escape(separator_result.unwrap_err())}[/]")
        raise typer.Exit(1)
    sep = separator_result.unwrap()

    table_result = resolve_prefixes(config)
    if isinstance(table_result, Err):
        console.print(f"[red]{escape(table_result.unwrap_err())}[/]")
        raise typer.Exit(1)

    if not values:
        console.print("[yellow]No values given.[/]")
        raise typer.Exit(0)

    try:
        if compare:
            render_comparison(
                console,
                values,
                list(config.prefix_tables().values()),
                separator=sep,
                precision=config.precision,
                suffix=config.suffix,
                width=config.width,
            )
        else:
            render_values(
                console,
                values,
                table_result.unwrap(),
                separator=sep,
                precision=config.precision,
                suffix=config.suffix,
                width=config.width,
            )
    except (TypeError, ValueError) as exc:
        console.print(f"[red]{escape(str(exc))}[/]")
        raise typer.Exit(1) from exc


def cli() -> None:
    typer.run(run)


if __name__ == "__main__":
    cli()
