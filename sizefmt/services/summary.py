from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sizefmt.models.prefixes import PrefixTable
from sizefmt.services.formatting import SizeFormatter


def _formatted(
    value: int,
    table: PrefixTable,
    separator: str,
    precision: int | None,
    suffix: str,
    width: int | None,
) -> str:
    return f"{SizeFormatter(value, table, separator, width=width).format(precision)}{suffix}"


def render_values(
    console: Console,
    values: Sequence[int],
    table: PrefixTable,
    *,
    separator: str,
    precision: int | None = None,
    suffix: str = "",
    width: int | None = None,
) -> None:
    for value in values:
        console.print(escape(_formatted(value, table, separator, precision, suffix, width)), highlight=False)


def render_comparison(
    console: Console,
    values: Sequence[int],
    tables: Sequence[PrefixTable],
    *,
    separator: str,
    precision: int | None = None,
    suffix: str = "",
    width: int | None = None,
) -> None:
    table = Table(title="Scaled Sizes", header_style="bold cyan")
    table.add_column("Value", justify="right")
    for prefixes in tables:
        table.add_column(f"{prefixes.name} (×{prefixes.base})", justify="right")
    for value in values:
        row = [f"{value:,}"]
        row.extend(
            escape(_formatted(value, prefixes, separator, precision, suffix, width)) for prefixes in tables
        )
        table.add_row(*row)
    console.print(table)
