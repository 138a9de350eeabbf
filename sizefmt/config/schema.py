from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from result import Err, Ok, Result

from sizefmt.models.enums import Separator
from sizefmt.models.prefixes import BUILTIN_PREFIXES, PrefixTable
from sizefmt.services.formatting import check_separator

_SEPARATOR_NAMES: dict[str, Separator] = {
    "point": Separator.POINT,
    "comma": Separator.COMMA,
}


@dataclass(slots=True)
class AppConfig:
    prefixes: str = "si"
    separator: str = Separator.POINT.value
    precision: int | None = None
    suffix: str = "B"
    width: int | None = None
    custom_prefixes: list[PrefixTable] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "prefixes": self.prefixes,
            "separator": self.separator,
            "precision": self.precision,
            "suffix": self.suffix,
            "width": self.width,
            "customPrefixes": [table.to_dict() for table in self.custom_prefixes],
        }

    def prefix_tables(self) -> dict[str, PrefixTable]:
        tables = dict(BUILTIN_PREFIXES)
        for table in self.custom_prefixes:
            tables.setdefault(table.name, table)
        return tables


def _table_from_dict(payload: dict[str, Any]) -> PrefixTable:
    labels = payload["labels"]
    if not isinstance(labels, list):
        raise ValueError(f"Labels of prefix table {payload.get('name')!r} must be a list.")
    return PrefixTable(
        name=str(payload["name"]),
        base=int(payload["base"]),
        labels=tuple(str(label) for label in labels),
    )


def _optional_int(value: Any) -> int | None:
    return int(value) if value is not None else None


def from_dict(data: dict[str, Any], defaults: AppConfig) -> AppConfig:
    precision = _optional_int(data.get("precision", defaults.precision))
    width = _optional_int(data.get("width", defaults.width))

    return AppConfig(
        prefixes=str(data.get("prefixes", defaults.prefixes)),
        separator=str(data.get("separator", defaults.separator)),
        precision=max(0, precision) if precision is not None else None,
        suffix=str(data.get("suffix", defaults.suffix)),
        width=max(1, width) if width is not None else None,
        custom_prefixes=[_table_from_dict(x) for x in data["customPrefixes"]]
        if "customPrefixes" in data
        else list(defaults.custom_prefixes),
    )


def resolve_prefixes(config: AppConfig, name: str | None = None) -> Result[PrefixTable, str]:
    wanted = name or config.prefixes
    tables = config.prefix_tables()
    table = tables.get(wanted)
    if table is None:
        return Err(f"Unknown prefix table '{wanted}'. Known: {', '.join(tables)}.")
    return Ok(table)


def resolve_separator(value: str) -> Result[str, str]:
    named = _SEPARATOR_NAMES.get(value.lower())
    if named is not None:
        return Ok(named.value)
    try:
        return Ok(check_separator(value))
    except ValueError as exc:
        return Err(str(exc))
