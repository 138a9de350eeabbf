from __future__ import annotations

import pytest

from sizefmt.models.enums import Separator
from sizefmt.models.prefixes import BINARY_PREFIXES, BUILTIN_PREFIXES, SI_PREFIXES, PrefixTable


def test_builtin_tables() -> None:
    assert SI_PREFIXES.base == 1000
    assert SI_PREFIXES.labels[:5] == ("", "k", "M", "G", "T")
    assert BINARY_PREFIXES.base == 1024
    assert BINARY_PREFIXES.labels[:5] == ("", "Ki", "Mi", "Gi", "Ti")
    assert SI_PREFIXES.size == BINARY_PREFIXES.size == 9
    assert set(BUILTIN_PREFIXES) == {"si", "binary"}


def test_labels_are_frozen_to_tuple() -> None:
    table = PrefixTable("millimeter", 1000, ["m", "", "k"])  # type: ignore[arg-type]
    assert table.labels == ("m", "", "k")
    assert hash(table) == hash(PrefixTable("millimeter", 1000, ("m", "", "k")))


def test_to_dict() -> None:
    table = PrefixTable("millimeter", 1000, ("m", "", "k"))
    assert table.to_dict() == {"name": "millimeter", "base": 1000, "labels": ["m", "", "k"]}


@pytest.mark.parametrize("base", [1, 0, -1000])
def test_base_must_exceed_one(base: int) -> None:
    with pytest.raises(ValueError, match="greater than 1"):
        PrefixTable("bad", base, ("",))


def test_base_must_be_int() -> None:
    with pytest.raises(TypeError, match="base"):
        PrefixTable("bad", 1000.0, ("",))  # type: ignore[arg-type]


def test_empty_table_rejected() -> None:
    with pytest.raises(ValueError, match="at least one label"):
        PrefixTable("bad", 1000, ())


def test_labels_must_be_strings() -> None:
    with pytest.raises(TypeError, match="labels"):
        PrefixTable("bad", 1000, ("", 1))  # type: ignore[arg-type]


def test_separator_values() -> None:
    assert Separator.POINT.value == "."
    assert Separator.COMMA.value == ","
