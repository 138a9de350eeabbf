from __future__ import annotations

from sizefmt.models.enums import Separator
from sizefmt.models.prefixes import BINARY_PREFIXES, SI_PREFIXES, PrefixSystem, PrefixTable
from sizefmt.models.scaled import ScaledValue
from sizefmt.services.formatting import (
    DEFAULT_PRECISION,
    SizeFormatter,
    format_binary,
    format_scaled,
    format_si,
)

__all__ = [
    "BINARY_PREFIXES",
    "DEFAULT_PRECISION",
    "PrefixSystem",
    "PrefixTable",
    "SI_PREFIXES",
    "ScaledValue",
    "Separator",
    "SizeFormatter",
    "format_binary",
    "format_scaled",
    "format_si",
]
