from __future__ import annotations

from enum import Enum


class Separator(str, Enum):
    POINT = "."
    COMMA = ","
