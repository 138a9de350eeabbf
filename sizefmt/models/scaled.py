from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ScaledValue:
    """One magnitude broken down at its display scale.

    ``fraction`` holds the already truncated decimal digits; it is empty when
    the value is shown as an integer.
    """

    index: int
    quotient: int
    fraction: str
    label: str
