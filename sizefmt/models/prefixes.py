from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence


class PrefixSystem(Protocol):
    """Anything that can scale a magnitude: a base and labels from smallest to largest."""

    @property
    def base(self) -> int: ...

    @property
    def labels(self) -> Sequence[str]: ...

    @property
    def size(self) -> int: ...


@dataclass(slots=True, frozen=True)
class PrefixTable:
    name: str
    base: int
    labels: tuple[str, ...]

    def __post_init__(self) -> None:
        check_prefix_system(self)
        object.__setattr__(self, "labels", tuple(self.labels))

    @property
    def size(self) -> int:
        return len(self.labels)

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "base": self.base, "labels": list(self.labels)}


def check_prefix_system(prefixes: PrefixSystem) -> None:
    """Reject tables that cannot select an index: no labels, a base of 1 or less, or a wrong size."""
    base = prefixes.base
    if isinstance(base, bool) or not isinstance(base, int):
        raise TypeError(f"Prefix base must be an int, got {type(base).__name__}.")
    if base <= 1:
        raise ValueError(f"Prefix base must be greater than 1, got {base}.")
    labels = prefixes.labels
    if isinstance(labels, str) or len(labels) == 0:
        raise ValueError("Prefix table needs at least one label.")
    for label in labels:
        if not isinstance(label, str):
            raise TypeError(f"Prefix labels must be strings, got {type(label).__name__}.")
    size = prefixes.size
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise ValueError(f"Prefix table size must be a positive int, got {size!r}.")
    if size != len(labels):
        raise ValueError(f"Prefix table size {size} does not match its {len(labels)} labels.")


SI_PREFIXES = PrefixTable("si", 1000, ("", "k", "M", "G", "T", "P", "E", "Z", "Y"))
BINARY_PREFIXES = PrefixTable("binary", 1024, ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"))

BUILTIN_PREFIXES: dict[str, PrefixTable] = {
    SI_PREFIXES.name: SI_PREFIXES,
    BINARY_PREFIXES.name: BINARY_PREFIXES,
}
