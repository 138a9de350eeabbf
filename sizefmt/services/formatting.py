from __future__ import annotations

import re
from dataclasses import dataclass

from sizefmt.models.enums import Separator
from sizefmt.models.prefixes import BINARY_PREFIXES, SI_PREFIXES, PrefixSystem, check_prefix_system
from sizefmt.models.scaled import ScaledValue

DEFAULT_PRECISION = 1

# [[fill]align][width][.precision]
_FORMAT_SPEC = re.compile(r"(?:(?P<fill>.)?(?P<align>[<>^]))?(?P<width>\d+)?(?:\.(?P<precision>\d+))?", re.DOTALL)


def prefix_index(raw: int, base: int, size: int) -> int:
    """Largest index below ``size`` whose scale ``base**index`` does not exceed ``raw``."""
    index = 0
    threshold = base
    while index < size - 1 and raw >= threshold:
        index += 1
        threshold *= base
    return index


def fraction_digits(remainder: int, divisor: int, precision: int) -> str:
    """Truncated decimal expansion of ``remainder / divisor``.

    At most ``precision`` digits. Generation stops as soon as the expansion is
    exact, but the first digit is always produced, so a zero remainder yields "0".
    """
    digits: list[str] = []
    for _ in range(precision):
        remainder *= 10
        digits.append(str(remainder // divisor))
        remainder %= divisor
        if remainder == 0:
            break
    return "".join(digits)


def resolve_precision(precision: int | None) -> int:
    if precision is None:
        return DEFAULT_PRECISION
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"Precision must be an int, got {type(precision).__name__}.")
    if precision < 0:
        raise ValueError(f"Precision must be non-negative, got {precision}.")
    return precision


def check_separator(separator: Separator | str) -> str:
    value = separator.value if isinstance(separator, Separator) else separator
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"Separator must be a single character, got {separator!r}.")
    if value.isdigit():
        raise ValueError(f"Separator cannot be a digit, got {value!r}.")
    return value


def scale(raw: int, prefixes: PrefixSystem, precision: int | None = None) -> ScaledValue:
    precision = resolve_precision(precision)
    index = prefix_index(raw, prefixes.base, prefixes.size)
    label = prefixes.labels[index]
    if index == 0:
        return ScaledValue(index=0, quotient=raw, fraction="", label=label)

    divisor = prefixes.base**index
    quotient, remainder = divmod(raw, divisor)
    return ScaledValue(
        index=index,
        quotient=quotient,
        fraction=fraction_digits(remainder, divisor, precision),
        label=label,
    )


def render(scaled: ScaledValue, separator: str) -> str:
    if scaled.fraction:
        return f"{scaled.quotient}{separator}{scaled.fraction}{scaled.label}"
    return f"{scaled.quotient}{scaled.label}"


@dataclass(slots=True, frozen=True)
class SizeFormatter:
    """A non-negative magnitude displayed with a scaled unit prefix.

    Values are always rounded down. ``width`` optionally declares the bit width
    of the magnitude; the table base must then fit in that width and the value
    must be representable in it.

    >>> f"{SizeFormatter.binary(42 * 1024 * 1024)}B"
    '42.0MiB'
    >>> f"{SizeFormatter.si(1_999_999_999):.4}B"
    '1.9999GB'
    """

    value: int
    prefixes: PrefixSystem = SI_PREFIXES
    separator: Separator | str = Separator.POINT
    width: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Magnitude must be an int, got {type(self.value).__name__}.")
        if self.value < 0:
            raise ValueError(f"Magnitude must be non-negative, got {self.value}.")
        check_prefix_system(self.prefixes)
        check_separator(self.separator)
        if self.width is not None:
            if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width <= 0:
                raise ValueError(f"Width must be a positive number of bits, got {self.width!r}.")
            limit = 1 << self.width
            if self.prefixes.base >= limit:
                raise ValueError(
                    f"Prefix base {self.prefixes.base} is too large for a {self.width}-bit magnitude."
                )
            if self.value >= limit:
                raise ValueError(f"Magnitude {self.value} does not fit in {self.width} bits.")

    @classmethod
    def si(cls, value: int, separator: Separator | str = Separator.POINT) -> SizeFormatter:
        return cls(value, SI_PREFIXES, separator, width=64)

    @classmethod
    def binary(cls, value: int, separator: Separator | str = Separator.POINT) -> SizeFormatter:
        return cls(value, BINARY_PREFIXES, separator, width=64)

    @property
    def max_index(self) -> int:
        """Highest prefix index reachable for this table and width."""
        top = self.prefixes.size - 1
        if self.width is None:
            return top
        return prefix_index((1 << self.width) - 1, self.prefixes.base, self.prefixes.size)

    def scaled(self, precision: int | None = None) -> ScaledValue:
        return scale(self.value, self.prefixes, precision)

    def format(self, precision: int | None = None) -> str:
        return render(self.scaled(precision), check_separator(self.separator))

    def __str__(self) -> str:
        return self.format()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.format()
        match = _FORMAT_SPEC.fullmatch(format_spec)
        if match is None:
            raise ValueError(f"Invalid format specifier {format_spec!r} for {type(self).__name__}.")
        precision = match["precision"]
        text = self.format(int(precision) if precision is not None else None)
        if match["width"] is None:
            return text
        return format(text, f"{match['fill'] or ' '}{match['align'] or '<'}{match['width']}")


def format_scaled(
    value: int,
    prefixes: PrefixSystem = SI_PREFIXES,
    separator: Separator | str = Separator.POINT,
    precision: int | None = None,
    width: int | None = None,
) -> str:
    return SizeFormatter(value, prefixes, separator, width=width).format(precision)


def format_si(value: int, precision: int | None = None) -> str:
    return SizeFormatter.si(value).format(precision)


def format_binary(value: int, precision: int | None = None) -> str:
    return SizeFormatter.binary(value).format(precision)
