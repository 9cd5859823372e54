"""SI prefix parsing and formatting for component values."""

import math
import re

SI_PREFIXES: dict[str, float] = {
    "p": 1e-12,
    "n": 1e-9,
    "u": 1e-6,
    "µ": 1e-6,
    "m": 1e-3,
    "k": 1e3,
    "K": 1e3,
    "meg": 1e6,
    "M": 1e6,
}

# Largest first; values below the last entry still use it
DISPLAY_PREFIXES: tuple[tuple[float, str], ...] = (
    (1e6, "M"),
    (1e3, "k"),
    (1.0, ""),
    (1e-3, "m"),
    (1e-6, "µ"),
    (1e-9, "n"),
    (1e-12, "p"),
)

# Number, optional prefix, optional unit: "9", "4.7k", "220 Ω", "1.5megohm", "9V"
VALUE_PATTERN = re.compile(
    r"^\s*(?P<number>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*"
    r"(?P<prefix>meg|[pnuµmkKM])?\s*"
    r"(?:[VvAW]|Ω|[Oo]hms?)?\s*$"
)


def parse_si_value(value_str: str) -> float:
    """
    Parse a component value with optional SI prefix and unit.

    Examples:
        >>> parse_si_value("4.7k")
        4700.0
        >>> parse_si_value("9 V")
        9.0

    Raises:
        ValueError: If the string is not a number
    """
    match = VALUE_PATTERN.match(value_str)
    if match is None:
        # Leaves float() spellings such as "inf" to the caller's finiteness check
        try:
            return float(value_str)
        except ValueError:
            raise ValueError(f"Cannot parse '{value_str}' as a value") from None

    number = float(match.group("number"))
    prefix = match.group("prefix")
    return number * SI_PREFIXES[prefix] if prefix else number


def format_si_value(value: float, unit: str = "", digits: int = 3) -> str:
    """
    Format a value with the closest SI prefix, e.g. ``4700 -> "4.7 kΩ"``.
    """
    if value == 0 or not math.isfinite(value):
        return f"{value:g} {unit}".rstrip()

    magnitude = abs(value)
    for scale, prefix in DISPLAY_PREFIXES:
        if magnitude >= scale:
            break

    return f"{value / scale:.{digits}g} {prefix}{unit}".rstrip()
