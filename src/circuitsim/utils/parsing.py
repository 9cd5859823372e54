"""Boundary parsing for user-entered component attribute values."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from circuitsim.utils.si_prefix import parse_si_value

_TRUE_WORDS = {"true", "closed", "on", "yes", "1"}
_FALSE_WORDS = {"false", "open", "off", "no", "0"}


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a raw attribute value."""

    ok: bool
    value: Any = None
    error: str = ""

    @classmethod
    def success(cls, value: Any) -> "ParseResult":
        return cls(True, value)

    @classmethod
    def failure(cls, error: str) -> "ParseResult":
        return cls(False, None, error)


def parse_number(raw: Any) -> ParseResult:
    """Parse a finite number, accepting SI-prefixed strings such as ``"1k"``."""
    if isinstance(raw, bool):
        return ParseResult.failure(f"Expected a number, got {raw!r}")
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        try:
            value = parse_si_value(raw)
        except ValueError:
            return ParseResult.failure(f"'{raw}' is not a number")
    else:
        return ParseResult.failure(f"Expected a number, got {type(raw).__name__}")

    if not math.isfinite(value):
        return ParseResult.failure(f"'{raw}' is not a finite number")
    return ParseResult.success(value)


def parse_bool(raw: Any) -> ParseResult:
    """Parse a switch state from a bool, 0/1 or a word like ``"open"``."""
    if isinstance(raw, bool):
        return ParseResult.success(raw)
    if isinstance(raw, int) and raw in (0, 1):
        return ParseResult.success(bool(raw))
    if isinstance(raw, str):
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return ParseResult.success(True)
        if word in _FALSE_WORDS:
            return ParseResult.success(False)
    return ParseResult.failure(f"'{raw}' is not a valid switch state")
