"""Utility functions for CircuitSim."""

from circuitsim.utils.si_prefix import format_si_value, parse_si_value
from circuitsim.utils.parsing import ParseResult, parse_bool, parse_number
from circuitsim.utils.hit_test import hit_test

__all__ = [
    "parse_si_value",
    "format_si_value",
    "ParseResult",
    "parse_bool",
    "parse_number",
    "hit_test",
]
