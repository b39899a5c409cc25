"""Parsing of tab-separated observation records."""

import math

from .errors import ParseError
from .window import Observation

FIELD_SEPARATOR = "\t"


def _to_number(field: str) -> float:
    # float() also accepts "nan" and "inf", which are not usable measurements
    number = float(field)
    if not math.isfinite(number):
        raise ValueError(field)
    return number


def parse_observation(line: str) -> Observation:
    """
    Parse an observation record.

    Expected format: ``<timestamp>\\t<cost>``

    Args:
        line: Input line, with or without its line terminator

    Returns:
        Parsed Observation

    Raises:
        ParseError: If the line has the wrong shape or a non-numeric field
    """
    line = line.rstrip("\r\n")
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) != 2:
        raise ParseError(f"Expected format: ${{TIMESTAMP}}\\t${{COST}}, got: {line}", line)

    try:
        timestamp = _to_number(fields[0])
    except ValueError:
        raise ParseError("Timestamp expected to be a number", line) from None

    try:
        cost = _to_number(fields[1])
    except ValueError:
        raise ParseError("Cost expected to be a number", line) from None

    return Observation(timestamp, cost)
