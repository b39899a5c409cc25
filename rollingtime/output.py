"""Console table formatting for rolling window state."""

from typing import List

from .constants import FRACTIONAL_ROW_FORMAT, ROW_FORMAT, TABLE_HEADER, TABLE_RULE
from .window import RollingWindow


def table_header() -> List[str]:
    """Return the two header lines of the output table."""
    return [TABLE_HEADER, TABLE_RULE]


def format_row(window: RollingWindow) -> str:
    """
    Format the state of a rolling window as a table row.

    The row describes the latest observation together with the current
    count, sum, min and max.

    Args:
        window: A populated rolling window

    Returns:
        Formatted row
    """
    latest = window.latest
    if latest is None:
        raise ValueError("Cannot format an empty rolling window")

    fmt = ROW_FORMAT if float(latest.timestamp).is_integer() else FRACTIONAL_ROW_FORMAT
    return fmt % (
        latest.timestamp,
        latest.value,
        window.count,
        window.sum,
        window.min,
        window.max,
    )
