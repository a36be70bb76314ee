"""Shared vocabulary and constants for tempus.

Units, directions and expression kinds are closed sets expressed as
``Literal`` aliases so every dispatch table keyed by them can be checked
exhaustively.
"""

from typing import Literal, TypeAlias

Unit: TypeAlias = Literal[
    "second", "minute", "hour", "day", "week", "month", "quarter", "year"
]
Direction: TypeAlias = Literal["forward", "backward"]
Kind: TypeAlias = Literal["static", "dynamic", "format", "timestamp"]
Boundary: TypeAlias = Literal["start", "end"]

UNITS: tuple[Unit, ...] = (
    "second",
    "minute",
    "hour",
    "day",
    "week",
    "month",
    "quarter",
    "year",
)

# Dynamic phrase modifiers
MODIFIERS: dict[str, Direction] = {
    "last": "backward",
    "next": "forward",
}

# Fixed text layout used to round-trip instants through the materializer
BASE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Britain and its colonies adopted the Gregorian calendar in 1752; bare
# integers below this are never read as years
EPOCH_CUTOFF = 1753

RANGE_DELIMITER = " to "
