from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from tempus.util import BASE_FORMAT


@dataclass(frozen=True, kw_only=True)
class TimeRange:
    # No start <= end check: "next week to last week" is a valid, inverted range
    start: datetime
    end: datetime

    def __iter__(self) -> Iterator[datetime]:
        yield self.start
        yield self.end

    def timestamps(self) -> tuple[int, int]:
        """Return (start, end) as Unix seconds."""
        return int(self.start.timestamp()), int(self.end.timestamp())

    def format(self, pattern: str = BASE_FORMAT) -> tuple[str, str]:
        return self.start.strftime(pattern), self.end.strftime(pattern)

    def __str__(self) -> str:
        """Human-friendly string showing range and duration."""
        start, end = self.format()
        duration = int((self.end - self.start).total_seconds()) + 1
        return f"TimeRange({start}→{end}, {duration}s)"
