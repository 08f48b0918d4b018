"""Ramita ParseAccumulator — opt-in profiling for HTML parsing.

This module provides accumulated metrics during parsing:
- Total parse time
- Source length
- Scanner event count
- Node count in the resulting tree

Zero overhead when disabled (get_parse_accumulator() returns None).

Example:
    from ramita import parse
    from ramita.profiling import profiled_parse

    with profiled_parse() as metrics:
        tree = parse("<p>Hello <b>World</b></p>")

    print(metrics.summary())
    # {"total_ms": 0.2, "source_length": 25, "event_count": 6, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ParseAccumulator:
    """Accumulated metrics during HTML parsing.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources parsed.
        event_count: Number of scanner events produced.
        node_count: Number of tree nodes produced.
        parse_calls: Number of parse() calls recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    event_count: int = 0
    node_count: int = 0
    parse_calls: int = 0

    def record_parse(self, source_length: int, event_count: int, node_count: int) -> None:
        """Record a parse call.

        Args:
            source_length: Length of the source string parsed.
            event_count: Number of events the scanner produced.
            node_count: Number of nodes in the result.

        """
        self.parse_calls += 1
        self.source_length += source_length
        self.event_count += event_count
        self.node_count += node_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of parse metrics.

        Returns:
            Dict with total_ms, source_length, event_count, node_count, parse_calls.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "event_count": self.event_count,
            "node_count": self.node_count,
            "parse_calls": self.parse_calls,
        }


_accumulator: ContextVar[ParseAccumulator | None] = ContextVar(
    "parse_accumulator",
    default=None,
)


def get_parse_accumulator() -> ParseAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_parse() -> Iterator[ParseAccumulator]:
    """Context manager for profiled parsing.

    Creates a ParseAccumulator and makes it available via
    get_parse_accumulator() for the duration of the with block.

    Yields:
        ParseAccumulator that will be populated during parse calls.

    """
    acc = ParseAccumulator()
    token: Token[ParseAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
