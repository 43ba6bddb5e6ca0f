"""Highlight event and region types.

A tokenizer describes highlighted source in one of two shapes:

- An ordered event stream: HighlightStart / Source / HighlightEnd,
  consumed forward-only by the renderer.
- A collection of HighlightRegion ranges, convertible into the event
  stream with events_from_regions().

Regions may nest but never partially overlap. The renderer trusts the
event stream for nesting, and only validates what it needs to stay
well-formed (bounds and balance).

Thread Safety:
All event and region types are frozen (immutable) and safe to share
across threads.

"""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from rayas.errors import MalformedEventStreamError


@dataclass(frozen=True, slots=True)
class HighlightStart:
    """Open a highlighted region.

    Attributes:
        index: Capture index into the role and class tables

    """

    index: int


@dataclass(frozen=True, slots=True)
class HighlightEnd:
    """Close the innermost open region."""


@dataclass(frozen=True, slots=True)
class Source:
    """Literal source text in the half-open byte range [start, end)."""

    start: int
    end: int


HighlightEvent: TypeAlias = HighlightStart | HighlightEnd | Source


@dataclass(frozen=True, slots=True)
class HighlightRegion:
    """A byte range [start, end) tagged with one capture index."""

    start: int
    end: int
    index: int

    def contains(self, other: HighlightRegion) -> bool:
        """Check whether other lies entirely within this region."""
        return self.start <= other.start and other.end <= self.end


def events_from_regions(
    regions: Iterable[HighlightRegion],
    length: int,
) -> Iterator[HighlightEvent]:
    """Convert nested regions into an ordered event stream.

    Regions are ordered by start offset, containing regions first.
    Uncovered bytes become Source events at the current depth, so the
    Source ranges tile [0, length) exactly.

    Args:
        regions: Regions over a buffer of ``length`` bytes, in any order
        length: Length of the source buffer in bytes

    Yields:
        HighlightStart, Source and HighlightEnd events

    Raises:
        MalformedEventStreamError: On partial overlap or out-of-bounds regions

    Example:
        >>> list(events_from_regions([HighlightRegion(0, 2, 0)], 3))
        [HighlightStart(index=0), Source(start=0, end=2), HighlightEnd(), Source(start=2, end=3)]
    """
    ordered = sorted(regions, key=lambda r: (r.start, -r.end))
    for region in ordered:
        if region.start < 0 or region.start > region.end or region.end > length:
            msg = f"region [{region.start}, {region.end}) outside buffer of {length} bytes"
            raise MalformedEventStreamError(msg, offset=region.start)

    stack: list[HighlightRegion] = []
    position = 0

    for region in ordered:
        # Close everything that ends at or before this region starts.
        while stack and stack[-1].end <= region.start:
            closing = stack.pop()
            if position < closing.end:
                yield Source(position, closing.end)
                position = closing.end
            yield HighlightEnd()

        if stack and not stack[-1].contains(region):
            parent = stack[-1]
            msg = (
                f"region [{region.start}, {region.end}) partially overlaps "
                f"[{parent.start}, {parent.end})"
            )
            raise MalformedEventStreamError(msg, offset=region.start)

        if position < region.start:
            yield Source(position, region.start)
            position = region.start

        yield HighlightStart(region.index)
        stack.append(region)

    while stack:
        closing = stack.pop()
        if position < closing.end:
            yield Source(position, closing.end)
            position = closing.end
        yield HighlightEnd()

    if position < length:
        yield Source(position, length)
