"""Interval and rectangle primitives shared by the layout engine and the nester.

All dimensions are integer millimeters. Spans are half-open, so two spans
that merely touch (``a.end == b.start``) do not overlap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Span:
    """Half-open horizontal interval ``[start, start + width)`` along a wall.

    Attributes:
        start: Offset from the left end of the wall in mm.
        width: Length of the interval in mm.
    """

    start: int
    width: int

    @property
    def end(self) -> int:
        """Exclusive right edge."""
        return self.start + self.width

    def overlaps(self, other: Span) -> bool:
        """Check whether two spans share any length."""
        return self.start < other.end and other.start < self.end

    def contains(self, position: int) -> bool:
        """Check whether ``position`` lies inside the span."""
        return self.start <= position < self.end

    def within(self, lower: int, upper: int) -> bool:
        """Check whether the span lies entirely inside ``[lower, upper]``."""
        return self.start >= lower and self.end <= upper


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle on a sheet, origin at the top-left corner."""

    x: int
    y: int
    width: int
    length: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.length

    @property
    def area(self) -> int:
        return self.width * self.length

    def overlaps(self, other: Rect) -> bool:
        """Check whether two rectangles share any area.

        Two rectangles overlap if neither is completely to the left,
        right, above, or below the other.
        """
        return not (
            self.right <= other.x
            or self.x >= other.right
            or self.bottom <= other.y
            or self.y >= other.bottom
        )

    def fits_inside(self, width: int, length: int) -> bool:
        """Check whether the rectangle lies within a ``width x length`` board."""
        return self.x >= 0 and self.y >= 0 and self.right <= width and self.bottom <= length


def overlaps_any(span: Span, others: Iterable[Span]) -> bool:
    """Check whether ``span`` overlaps at least one span in ``others``."""
    return any(span.overlaps(other) for other in others)


def merge_spans(spans: Iterable[Span]) -> list[Span]:
    """Merge overlapping or touching spans into a sorted, disjoint list."""
    ordered = sorted(spans, key=lambda s: s.start)
    merged: list[Span] = []
    for span in ordered:
        if span.width <= 0:
            continue
        if merged and span.start <= merged[-1].end:
            last = merged[-1]
            merged[-1] = Span(last.start, max(last.end, span.end) - last.start)
        else:
            merged.append(span)
    return merged


def free_run(position: int, occupied: Iterable[Span], limit: int) -> int:
    """Length of the contiguous free gap starting at ``position``.

    Returns 0 when ``position`` is inside an occupied span. Otherwise the gap
    runs up to the nearest occupied span starting to the right, or to ``limit``.
    """
    next_start = limit
    for span in occupied:
        if span.contains(position):
            return 0
        if position < span.start < next_start:
            next_start = span.start
    return max(0, next_start - position)
