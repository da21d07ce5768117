"""Slicer geometry primitives."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SliceRange:
    """Axis-aligned pixel range with inclusive start/stop bounds."""

    xstart: int
    ystart: int
    xstop: int
    ystop: int

    @property
    def width(self) -> int:
        return self.xstop - self.xstart + 1

    @property
    def height(self) -> int:
        return self.ystop - self.ystart + 1

    def contains(self, px: float, py: float) -> bool:
        """Return whether a point is inside the range, edges included."""
        return self.xstart <= px <= self.xstop and self.ystart <= py <= self.ystop


@dataclass(frozen=True, slots=True)
class CellCoord:
    """Slice position in 1-based row/column space."""

    row: int
    col: int


def merge_ranges(ranges: Iterable[SliceRange]) -> SliceRange:
    """Return the bounding box of one or more ranges."""
    items = tuple(ranges)
    if not items:
        raise ValueError("cannot merge an empty range set")
    return SliceRange(
        xstart=min(item.xstart for item in items),
        ystart=min(item.ystart for item in items),
        xstop=max(item.xstop for item in items),
        ystop=max(item.ystop for item in items),
    )


def round_half_up(value: float) -> int:
    """Round to nearest integer with ties toward positive infinity."""
    return int(math.floor(float(value) + 0.5))
