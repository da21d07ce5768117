"""Percentage-driven 5x5 surface partitioning."""

from __future__ import annotations

from zoneslicer.api.errors import SurfaceConfigError
from zoneslicer.layout.geometry import SliceRange, round_half_up
from zoneslicer.layout.proportions import (
    DEFAULT_PROPORTIONS,
    GRID_SIZE,
    Proportions,
    slice_percentages,
)
from zoneslicer.runtime.logging import get_slicer_logger

_LOG = get_slicer_logger(__name__)


def percent_to_pixels(percent: float, dimension: int) -> int:
    """Convert a percent of a dimension to a whole pixel count."""
    return round_half_up(dimension * (percent / 100.0))


def validate_dimension(label: str, value: object) -> int:
    """Return value as a positive pixel dimension or raise SurfaceConfigError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise SurfaceConfigError(f"surface {label} must be an integer, got {value!r}")
    if value <= 0:
        raise SurfaceConfigError(f"surface {label} must be positive, got {value!r}")
    return value


def partition(
    width: int,
    height: int,
    proportions: Proportions = DEFAULT_PROPORTIONS,
) -> tuple[SliceRange, ...]:
    """Tile a width x height surface into 25 row-major slice ranges.

    Every slice is sized from the percentage of the full dimension, so rounding
    drift can leave a pixel or two uncovered (or overhanging) at the right and
    bottom edges. A slice whose bottom edge lands exactly on ``height`` is
    pulled back one row; the right edge is not corrected.
    """
    width = validate_dimension("width", width)
    height = validate_dimension("height", height)
    proportions = proportions.validate()
    for label, dimension in (("width", width), ("height", height)):
        for percent in proportions.axis():
            if percent_to_pixels(percent, dimension) < 1:
                raise SurfaceConfigError(
                    f"surface {label} {dimension} is too small: a {percent:g}% band "
                    "rounds to zero pixels"
                )

    slices: list[SliceRange] = []
    xoffset = 0
    yoffset = 0
    for index, (x_pct, y_pct) in enumerate(slice_percentages(proportions), start=1):
        xstop = xoffset + percent_to_pixels(x_pct, width) - 1
        ystop = yoffset + percent_to_pixels(y_pct, height) - 1
        if index % GRID_SIZE == 0:
            next_x, next_y = 0, ystop + 1
        else:
            next_x, next_y = xstop + 1, yoffset
        if ystop == height:
            _LOG.debug(
                "slice_bottom_clamped index=%d ystop=%d height=%d", index, ystop, height
            )
            ystop -= 1
            if ystop < yoffset:
                raise SurfaceConfigError(f"surface height {height} leaves slice {index} empty")
        slices.append(SliceRange(xstart=xoffset, ystart=yoffset, xstop=xstop, ystop=ystop))
        xoffset, yoffset = next_x, next_y
    return tuple(slices)
