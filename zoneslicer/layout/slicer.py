"""25-slice surface partition with metazone queries."""

from __future__ import annotations

import math
from collections.abc import Mapping

from zoneslicer.api.errors import SliceIndexError
from zoneslicer.api.surface import SurfaceSize, SurfaceSizeProvider
from zoneslicer.layout.geometry import CellCoord, SliceRange, round_half_up
from zoneslicer.layout.grid_partition import partition, validate_dimension
from zoneslicer.layout.metazones import Metazone, build_metazones, resolve_metazone
from zoneslicer.layout.proportions import GRID_SIZE, SLICE_COUNT, Proportions
from zoneslicer.runtime.config import load_proportions
from zoneslicer.runtime.logging import get_slicer_logger
from zoneslicer.runtime.surface import default_surface_provider

_LOG = get_slicer_logger("zoneslicer.slicer")


class Slicer25:
    """Immutable 5x5 slicing of one surface.

    Slices are numbered 1..25 row-major from the top-left corner. The layout is
    a border ring, two large zones per axis and a thin crosshair gutter::

        +---+-----------++-----------+---+   slices  1- 5  (border)
        |   |           ||           |   |   slices  6-10  (zone)
        +===+===========[]===========+===+   slices 11-15  (mid)
        |   |           ||           |   |   slices 16-20  (zone)
        +---+-----------++-----------+---+   slices 21-25  (border)

    A point on the surface lies in at most one slice (rounding can leave the
    last pixel row or column uncovered) and usually in several
    metazones (for example ``left``, ``top`` and ``lt_zone`` at once).
    ``v_mid`` is the thin vertical gutter column and ``h_mid`` the thin
    horizontal gutter row, not the center lines.

    Missing dimensions are requested from ``surface_provider`` (or the
    environment-configured default provider) once, at construction. When
    ``proportions`` is omitted they are read from ``ZONESLICER_*_PCT``, so
    ``slices`` can differ from ``partition(width, height)``, which always
    defaults to 15/34/2.

    Non-finite coordinates are treated as outside every slice.
    """

    __slots__ = ("_size", "_proportions", "_slices", "_metazones")

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        *,
        proportions: Proportions | None = None,
        surface_provider: SurfaceSizeProvider | None = None,
    ) -> None:
        if width is None or height is None:
            provider = surface_provider
            if provider is None:
                provider = default_surface_provider()
            fallback = provider.surface_size()
            width = fallback.width if width is None else width
            height = fallback.height if height is None else height
        size = SurfaceSize(
            width=validate_dimension("width", width),
            height=validate_dimension("height", height),
        )
        resolved = (proportions if proportions is not None else load_proportions()).validate()
        self._size = size
        self._proportions = resolved
        self._slices = partition(size.width, size.height, resolved)
        self._metazones = build_metazones(self._slices)
        _LOG.debug(
            "slicer_built width=%d height=%d border=%g zone=%g mid=%g",
            size.width,
            size.height,
            resolved.border,
            resolved.zone,
            resolved.mid,
        )

    def __repr__(self) -> str:
        return f"Slicer25(width={self._size.width}, height={self._size.height})"

    @property
    def size(self) -> SurfaceSize:
        return self._size

    @property
    def width(self) -> int:
        return self._size.width

    @property
    def height(self) -> int:
        return self._size.height

    @property
    def proportions(self) -> Proportions:
        return self._proportions

    @property
    def slices(self) -> tuple[SliceRange, ...]:
        """Slice ranges; slice ``i`` is at position ``i - 1``."""
        return self._slices

    @property
    def metazones(self) -> Mapping[Metazone, SliceRange]:
        return self._metazones

    def slice_range(self, index: int) -> SliceRange:
        """Return pixel range for a 1-based slice index."""
        if isinstance(index, bool) or not isinstance(index, int) or not 1 <= index <= SLICE_COUNT:
            raise SliceIndexError(index)
        return self._slices[index - 1]

    def slice_cell(self, index: int) -> CellCoord:
        """Return 1-based row/column of a slice index."""
        self.slice_range(index)
        row, col = divmod(index - 1, GRID_SIZE)
        return CellCoord(row=row + 1, col=col + 1)

    def metazone_range(self, name: Metazone | str) -> SliceRange:
        """Return bounding range of a named metazone."""
        return self._metazones[resolve_metazone(name)]

    def which_slice(self, x: float, y: float) -> int | None:
        """Return the slice index containing a point, or None outside all slices."""
        pixel = _to_pixel(x, y)
        if pixel is None:
            return None
        for index, rng in enumerate(self._slices, start=1):
            if rng.contains(*pixel):
                return index
        return None

    def is_in(self, name: Metazone | str, x: float, y: float) -> bool:
        """Return whether a point falls within a named metazone."""
        rng = self.metazone_range(name)
        pixel = _to_pixel(x, y)
        return pixel is not None and rng.contains(*pixel)

    def metazones_at(self, x: float, y: float) -> tuple[Metazone, ...]:
        """Return every metazone containing a point, in vocabulary order."""
        pixel = _to_pixel(x, y)
        if pixel is None:
            return ()
        return tuple(zone for zone, rng in self._metazones.items() if rng.contains(*pixel))


def _to_pixel(x: float, y: float) -> tuple[int, int] | None:
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return round_half_up(x), round_half_up(y)
