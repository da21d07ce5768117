"""Public error taxonomy for surface slicing."""

from __future__ import annotations


class ZoneSlicerError(Exception):
    """Base class for all slicer errors."""


class SurfaceConfigError(ZoneSlicerError, ValueError):
    """Raised when a surface width or height is not a positive integer."""


class ProportionsError(ZoneSlicerError, ValueError):
    """Raised when border/zone/mid proportions do not tile 100 percent."""


class UnknownMetazoneError(ZoneSlicerError, ValueError):
    """Raised when a metazone name is outside the fixed vocabulary."""

    def __init__(self, name: object) -> None:
        super().__init__(f"unknown metazone: {name!r}")
        self.name = name


class SliceIndexError(ZoneSlicerError, IndexError):
    """Raised when a slice index is outside 1..25."""

    def __init__(self, index: object) -> None:
        super().__init__(f"slice index out of range: {index!r}")
        self.index = index


class SurfaceUnavailableError(ZoneSlicerError, RuntimeError):
    """Raised when no surface size provider can report a size."""
