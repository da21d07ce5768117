"""Percentage-based 25-slice surface partitioning with named metazones."""

from zoneslicer.api.errors import (
    ProportionsError,
    SliceIndexError,
    SurfaceConfigError,
    SurfaceUnavailableError,
    UnknownMetazoneError,
    ZoneSlicerError,
)
from zoneslicer.api.surface import SurfaceSize, SurfaceSizeProvider
from zoneslicer.layout import (
    DEFAULT_PROPORTIONS,
    Metazone,
    Proportions,
    SliceRange,
    Slicer25,
    partition,
)

__all__ = [
    "DEFAULT_PROPORTIONS",
    "Metazone",
    "Proportions",
    "ProportionsError",
    "SliceIndexError",
    "SliceRange",
    "Slicer25",
    "SurfaceConfigError",
    "SurfaceSize",
    "SurfaceSizeProvider",
    "SurfaceUnavailableError",
    "UnknownMetazoneError",
    "ZoneSlicerError",
    "partition",
]
