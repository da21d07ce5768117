"""Public slicer API contracts."""

from zoneslicer.api.errors import (
    ProportionsError,
    SliceIndexError,
    SurfaceConfigError,
    SurfaceUnavailableError,
    UnknownMetazoneError,
    ZoneSlicerError,
)
from zoneslicer.api.surface import SurfaceSize, SurfaceSizeProvider

__all__ = [
    "ProportionsError",
    "SliceIndexError",
    "SurfaceConfigError",
    "SurfaceSize",
    "SurfaceSizeProvider",
    "SurfaceUnavailableError",
    "UnknownMetazoneError",
    "ZoneSlicerError",
]
