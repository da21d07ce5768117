"""Slicer runtime modules: configuration, logging and surface providers."""

from zoneslicer.runtime.config import SlicerConfig, load_slicer_config
from zoneslicer.runtime.logging import apply_slicer_log_level, get_slicer_logger
from zoneslicer.runtime.surface import (
    EnvSurfaceSizeProvider,
    FallbackSurfaceSizeProvider,
    FixedSurfaceSizeProvider,
    MonitorSurfaceSizeProvider,
    default_surface_provider,
)

__all__ = [
    "EnvSurfaceSizeProvider",
    "FallbackSurfaceSizeProvider",
    "FixedSurfaceSizeProvider",
    "MonitorSurfaceSizeProvider",
    "SlicerConfig",
    "apply_slicer_log_level",
    "default_surface_provider",
    "get_slicer_logger",
    "load_slicer_config",
]
