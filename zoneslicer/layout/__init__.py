"""Surface slicing layout: grid partition, metazones and queries."""

from zoneslicer.layout.geometry import CellCoord, SliceRange, merge_ranges
from zoneslicer.layout.grid_partition import partition
from zoneslicer.layout.metazones import METAZONE_SLICES, Metazone, build_metazones
from zoneslicer.layout.proportions import DEFAULT_PROPORTIONS, Proportions
from zoneslicer.layout.slicer import Slicer25

__all__ = [
    "CellCoord",
    "DEFAULT_PROPORTIONS",
    "METAZONE_SLICES",
    "Metazone",
    "Proportions",
    "SliceRange",
    "Slicer25",
    "build_metazones",
    "merge_ranges",
    "partition",
]
