"""Named composite regions merged from fixed slice subsets."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum
from types import MappingProxyType

from zoneslicer.api.errors import UnknownMetazoneError
from zoneslicer.layout.geometry import SliceRange, merge_ranges
from zoneslicer.layout.proportions import GRID_SIZE, SLICE_COUNT


class Metazone(StrEnum):
    """Fixed metazone vocabulary."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    L_BORDER = "l_border"
    R_BORDER = "r_border"
    T_BORDER = "t_border"
    B_BORDER = "b_border"
    V_MID = "v_mid"
    H_MID = "h_mid"
    LT_CORNER = "lt_corner"
    RT_CORNER = "rt_corner"
    LB_CORNER = "lb_corner"
    RB_CORNER = "rb_corner"
    LT_ZONE = "lt_zone"
    RT_ZONE = "rt_zone"
    LB_ZONE = "lb_zone"
    RB_ZONE = "rb_zone"
    CENTER = "center"


def _columns(*cols: int) -> frozenset[int]:
    return frozenset(
        (row - 1) * GRID_SIZE + col for row in range(1, GRID_SIZE + 1) for col in cols
    )


def _rows(*rows: int) -> frozenset[int]:
    return frozenset(
        (row - 1) * GRID_SIZE + col for row in rows for col in range(1, GRID_SIZE + 1)
    )


METAZONE_SLICES: Mapping[Metazone, frozenset[int]] = MappingProxyType(
    {
        Metazone.LEFT: _columns(1, 2, 3),
        Metazone.RIGHT: _columns(3, 4, 5),
        Metazone.TOP: _rows(1, 2, 3),
        Metazone.BOTTOM: _rows(3, 4, 5),
        Metazone.L_BORDER: _columns(1),
        Metazone.R_BORDER: _columns(5),
        Metazone.T_BORDER: _rows(1),
        Metazone.B_BORDER: _rows(5),
        Metazone.V_MID: _columns(3),
        Metazone.H_MID: _rows(3),
        Metazone.LT_CORNER: frozenset({1}),
        Metazone.RT_CORNER: frozenset({5}),
        Metazone.LB_CORNER: frozenset({21}),
        Metazone.RB_CORNER: frozenset({25}),
        Metazone.LT_ZONE: frozenset({7}),
        Metazone.RT_ZONE: frozenset({9}),
        Metazone.LB_ZONE: frozenset({17}),
        Metazone.RB_ZONE: frozenset({19}),
        Metazone.CENTER: frozenset({13}),
    }
)


def resolve_metazone(name: Metazone | str) -> Metazone:
    """Normalize a metazone name or raise UnknownMetazoneError."""
    if isinstance(name, Metazone):
        return name
    if isinstance(name, str):
        try:
            return Metazone(name.strip().lower())
        except ValueError:
            raise UnknownMetazoneError(name) from None
    raise UnknownMetazoneError(name)


def build_metazones(slices: Sequence[SliceRange]) -> Mapping[Metazone, SliceRange]:
    """Merge the 25-slice table into the read-only metazone table."""
    if len(slices) != SLICE_COUNT:
        raise ValueError(f"expected {SLICE_COUNT} slices, got {len(slices)}")
    table: dict[Metazone, SliceRange] = {}
    for zone, indices in METAZONE_SLICES.items():
        members = [slices[index - 1] for index in sorted(indices)]
        table[zone] = members[0] if len(members) == 1 else merge_ranges(members)
    return MappingProxyType(table)
