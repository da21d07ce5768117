import pytest

from zoneslicer.api.errors import UnknownMetazoneError
from zoneslicer.layout.geometry import SliceRange
from zoneslicer.layout.grid_partition import partition
from zoneslicer.layout.metazones import (
    METAZONE_SLICES,
    Metazone,
    build_metazones,
    resolve_metazone,
)


def test_vocabulary_and_index_tables() -> None:
    assert len(Metazone) == 19
    assert set(METAZONE_SLICES) == set(Metazone)
    assert METAZONE_SLICES[Metazone.LEFT] == frozenset(
        {1, 2, 3, 6, 7, 8, 11, 12, 13, 16, 17, 18, 21, 22, 23}
    )
    assert METAZONE_SLICES[Metazone.BOTTOM] == frozenset(range(11, 26))
    assert METAZONE_SLICES[Metazone.V_MID] == frozenset({3, 8, 13, 18, 23})
    assert METAZONE_SLICES[Metazone.H_MID] == frozenset({11, 12, 13, 14, 15})
    assert METAZONE_SLICES[Metazone.R_BORDER] == frozenset({5, 10, 15, 20, 25})
    assert METAZONE_SLICES[Metazone.CENTER] == frozenset({13})
    for indices in METAZONE_SLICES.values():
        assert all(1 <= index <= 25 for index in indices)


def test_build_metazones_on_1000_square() -> None:
    slices = partition(1000, 1000)
    zones = build_metazones(slices)
    assert zones[Metazone.LEFT] == SliceRange(xstart=0, ystart=0, xstop=509, ystop=999)
    assert zones[Metazone.RIGHT] == SliceRange(xstart=490, ystart=0, xstop=999, ystop=999)
    assert zones[Metazone.TOP] == SliceRange(xstart=0, ystart=0, xstop=999, ystop=509)
    assert zones[Metazone.H_MID] == SliceRange(xstart=0, ystart=490, xstop=999, ystop=509)
    assert zones[Metazone.V_MID] == SliceRange(xstart=490, ystart=0, xstop=509, ystop=999)
    assert zones[Metazone.T_BORDER] == SliceRange(xstart=0, ystart=0, xstop=999, ystop=149)
    assert zones[Metazone.CENTER] is slices[12]
    assert zones[Metazone.RB_CORNER] is slices[24]
    assert zones[Metazone.LB_ZONE] is slices[16]


def test_build_metazones_is_read_only() -> None:
    zones = build_metazones(partition(400, 300))
    with pytest.raises(TypeError):
        zones[Metazone.CENTER] = SliceRange(0, 0, 0, 0)  # type: ignore[index]


def test_build_metazones_requires_full_table() -> None:
    with pytest.raises(ValueError):
        build_metazones(partition(400, 300)[:24])


def test_opposite_halves_span_full_surface() -> None:
    for width, height in ((100, 100), (1280, 800), (1920, 1080), (333, 777)):
        slices = partition(width, height)
        zones = build_metazones(slices)
        right_edge = max(rng.xstop for rng in slices)
        bottom_edge = max(rng.ystop for rng in slices)
        assert zones[Metazone.LEFT].xstart == 0
        assert zones[Metazone.RIGHT].xstop == right_edge
        assert zones[Metazone.LEFT].xstop >= zones[Metazone.RIGHT].xstart - 1
        assert zones[Metazone.TOP].ystart == 0
        assert zones[Metazone.BOTTOM].ystop == bottom_edge
        assert zones[Metazone.TOP].ystop >= zones[Metazone.BOTTOM].ystart - 1


def test_resolve_metazone_accepts_names_and_members() -> None:
    assert resolve_metazone("center") is Metazone.CENTER
    assert resolve_metazone(" LT_Corner ") is Metazone.LT_CORNER
    assert resolve_metazone(Metazone.V_MID) is Metazone.V_MID


def test_resolve_metazone_rejects_unknown() -> None:
    with pytest.raises(UnknownMetazoneError) as excinfo:
        resolve_metazone("bogus_zone")
    assert excinfo.value.name == "bogus_zone"
    with pytest.raises(UnknownMetazoneError):
        resolve_metazone(13)  # type: ignore[arg-type]
