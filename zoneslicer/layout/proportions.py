"""Border/zone/mid proportions and the per-slice percentage table."""

from __future__ import annotations

from dataclasses import dataclass

from zoneslicer.api.errors import ProportionsError

GRID_SIZE = 5
SLICE_COUNT = GRID_SIZE * GRID_SIZE


@dataclass(frozen=True, slots=True)
class Proportions:
    """Percent of each axis taken by border, zone and mid bands."""

    border: float = 15.0
    zone: float = 34.0
    mid: float = 2.0

    def axis(self) -> tuple[float, float, float, float, float]:
        """Return band percentages along one axis, outer edge to outer edge."""
        return (self.border, self.zone, self.mid, self.zone, self.border)

    def validate(self) -> Proportions:
        for label, value in (("border", self.border), ("zone", self.zone), ("mid", self.mid)):
            if value <= 0:
                raise ProportionsError(f"{label} proportion must be positive, got {value!r}")
        total = sum(self.axis())
        if abs(total - 100.0) > 1e-9:
            raise ProportionsError(
                f"proportions must sum to 100 along each axis, got {total:g} "
                f"(border={self.border:g}, zone={self.zone:g}, mid={self.mid:g})"
            )
        return self


DEFAULT_PROPORTIONS = Proportions()


def slice_percentages(proportions: Proportions) -> tuple[tuple[float, float], ...]:
    """Return (width%, height%) for slices 1..25 in row-major order."""
    bands = proportions.axis()
    return tuple((bands[col], bands[row]) for row in range(GRID_SIZE) for col in range(GRID_SIZE))
