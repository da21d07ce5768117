"""Surface size contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class SurfaceSize:
    """Pixel dimensions of the surface being sliced."""

    width: int
    height: int


class SurfaceSizeProvider(Protocol):
    """Environment capability: report the current surface size."""

    def surface_size(self) -> SurfaceSize:
        """Return current surface size or raise SurfaceUnavailableError."""
