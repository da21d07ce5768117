"""Centralized environment configuration for surface slicing."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Mapping, TypeAlias

from zoneslicer.api.surface import SurfaceSize
from zoneslicer.layout.proportions import DEFAULT_PROPORTIONS, Proportions

SurfaceProviderMode: TypeAlias = Literal["auto", "env", "monitor"]


@dataclass(frozen=True, slots=True)
class SlicerSurfaceConfig:
    width: int | None
    height: int | None
    provider_mode: SurfaceProviderMode

    @property
    def size(self) -> SurfaceSize | None:
        if self.width is None or self.height is None:
            return None
        return SurfaceSize(width=self.width, height=self.height)


@dataclass(frozen=True, slots=True)
class SlicerConfig:
    surface: SlicerSurfaceConfig
    proportions: Proportions
    log_level: str | None


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _optional_int(name: str, *, env: Mapping[str, str] | None = None) -> int | None:
    raw = _raw(name, env=env)
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _resolution(raw: str) -> tuple[int, int] | None:
    value = str(raw).strip().lower()
    if not value:
        return None
    normalized = value.replace(" ", "")
    for sep in ("x", ",", ":"):
        if sep in normalized:
            left, right = normalized.split(sep, 1)
            try:
                width = int(left)
                height = int(right)
            except ValueError:
                return None
            return (width, height)
    return None


def _normalize_provider_mode(raw: str) -> SurfaceProviderMode:
    value = str(raw).strip().lower()
    if value in {"env", "environment", "config"}:
        return "env"
    if value in {"monitor", "glfw", "screen"}:
        return "monitor"
    return "auto"


def resolve_log_level_name(*, env: Mapping[str, str] | None = None) -> str | None:
    """Resolve the package log level override, if configured."""
    value = _text("ZONESLICER_LOG_LEVEL", "", env=env)
    return value.upper() if value else None


def load_surface_config(*, env: Mapping[str, str] | None = None) -> SlicerSurfaceConfig:
    resolution = _resolution(_text("ZONESLICER_SURFACE_RESOLUTION", "", env=env))
    width = _optional_int("ZONESLICER_SURFACE_WIDTH", env=env)
    height = _optional_int("ZONESLICER_SURFACE_HEIGHT", env=env)
    if resolution is not None:
        width = resolution[0] if width is None else width
        height = resolution[1] if height is None else height
    return SlicerSurfaceConfig(
        width=width,
        height=height,
        provider_mode=_normalize_provider_mode(
            _text("ZONESLICER_SURFACE_PROVIDER", "auto", env=env)
        ),
    )


def load_proportions(*, env: Mapping[str, str] | None = None) -> Proportions:
    """Load border/zone/mid proportions; validation happens at partition time."""
    return Proportions(
        border=_float("ZONESLICER_BORDER_PCT", DEFAULT_PROPORTIONS.border, env=env),
        zone=_float("ZONESLICER_ZONE_PCT", DEFAULT_PROPORTIONS.zone, env=env),
        mid=_float("ZONESLICER_MID_PCT", DEFAULT_PROPORTIONS.mid, env=env),
    )


def load_slicer_config(*, env: Mapping[str, str] | None = None) -> SlicerConfig:
    return SlicerConfig(
        surface=load_surface_config(env=env),
        proportions=load_proportions(env=env),
        log_level=resolve_log_level_name(env=env),
    )
