"""Surface size providers used when a caller omits width or height."""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from types import ModuleType
from typing import Any

from zoneslicer.api.errors import SurfaceUnavailableError
from zoneslicer.api.surface import SurfaceSize, SurfaceSizeProvider
from zoneslicer.runtime.config import load_surface_config
from zoneslicer.runtime.errors import RECOVERABLE_RUNTIME_ERRORS, log_recoverable
from zoneslicer.runtime.logging import get_slicer_logger

_LOG = get_slicer_logger("zoneslicer.surface")


class FixedSurfaceSizeProvider:
    """Provider returning one fixed surface size."""

    def __init__(self, size: SurfaceSize) -> None:
        self._size = size

    def surface_size(self) -> SurfaceSize:
        return self._size


class EnvSurfaceSizeProvider:
    """Provider reading ZONESLICER_SURFACE_* configuration."""

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env = env

    def surface_size(self) -> SurfaceSize:
        size = load_surface_config(env=self._env).size
        if size is None:
            raise SurfaceUnavailableError("surface size is not configured in the environment")
        return size


class MonitorSurfaceSizeProvider:
    """Provider reporting the primary monitor work area through GLFW."""

    def __init__(self, glfw_module: ModuleType | Any | None = None) -> None:
        self._glfw = glfw_module

    def surface_size(self) -> SurfaceSize:
        glfw = self._glfw if self._glfw is not None else _import_glfw()
        running, monitor = _query_running_monitor(glfw)
        if running:
            # Host owns the GLFW lifetime; never init/terminate under it.
            return _monitor_size(glfw, monitor)
        if not glfw.init():
            raise SurfaceUnavailableError("glfw.init failed")
        try:
            return _monitor_size(glfw, glfw.get_primary_monitor())
        finally:
            glfw.terminate()


class FallbackSurfaceSizeProvider:
    """Provider chain: first provider that reports a size wins."""

    def __init__(self, *providers: SurfaceSizeProvider) -> None:
        self._providers = tuple(providers)

    @property
    def providers(self) -> tuple[SurfaceSizeProvider, ...]:
        return self._providers

    def surface_size(self) -> SurfaceSize:
        for provider in self._providers:
            try:
                size = provider.surface_size()
            except RECOVERABLE_RUNTIME_ERRORS:
                log_recoverable(
                    _LOG,
                    f"surface_provider_failed provider={type(provider).__name__}",
                )
                continue
            _LOG.debug(
                "surface_provider_resolved provider=%s width=%d height=%d",
                type(provider).__name__,
                size.width,
                size.height,
            )
            return size
        raise SurfaceUnavailableError(
            f"no surface size provider succeeded ({len(self._providers)} tried)"
        )


def default_surface_provider(*, env: Mapping[str, str] | None = None) -> SurfaceSizeProvider:
    """Build the provider selected by ZONESLICER_SURFACE_PROVIDER."""
    mode = load_surface_config(env=env).provider_mode
    if mode == "env":
        return EnvSurfaceSizeProvider(env)
    if mode == "monitor":
        return MonitorSurfaceSizeProvider()
    return FallbackSurfaceSizeProvider(EnvSurfaceSizeProvider(env), MonitorSurfaceSizeProvider())


def _query_running_monitor(glfw: Any) -> tuple[bool, Any]:
    """Return (running, primary monitor); GLFW reports NOT_INITIALIZED as a warning or error."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            monitor = glfw.get_primary_monitor()
        except Warning:
            return False, None
    if caught:
        return False, None
    return True, monitor


def _monitor_size(glfw: Any, monitor: Any) -> SurfaceSize:
    if not monitor:
        raise SurfaceUnavailableError("no primary monitor available")
    _, _, width, height = glfw.get_monitor_workarea(monitor)
    if int(width) <= 0 or int(height) <= 0:
        video_mode = glfw.get_video_mode(monitor)
        if video_mode is None:
            raise SurfaceUnavailableError("primary monitor reported no usable size")
        width, height = video_mode.size.width, video_mode.size.height
    return SurfaceSize(width=int(width), height=int(height))


def _import_glfw() -> ModuleType:
    import glfw

    return glfw
