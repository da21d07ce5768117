from __future__ import annotations

import os
import warnings
from dataclasses import dataclass

import pytest


@pytest.fixture(autouse=True)
def _isolated_slicer_env(monkeypatch) -> None:
    for name in list(os.environ):
        if name.startswith("ZONESLICER_") or name == "LOG_LEVEL":
            monkeypatch.delenv(name, raising=False)


@dataclass(frozen=True, slots=True)
class FakeVideoModeSize:
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class FakeVideoMode:
    size: FakeVideoModeSize


class FakeGlfw:
    def __init__(
        self,
        *,
        init_ok: bool = True,
        initialised: bool = False,
        monitor: object | None = "primary",
        workarea: tuple[int, int, int, int] = (0, 0, 1920, 1040),
        video_mode: FakeVideoMode | None = None,
    ) -> None:
        self.init_ok = init_ok
        self.initialised = initialised
        self.monitor = monitor
        self.workarea = workarea
        self.video_mode = video_mode
        self.calls: list[str] = []

    def init(self) -> bool:
        self.calls.append("init")
        self.initialised = self.init_ok
        return self.init_ok

    def terminate(self) -> None:
        self.calls.append("terminate")
        self.initialised = False

    def get_primary_monitor(self) -> object | None:
        self.calls.append("get_primary_monitor")
        if not self.initialised:
            warnings.warn("GLFW_NOT_INITIALIZED", UserWarning, stacklevel=2)
            return None
        return self.monitor

    def get_monitor_workarea(self, monitor: object) -> tuple[int, int, int, int]:
        self.calls.append("get_monitor_workarea")
        return self.workarea

    def get_video_mode(self, monitor: object) -> FakeVideoMode | None:
        self.calls.append("get_video_mode")
        return self.video_mode
