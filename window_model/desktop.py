"""Desktop and window manager descriptions from ``wmctrl -d`` / ``-m``."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DesktopRecord(BaseModel):
    """One virtual desktop."""

    model_config = ConfigDict(frozen=True)

    index: int
    current: bool
    geometry: str
    viewport: str
    work_area: str
    name: str


class WindowManagerInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    wm_class: str | None = None
    pid: int | None = None
    showing_desktop: bool | None = None
    raw: dict[str, str] = Field(default_factory=dict)
