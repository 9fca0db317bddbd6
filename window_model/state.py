"""Window state hints for ``wmctrl -b``."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Action(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    TOGGLE = "toggle"


class Property(str, Enum):
    """EWMH ``_NET_WM_STATE`` hints, spelled the way wmctrl expects them."""

    MODAL = "modal"
    STICKY = "sticky"
    MAXIMIZED_VERT = "maximized_vert"
    MAXIMIZED_HORZ = "maximized_horz"
    SHADED = "shaded"
    SKIP_TASKBAR = "skip_taskbar"
    SKIP_PAGER = "skip_pager"
    HIDDEN = "hidden"
    FULLSCREEN = "fullscreen"
    ABOVE = "above"
    BELOW = "below"


class StateChange(BaseModel):
    """One action applied to one or two properties.

    Combinations are not validated; wmctrl and the window manager decide
    what to do with them.
    """

    model_config = ConfigDict(frozen=True)

    action: Action
    property: Property
    second_property: Property | None = None

    def to_argument(self) -> str:
        tokens = [self.action.value, self.property.value]
        if self.second_property is not None:
            tokens.append(self.second_property.value)
        return ",".join(tokens)

    def __str__(self) -> str:
        return self.to_argument()
