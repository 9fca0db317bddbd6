"""Value objects exchanged with the wmctrl wrapper."""

from window_model.desktop import DesktopRecord, WindowManagerInfo
from window_model.state import Action, Property, StateChange
from window_model.transformation import UNCHANGED, TransformSpec
from window_model.window import WindowListing, WindowRecord

__all__ = [
    "Action",
    "DesktopRecord",
    "Property",
    "StateChange",
    "TransformSpec",
    "UNCHANGED",
    "WindowListing",
    "WindowManagerInfo",
    "WindowRecord",
]
