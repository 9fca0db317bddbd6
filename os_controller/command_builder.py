"""Argument lists for wmctrl window operations.

Every builder returns the arguments that follow the executable name. Window
identifiers are always addressed with ``-i`` and passed through verbatim.
"""

from __future__ import annotations

from window_model.state import StateChange
from window_model.transformation import TransformSpec

LIST_WINDOWS_ARGS = ["-l", "-p"]
LIST_WINDOWS_DETAILED_ARGS = ["-l", "-p", "-G", "-x"]
LIST_DESKTOPS_ARGS = ["-d"]
WM_INFO_ARGS = ["-m"]


def transform_args(identifier: str, spec: TransformSpec) -> list[str]:
    return ["-i", "-r", identifier, "-e", spec.to_argument()]


def close_args(identifier: str) -> list[str]:
    return ["-i", "-c", identifier]


def change_state_args(identifier: str, change: StateChange) -> list[str]:
    return ["-i", "-r", identifier, "-b", change.to_argument()]


def set_title_args(identifier: str, title: str) -> list[str]:
    return ["-i", "-r", identifier, "-N", title]


def set_icon_title_args(identifier: str, title: str) -> list[str]:
    return ["-i", "-r", identifier, "-I", title]


def set_both_titles_args(identifier: str, title: str) -> list[str]:
    return ["-i", "-r", identifier, "-T", title]


def move_to_desktop_args(identifier: str, desktop: int) -> list[str]:
    return ["-i", "-r", identifier, "-t", str(desktop)]


def activate_args(identifier: str) -> list[str]:
    """Move the window to the current desktop and raise it (``-R``)."""
    return ["-i", "-R", identifier]


def raise_args(identifier: str) -> list[str]:
    """Switch to the window's desktop and raise it (``-a``)."""
    return ["-i", "-a", identifier]
