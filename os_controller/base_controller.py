"""Base interface for window controllers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from window_model.state import StateChange
from window_model.transformation import TransformSpec
from window_model.window import WindowListing


class BaseController(ABC):
    """Abstract window controller interface.

    Operations take a window identifier, never a record, and are
    fire-and-forget: success means the tool exited zero, not that the
    window manager honoured the request.
    """

    @abstractmethod
    def list_windows(self, detailed: bool = False) -> WindowListing:
        """Return a snapshot of the managed windows."""
        pass

    @abstractmethod
    def transform(self, identifier: str, spec: TransformSpec) -> None:
        """Move and/or resize a window."""
        pass

    @abstractmethod
    def close(self, identifier: str) -> None:
        """Ask the window manager to close a window gracefully."""
        pass

    @abstractmethod
    def change_state(self, identifier: str, change: StateChange) -> None:
        """Add, remove or toggle window state hints."""
        pass

    @abstractmethod
    def raise_window(self, identifier: str) -> None:
        """Switch to the window's desktop and raise it."""
        pass
