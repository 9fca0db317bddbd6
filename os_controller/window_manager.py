"""Title-based lookups over wmctrl window listings."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from executor.errors import NotFound
from os_controller.wmctrl_controller import WmctrlController
from window_model.window import WindowRecord


def match_title(
    windows: Iterable[WindowRecord],
    title: str,
    exact: bool = False,
    ignore_case: bool = False,
) -> list[WindowRecord]:
    """Filter records by title, substring match unless ``exact``."""
    needle = title.casefold() if ignore_case else title
    matches = []
    for window in windows:
        haystack = window.title.casefold() if ignore_case else window.title
        if (haystack == needle) if exact else (needle in haystack):
            matches.append(window)
    return matches


class WindowManager:
    """Facade that resolves windows by title before acting on them."""

    def __init__(self, controller: WmctrlController | None = None) -> None:
        self.controller = controller or WmctrlController()
        self.logger = logging.getLogger("wm.window_manager")

    def list_windows(self, detailed: bool = False) -> list[WindowRecord]:
        return list(self.controller.list_windows(detailed=detailed))

    def find_windows(
        self,
        title: str,
        exact: bool = False,
        ignore_case: bool = False,
    ) -> list[WindowRecord]:
        """Return every window of a fresh listing whose title matches."""
        return match_title(self.controller.list_windows(), title, exact=exact, ignore_case=ignore_case)

    def find_window(
        self,
        title: str,
        exact: bool = False,
        ignore_case: bool = False,
    ) -> WindowRecord:
        """Return the first matching window or raise NotFound."""
        matches = self.find_windows(title, exact=exact, ignore_case=ignore_case)
        if not matches:
            raise NotFound(f"No window with title {'equal to' if exact else 'containing'} {title!r}")
        if len(matches) > 1:
            self.logger.debug("%d windows match %r, using %s", len(matches), title, matches[0].identifier)
        return matches[0]

    def focus_window(self, title_substring: str) -> WindowRecord:
        window = self.find_window(title_substring)
        self.controller.raise_window(window.identifier)
        return window

    def close_window(self, title_substring: str) -> WindowRecord:
        window = self.find_window(title_substring)
        self.controller.close(window.identifier)
        return window
