"""Window controller backed by the wmctrl command-line tool."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from core.audit_logger import AuditLogger
from core.config import WmctrlSettings
from executor.command_executor import run_command
from executor.errors import NotFound, ToolFailed, WmctrlError
from os_controller import command_builder
from os_controller.base_controller import BaseController
from os_controller.listing_parser import (
    parse_desktop_listing,
    parse_window_listing,
    parse_wm_info,
)
from window_model.desktop import DesktopRecord, WindowManagerInfo
from window_model.state import StateChange
from window_model.transformation import TransformSpec
from window_model.window import WindowListing

Runner = Callable[..., tuple[int, str, str]]


class WmctrlController(BaseController):
    """Runs one wmctrl process per call and holds no window state.

    wmctrl itself reports success for many requests the window manager
    ignores, so a call returning normally only means the tool exited zero.
    """

    def __init__(
        self,
        executable: str = "wmctrl",
        timeout: float | None = None,
        strict_listing: bool = False,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self.executable = executable
        self.timeout = timeout
        self.strict_listing = strict_listing
        self.audit_logger = audit_logger
        self.runner: Runner = run_command
        self.logger = logging.getLogger("wm.controller")

    @classmethod
    def from_settings(cls, settings: WmctrlSettings) -> WmctrlController:
        audit_logger = None
        if settings.audit_log_path is not None:
            audit_logger = AuditLogger(Path(settings.audit_log_path))
        return cls(
            executable=settings.executable,
            timeout=settings.timeout_seconds,
            strict_listing=settings.strict_listing,
            audit_logger=audit_logger,
        )

    def _run(self, operation: str, args: list[str]) -> str:
        argv = [self.executable, *args]
        self.logger.debug("%s: %s", operation, argv)
        try:
            code, stdout, stderr = self.runner(argv, timeout=self.timeout)
        except WmctrlError as exc:
            self._audit(operation, argv, "unavailable", None, str(exc))
            raise
        if code != 0:
            self._audit(operation, argv, "failed", code, stderr.strip())
            raise ToolFailed(argv, code, stderr)
        self._audit(operation, argv, "success", code)
        return stdout

    def _audit(
        self,
        operation: str,
        argv: list[str],
        outcome: str,
        returncode: int | None,
        reason: str = "",
    ) -> None:
        if self.audit_logger is not None:
            self.audit_logger.log(
                operation=operation,
                argv=argv,
                outcome=outcome,
                returncode=returncode,
                reason=reason,
            )

    def list_windows(self, detailed: bool = False) -> WindowListing:
        """List windows; ``detailed`` adds geometry and WM_CLASS (``-G -x``)."""
        args = command_builder.LIST_WINDOWS_DETAILED_ARGS if detailed else command_builder.LIST_WINDOWS_ARGS
        stdout = self._run("list_windows", args)
        listing = parse_window_listing(stdout, strict=self.strict_listing, detailed=detailed)
        self.logger.debug(
            "Listed %d windows (%d malformed lines skipped)",
            len(listing.windows),
            len(listing.malformed),
        )
        return listing

    def list_desktops(self) -> list[DesktopRecord]:
        stdout = self._run("list_desktops", command_builder.LIST_DESKTOPS_ARGS)
        return parse_desktop_listing(stdout)

    def current_desktop(self) -> DesktopRecord:
        for desktop in self.list_desktops():
            if desktop.current:
                return desktop
        raise NotFound("wmctrl reported no current desktop")

    def wm_info(self) -> WindowManagerInfo:
        stdout = self._run("wm_info", command_builder.WM_INFO_ARGS)
        return parse_wm_info(stdout)

    def transform(self, identifier: str, spec: TransformSpec) -> None:
        self._run("transform", command_builder.transform_args(identifier, spec))

    def close(self, identifier: str) -> None:
        self._run("close", command_builder.close_args(identifier))

    def change_state(self, identifier: str, change: StateChange) -> None:
        self._run("change_state", command_builder.change_state_args(identifier, change))

    def set_title(self, identifier: str, title: str) -> None:
        self._run("set_title", command_builder.set_title_args(identifier, title))

    def set_icon_title(self, identifier: str, title: str) -> None:
        self._run("set_icon_title", command_builder.set_icon_title_args(identifier, title))

    def set_both_titles(self, identifier: str, title: str) -> None:
        self._run("set_both_titles", command_builder.set_both_titles_args(identifier, title))

    def move_to_desktop(self, identifier: str, desktop: int) -> None:
        self._run("move_to_desktop", command_builder.move_to_desktop_args(identifier, desktop))

    def activate(self, identifier: str) -> None:
        self._run("activate", command_builder.activate_args(identifier))

    def raise_window(self, identifier: str) -> None:
        self._run("raise_window", command_builder.raise_args(identifier))
