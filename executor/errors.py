"""Error taxonomy for wmctrl invocations and listing parsing."""

from __future__ import annotations


class WmctrlError(RuntimeError):
    """Base class for every failure raised by this package."""


class ToolUnavailable(WmctrlError):
    """The wmctrl executable could not be located or launched."""

    def __init__(self, executable: str, cause: BaseException | None = None) -> None:
        self.executable = executable
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Cannot launch '{executable}'{detail}")


class ToolFailed(WmctrlError):
    """The tool ran and exited non-zero. ``stderr`` is kept verbatim."""

    def __init__(self, argv: list[str], returncode: int | None, stderr: str) -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        message = f"{' '.join(self.argv)} exited with status {returncode}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class ToolTimeout(ToolFailed):
    """The tool did not exit within the configured timeout."""

    def __init__(self, argv: list[str], timeout: float, stderr: str = "") -> None:
        self.timeout = timeout
        super().__init__(argv, None, stderr)
        self.args = (f"{' '.join(self.argv)} timed out after {timeout:g}s",)


class MalformedListing(WmctrlError, ValueError):
    """A listing line could not be parsed into a record."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")


class NotFound(WmctrlError, LookupError):
    """No record matched a lookup."""
