"""Shared fixtures: a scripted stand-in for the wmctrl process."""

from __future__ import annotations

import pytest

from os_controller.wmctrl_controller import WmctrlController


class FakeRunner:
    """Records argv lists and replays scripted (code, stdout, stderr) results."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.timeouts: list[float | None] = []
        self.results: list[tuple[int, str, str]] = []

    def queue(self, stdout: str = "", code: int = 0, stderr: str = "") -> None:
        self.results.append((code, stdout, stderr))

    def __call__(self, argv: list[str], timeout: float | None = None) -> tuple[int, str, str]:
        self.calls.append(list(argv))
        self.timeouts.append(timeout)
        if self.results:
            return self.results.pop(0)
        return 0, "", ""


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def controller(fake_runner: FakeRunner) -> WmctrlController:
    ctl = WmctrlController()
    ctl.runner = fake_runner
    return ctl
