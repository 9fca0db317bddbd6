"""CLI tests with a scripted wmctrl."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from core.config import WmctrlSettings
from ui.cli import cli, commands

runner = CliRunner()


@pytest.fixture
def cli_context(monkeypatch: pytest.MonkeyPatch, controller) -> commands.CliContext:
    ctx = commands.CliContext(settings=WmctrlSettings(), controller=controller)
    monkeypatch.setattr(commands, "load_context", lambda config_path: ctx)
    return ctx


def test_list(cli_context, fake_runner) -> None:
    fake_runner.queue("0x01400003  0 12345  localhost My Cool - Window\nbroken\n")

    result = runner.invoke(cli.app, ["list"])

    assert result.exit_code == 0
    assert "0x01400003" in result.output
    assert "My Cool - Window" in result.output
    assert "skipped" in result.output


def test_list_json(cli_context, fake_runner) -> None:
    fake_runner.queue("0x1 2 30 host Title here\n")

    result = runner.invoke(cli.app, ["list", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output) == [
        {
            "identifier": "0x1",
            "desktop_index": 2,
            "process_id": 30,
            "host": "host",
            "title": "Title here",
            "geometry": None,
            "wm_class": None,
        }
    ]


def test_find_no_match(cli_context, fake_runner) -> None:
    fake_runner.queue("0x1 0 1 host Terminal\n")
    result = runner.invoke(cli.app, ["find", "Firefox"])
    assert result.exit_code == 1


def test_move(cli_context, fake_runner) -> None:
    result = runner.invoke(cli.app, ["move", "0x1", "--x", "10", "--width", "800"])
    assert result.exit_code == 0
    assert fake_runner.calls == [["wmctrl", "-i", "-r", "0x1", "-e", "0,10,-1,800,-1"]]


def test_state(cli_context, fake_runner) -> None:
    result = runner.invoke(cli.app, ["state", "0x1", "add", "maximized_vert", "maximized_horz"])
    assert result.exit_code == 0
    assert fake_runner.calls == [["wmctrl", "-i", "-r", "0x1", "-b", "add,maximized_vert,maximized_horz"]]


def test_title_both(cli_context, fake_runner) -> None:
    result = runner.invoke(cli.app, ["title", "0x1", "Hello world", "--which", "both"])
    assert result.exit_code == 0
    assert fake_runner.calls == [["wmctrl", "-i", "-r", "0x1", "-T", "Hello world"]]


def test_tool_failure_exits_non_zero(cli_context, fake_runner) -> None:
    fake_runner.queue(code=1, stderr="Cannot open display.")
    result = runner.invoke(cli.app, ["close", "0x1"])
    assert result.exit_code == 1
    assert "Cannot open display." in result.output


def test_desktops_and_info(cli_context, fake_runner) -> None:
    fake_runner.queue("0  * DG: 1920x1080  VP: 0,0  WA: 0,0 1920x1080  Main\n")
    fake_runner.queue("Name: i3\n")

    desktops = runner.invoke(cli.app, ["desktops"])
    info = runner.invoke(cli.app, ["info"])

    assert "Main" in desktops.output
    assert json.loads(info.output)["name"] == "i3"


def test_config_show(cli_context) -> None:
    result = runner.invoke(cli.app, ["config-show"])
    assert result.exit_code == 0
    assert json.loads(result.output)["executable"] == "wmctrl"


def test_list_detailed_json(cli_context, fake_runner) -> None:
    fake_runner.queue("0x1 0 30 -5 0 800 600 xterm.XTerm host Shell\n")

    result = runner.invoke(cli.app, ["list", "--detailed", "--json"])

    assert result.exit_code == 0
    assert fake_runner.calls == [["wmctrl", "-l", "-p", "-G", "-x"]]
    record = json.loads(result.output)[0]
    assert record["geometry"] == {"x": -5, "y": 0, "width": 800, "height": 600}
    assert record["wm_class"] == "xterm.XTerm"


def test_move_negative_position_is_forwarded(cli_context, fake_runner) -> None:
    result = runner.invoke(cli.app, ["move", "0x1", "--x", "-5"])
    assert result.exit_code == 0
    assert fake_runner.calls == [["wmctrl", "-i", "-r", "0x1", "-e", "0,-5,-1,-1,-1"]]


def test_move_invalid_size_exits_non_zero(cli_context, fake_runner) -> None:
    result = runner.invoke(cli.app, ["move", "0x1", "--width", "-5"])
    assert result.exit_code == 1
    assert not isinstance(result.exception, ValidationError)
    assert "error:" in result.output
    assert fake_runner.calls == []


def test_missing_config_file_exits_non_zero(tmp_path: Path) -> None:
    result = runner.invoke(cli.app, ["--config", str(tmp_path / "absent.yaml"), "config-show"])
    assert result.exit_code == 1
    assert "invalid configuration" in result.output


@pytest.mark.parametrize(
    "content",
    ["timeout_seconds: -3\n", "- not\n- a mapping\n", "executable: [unclosed\n"],
)
def test_bad_config_file_exits_non_zero(tmp_path: Path, content: str) -> None:
    config = tmp_path / "wm.yaml"
    config.write_text(content, encoding="utf-8")

    result = runner.invoke(cli.app, ["--config", str(config), "config-show"])

    assert result.exit_code == 1
    assert "invalid configuration" in result.output
