"""Typer command handlers."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from pathlib import Path
from typing import Any

import typer
import yaml
from pydantic import ValidationError

from core.config import WmctrlSettings, load_settings
from executor.errors import WmctrlError
from os_controller.window_manager import WindowManager
from os_controller.wmctrl_controller import WmctrlController
from window_model.state import Action, Property, StateChange
from window_model.transformation import TransformSpec
from window_model.window import WindowRecord


@dataclass
class CliContext:
    """Settings and controller shared by one CLI invocation."""

    settings: WmctrlSettings
    controller: WmctrlController

    @property
    def manager(self) -> WindowManager:
        return WindowManager(self.controller)


CONFIG_ERRORS = (OSError, ValueError, yaml.YAMLError)


def load_context(config_path: Path | None) -> CliContext:
    settings = load_settings(config_path)
    return CliContext(settings=settings, controller=WmctrlController.from_settings(settings))


def _reports_errors(func: Callable[..., None]) -> Callable[..., None]:
    """Turn wrapper and argument validation errors into a message on stderr and exit status 1."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        try:
            func(*args, **kwargs)
        except (WmctrlError, ValidationError) as exc:
            typer.echo(f"error: {exc}", err=True)
            raise typer.Exit(code=1) from exc

    return wrapper


def _format_window(window: WindowRecord) -> str:
    return f"{window.identifier}  {window.desktop_index:>2}  {window.process_id:>6}  {window.host}  {window.title}"


@_reports_errors
def list_windows(ctx: CliContext, as_json: bool = False, detailed: bool = False) -> None:
    """Print the current window listing."""
    listing = ctx.controller.list_windows(detailed=detailed)
    if as_json:
        typer.echo(json.dumps([w.model_dump() for w in listing], indent=2))
    else:
        for window in listing:
            typer.echo(_format_window(window))
    for problem in listing.malformed:
        typer.echo(f"warning: skipped {problem}", err=True)


@_reports_errors
def find(ctx: CliContext, title: str, exact: bool = False, ignore_case: bool = False) -> None:
    matches = ctx.manager.find_windows(title, exact=exact, ignore_case=ignore_case)
    if not matches:
        typer.echo(f"No window matches {title!r}", err=True)
        raise typer.Exit(code=1)
    for window in matches:
        typer.echo(_format_window(window))


@_reports_errors
def move(ctx: CliContext, window_id: str, x: int, y: int, width: int, height: int) -> None:
    ctx.controller.transform(window_id, TransformSpec(x=x, y=y, width=width, height=height))


@_reports_errors
def close(ctx: CliContext, window_id: str) -> None:
    ctx.controller.close(window_id)


@_reports_errors
def change_state(
    ctx: CliContext,
    window_id: str,
    action: Action,
    prop: Property,
    second: Property | None = None,
) -> None:
    change = StateChange(action=action, property=prop, second_property=second)
    ctx.controller.change_state(window_id, change)


@_reports_errors
def set_title(ctx: CliContext, window_id: str, title: str, which: str = "name") -> None:
    setters = {
        "name": ctx.controller.set_title,
        "icon": ctx.controller.set_icon_title,
        "both": ctx.controller.set_both_titles,
    }
    if which not in setters:
        raise typer.BadParameter(f"expected one of {', '.join(setters)}", param_hint="--which")
    setters[which](window_id, title)


@_reports_errors
def move_to_desktop(ctx: CliContext, window_id: str, desktop: int) -> None:
    ctx.controller.move_to_desktop(window_id, desktop)


@_reports_errors
def activate(ctx: CliContext, window_id: str) -> None:
    ctx.controller.activate(window_id)


@_reports_errors
def raise_window(ctx: CliContext, window_id: str) -> None:
    ctx.controller.raise_window(window_id)


@_reports_errors
def desktops(ctx: CliContext) -> None:
    for desktop in ctx.controller.list_desktops():
        marker = "*" if desktop.current else "-"
        typer.echo(f"{desktop.index:>2} {marker} {desktop.geometry}  {desktop.name}")


@_reports_errors
def wm_info(ctx: CliContext) -> None:
    typer.echo(json.dumps(ctx.controller.wm_info().model_dump(), indent=2))


def config_show(ctx: CliContext) -> None:
    """Show effective runtime config."""
    typer.echo(json.dumps(ctx.settings.model_dump(mode="json"), indent=2))
