"""CLI entrypoint for wmctrl-kit."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from ui.cli import commands
from window_model.state import Action, Property

app = typer.Typer(help="Inspect and control windows through wmctrl")


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every wmctrl call"),
) -> None:
    """Load configuration shared by every command."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        ctx.obj = commands.load_context(config)
    except commands.CONFIG_ERRORS as exc:
        typer.echo(f"error: invalid configuration: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("list")
def list_cmd(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print records as JSON"),
    detailed: bool = typer.Option(False, "--detailed", "-d", help="Include geometry and WM_CLASS"),
) -> None:
    """List managed windows."""
    commands.list_windows(ctx.obj, as_json=as_json, detailed=detailed)


@app.command("find")
def find_cmd(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Title or title fragment"),
    exact: bool = typer.Option(False, "--exact", help="Require an exact title match"),
    ignore_case: bool = typer.Option(False, "--ignore-case", "-i"),
) -> None:
    """Find windows by title."""
    commands.find(ctx.obj, title=title, exact=exact, ignore_case=ignore_case)


@app.command("move")
def move_cmd(
    ctx: typer.Context,
    window_id: str = typer.Argument(..., help="Window id, e.g. 0x01400003"),
    x: int = typer.Option(-1, help="Left edge, -1 keeps it"),
    y: int = typer.Option(-1, help="Top edge, -1 keeps it"),
    width: int = typer.Option(-1, help="Width, -1 keeps it"),
    height: int = typer.Option(-1, help="Height, -1 keeps it"),
) -> None:
    """Move and/or resize a window."""
    commands.move(ctx.obj, window_id=window_id, x=x, y=y, width=width, height=height)


@app.command("close")
def close_cmd(ctx: typer.Context, window_id: str = typer.Argument(...)) -> None:
    """Close a window gracefully."""
    commands.close(ctx.obj, window_id=window_id)


@app.command("state")
def state_cmd(
    ctx: typer.Context,
    window_id: str = typer.Argument(...),
    action: Action = typer.Argument(..., case_sensitive=False),
    prop: Property = typer.Argument(..., metavar="PROPERTY", case_sensitive=False),
    second: Optional[Property] = typer.Argument(None, metavar="[SECOND]", case_sensitive=False),
) -> None:
    """Add, remove or toggle window state hints."""
    commands.change_state(ctx.obj, window_id=window_id, action=action, prop=prop, second=second)


@app.command("title")
def title_cmd(
    ctx: typer.Context,
    window_id: str = typer.Argument(...),
    title: str = typer.Argument(...),
    which: str = typer.Option("name", help="name, icon or both"),
) -> None:
    """Set the window title and/or icon title."""
    commands.set_title(ctx.obj, window_id=window_id, title=title, which=which)


@app.command("desktop")
def desktop_cmd(
    ctx: typer.Context,
    window_id: str = typer.Argument(...),
    desktop: int = typer.Argument(..., help="Target desktop index"),
) -> None:
    """Move a window to another desktop."""
    commands.move_to_desktop(ctx.obj, window_id=window_id, desktop=desktop)


@app.command("activate")
def activate_cmd(ctx: typer.Context, window_id: str = typer.Argument(...)) -> None:
    """Bring a window to the current desktop and raise it."""
    commands.activate(ctx.obj, window_id=window_id)


@app.command("raise")
def raise_cmd(ctx: typer.Context, window_id: str = typer.Argument(...)) -> None:
    """Switch to a window's desktop and raise it."""
    commands.raise_window(ctx.obj, window_id=window_id)


@app.command("desktops")
def desktops_cmd(ctx: typer.Context) -> None:
    """List virtual desktops."""
    commands.desktops(ctx.obj)


@app.command("info")
def info_cmd(ctx: typer.Context) -> None:
    """Show window manager information."""
    commands.wm_info(ctx.obj)


@app.command("config-show")
def config_show_cmd(ctx: typer.Context) -> None:
    """Show effective configuration."""
    commands.config_show(ctx.obj)


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
