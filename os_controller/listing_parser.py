"""Parsers for the text wmctrl prints on stdout."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from executor.errors import MalformedListing
from window_model.desktop import DesktopRecord, WindowManagerInfo
from window_model.transformation import TransformSpec
from window_model.window import WindowListing, WindowRecord

logger = logging.getLogger("wm.listing")

_WINDOW_ID_RE = re.compile(r"^0x[0-9a-fA-F]+$")
_DESKTOP_RE = re.compile(
    r"^(?P<index>-?\d+)\s+(?P<marker>[*-])\s+"
    r"DG:\s*(?P<geometry>\S+)\s+"
    r"VP:\s*(?P<viewport>\S+)\s+"
    r"WA:\s*(?P<wa_origin>\S+)(?:\s+(?P<wa_size>\d+x\d+))?"
    r"(?:\s+(?P<name>.*))?$"
)

# id desktop pid host [title]
_BASIC_FIELDS = 4
# id desktop pid x y width height class host [title]
_DETAILED_FIELDS = 9


def _output_lines(output: str) -> Iterator[tuple[int, str]]:
    """Yield numbered non-blank records. Only ``\\n`` ends a record."""
    for number, line in enumerate(output.split("\n"), start=1):
        line = line.rstrip("\r")
        if line.strip():
            yield number, line


def _to_int(value: str, name: str, line_number: int, line: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise MalformedListing(line_number, line, f"{name} must be an integer, got {value!r}") from None


def parse_window_line(line: str, line_number: int = 1, detailed: bool = False) -> WindowRecord:
    """Parse one ``wmctrl -l -p`` line, or ``-l -p -G -x`` when ``detailed``.

    The leading fields are whitespace-delimited tokens. Everything after
    the last of them is the title, kept verbatim including trailing
    whitespace.
    """
    expected = _DETAILED_FIELDS if detailed else _BASIC_FIELDS
    parts = line.lstrip().split(None, expected)
    if len(parts) < expected:
        raise MalformedListing(line_number, line, f"expected at least {expected} fields, got {len(parts)}")
    title = parts[expected] if len(parts) > expected else ""
    identifier = parts[0]
    if not _WINDOW_ID_RE.match(identifier):
        raise MalformedListing(line_number, line, f"invalid window id {identifier!r}")
    desktop_index = _to_int(parts[1], "desktop", line_number, line)
    process_id = _to_int(parts[2], "pid", line_number, line)

    if not detailed:
        return WindowRecord(
            identifier=identifier,
            desktop_index=desktop_index,
            process_id=process_id,
            host=parts[3],
            title=title,
        )

    x, y, width, height = (
        _to_int(value, name, line_number, line)
        for value, name in zip(parts[3:7], ("x", "y", "width", "height"))
    )
    if width < 0 or height < 0:
        raise MalformedListing(line_number, line, "width and height must not be negative")
    wm_class = parts[7]
    return WindowRecord(
        identifier=identifier,
        desktop_index=desktop_index,
        process_id=process_id,
        host=parts[8],
        title=title,
        geometry=TransformSpec(x=x, y=y, width=width, height=height),
        wm_class=None if wm_class == "N/A" else wm_class,
    )


def parse_window_listing(output: str, strict: bool = False, detailed: bool = False) -> WindowListing:
    """Parse full listing output, skipping malformed lines unless ``strict``."""
    listing = WindowListing()
    for number, line in _output_lines(output):
        try:
            listing.windows.append(parse_window_line(line, number, detailed=detailed))
        except MalformedListing as exc:
            if strict:
                raise
            logger.warning("Skipping malformed listing line: %s", exc)
            listing.malformed.append(exc)
    return listing


def parse_desktop_listing(output: str) -> list[DesktopRecord]:
    """Parse ``wmctrl -d`` output. Unrecognised lines are logged and skipped."""
    desktops: list[DesktopRecord] = []
    for number, line in _output_lines(output):
        match = _DESKTOP_RE.match(line.strip())
        if not match:
            logger.warning("Skipping malformed desktop line %d: %r", number, line)
            continue
        desktops.append(
            DesktopRecord(
                index=int(match.group("index")),
                current=match.group("marker") == "*",
                geometry=match.group("geometry"),
                viewport=match.group("viewport"),
                work_area=" ".join(
                    part for part in (match.group("wa_origin"), match.group("wa_size")) if part
                ),
                name=(match.group("name") or "").strip(),
            )
        )
    return desktops


def parse_wm_info(output: str) -> WindowManagerInfo:
    """Parse the ``Key: value`` lines printed by ``wmctrl -m``."""
    raw: dict[str, str] = {}
    for line in output.splitlines():
        key, sep, value = line.partition(":")
        if not sep:
            continue
        raw[key.strip()] = value.strip()

    pid_text = raw.get("PID", "")
    showing = next(
        (value for key, value in raw.items() if "showing the desktop" in key),
        None,
    )
    wm_class = raw.get("Class")
    return WindowManagerInfo(
        name=raw.get("Name", ""),
        wm_class=None if wm_class in (None, "N/A") else wm_class,
        pid=int(pid_text) if pid_text.isdigit() else None,
        showing_desktop=None if showing is None else showing.upper() == "ON",
        raw=raw,
    )
