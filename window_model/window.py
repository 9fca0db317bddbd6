"""Window records parsed from ``wmctrl -l -p`` (optionally ``-G -x``)."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict

from executor.errors import MalformedListing
from window_model.transformation import TransformSpec


class WindowRecord(BaseModel):
    """Point-in-time snapshot of one managed window.

    The record is not bound to the live window. Any operation that uses its
    identifier can fail with ToolFailed once the window has been closed or
    recreated, and callers are expected to tolerate that. ``geometry`` and
    ``wm_class`` are only filled by a detailed listing.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str
    desktop_index: int
    process_id: int
    host: str
    title: str
    geometry: TransformSpec | None = None
    wm_class: str | None = None


@dataclass
class WindowListing:
    """Ordered windows of one listing plus the lines that were skipped."""

    windows: list[WindowRecord] = field(default_factory=list)
    malformed: list[MalformedListing] = field(default_factory=list)

    def __iter__(self) -> Iterator[WindowRecord]:
        return iter(self.windows)

    def __len__(self) -> int:
        return len(self.windows)

    def __getitem__(self, index: int) -> WindowRecord:
        return self.windows[index]

    def __bool__(self) -> bool:
        return bool(self.windows)
