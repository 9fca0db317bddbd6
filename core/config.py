"""Configuration loading for the wmctrl wrapper."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "config" / "default.yaml"


class WmctrlSettings(BaseModel):
    """Effective runtime settings. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    executable: str = "wmctrl"
    timeout_seconds: float | None = Field(default=None, gt=0)
    strict_listing: bool = False
    audit_log_path: Path | None = None


def read_settings_file(path: Path) -> dict[str, Any]:
    """Read a flat YAML mapping of settings; a missing file reads as empty."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {path}")
    return data


def load_settings(
    config_path: Path | None = None,
    defaults_path: Path = DEFAULT_CONFIG_PATH,
) -> WmctrlSettings:
    """Overlay an optional user file on the bundled defaults."""
    values = read_settings_file(defaults_path)
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        values.update(read_settings_file(config_path))
    return WmctrlSettings.model_validate(values)
