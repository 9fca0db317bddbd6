"""Audit logger tests."""

from __future__ import annotations

import json
from pathlib import Path

from core.audit_logger import AuditLogger


def test_audit_logger_appends_json_lines(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "audit.jsonl"
    audit = AuditLogger(path)

    audit.log(operation="close", argv=["wmctrl", "-i", "-c", "0x1"], outcome="success", returncode=0)
    audit.log(operation="close", argv=["wmctrl", "-i", "-c", "0x1"], outcome="failed", returncode=1, reason="gone")

    events = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert len(events) == 2
    assert events[0]["argv_hash"] == events[1]["argv_hash"]
    assert events[1]["reason"] == "gone"
    assert "timestamp" in events[0]
