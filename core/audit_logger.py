"""Structured JSONL audit logger for wmctrl invocations."""

from __future__ import annotations

import hashlib
import json
import logging
from datetime import UTC, datetime
from pathlib import Path


class AuditLogger:
    """Writes one JSON line per invocation."""

    def __init__(self, log_path: Path) -> None:
        self.log_path = log_path
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger("wm.audit")

    @staticmethod
    def _hash_argv(argv: list[str]) -> str:
        payload = json.dumps(argv).encode("utf-8")
        return hashlib.sha256(payload).hexdigest()

    def log(
        self,
        operation: str,
        argv: list[str],
        outcome: str,
        returncode: int | None = None,
        reason: str = "",
    ) -> None:
        """Append one JSONL audit event."""
        event = {
            "timestamp": datetime.now(UTC).isoformat(),
            "operation": operation,
            "argv_hash": self._hash_argv(argv),
            "outcome": outcome,
            "returncode": returncode,
            "reason": reason,
        }
        line = json.dumps(event, ensure_ascii=True)
        with self.log_path.open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")
        self.logger.info(line)
