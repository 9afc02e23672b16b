"""Structured JSONL logging for generator runs."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


def log_event(
    log_path: Path,
    event_type: str,
    payload: Dict[str, Any],
    run_id: Optional[str] = None,
) -> None:
    """Append a structured event to a JSONL log."""
    record = {
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "event_type": event_type,
        "run_id": run_id,
        "payload": payload,
    }
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(record, sort_keys=True, ensure_ascii=True) + "\n")


def read_events(log_path: Path, run_id: Optional[str] = None) -> List[Dict[str, Any]]:
    """Load logged events, optionally only those of one run."""
    if not log_path.exists():
        return []
    events = []
    with log_path.open("r", encoding="utf-8") as handle:
        for line in handle:
            if not line.strip():
                continue
            record = json.loads(line)
            if run_id is None or record.get("run_id") == run_id:
                events.append(record)
    return events
