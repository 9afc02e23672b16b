"""Base model for lucide-py contracts."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class LucideBaseModel(BaseModel):
    """Rejects unknown fields; serializes to sorted, ASCII-only JSON."""

    model_config = ConfigDict(extra="forbid")

    def to_json(self) -> str:
        return json.dumps(self.model_dump(), sort_keys=True, ensure_ascii=True)

    def write_json(self, path: Path) -> Path:
        """Write ``to_json()`` to ``path``, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.to_json())
        return path
