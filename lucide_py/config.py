"""Runtime configuration loader."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .models.config import Config
from .render.generator import INDEX_FILE_NAME


def _require_dir(path: Path, label: str) -> None:
    if not path.is_dir():
        raise FileNotFoundError(f"Missing {label}: {path}")


def load_config(
    project_root: Optional[Path] = None,
    source_dir: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    sentinel_name: str = INDEX_FILE_NAME,
) -> Config:
    """Load configuration with canonical defaults and validate paths."""
    root = project_root or Path(__file__).resolve().parents[1]
    source_dir = source_dir or root / "assets" / "icons"
    output_dir = output_dir or root / "lucide_py" / "icons"
    runs_dir = root / "runs"

    _require_dir(source_dir, "icon_source_dir")

    return Config(
        project_root=str(root),
        source_dir=str(source_dir),
        output_dir=str(output_dir),
        sentinel_name=sentinel_name,
        runs_dir=str(runs_dir),
        log_path=str(runs_dir / "generate_log.jsonl"),
    )
