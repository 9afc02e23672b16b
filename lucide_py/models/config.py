"""Config model."""

from __future__ import annotations

from pydantic import Field, constr

from .base import LucideBaseModel

NonEmptyStr = constr(min_length=1)


class Config(LucideBaseModel):
    project_root: NonEmptyStr = Field(..., description="Project root directory")
    source_dir: NonEmptyStr = Field(..., description="Directory holding the SVG icon sources")
    output_dir: NonEmptyStr = Field(..., description="Package directory receiving generated modules")
    sentinel_name: NonEmptyStr = Field(..., description="Output file whose presence marks a finished run")
    runs_dir: NonEmptyStr = Field(..., description="Runs output directory")
    log_path: NonEmptyStr = Field(..., description="JSONL event log path")
