"""Icon source and generated component contracts."""

from __future__ import annotations

from typing import List

from pydantic import Field, constr

from .base import LucideBaseModel

NonEmptyStr = constr(min_length=1)


class IconSource(LucideBaseModel):
    file_name: NonEmptyStr = Field(..., description="SVG filename, e.g. arrow-up-circle.svg")
    pascal_name: NonEmptyStr = Field(..., description="Public component name")
    snake_name: NonEmptyStr = Field(..., description="Unescaped snake_case name")
    module_name: NonEmptyStr = Field(..., description="Module name after reserved-word escaping")
    contents: str = Field(..., description="Raw SVG document as stored on disk")


class IconComponent(LucideBaseModel):
    source_file: NonEmptyStr = Field(..., description="SVG filename the component was built from")
    pascal_name: NonEmptyStr
    module_name: NonEmptyStr
    index_entry: NonEmptyStr = Field(..., description="Re-export line for the index module")
    file_path: NonEmptyStr = Field(..., description="Path of the generated component module")
    contents: NonEmptyStr = Field(..., description="Generated component module source")


class GenerationReport(LucideBaseModel):
    skipped: bool = False
    source_count: int = 0
    index_path: NonEmptyStr
    sentinel_path: NonEmptyStr
    written_files: List[str] = Field(default_factory=list)
    removed_files: List[str] = Field(default_factory=list)
    components: List[str] = Field(default_factory=list)
