"""SVG icon directory to Python component package generator."""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Set

from ..models.icon import GenerationReport, IconComponent, IconSource
from ..naming.identifiers import SVG_EXTENSION, derive_names
from .template import (
    SvgStructureError,
    create_component_source,
    create_index_entry,
    strip_document,
)

INDEX_FILE_NAME = "__init__.py"
INDEX_HEADER = '"""Lucide icon components. Generated from the SVG sources; do not edit."""\n\n'


class DuplicateIconError(ValueError):
    """Raised when two icon files map onto the same component or module name."""


def read_svg(path: Path) -> str:
    """Read an SVG source exactly as stored, without newline translation."""
    with open(path, "r", encoding="utf-8", newline="") as handle:
        return handle.read()


def find_duplicates(components: List[IconComponent]) -> List[str]:
    """Return one message per component or module name claimed more than once."""
    errors: List[str] = []
    for attribute, label in (("pascal_name", "component"), ("module_name", "module")):
        claims: Dict[str, List[str]] = defaultdict(list)
        for component in components:
            claims[getattr(component, attribute)].append(component.source_file)
        for name, owners in sorted(claims.items()):
            if len(owners) > 1:
                errors.append(f"Duplicate {label} name {name!r}: {', '.join(owners)}")
    return errors


class Generator:
    def __init__(
        self,
        source_dir: Path,
        output_dir: Path,
        sentinel_name: str = INDEX_FILE_NAME,
    ) -> None:
        self.source_dir = source_dir
        self.output_dir = output_dir
        self.sentinel_name = sentinel_name

    @property
    def index_path(self) -> Path:
        return self.output_dir / INDEX_FILE_NAME

    @property
    def sentinel_path(self) -> Path:
        return self.output_dir / self.sentinel_name

    def is_generated(self) -> bool:
        return self.sentinel_path.exists()

    def fetch_svg_paths(self) -> List[Path]:
        """List ``.svg`` files in the source directory, sorted by filename."""
        if not self.source_dir.is_dir():
            raise FileNotFoundError(f"Missing icon source directory: {self.source_dir}")
        return sorted(
            (path for path in self.source_dir.iterdir()
             if path.is_file() and path.name.endswith(SVG_EXTENSION)),
            key=lambda path: path.name,
        )

    def load_source(self, path: Path) -> IconSource:
        names = derive_names(path.name)
        return IconSource(
            file_name=path.name,
            pascal_name=names.pascal_name,
            snake_name=names.snake_name,
            module_name=names.module_name,
            contents=read_svg(path),
        )

    def fetch_sources(self) -> List[IconSource]:
        return [self.load_source(path) for path in self.fetch_svg_paths()]

    def build_component(self, source: IconSource) -> IconComponent:
        try:
            markup = strip_document(source.contents)
            contents = create_component_source(markup, source.pascal_name)
        except SvgStructureError as exc:
            raise SvgStructureError(f"{source.file_name}: {exc}") from exc
        return IconComponent(
            source_file=source.file_name,
            pascal_name=source.pascal_name,
            module_name=source.module_name,
            index_entry=create_index_entry(source.module_name, source.pascal_name),
            file_path=str(self.output_dir / f"{source.module_name}.py"),
            contents=contents,
        )

    def build_components(self, sources: List[IconSource]) -> List[IconComponent]:
        return [self.build_component(source) for source in sources]

    def build_index(self, components: List[IconComponent]) -> str:
        """Render the index module re-exporting every component."""
        ordered = sorted(components, key=lambda component: component.module_name)
        lines = [INDEX_HEADER]
        lines.extend(component.index_entry for component in ordered)
        lines.append("\n__all__ = [\n")
        lines.extend(f'    "{component.pascal_name}",\n' for component in ordered)
        lines.append("]\n")
        return "".join(lines)

    def generate(self, force: bool = False) -> GenerationReport:
        """Write every component module and the index, unless already generated.

        Component files are written before the index so an interrupted run
        leaves no sentinel behind when the index is the sentinel. Modules left
        over from icons no longer in the source directory are deleted.
        """
        if self.is_generated() and not force:
            return GenerationReport(
                skipped=True,
                index_path=str(self.index_path),
                sentinel_path=str(self.sentinel_path),
            )

        sources = self.fetch_sources()
        components = self.build_components(sources)
        duplicates = find_duplicates(components)
        if duplicates:
            raise DuplicateIconError("; ".join(duplicates))

        index_contents = self.build_index(components)
        written: List[str] = []
        self.output_dir.mkdir(parents=True, exist_ok=True)
        removed = self._remove_stale_modules(
            {Path(component.file_path).name for component in components} | {INDEX_FILE_NAME}
        )
        for component in components:
            self._write(Path(component.file_path), component.contents)
            written.append(component.file_path)
        self._write(self.index_path, index_contents)
        written.append(str(self.index_path))

        return GenerationReport(
            skipped=False,
            source_count=len(sources),
            index_path=str(self.index_path),
            sentinel_path=str(self.sentinel_path),
            written_files=written,
            removed_files=removed,
            components=[component.pascal_name for component in components],
        )

    def _remove_stale_modules(self, keep: Set[str]) -> List[str]:
        removed: List[str] = []
        for path in sorted(self.output_dir.glob("*.py")):
            if path.name not in keep:
                path.unlink()
                removed.append(str(path))
        return removed

    def _write(self, path: Path, contents: str) -> None:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(contents)
