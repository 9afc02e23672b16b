"""Icon source directory validation."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..models.icon import IconComponent
from ..naming.identifiers import SVG_EXTENSION, derive_names
from ..render.generator import find_duplicates, read_svg
from ..render.template import (
    create_component_source,
    create_index_entry,
    strip_document,
)


def validate_icon_sources(source_dir: Path) -> List[str]:
    """Return a list of validation errors; empty list means pass."""
    if not source_dir.is_dir():
        return [f"Missing icon source directory: {source_dir}"]

    errors: List[str] = []
    components: List[IconComponent] = []
    svg_paths = sorted(
        path for path in source_dir.iterdir()
        if path.is_file() and path.name.endswith(SVG_EXTENSION)
    )
    if not svg_paths:
        errors.append(f"No {SVG_EXTENSION} files found in: {source_dir}")

    for path in svg_paths:
        try:
            names = derive_names(path.name)
            markup = strip_document(read_svg(path))
            contents = create_component_source(markup, names.pascal_name)
        except (ValueError, UnicodeDecodeError) as exc:
            errors.append(f"{path.name}: {exc}")
            continue
        components.append(
            IconComponent(
                source_file=path.name,
                pascal_name=names.pascal_name,
                module_name=names.module_name,
                index_entry=create_index_entry(names.module_name, names.pascal_name),
                file_path=f"{names.module_name}.py",
                contents=contents,
            )
        )

    errors.extend(find_duplicates(components))
    return errors
