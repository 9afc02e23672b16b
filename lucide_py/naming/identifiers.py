"""Icon filename to Python identifier rules.

Every icon filename yields two names:

- a PascalCase component name, the public symbol re-exported by the index
  (``arrow-up-circle.svg`` -> ``ArrowUpCircle``);
- a snake_case module name, the generated file's stem
  (``arrow-up-circle.svg`` -> ``arrow_up_circle``).

Module names that collide with a Python keyword (compared case-insensitively)
get a trailing underscore, e.g. ``import.svg`` -> ``import_``. Component
names only collide with ``None``, ``True`` and ``False``, which get the same
marker (``none.svg`` -> ``None_``).
"""

from __future__ import annotations

import re
from typing import FrozenSet, NamedTuple

SVG_EXTENSION = ".svg"
RESERVED_MARKER = "_"

# Python 3.12 hard and soft keywords, lowercased. Fixed so output does not
# depend on the running interpreter.
RESERVED_IDENTIFIERS: FrozenSet[str] = frozenset({
    "false", "none", "true", "and", "as", "assert", "async", "await",
    "break", "class", "continue", "def", "del", "elif", "else", "except",
    "finally", "for", "from", "global", "if", "import", "in", "is",
    "lambda", "nonlocal", "not", "or", "pass", "raise", "return", "try",
    "while", "with", "yield",
    "_", "case", "match", "type",
})

# Keywords spelled with a leading capital; PascalCase names can hit these.
CAPITALIZED_KEYWORDS: FrozenSet[str] = frozenset({"False", "None", "True"})

_ICON_FILENAME_RE = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*\.svg$")


class IconNameError(ValueError):
    """Raised when a filename cannot be turned into icon identifiers."""


class IconNames(NamedTuple):
    pascal_name: str
    snake_name: str
    module_name: str


def is_valid_icon_filename(file_name: str) -> bool:
    """Check for lowercase alphanumeric words joined by hyphens, ending in .svg."""
    return bool(_ICON_FILENAME_RE.match(file_name))


def _uppercase_first(word: str) -> str:
    if not word:
        return word
    return word[0].upper() + word[1:]


def to_pascal_case(file_name: str) -> str:
    """Drop the extension and join the hyphen-separated words capitalized."""
    if file_name.endswith(SVG_EXTENSION):
        file_name = file_name[: -len(SVG_EXTENSION)]
    return "".join(_uppercase_first(word) for word in file_name.split("-"))


def to_snake_case(file_name: str) -> str:
    """Drop the fixed-length extension suffix and swap hyphens for underscores."""
    return file_name[: -len(SVG_EXTENSION)].replace("-", "_")


def is_reserved(name: str) -> bool:
    return name.lower() in RESERVED_IDENTIFIERS


def escape_reserved(snake_name: str) -> str:
    """Append the reserved marker when ``snake_name`` collides with a keyword."""
    if is_reserved(snake_name):
        return snake_name + RESERVED_MARKER
    return snake_name


def escape_component_name(pascal_name: str) -> str:
    """Append the reserved marker to ``None``, ``True`` and ``False``."""
    if pascal_name in CAPITALIZED_KEYWORDS:
        return pascal_name + RESERVED_MARKER
    return pascal_name


def derive_names(file_name: str) -> IconNames:
    """Compute the component and module names for one icon file.

    Raises:
        IconNameError: if ``file_name`` is not a lowercase, hyphen-separated
            ``.svg`` name.
    """
    if not is_valid_icon_filename(file_name):
        raise IconNameError(
            f"Invalid icon filename: {file_name!r} "
            "(expected lowercase words joined by '-' ending in '.svg')"
        )
    snake_name = to_snake_case(file_name)
    return IconNames(
        pascal_name=escape_component_name(to_pascal_case(file_name)),
        snake_name=snake_name,
        module_name=escape_reserved(snake_name),
    )
