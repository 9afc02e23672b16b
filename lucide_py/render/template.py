"""SVG document stripping and component module templating."""

from __future__ import annotations

# Length of the fixed Lucide opening block, from "<svg" through the ">\n"
# that closes its attribute list.
HEADER_LENGTH = 201
# "</svg>\n"
FOOTER_LENGTH = 7

HEADER_PREFIX = "<svg"
HEADER_SUFFIX = ">\n"
FOOTER = "</svg>\n"

MARKUP_PLACEHOLDER = "{}"

TEMPLATE = '''"""Lucide icon component. Generated from its SVG source; do not edit."""

from lucide_py.context import expect_attributes

MARKUP = r"""{}"""


def _() -> str:
    return expect_attributes().get().render_svg(MARKUP)
'''

# Offset of the one-character component name placeholder in "def _()".
NAME_OFFSET = TEMPLATE.index("def _()") + len("def ")


class SvgStructureError(ValueError):
    """Raised when an SVG source does not have the fixed Lucide layout."""


def strip_document(contents: str) -> str:
    """Remove the fixed header and footer, leaving the inner icon markup."""
    if len(contents) < HEADER_LENGTH + FOOTER_LENGTH:
        raise SvgStructureError(
            f"SVG source is {len(contents)} characters, shorter than the "
            f"{HEADER_LENGTH + FOOTER_LENGTH}-character header and footer"
        )
    header = contents[:HEADER_LENGTH]
    footer = contents[-FOOTER_LENGTH:]
    if not header.startswith(HEADER_PREFIX) or not header.endswith(HEADER_SUFFIX):
        raise SvgStructureError(
            f"SVG header does not match the Lucide layout: {header[:40]!r}..."
        )
    if footer != FOOTER:
        raise SvgStructureError(f"SVG footer is {footer!r}, expected {FOOTER!r}")
    return contents[HEADER_LENGTH:-FOOTER_LENGTH]


def check_embeddable(markup: str) -> None:
    """Ensure markup can sit inside the template's raw triple-quoted literal."""
    if '"""' in markup:
        raise SvgStructureError('SVG markup contains \'"""\' and cannot be embedded')
    if markup.endswith(("\\", '"')):
        raise SvgStructureError(
            f"SVG markup ends with {markup[-1]!r} and cannot be embedded"
        )


def create_component_source(markup: str, pascal_name: str) -> str:
    """Fill the component template with a name and inner SVG markup."""
    check_embeddable(markup)
    source = TEMPLATE[:NAME_OFFSET] + pascal_name + TEMPLATE[NAME_OFFSET + 1:]
    return source.replace(MARKUP_PLACEHOLDER, markup, 1)


def create_index_entry(module_name: str, pascal_name: str) -> str:
    return f"from .{module_name} import {pascal_name}\n"
