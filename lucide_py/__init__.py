"""Lucide icons as Python components.

Generated components live in ``lucide_py.icons`` and render with the
attributes provided through :func:`provide_attributes`.
"""

from .context import (
    AttributesSignal,
    MissingAttributesContextError,
    attributes_scope,
    expect_attributes,
    provide_attributes,
    use_attributes,
)
from .models.attributes import IconAttributes

__all__ = [
    "AttributesSignal",
    "IconAttributes",
    "MissingAttributesContextError",
    "attributes_scope",
    "expect_attributes",
    "provide_attributes",
    "use_attributes",
]
