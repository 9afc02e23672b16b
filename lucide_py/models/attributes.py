"""Shared SVG attributes read by every generated icon component."""

from __future__ import annotations

from html import escape
from typing import Any, List, Tuple

from .base import LucideBaseModel

DEFAULT_XMLNS = "http://www.w3.org/2000/svg"
DEFAULT_WIDTH = "16"
DEFAULT_HEIGHT = "16"
DEFAULT_VIEW_BOX = "0 0 24 24"
DEFAULT_FILL = "none"
DEFAULT_STROKE = "currentColor"
DEFAULT_STROKE_WIDTH = "2"
DEFAULT_STROKE_LINECAP = "round"
DEFAULT_STROKE_LINEJOIN = "round"

# Field name -> SVG attribute name, in the order components render them.
SVG_ATTRIBUTE_NAMES: Tuple[Tuple[str, str], ...] = (
    ("classes", "class"),
    ("xmlns", "xmlns"),
    ("width", "width"),
    ("height", "height"),
    ("view_box", "viewBox"),
    ("fill", "fill"),
    ("stroke", "stroke"),
    ("stroke_width", "stroke-width"),
    ("stroke_linecap", "stroke-linecap"),
    ("stroke_linejoin", "stroke-linejoin"),
)


class IconAttributes(LucideBaseModel):
    """Attribute set applied to the root ``<svg>`` of every icon component.

    Two ways to build one:

    - ``IconAttributes.new_with_attributes(...)`` sets all ten values at once.
    - ``IconAttributes.new()`` starts from the Lucide defaults; chain the
      ``set_*`` builders to change a few of them::

          IconAttributes.new().set_height(24).set_width(96).set_stroke_width(1.625)

    Setters accept anything with a string form and return the instance.
    For an application-wide icon look, provide the attributes once through
    ``lucide_py.context.provide_attributes``.
    """

    classes: str = ""
    xmlns: str = DEFAULT_XMLNS
    width: str = DEFAULT_WIDTH
    height: str = DEFAULT_HEIGHT
    view_box: str = DEFAULT_VIEW_BOX
    fill: str = DEFAULT_FILL
    stroke: str = DEFAULT_STROKE
    stroke_width: str = DEFAULT_STROKE_WIDTH
    stroke_linecap: str = DEFAULT_STROKE_LINECAP
    stroke_linejoin: str = DEFAULT_STROKE_LINEJOIN

    @classmethod
    def new(cls) -> "IconAttributes":
        """Create attributes holding the default Lucide SVG values."""
        return cls()

    @classmethod
    def new_with_attributes(
        cls,
        classes: Any,
        xmlns: Any,
        width: Any,
        height: Any,
        view_box: Any,
        fill: Any,
        stroke: Any,
        stroke_width: Any,
        stroke_linecap: Any,
        stroke_linejoin: Any,
    ) -> "IconAttributes":
        """Create a full attribute list from scratch.

        Example::

            IconAttributes.new_with_attributes(
                "animate-pulse",
                "http://www.w3.org/2000/svg",
                24,
                24,
                "0 0 24 24",
                "#ffffff",
                "rgba(0,0,0,0.69)",
                1.625,
                "round",
                "round",
            )

        If you only wish to set a few attributes, use ``new()`` instead.
        """
        return cls(
            classes=str(classes),
            xmlns=str(xmlns),
            width=str(width),
            height=str(height),
            view_box=str(view_box),
            fill=str(fill),
            stroke=str(stroke),
            stroke_width=str(stroke_width),
            stroke_linecap=str(stroke_linecap),
            stroke_linejoin=str(stroke_linejoin),
        )

    def set_classes(self, classes: Any) -> "IconAttributes":
        """Set the SVG's ``class`` attribute."""
        self.classes = str(classes)
        return self

    def set_xmlns(self, xmlns: Any) -> "IconAttributes":
        self.xmlns = str(xmlns)
        return self

    def set_width(self, width: Any) -> "IconAttributes":
        """Set the SVG's ``width`` attribute in pixels."""
        self.width = str(width)
        return self

    def set_height(self, height: Any) -> "IconAttributes":
        """Set the SVG's ``height`` attribute in pixels."""
        self.height = str(height)
        return self

    def set_view_box(self, view_box: Any) -> "IconAttributes":
        self.view_box = str(view_box)
        return self

    def set_fill(self, fill: Any) -> "IconAttributes":
        self.fill = str(fill)
        return self

    def set_stroke(self, stroke: Any) -> "IconAttributes":
        self.stroke = str(stroke)
        return self

    def set_stroke_width(self, stroke_width: Any) -> "IconAttributes":
        self.stroke_width = str(stroke_width)
        return self

    def set_stroke_linecap(self, stroke_linecap: Any) -> "IconAttributes":
        self.stroke_linecap = str(stroke_linecap)
        return self

    def set_stroke_linejoin(self, stroke_linejoin: Any) -> "IconAttributes":
        self.stroke_linejoin = str(stroke_linejoin)
        return self

    def svg_attributes(self) -> List[Tuple[str, str]]:
        """Return (svg_name, value) pairs in render order, skipping an empty class."""
        pairs: List[Tuple[str, str]] = []
        for field_name, svg_name in SVG_ATTRIBUTE_NAMES:
            value = getattr(self, field_name)
            if field_name == "classes" and not value:
                continue
            pairs.append((svg_name, value))
        return pairs

    def render_svg(self, markup: str) -> str:
        """Wrap inner icon markup in an ``<svg>`` element carrying these attributes."""
        rendered = " ".join(
            f'{name}="{escape(value, quote=True)}"' for name, value in self.svg_attributes()
        )
        return f"<svg {rendered}>{markup}</svg>"
