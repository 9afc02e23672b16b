"""IconAttributes model tests."""

import json
import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from lucide_py.models.attributes import IconAttributes


class TestIconAttributes(unittest.TestCase):
    def test_defaults(self) -> None:
        attributes = IconAttributes.new()
        self.assertEqual(attributes.classes, "")
        self.assertEqual(attributes.xmlns, "http://www.w3.org/2000/svg")
        self.assertEqual(attributes.width, "16")
        self.assertEqual(attributes.height, "16")
        self.assertEqual(attributes.view_box, "0 0 24 24")
        self.assertEqual(attributes.fill, "none")
        self.assertEqual(attributes.stroke, "currentColor")
        self.assertEqual(attributes.stroke_width, "2")
        self.assertEqual(attributes.stroke_linecap, "round")
        self.assertEqual(attributes.stroke_linejoin, "round")

    def test_new_with_attributes_stringifies(self) -> None:
        attributes = IconAttributes.new_with_attributes(
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
        self.assertEqual(attributes.width, "24")
        self.assertEqual(attributes.stroke_width, "1.625")
        self.assertEqual(attributes.classes, "animate-pulse")

    def test_builder_setters_chain(self) -> None:
        attributes = IconAttributes.new().set_height(24).set_width(96).set_stroke_width(1.625)
        self.assertEqual((attributes.height, attributes.width, attributes.stroke_width), ("24", "96", "1.625"))

    def test_unknown_field_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            IconAttributes(color="red")

    def test_svg_attributes_order_and_empty_class(self) -> None:
        names = [name for name, _ in IconAttributes.new().svg_attributes()]
        self.assertEqual(
            names,
            ["xmlns", "width", "height", "viewBox", "fill", "stroke",
             "stroke-width", "stroke-linecap", "stroke-linejoin"],
        )
        with_class = IconAttributes.new().set_classes("icon").svg_attributes()
        self.assertEqual(with_class[0], ("class", "icon"))

    def test_render_svg_escapes_values(self) -> None:
        rendered = IconAttributes.new().set_classes('a"b').render_svg("<path/>")
        self.assertTrue(rendered.startswith('<svg class="a&quot;b" xmlns="http://www.w3.org/2000/svg"'))
        self.assertTrue(rendered.endswith("><path/></svg>"))

    def test_to_json_is_sorted(self) -> None:
        data = json.loads(IconAttributes.new().to_json())
        self.assertEqual(list(data), sorted(data))

    def test_write_json_creates_parent_directories(self) -> None:
        attributes = IconAttributes.new().set_width(20)
        with tempfile.TemporaryDirectory() as temp_dir:
            path = attributes.write_json(Path(temp_dir) / "nested" / "attributes.json")
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        self.assertEqual(data["width"], "20")
        self.assertEqual(data["view_box"], "0 0 24 24")


if __name__ == "__main__":
    unittest.main()
