"""Icon source validation tests."""

import shutil
import tempfile
import unittest
from pathlib import Path

from lucide_py.validate.sources import validate_icon_sources

ASSETS_DIR = Path(__file__).resolve().parents[1] / "assets" / "icons"


class TestValidateIconSources(unittest.TestCase):
    def test_bundled_sources_pass(self) -> None:
        self.assertEqual(validate_icon_sources(ASSETS_DIR), [])

    def test_missing_directory_is_reported(self) -> None:
        errors = validate_icon_sources(Path("/nonexistent/icons"))
        self.assertTrue(any("Missing icon source directory" in err for err in errors))

    def test_problems_are_collected(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            source_dir = Path(temp_dir) / "icons"
            shutil.copytree(ASSETS_DIR, source_dir)
            shutil.copy(source_dir / "box.svg", source_dir / "Bad_Name.svg")
            (source_dir / "short.svg").write_text("<svg/>\n", encoding="utf-8")
            shutil.copy(source_dir / "arrow-down-0-1.svg", source_dir / "arrow-down-01.svg")

            errors = validate_icon_sources(source_dir)

        self.assertTrue(any(err.startswith("Bad_Name.svg: Invalid icon filename") for err in errors))
        self.assertTrue(any(err.startswith("short.svg:") for err in errors))
        self.assertTrue(any("Duplicate component name 'ArrowDown01'" in err for err in errors))
        self.assertEqual(len(errors), 3)

    def test_empty_directory_is_reported(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            errors = validate_icon_sources(Path(temp_dir))
        self.assertEqual(len(errors), 1)
        self.assertIn("No .svg files found", errors[0])


if __name__ == "__main__":
    unittest.main()
