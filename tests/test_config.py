"""Config loader tests."""

import tempfile
import unittest
from pathlib import Path

from lucide_py.config import load_config


class TestConfig(unittest.TestCase):
    def _setup_project_root(self) -> Path:
        temp_dir = Path(tempfile.mkdtemp())
        (temp_dir / "assets" / "icons").mkdir(parents=True)
        return temp_dir

    def test_load_config_success(self) -> None:
        root = self._setup_project_root()
        config = load_config(root)
        self.assertEqual(Path(config.project_root), root)
        self.assertEqual(Path(config.source_dir), root / "assets" / "icons")
        self.assertEqual(Path(config.output_dir), root / "lucide_py" / "icons")
        self.assertEqual(config.sentinel_name, "__init__.py")
        self.assertEqual(Path(config.log_path), root / "runs" / "generate_log.jsonl")

    def test_load_config_overrides(self) -> None:
        root = self._setup_project_root()
        source_dir = root / "svg"
        source_dir.mkdir()
        config = load_config(root, source_dir=source_dir, output_dir=root / "out")
        self.assertEqual(Path(config.source_dir), source_dir)
        self.assertEqual(Path(config.output_dir), root / "out")

    def test_load_config_missing_source_dir(self) -> None:
        root = self._setup_project_root()
        (root / "assets" / "icons").rmdir()
        with self.assertRaises(FileNotFoundError):
            load_config(root)

    def test_default_project_root_has_bundled_icons(self) -> None:
        bundled = Path(__file__).resolve().parents[1] / "assets" / "icons"
        if not bundled.is_dir():
            self.skipTest("bundled icons not found")
        config = load_config(Path(__file__).resolve().parents[1])
        self.assertTrue(any(Path(config.source_dir).glob("*.svg")))


if __name__ == "__main__":
    unittest.main()
