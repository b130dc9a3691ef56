from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazytree.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def _load_with(self, payload: str | None) -> config.BrowserConfig:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            if payload is not None:
                config_path.write_text(payload, encoding="utf-8")
            with mock.patch("lazytree.runtime.config.CONFIG_PATH", config_path):
                return config.load_browser_config()

    def test_missing_file_uses_defaults(self) -> None:
        self.assertEqual(self._load_with(None), config.BrowserConfig())
        self.assertEqual(config.BrowserConfig().max_visible_children, 7)

    def test_valid_values_are_read(self) -> None:
        loaded = self._load_with(
            json.dumps({"theme": "ocean", "max_visible_children": 5, "tick_ms": 50, "status_seconds": 1.5})
        )
        self.assertEqual(loaded.theme_name, "ocean")
        self.assertEqual(loaded.max_visible_children, 5)
        self.assertEqual(loaded.tick_ms, 50)
        self.assertEqual(loaded.status_seconds, 1.5)

    def test_invalid_values_fall_back_per_key(self) -> None:
        loaded = self._load_with(
            json.dumps({"theme": " ", "max_visible_children": True, "tick_ms": 0, "status_seconds": "x"})
        )
        self.assertEqual(loaded, config.BrowserConfig())

    def test_malformed_or_non_object_json_is_ignored(self) -> None:
        self.assertEqual(self._load_with("{not json"), config.BrowserConfig())
        self.assertEqual(self._load_with("[1, 2]"), config.BrowserConfig())


if __name__ == "__main__":
    unittest.main()
