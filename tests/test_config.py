"""Tests for config module functionality."""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch


class TestConfig(unittest.TestCase):
    """Test cases for Config class."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        from wakatime_editor.config import Config

        self.config = Config(config_dir=self.temp_dir)

    def tearDown(self):
        """Clean up test fixtures."""
        import shutil

        shutil.rmtree(self.temp_dir)

    def test_initialization(self):
        self.assertEqual(self.config.config_dir, Path(self.temp_dir))
        self.assertTrue(self.config.config_file.name.endswith("settings.json"))

    def test_default_values(self):
        """Test that default values are set correctly."""
        self.assertEqual(self.config.api_key, "")
        self.assertTrue(self.config.enabled)
        self.assertFalse(self.config.debug)
        self.assertEqual(self.config.api_url, "https://api.wakatime.com/api/v1")

    def test_api_url_strips_trailing_slash(self):
        self.config.set("api_url", "https://wakapi.example.com/api/compat/wakatime/v1/")
        self.assertEqual(
            self.config.api_url, "https://wakapi.example.com/api/compat/wakatime/v1"
        )

    def test_property_setters(self):
        self.config.api_key = "waka_123"
        self.config.enabled = False
        self.config.debug = True

        self.assertEqual(self.config.get("api_key"), "waka_123")
        self.assertFalse(self.config.enabled)
        self.assertTrue(self.config.debug)

    def test_project_root_defaults_to_cwd(self):
        self.assertEqual(self.config.project_root, Path.cwd())

    def test_default_project_falls_back_to_directory_name(self):
        project_dir = Path(self.temp_dir) / "SpaceGame"
        project_dir.mkdir()
        self.config.set("project_root", str(project_dir))

        self.assertEqual(self.config.default_project, "SpaceGame")

        self.config.set("default_project", "Space Game")
        self.assertEqual(self.config.default_project, "Space Game")

    def test_default_project_at_filesystem_root(self):
        """Test that a root project directory still yields a project name."""
        self.config.set("project_root", "/")

        self.assertEqual(self.config.default_project, "Unity Project")

    def test_save_and_load(self):
        """Test saving and reloading configuration."""
        from wakatime_editor.config import Config

        self.config.api_key = "waka_123"
        self.config.save()

        reloaded = Config(config_dir=self.temp_dir)
        self.assertEqual(reloaded.api_key, "waka_123")
        self.assertTrue(reloaded.enabled)

    def test_corrupt_file_uses_defaults(self):
        from wakatime_editor.config import DEFAULT_CONFIG, Config

        with open(self.config.config_file, "w", encoding="utf-8") as f:
            f.write("{not json")

        with patch("builtins.print") as mock_print:
            config = Config(config_dir=self.temp_dir)

        self.assertEqual(config.get_all(), DEFAULT_CONFIG)
        mock_print.assert_any_call("Using default configuration.")

    def test_partial_file_merged_with_defaults(self):
        from wakatime_editor.config import Config

        with open(self.config.config_file, "w", encoding="utf-8") as f:
            json.dump({"debug": True}, f)

        config = Config(config_dir=self.temp_dir)
        self.assertTrue(config.debug)
        self.assertTrue(config.enabled)


class TestLoadConfigFromEnv(unittest.TestCase):
    """Test cases for environment overrides."""

    def test_env_mapping(self):
        from wakatime_editor.config import load_config_from_env

        env = {
            "WAKATIME_API_KEY": "waka_env",
            "WAKATIME_ENABLED": "no",
            "WAKATIME_DEBUG": "1",
            "WAKATIME_API_URL": "http://localhost:3000/api/v1",
        }
        with patch.dict(os.environ, env, clear=True):
            result = load_config_from_env()

        self.assertEqual(
            result,
            {
                "api_key": "waka_env",
                "enabled": False,
                "debug": True,
                "api_url": "http://localhost:3000/api/v1",
            },
        )

    def test_no_env(self):
        from wakatime_editor.config import load_config_from_env

        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(load_config_from_env(), {})

    def test_get_config_applies_env(self):
        from wakatime_editor import config as config_module

        with tempfile.TemporaryDirectory() as home:
            with patch.object(Path, "home", return_value=Path(home)), patch.dict(
                os.environ, {"WAKATIME_API_KEY": "waka_env"}, clear=True
            ):
                config = config_module.reload_config()
                self.assertIs(config_module.get_config(), config)

            self.assertEqual(config.api_key, "waka_env")
            config_module._global_config = None


if __name__ == "__main__":
    unittest.main()
