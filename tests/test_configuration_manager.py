import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cv_copilot.models.enums import Locale  # noqa: E402
from cv_copilot.services.configuration_manager import ConfigurationManager  # noqa: E402
from cv_copilot.utils.exceptions import ConfigurationError  # noqa: E402

MANAGED_ENV_VARS = ("ENVIRONMENT", "CV_COPILOT_LOCALE", "LOG_LEVEL")


class ConfigurationManagerTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.config_dir = Path(self.tmp.name)
        self.env_patch = mock.patch.dict(os.environ, {}, clear=False)
        self.env_patch.start()
        for name in MANAGED_ENV_VARS:
            os.environ.pop(name, None)

    def tearDown(self):
        self.env_patch.stop()
        self.tmp.cleanup()

    def manager(self):
        return ConfigurationManager(str(self.config_dir), env_file=str(self.config_dir / ".env"))

    def write(self, name, content):
        (self.config_dir / name).write_text(content, encoding="utf-8")

    def test_defaults_without_files(self):
        manager = self.manager()
        config = manager.initialize()

        self.assertEqual(config.extraction.min_text_length, 20)
        self.assertTrue(config.extraction.placeholder_fallback)
        self.assertEqual(config.analysis.default_locale, "fr")
        self.assertEqual(manager.get_locale(), Locale.FR)

    def test_yaml_overrides_defaults(self):
        self.write("config.yaml", "\n".join([
            "app:",
            "  name: CV Copilot Test",
            "extraction:",
            "  min_text_length: 50",
            "  placeholder_fallback: false",
            "analysis:",
            "  default_locale: EN",
            "  timeout_seconds: 5",
        ]))
        manager = self.manager()
        config = manager.initialize()

        self.assertEqual(config.app_name, "CV Copilot Test")
        self.assertEqual(config.extraction.min_text_length, 50)
        self.assertFalse(config.extraction.placeholder_fallback)
        self.assertEqual(config.analysis.default_locale, "en")
        self.assertEqual(manager.get_setting("analysis.timeout_seconds"), 5)

    def test_environment_specific_file(self):
        self.write("config.yaml", "extraction:\n  min_text_length: 50\n")
        self.write("config.testing.yaml", "extraction:\n  min_text_length: 5\n")
        os.environ["ENVIRONMENT"] = "testing"

        config = self.manager().initialize()
        self.assertEqual(config.environment, "testing")
        self.assertEqual(config.extraction.min_text_length, 5)

    def test_environment_overrides(self):
        self.write(".env", "CV_COPILOT_LOCALE=en\nLOG_LEVEL=debug\n")
        manager = self.manager()
        config = manager.initialize()

        self.assertEqual(config.analysis.default_locale, "en")
        self.assertEqual(config.logging.level, "DEBUG")
        self.assertEqual(manager.get_logging_config()["level"], "DEBUG")

    def test_invalid_locale_raises(self):
        self.write("config.yaml", "analysis:\n  default_locale: de\n")
        with self.assertRaises(ConfigurationError) as ctx:
            self.manager().initialize()
        self.assertEqual(ctx.exception.config_key, "analysis.default_locale")

    def test_invalid_values_raise(self):
        self.write("config.yaml", "analysis:\n  timeout_seconds: 0\n")
        with self.assertRaises(ConfigurationError):
            self.manager().initialize()

    def test_malformed_yaml_raises(self):
        self.write("config.yaml", "extraction: [unclosed\n")
        with self.assertRaises(ConfigurationError):
            self.manager().initialize()

    def test_get_setting(self):
        manager = self.manager()
        self.assertEqual(manager.get_setting("extraction.min_text_length", 1), 1)
        manager.initialize()
        self.assertEqual(manager.get_setting("extraction.min_text_length"), 20)
        self.assertEqual(manager.get_setting("extraction.missing", "fallback"), "fallback")

    def test_get_config_before_initialize(self):
        with self.assertRaises(ConfigurationError):
            self.manager().get_config()

    def test_logging_config_maps_to_setup_logging(self):
        self.write("config.yaml", "logging:\n  format: json\n  file_path: logs/cv.log\n  file_output: true\n")
        manager = self.manager()
        manager.initialize()
        logging_config = manager.get_logging_config()
        self.assertTrue(logging_config["structured"])
        self.assertTrue(logging_config["enable_file"])
        self.assertEqual(logging_config["log_file"], "logs/cv.log")


if __name__ == "__main__":
    unittest.main()
