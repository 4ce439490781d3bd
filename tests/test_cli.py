import json
import logging
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from click.testing import CliRunner

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import docx  # noqa: E402

from cv_copilot.cli import cli, error_message  # noqa: E402
from cv_copilot.models.enums import Locale  # noqa: E402

CV_LINES = [
    "Marie Tremblay",
    "Position: Marketing Coordinator at Acme Media Inc.",
    "Responsible for managing campaigns on social media",
    "6 years of experience in digital marketing, SEO and content creation",
    "Bachelor of Commerce in Marketing",
    "Montréal, QC",
    "French (native), English (fluent)",
]


class CLITests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.workdir = Path(self.tmp.name)
        self.config_dir = self.workdir / "config"
        self.config_dir.mkdir()
        (self.config_dir / "config.yaml").write_text("logging:\n  level: ERROR\n", encoding="utf-8")

        document = docx.Document()
        for line in CV_LINES:
            document.add_paragraph(line)
        self.cv_path = self.workdir / "marie.docx"
        document.save(str(self.cv_path))

        self.env_patch = mock.patch.dict(os.environ, {}, clear=False)
        self.env_patch.start()
        for name in ("ENVIRONMENT", "CV_COPILOT_LOCALE", "LOG_LEVEL"):
            os.environ.pop(name, None)
        self.runner = CliRunner()

    def tearDown(self):
        self.env_patch.stop()
        logging.getLogger().handlers.clear()
        self.tmp.cleanup()

    def invoke(self, *args):
        return self.runner.invoke(cli, ["-c", str(self.config_dir), *args])

    def test_analyze_json(self):
        result = self.invoke("analyze", str(self.cv_path), "--lang", "en", "--json")

        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.stdout)
        self.assertEqual(payload["profile"]["personal_info"]["name"], "Marie Tremblay")
        self.assertEqual(payload["profile"]["extraction_mode"], "native")
        self.assertNotIn("raw_text", payload["profile"])
        self.assertEqual(payload["recommendations"][0]["title"], "Marketing Manager")
        self.assertTrue(all(insight["priority"] in ("high", "medium", "low") for insight in payload["insights"]))

    def test_analyze_rich_output(self):
        result = self.invoke("analyze", str(self.cv_path), "--lang", "fr")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Recommandations", result.output)
        self.assertIn("Marketing Manager", result.output)

    def test_unsupported_file_reports_localized_error(self):
        text_file = self.workdir / "cv.txt"
        text_file.write_text("Plain text CV", encoding="utf-8")

        result = self.invoke("analyze", str(text_file), "--lang", "en")

        self.assertEqual(result.exit_code, 1)
        self.assertIn(error_message("UNSUPPORTED_FORMAT", Locale.EN), result.output)

    def test_enhance(self):
        result = self.invoke("enhance", str(self.cv_path), "Responsible for managing campaigns", "--lang", "fr")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Élevé", result.output)

    def test_default_locale_comes_from_config(self):
        (self.config_dir / "config.yaml").write_text(
            "logging:\n  level: ERROR\nanalysis:\n  default_locale: en\n", encoding="utf-8"
        )
        result = self.invoke("enhance", str(self.cv_path), "Helped the team")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("High", result.output)

    def test_invalid_configuration_exits(self):
        (self.config_dir / "config.yaml").write_text("analysis:\n  default_locale: de\n", encoding="utf-8")
        result = self.invoke("analyze", str(self.cv_path))
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Failed to load configuration", result.output)


class ErrorMessageTests(unittest.TestCase):
    def test_unknown_codes_fall_back_to_generic_message(self):
        self.assertEqual(error_message(None, Locale.FR), "Une erreur est survenue pendant l'analyse de votre CV.")
        self.assertIn("PDF", error_message("INSUFFICIENT_TEXT", Locale.EN))


if __name__ == "__main__":
    unittest.main()
