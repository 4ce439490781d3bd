import asyncio
import sys
import time
import unittest
from io import BytesIO
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import docx  # noqa: E402

from cv_copilot.models.enums import ExtractionMode, Locale  # noqa: E402
from cv_copilot.parsers.base_parser import DOCX_MEDIA_TYPE, PDF_MEDIA_TYPE  # noqa: E402
from cv_copilot.parsers.profile_builder import ProfileBuilder  # noqa: E402
from cv_copilot.services.analysis_service import AnalysisService, AnalysisSession, analyze_upload  # noqa: E402
from cv_copilot.services.configuration_manager import AppConfig  # noqa: E402
from cv_copilot.utils.exceptions import (  # noqa: E402
    CVCopilotError,
    ExtractionError,
    InsufficientTextError,
    UnsupportedFormatError,
)
from cv_copilot.utils.logging import get_correlation_id  # noqa: E402

CV_LINES = [
    "Marie Tremblay",
    "Position: Marketing Coordinator at Acme Media Inc.",
    "Responsible for managing campaigns on social media",
    "6 years of experience in digital marketing, SEO and content creation",
    "Bachelor of Commerce in Marketing",
    "Montréal, QC",
    "French (native), English (fluent)",
]


def build_docx(lines):
    document = docx.Document()
    for line in lines:
        document.add_paragraph(line)
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


class AnalysisServiceTests(unittest.TestCase):
    def setUp(self):
        self.service = AnalysisService()

    def test_docx_upload_builds_profile(self):
        profile = asyncio.run(self.service.analyze_upload(build_docx(CV_LINES), DOCX_MEDIA_TYPE, "marie.docx"))

        self.assertEqual(profile.extraction_mode, ExtractionMode.NATIVE)
        self.assertEqual(profile.years_of_experience, 6)
        self.assertEqual(profile.personal_info.name, "Marie Tremblay")
        self.assertIn("digital marketing", profile.skills)
        self.assertEqual(profile.languages, ("english", "french"))
        self.assertEqual(self.service.get_stats()["successful_analyses"], 1)

    def test_unsupported_media_type_rejected_before_decoding(self):
        with mock.patch.object(self.service.text_extractor.registry, "get_handler",
                               wraps=self.service.text_extractor.registry.get_handler) as get_handler:
            with self.assertRaises(UnsupportedFormatError):
                asyncio.run(self.service.analyze_upload(b"GIF89a", "image/gif", "photo.gif"))
        get_handler.assert_not_called()
        self.assertEqual(self.service.get_stats()["uploads_analyzed"], 0)

    def test_placeholder_fallback_disabled_by_config(self):
        config = AppConfig()
        config.extraction.placeholder_fallback = False
        service = AnalysisService(config)
        reader = mock.MagicMock(is_encrypted=False, pages=[])
        with mock.patch("cv_copilot.parsers.file_handlers.PdfReader", return_value=reader):
            with self.assertRaises(InsufficientTextError):
                asyncio.run(service.analyze_upload(b"%PDF-1.4", PDF_MEDIA_TYPE, "scan.pdf"))
        self.assertEqual(service.get_stats()["failed_analyses"], 1)

    def test_placeholder_profile_for_text_less_pdf(self):
        reader = mock.MagicMock(is_encrypted=False, pages=[])
        with mock.patch("cv_copilot.parsers.file_handlers.PdfReader", return_value=reader):
            profile = asyncio.run(self.service.analyze_upload(b"%PDF-1.4", PDF_MEDIA_TYPE, "dev_resume.pdf"))
        self.assertTrue(profile.is_placeholder)
        self.assertIn("python", profile.skills)
        self.assertEqual(self.service.get_stats()["degraded_analyses"], 1)

    def test_oversized_upload(self):
        config = AppConfig()
        config.extraction.max_file_size = 10
        service = AnalysisService(config)
        with self.assertRaises(ExtractionError) as ctx:
            asyncio.run(service.analyze_upload(b"x" * 11, DOCX_MEDIA_TYPE, "big.docx"))
        self.assertEqual(ctx.exception.error_code, "FILE_TOO_LARGE")

    def test_timeout_interrupts_slow_extraction(self):
        def slow_extract(*args):
            time.sleep(0.5)
            raise AssertionError("extraction should have been abandoned")

        async def submit():
            started = time.perf_counter()
            with self.assertRaises(asyncio.TimeoutError):
                await asyncio.wait_for(
                    self.service.analyze_upload(b"%PDF-1.4", PDF_MEDIA_TYPE, "slow.pdf"), timeout=0.05
                )
            return time.perf_counter() - started

        with mock.patch.object(self.service.text_extractor, "extract", side_effect=slow_extract):
            elapsed = asyncio.run(submit())
        self.assertLess(elapsed, 0.4)

    def test_module_level_entry_point(self):
        with self.assertRaises(UnsupportedFormatError):
            asyncio.run(analyze_upload(b"", "text/plain", "cv.txt"))


class ControlledService:
    """Service double whose uploads complete only when their gate opens."""

    def __init__(self):
        self.gates = {}
        self.builder = ProfileBuilder()

    async def analyze_upload(self, file_bytes, media_type, file_name=""):
        gate = self.gates.get(file_name)
        if gate is not None:
            await gate.wait()
        if media_type != PDF_MEDIA_TYPE:
            raise UnsupportedFormatError("unsupported", media_type=media_type)
        return self.builder.build(file_bytes.decode("utf-8"), file_name=file_name)


class AnalysisSessionTests(unittest.TestCase):
    def test_stale_result_is_discarded(self):
        async def scenario():
            service = ControlledService()
            service.gates["old.pdf"] = asyncio.Event()
            session = AnalysisSession(service)

            old_task = asyncio.create_task(session.submit(b"Senior accountant in Laval", PDF_MEDIA_TYPE, "old.pdf"))
            await asyncio.sleep(0)
            new_profile = await session.submit(b"Junior developer with Python and SQL", PDF_MEDIA_TYPE, "new.pdf")
            service.gates["old.pdf"].set()
            old_result = await old_task
            return session, old_result, new_profile

        session, old_result, new_profile = asyncio.run(scenario())

        self.assertIsNone(old_result)
        self.assertIs(session.profile, new_profile)
        self.assertEqual(session.profile.file_name, "new.pdf")
        self.assertEqual(session.latest_request_id, 2)

    def test_failure_of_superseded_request_is_ignored(self):
        async def scenario():
            service = ControlledService()
            service.gates["bad.png"] = asyncio.Event()
            session = AnalysisSession(service)

            bad_task = asyncio.create_task(session.submit(b"", "image/png", "bad.png"))
            await asyncio.sleep(0)
            await session.submit(b"Project manager with agile and scrum", PDF_MEDIA_TYPE, "good.pdf")
            service.gates["bad.png"].set()
            return session, await bad_task

        session, bad_result = asyncio.run(scenario())
        self.assertIsNone(bad_result)
        self.assertEqual(session.profile.file_name, "good.pdf")

    def test_new_upload_discards_previous_profile(self):
        session = AnalysisSession(ControlledService())
        asyncio.run(session.submit(b"Marketing manager with SEO skills", PDF_MEDIA_TYPE, "first.pdf"))
        self.assertIsNotNone(session.profile)

        with self.assertRaises(UnsupportedFormatError):
            asyncio.run(session.submit(b"", "image/png", "second.png"))
        self.assertIsNone(session.profile)

    def test_request_id_is_the_correlation_id(self):
        async def scenario():
            session = AnalysisSession(ControlledService())
            await session.submit(b"Data analyst with SQL and Tableau", PDF_MEDIA_TYPE, "cv.pdf")
            return get_correlation_id()

        self.assertEqual(asyncio.run(scenario()), "upload-1")

    def test_query_helpers(self):
        session = AnalysisSession(ControlledService(), locale=Locale.EN)
        with self.assertRaises(CVCopilotError):
            session.recommendations()

        text = "Digital marketing, social media, SEO and content creation in Montreal. English and French."
        asyncio.run(session.submit(text.encode("utf-8"), PDF_MEDIA_TYPE, "cv.pdf"))

        self.assertEqual(session.recommendations()[0].title, "Marketing Manager")
        self.assertEqual(session.insights(), session.insight_engine.analyze(session.profile, Locale.EN))
        self.assertEqual(session.enhance("Helped the team").impact, "High")
        self.assertEqual(session.enhance("Helped the team", "fr").impact, "Élevé")


if __name__ == "__main__":
    unittest.main()
