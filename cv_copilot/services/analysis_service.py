"""Service turning an uploaded CV into a profile, and the per-user session around it."""

import asyncio
import itertools
import logging
import time
from typing import Any, Dict, List, Optional

from .configuration_manager import AppConfig
from ..advisors import EnhancementAdvisor, InsightEngine, RecommendationEngine, resolve_locale
from ..advisors.localization import LocaleLike
from ..models.advice import EnhancementSuggestion, Insight, JobRecommendation
from ..models.enums import Locale
from ..models.profile import CVProfile
from ..parsers import ProfileBuilder, TextExtractor
from ..utils.exceptions import CVCopilotError, ExtractionError
from ..utils.logging import get_logger, log_performance, set_correlation_id


class AnalysisService:
    """Coordinates text extraction and profile building for one upload at a time."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        logger: Optional[logging.Logger] = None,
        profile_builder: Optional[ProfileBuilder] = None,
    ):
        """Initialize the analysis service.

        Args:
            config: Application configuration, defaults when omitted
            logger: Logger handed to the text extractor
            profile_builder: Builder used to turn text into profiles
        """
        self.config = config or AppConfig()
        self.logger = logger or get_logger("analysis_service")
        self.text_extractor = TextExtractor(
            self.logger,
            min_text_length=self.config.extraction.min_text_length,
            placeholder_fallback=self.config.extraction.placeholder_fallback,
        )
        self.profile_builder = profile_builder or ProfileBuilder()

        self.stats: Dict[str, Any] = {
            "uploads_analyzed": 0,
            "successful_analyses": 0,
            "failed_analyses": 0,
            "degraded_analyses": 0,
            "last_analysis_time": None,
        }

    async def analyze_upload(self, file_bytes: bytes, media_type: Optional[str], file_name: str = "") -> CVProfile:
        """Extract text from an uploaded file and build its profile.

        Args:
            file_bytes: Content of the uploaded file
            media_type: Declared media type of the upload
            file_name: Name of the uploaded file

        Returns:
            A new CVProfile

        Raises:
            UnsupportedFormatError: Media type is not PDF or a word-processing document
            InsufficientTextError: Too little text could be extracted
            ExtractionFailureError: The document could not be decoded
        """
        self.text_extractor.check_media_type(media_type)

        start_time = time.perf_counter()
        self.stats["uploads_analyzed"] += 1
        try:
            max_file_size = self.config.extraction.max_file_size
            if len(file_bytes) > max_file_size:
                raise ExtractionError(
                    f"File is too large ({len(file_bytes)} bytes, limit {max_file_size})",
                    error_code="FILE_TOO_LARGE",
                    details={"file_size": len(file_bytes), "max_file_size": max_file_size},
                )

            # Decoding blocks, so it runs off the event loop where timeouts can interrupt the wait
            result = await asyncio.to_thread(self.text_extractor.extract, file_bytes, media_type, file_name)
            profile = self.profile_builder.build(result.text, result.mode, file_name or None)
        except CVCopilotError as e:
            self.stats["failed_analyses"] += 1
            self.logger.warning(f"Analysis of {file_name or 'upload'} failed: {e}")
            raise

        duration = time.perf_counter() - start_time
        self.stats["successful_analyses"] += 1
        if profile.is_placeholder:
            self.stats["degraded_analyses"] += 1
        self.stats["last_analysis_time"] = duration

        log_performance("analyze_upload", duration, {
            "file_name": file_name,
            "strategy": result.strategy,
            "extraction_mode": profile.extraction_mode.value,
            "skills": len(profile.skills),
        })
        return profile

    def get_stats(self) -> Dict[str, Any]:
        """Get analysis statistics."""
        return dict(self.stats)


_default_service: Optional[AnalysisService] = None


async def analyze_upload(file_bytes: bytes, media_type: Optional[str], file_name: str = "") -> CVProfile:
    """Analyze an upload with a default-configured service."""
    global _default_service
    if _default_service is None:
        _default_service = AnalysisService()
    return await _default_service.analyze_upload(file_bytes, media_type, file_name)


class AnalysisSession:
    """Holds the current profile of one user session.

    Every submission gets a request id from a monotonically increasing
    counter. A result that arrives after a newer submission was made is
    discarded, so an older upload never replaces a newer profile.
    """

    def __init__(
        self,
        service: Optional[AnalysisService] = None,
        locale: LocaleLike = Locale.FR,
        recommendation_engine: Optional[RecommendationEngine] = None,
        insight_engine: Optional[InsightEngine] = None,
        enhancement_advisor: Optional[EnhancementAdvisor] = None,
    ):
        self.service = service or AnalysisService()
        self.locale = resolve_locale(locale)
        self.recommendation_engine = recommendation_engine or RecommendationEngine()
        self.insight_engine = insight_engine or InsightEngine()
        self.enhancement_advisor = enhancement_advisor or EnhancementAdvisor()
        self.logger = get_logger("analysis_session")

        self.profile: Optional[CVProfile] = None
        self._request_ids = itertools.count(1)
        self.latest_request_id = 0

    def is_current(self, request_id: int) -> bool:
        """Check whether a request id belongs to the latest submission."""
        return request_id == self.latest_request_id

    async def submit(self, file_bytes: bytes, media_type: Optional[str], file_name: str = "") -> Optional[CVProfile]:
        """Analyze an upload and make it the session's profile.

        The previous profile is discarded as soon as a new upload starts.

        Returns:
            The new profile, or None when a newer submission superseded this one

        Raises:
            CVCopilotError: When the analysis of the latest submission fails
        """
        request_id = next(self._request_ids)
        self.latest_request_id = request_id
        self.profile = None
        set_correlation_id(f"upload-{request_id}")
        self.logger.info(f"Request {request_id}: analyzing {file_name or 'upload'}")

        try:
            profile = await self.service.analyze_upload(file_bytes, media_type, file_name)
        except CVCopilotError:
            if not self.is_current(request_id):
                self.logger.info(f"Request {request_id}: failure of superseded request ignored")
                return None
            raise

        if not self.is_current(request_id):
            self.logger.info(
                f"Request {request_id}: result discarded, request {self.latest_request_id} is newer"
            )
            return None

        self.profile = profile
        return profile

    def _require_profile(self) -> CVProfile:
        if self.profile is None:
            raise CVCopilotError("No CV has been analyzed in this session", error_code="NO_PROFILE")
        return self.profile

    def recommendations(self, locale: Optional[LocaleLike] = None) -> List[JobRecommendation]:
        """Job recommendations for the current profile."""
        return self.recommendation_engine.recommend(self._require_profile(), locale or self.locale)

    def insights(self, locale: Optional[LocaleLike] = None) -> List[Insight]:
        """General then regional insights for the current profile."""
        return self.insight_engine.analyze(self._require_profile(), locale or self.locale)

    def enhance(self, fragment: str, locale: Optional[LocaleLike] = None) -> EnhancementSuggestion:
        """Enhancement advice for a fragment of the current CV."""
        return self.enhancement_advisor.suggest(self.profile, fragment, locale or self.locale)
