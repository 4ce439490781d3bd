"""CV Copilot: CV analysis and advice for the Quebec job market."""

__version__ = "1.0.0"

from .models import CVProfile, EnhancementSuggestion, ExtractionMode, Insight, JobRecommendation, Locale, Priority
from .parsers import FieldExtractor, ProfileBuilder, TextExtractor
from .advisors import EnhancementAdvisor, InsightEngine, RecommendationEngine
from .services import AnalysisService, AnalysisSession, ConfigurationManager, analyze_upload
from .utils.exceptions import (
    CVCopilotError,
    ExtractionError,
    ExtractionFailureError,
    InsufficientTextError,
    UnsupportedFormatError,
)

__all__ = [
    "__version__",
    "CVProfile",
    "EnhancementSuggestion",
    "ExtractionMode",
    "Insight",
    "JobRecommendation",
    "Locale",
    "Priority",
    "FieldExtractor",
    "ProfileBuilder",
    "TextExtractor",
    "EnhancementAdvisor",
    "InsightEngine",
    "RecommendationEngine",
    "AnalysisService",
    "AnalysisSession",
    "ConfigurationManager",
    "analyze_upload",
    "CVCopilotError",
    "ExtractionError",
    "ExtractionFailureError",
    "InsufficientTextError",
    "UnsupportedFormatError",
]
