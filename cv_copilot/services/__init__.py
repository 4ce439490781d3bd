"""Services for CV Copilot."""

from .configuration_manager import (
    AnalysisConfig,
    AppConfig,
    ConfigurationManager,
    ExtractionConfig,
    LoggingConfig,
)
from .analysis_service import AnalysisService, AnalysisSession, analyze_upload

__all__ = [
    "AnalysisConfig",
    "AppConfig",
    "ConfigurationManager",
    "ExtractionConfig",
    "LoggingConfig",
    "AnalysisService",
    "AnalysisSession",
    "analyze_upload",
]
