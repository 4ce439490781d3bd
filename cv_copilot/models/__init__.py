"""Data models for CV Copilot."""

from .base import BaseModel, ValueModel
from .enums import ExtractionMode, Locale, Priority
from .profile import CVProfile, ExtractedFields, PersonalInfo
from .advice import EnhancementSuggestion, Insight, JobRecommendation

__all__ = [
    "BaseModel",
    "ValueModel",
    "ExtractionMode",
    "Locale",
    "Priority",
    "CVProfile",
    "ExtractedFields",
    "PersonalInfo",
    "EnhancementSuggestion",
    "Insight",
    "JobRecommendation",
]
