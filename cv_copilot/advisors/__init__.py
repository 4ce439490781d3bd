"""Recommendation, insight and enhancement queries over a CV profile."""

from .catalog import JOB_CATALOG, JobArchetype
from .localization import resolve_locale
from .recommendation_engine import RecommendationEngine
from .insight_engine import REGIONAL_KEYWORDS, InsightEngine
from .enhancement_advisor import EnhancementAdvisor, EnhancementRule

__all__ = [
    "JOB_CATALOG",
    "JobArchetype",
    "resolve_locale",
    "RecommendationEngine",
    "REGIONAL_KEYWORDS",
    "InsightEngine",
    "EnhancementAdvisor",
    "EnhancementRule",
]
