"""Advice models returned by the recommendation, insight and enhancement queries."""

from pydantic import Field

from .base import ValueModel
from .enums import Priority


class JobRecommendation(ValueModel):
    """A job archetype matched against a profile."""

    title: str = Field(..., description="Archetype title")
    reason: str = Field(..., description="Localized rationale")
    match_score: int = Field(..., ge=0, le=100, description="Keyword overlap score")


class Insight(ValueModel):
    """A completeness or quality observation about a CV."""

    category: str = Field(..., description="Insight category")
    title: str = Field(..., description="Localized title")
    description: str = Field(..., description="Localized description")
    suggestion: str = Field(..., description="Localized suggestion")
    priority: Priority = Field(..., description="Insight priority")


class EnhancementSuggestion(ValueModel):
    """Rewrite advice for one selected CV fragment."""

    original_text: str = Field(..., description="Fragment as selected by the user")
    suggestion: str = Field(..., description="Localized rewrite suggestion")
    reason: str = Field(..., description="Localized rationale")
    impact: str = Field(..., description="Localized impact label")
