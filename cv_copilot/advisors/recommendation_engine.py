"""Job recommendations scored by keyword overlap with a profile's skills."""

import logging
from typing import List, Optional, Sequence, Tuple

from .catalog import JOB_CATALOG, JobArchetype
from .localization import LocaleLike, resolve_locale
from ..models.advice import JobRecommendation
from ..models.profile import CVProfile
from ..utils.logging import get_logger

MAX_RECOMMENDATIONS = 5


def round_half_up(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator * 100`` to the nearest integer, halves up."""
    return (200 * numerator + denominator) // (2 * denominator)


def matching_skills(skills: Sequence[str], keywords: Sequence[str]) -> List[str]:
    """Get the skills containing any of the keywords, case-insensitively."""
    lowered_keywords = [keyword.lower() for keyword in keywords]
    return [
        skill for skill in skills
        if any(keyword in skill.lower() for keyword in lowered_keywords)
    ]


class RecommendationEngine:
    """Ranks the job catalog against a profile."""

    def __init__(
        self,
        catalog: Sequence[JobArchetype] = JOB_CATALOG,
        limit: int = MAX_RECOMMENDATIONS,
        logger: Optional[logging.Logger] = None,
    ):
        self.catalog: Tuple[JobArchetype, ...] = tuple(catalog)
        self.limit = limit
        self.logger = logger or get_logger("recommendation_engine")

    def score(self, archetype: JobArchetype, skills: Sequence[str]) -> int:
        """Score one archetype between 0 and 100."""
        if not archetype.keywords:
            return 0
        matches = len(matching_skills(skills, archetype.keywords))
        return min(100, round_half_up(matches, len(archetype.keywords)))

    def recommend(self, profile: CVProfile, locale: LocaleLike) -> List[JobRecommendation]:
        """Recommend up to ``limit`` archetypes, best score first.

        Archetypes without any matching skill are left out. Ties keep
        catalog order.
        """
        locale = resolve_locale(locale)
        recommendations = []
        for archetype in self.catalog:
            score = self.score(archetype, profile.skills)
            if score == 0:
                continue
            recommendations.append(
                JobRecommendation(
                    title=archetype.title,
                    reason=archetype.reasons[locale],
                    match_score=score,
                )
            )

        recommendations.sort(key=lambda recommendation: recommendation.match_score, reverse=True)
        self.logger.debug(f"{len(recommendations)} archetypes matched {len(profile.skills)} skills")
        return recommendations[:self.limit]
