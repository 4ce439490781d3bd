"""Completeness and regional-fit checks over a CV profile."""

import logging
from typing import Callable, List, Optional, Tuple

from .localization import LocaleLike, resolve_locale
from ..models.advice import Insight
from ..models.enums import Locale, Priority
from ..models.profile import CVProfile
from ..utils.logging import get_logger

MIN_SKILLS = 5
REGIONAL_KEYWORDS = ("quebec", "québec", "montreal", "montréal", "canada", "canadian")


def _insight(category: str, priority: Priority, locale: Locale, fr: Tuple[str, str, str],
             en: Tuple[str, str, str]) -> Insight:
    title, description, suggestion = fr if locale == Locale.FR else en
    return Insight(
        category=category,
        title=title,
        description=description,
        suggestion=suggestion,
        priority=priority,
    )


def check_skills(profile: CVProfile, locale: Locale) -> Optional[Insight]:
    count = len(profile.skills)
    if count >= MIN_SKILLS:
        return None
    return _insight(
        "skills", Priority.HIGH, locale,
        fr=(
            "Compétences limitées",
            f"Votre CV mentionne seulement {count} compétences spécifiques.",
            "Ajoutez plus de compétences techniques et soft skills pertinentes pour le marché québécois.",
        ),
        en=(
            "Limited Skills",
            f"Your CV mentions only {count} specific skills.",
            "Add more technical and soft skills relevant to the Quebec market.",
        ),
    )


def check_languages(profile: CVProfile, locale: Locale) -> Optional[Insight]:
    if profile.has_language("french") or profile.has_language("english"):
        return None
    return _insight(
        "languages", Priority.HIGH, locale,
        fr=(
            "Langues non spécifiées",
            "Aucune compétence linguistique n'est mentionnée dans votre CV.",
            "Spécifiez clairement vos compétences en français et en anglais avec votre niveau de maîtrise.",
        ),
        en=(
            "Languages Not Specified",
            "No language skills are mentioned in your CV.",
            "Clearly specify your French and English skills with your proficiency level.",
        ),
    )


def check_experience(profile: CVProfile, locale: Locale) -> Optional[Insight]:
    if profile.experience_snippets:
        return None
    return _insight(
        "experience", Priority.HIGH, locale,
        fr=(
            "Expérience professionnelle manquante",
            "Aucune expérience professionnelle n'a été détectée dans votre CV.",
            "Ajoutez vos expériences professionnelles avec des descriptions détaillées "
            "et des réalisations quantifiées.",
        ),
        en=(
            "Missing Professional Experience",
            "No professional experience was detected in your CV.",
            "Add your professional experiences with detailed descriptions and quantified achievements.",
        ),
    )


def check_education(profile: CVProfile, locale: Locale) -> Optional[Insight]:
    if profile.education_snippets:
        return None
    return _insight(
        "education", Priority.MEDIUM, locale,
        fr=(
            "Formation académique manquante",
            "Aucune formation académique n'a été détectée dans votre CV.",
            "Incluez votre formation académique avec les diplômes obtenus et les institutions fréquentées.",
        ),
        en=(
            "Missing Academic Background",
            "No academic background was detected in your CV.",
            "Include your academic background with degrees obtained and institutions attended.",
        ),
    )


def check_regional_experience(profile: CVProfile, locale: Locale) -> Optional[Insight]:
    lowered = profile.raw_text.lower()
    if any(keyword in lowered for keyword in REGIONAL_KEYWORDS):
        return None
    return _insight(
        "quebec", Priority.MEDIUM, locale,
        fr=(
            "Expérience québécoise manquante",
            "Aucune expérience au Québec ou au Canada n'est mentionnée.",
            "Si vous avez de l'expérience au Québec, mentionnez-la. Sinon, mettez l'accent sur "
            "votre adaptabilité et votre intérêt pour le marché québécois.",
        ),
        en=(
            "Missing Quebec Experience",
            "No experience in Quebec or Canada is mentioned.",
            "If you have experience in Quebec, mention it. Otherwise, emphasize your adaptability "
            "and interest in the Quebec market.",
        ),
    )


def check_french(profile: CVProfile, locale: Locale) -> Optional[Insight]:
    if profile.has_language("french"):
        return None
    return _insight(
        "french", Priority.HIGH, locale,
        fr=(
            "Compétences en français",
            "Le français est essentiel pour la plupart des emplois au Québec.",
            "Indiquez votre niveau de français et vos efforts pour l'améliorer.",
        ),
        en=(
            "French Language Skills",
            "French is essential for most jobs in Quebec.",
            "Indicate your French level and efforts to improve it.",
        ),
    )


Check = Callable[[CVProfile, Locale], Optional[Insight]]

GENERAL_CHECKS: Tuple[Check, ...] = (check_skills, check_languages, check_experience, check_education)
REGIONAL_CHECKS: Tuple[Check, ...] = (check_regional_experience, check_french)


class InsightEngine:
    """Runs an ordered battery of independent checks over a profile."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_logger("insight_engine")

    def general_insights(self, profile: CVProfile, locale: LocaleLike) -> List[Insight]:
        """Skills, languages, experience and education checks."""
        return self._run(GENERAL_CHECKS, profile, locale)

    def regional_insights(self, profile: CVProfile, locale: LocaleLike) -> List[Insight]:
        """Quebec experience and French language checks."""
        return self._run(REGIONAL_CHECKS, profile, locale)

    def analyze(self, profile: CVProfile, locale: LocaleLike) -> List[Insight]:
        """Run every check, general ones first."""
        return self._run(GENERAL_CHECKS + REGIONAL_CHECKS, profile, locale)

    def _run(self, checks: Tuple[Check, ...], profile: CVProfile, locale: LocaleLike) -> List[Insight]:
        locale = resolve_locale(locale)
        insights = [insight for insight in (check(profile, locale) for check in checks) if insight]
        self.logger.debug(f"{len(insights)} of {len(checks)} checks raised an insight")
        return insights
