"""Assembles extracted fields into an immutable CV profile."""

from typing import Optional, Sequence

from .experience import ExperienceEstimator
from .field_extractor import FieldExtractor
from ..models.enums import ExtractionMode
from ..models.profile import CVProfile

SUMMARY_SKILL_COUNT = 5
NO_SKILLS_PHRASE = "various fields"
NO_EXPERIENCE_PHRASE = "various professional roles"


def generate_summary(years: int, skills: Sequence[str], experience_snippets: Sequence[str]) -> str:
    """Render the one-paragraph profile summary."""
    main_skills = ", ".join(skills[:SUMMARY_SKILL_COUNT]) or NO_SKILLS_PHRASE
    background = experience_snippets[0] if experience_snippets else NO_EXPERIENCE_PHRASE
    return (
        f"Professional with {years} years of experience specializing in {main_skills}. "
        f"Strong background in {background}."
    )


class ProfileBuilder:
    """Builds a CVProfile from raw text."""

    def __init__(
        self,
        field_extractor: Optional[FieldExtractor] = None,
        experience_estimator: Optional[ExperienceEstimator] = None,
    ):
        self.field_extractor = field_extractor or FieldExtractor()
        self.experience_estimator = experience_estimator or ExperienceEstimator()

    def build(
        self,
        text: str,
        extraction_mode: ExtractionMode = ExtractionMode.NATIVE,
        file_name: Optional[str] = None,
    ) -> CVProfile:
        """Extract fields, estimate experience and generate the summary.

        Args:
            text: Raw CV text
            extraction_mode: How the text was obtained
            file_name: Name of the uploaded file

        Returns:
            A new CVProfile
        """
        fields = self.field_extractor.extract_fields(text)
        years = self.experience_estimator.estimate_years(text)
        return CVProfile(
            **dict(fields),
            raw_text=text,
            years_of_experience=years,
            summary=generate_summary(years, fields.skills, fields.experience_snippets),
            extraction_mode=extraction_mode,
            file_name=file_name,
        )
