"""CV profile models for CV Copilot."""

from typing import Optional, Tuple

from pydantic import Field

from .base import ValueModel
from .enums import ExtractionMode

MAX_SKILLS = 20
MAX_EXPERIENCE_SNIPPETS = 8
MAX_EDUCATION_SNIPPETS = 5
MAX_CERTIFICATIONS = 8
MAX_JOB_TITLES = 10
MAX_COMPANIES = 8
MAX_DEGREES = 5
MAX_INSTITUTIONS = 5


class PersonalInfo(ValueModel):
    """Contact details found in a CV; every field is optional."""

    name: Optional[str] = Field(None, description="Candidate's full name")
    email: Optional[str] = Field(None, description="Candidate's email address")
    phone: Optional[str] = Field(None, description="Candidate's phone number")
    location: Optional[str] = Field(None, description="First place name found in the CV")


class ExtractedFields(ValueModel):
    """Heuristic fields pulled out of raw CV text."""

    skills: Tuple[str, ...] = Field(default=(), max_length=MAX_SKILLS, description="Detected skills")
    experience_snippets: Tuple[str, ...] = Field(
        default=(), max_length=MAX_EXPERIENCE_SNIPPETS, description="Fragments describing work history"
    )
    education_snippets: Tuple[str, ...] = Field(
        default=(), max_length=MAX_EDUCATION_SNIPPETS, description="Fragments describing education"
    )
    languages: Tuple[str, ...] = Field(default=(), description="Lowercase language names, no duplicates")
    certifications: Tuple[str, ...] = Field(default=(), max_length=MAX_CERTIFICATIONS, description="Certifications")
    job_titles: Tuple[str, ...] = Field(default=(), max_length=MAX_JOB_TITLES, description="Job titles")
    companies: Tuple[str, ...] = Field(default=(), max_length=MAX_COMPANIES, description="Company names")
    degrees: Tuple[str, ...] = Field(default=(), max_length=MAX_DEGREES, description="Degrees")
    institutions: Tuple[str, ...] = Field(default=(), max_length=MAX_INSTITUTIONS, description="Institutions")
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo, description="Contact details")


class CVProfile(ExtractedFields):
    """Structured record derived from one uploaded CV.

    Built exactly once per successful analysis and never mutated; a new
    upload produces a new profile.
    """

    raw_text: str = Field(..., description="Full extracted text")
    years_of_experience: int = Field(3, ge=0, description="Best-effort estimate of years of experience")
    summary: str = Field("", description="Generated one-paragraph summary")
    extraction_mode: ExtractionMode = Field(ExtractionMode.NATIVE, description="How raw_text was obtained")
    file_name: Optional[str] = Field(None, description="Name of the uploaded file")

    def has_language(self, language: str) -> bool:
        """Check whether a language was detected (case-insensitive)."""
        return language.lower() in self.languages

    @property
    def is_placeholder(self) -> bool:
        """True when the profile was built from degraded-mode text."""
        return self.extraction_mode.is_degraded
