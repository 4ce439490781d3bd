"""Best-effort estimate of a candidate's years of experience."""

import re
from typing import Pattern, Tuple

DEFAULT_YEARS = 3
SENIOR_YEARS = 5

EXPLICIT_YEARS_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"(?<!\d)(\d{1,2})\+?[ \t]*years?[ \t]+of[ \t]+(?:\w+[ \t]+)?experience", re.IGNORECASE),
    re.compile(r"(?<!\d)(\d{1,2})\+?[ \t]*years?[ \t]+in[ \t]+the[ \t]+field", re.IGNORECASE),
    re.compile(r"experience[ \t]*:[ \t]*(\d{1,2})\+?[ \t]*years?", re.IGNORECASE),
    re.compile(r"(?<!\d)(\d{1,2})\+?[ \t]*ans[ \t]+d['’][ \t]*expérience", re.IGNORECASE),
    re.compile(r"expérience[ \t]*:[ \t]*(\d{1,2})\+?[ \t]*ans", re.IGNORECASE),
)

# Matched anywhere in the text, so "leadership" counts as "lead"
SENIORITY_KEYWORDS: Tuple[str, ...] = ("senior", "lead", "principal", "director", "manager")


class ExperienceEstimator:
    """Derives an approximate number of years of experience from CV text.

    Explicit statements win, in pattern order; otherwise seniority keywords
    imply ``senior_years``; otherwise ``default_years`` is returned. Never
    fails.
    """

    def __init__(self, default_years: int = DEFAULT_YEARS, senior_years: int = SENIOR_YEARS):
        self.default_years = default_years
        self.senior_years = senior_years

    def estimate_years(self, text: str) -> int:
        text = text or ""
        for pattern in EXPLICIT_YEARS_PATTERNS:
            match = pattern.search(text)
            if match:
                return int(match.group(1))
        lowered = text.lower()
        if any(keyword in lowered for keyword in SENIORITY_KEYWORDS):
            return self.senior_years
        return self.default_years


def estimate_years(text: str) -> int:
    """Estimate years of experience with the default fallbacks."""
    return ExperienceEstimator().estimate_years(text)
