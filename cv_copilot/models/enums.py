"""Enumeration types for CV Copilot."""

from enum import Enum


class Locale(Enum):
    """Display language of rendered strings."""

    FR = "fr"
    EN = "en"

    @classmethod
    def _missing_(cls, value):
        """Handle case variants and qualified names such as "Locale.EN"."""
        if isinstance(value, str):
            if value.startswith("Locale."):
                value = value.split(".", 1)[1]
            for member in cls:
                if value.lower() in (member.value, member.name.lower()):
                    return member
        return None


class Priority(Enum):
    """Priority of a CV insight."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ExtractionMode(Enum):
    """How the raw text of a profile was obtained."""

    NATIVE = "native"
    PLACEHOLDER = "placeholder"
    NOTICE = "notice"

    @property
    def is_degraded(self) -> bool:
        """True when the text is not the document's own content."""
        return self != ExtractionMode.NATIVE
