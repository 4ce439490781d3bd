"""Entity lookup capabilities used by the field extractor."""

import re
from abc import ABC, abstractmethod
from typing import List, Pattern, Union

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_PATTERN = re.compile(
    r"(?<![\w+])(?:\+?\d{1,3}[ .-]?)?(?:\(\d{3}\)|\d{3})[ .-]?\d{3}[ .-]?\d{4}(?!\d)"
)
_NAME_WORD = r"[A-ZÀ-Ý][a-zà-ÿ']+(?:-[A-ZÀ-Ý][a-zà-ÿ']+)?"
NAME_LINE_PATTERN = re.compile(
    rf"^[ \t]*({_NAME_WORD}(?:[ \t]+{_NAME_WORD}){{1,2}})[ \t]*$", re.MULTILINE
)
REGION_SUFFIX_PATTERN = re.compile(
    r"\b([A-ZÀ-Ý][a-zà-ÿ'-]+(?:[ -][A-ZÀ-Ý][a-zà-ÿ'-]+)*,[ \t]*"
    r"(?:QC|ON|BC|AB|MB|NS|NB|NL|PE|SK|Québec|Quebec|Ontario|Canada|France))\b"
)

# Gazetteer of places a CV for this market commonly mentions
KNOWN_PLACES = (
    "Montréal", "Montreal", "Québec", "Quebec", "Laval", "Gatineau", "Longueuil",
    "Sherbrooke", "Trois-Rivières", "Saguenay", "Lévis", "Terrebonne", "Toronto",
    "Ottawa", "Vancouver", "Calgary", "Edmonton", "Winnipeg", "Halifax", "Canada",
    "Paris", "Lyon", "Marseille", "Toulouse", "Bruxelles", "Brussels", "Genève",
    "Geneva", "France", "Belgique", "Belgium", "Suisse", "Switzerland", "Maroc",
    "Morocco", "Algérie", "Algeria", "Tunisie", "Tunisia", "Sénégal", "Senegal",
    "Haïti", "Haiti", "Liban", "Lebanon", "New York", "Boston", "London", "Londres",
)
_KNOWN_PLACE_PATTERN = re.compile(
    r"(?<![\w-])(" + "|".join(re.escape(place) for place in KNOWN_PLACES) + r")(?![\w-])"
)

# Capitalized words that start headings or titles rather than names
NON_NAME_WORDS = frozenset(
    """
    curriculum vitae resume résumé cv profile profil summary sommaire objective
    experience expérience work professional professionnelle education formation
    skills compétences languages langues certifications references références
    contact information informations personal personnelles projects projets
    interests intérêts hobbies sample manager analyst engineer developer designer
    consultant coordinator specialist director assistant marketing sales digital
    project business data software senior junior lead services google microsoft
    university université college collège school école institute institut
    """.split()
)


class TextDocument(ABC):
    """Read-only view of a text exposing the lookups the extractor needs."""

    def __init__(self, text: str):
        """Initialize the document.

        Args:
            text: Raw text to analyze
        """
        self.text = text or ""

    @abstractmethod
    def extract_emails(self) -> List[str]:
        """Get email addresses in order of appearance."""

    @abstractmethod
    def extract_phones(self) -> List[str]:
        """Get phone numbers in order of appearance."""

    @abstractmethod
    def extract_person_names(self) -> List[str]:
        """Get spans that look like person names, in order of appearance."""

    @abstractmethod
    def extract_place_names(self) -> List[str]:
        """Get place names in order of appearance."""

    @abstractmethod
    def extract_matches(self, pattern: Union[str, Pattern[str]]) -> List[str]:
        """Get every match of a pattern.

        The first capture group is returned when the pattern has one,
        otherwise the whole match.
        """


class RegexTextDocument(TextDocument):
    """TextDocument backed by regular expressions and a small gazetteer."""

    def extract_emails(self) -> List[str]:
        return EMAIL_PATTERN.findall(self.text)

    def extract_phones(self) -> List[str]:
        return [match.group(0).strip() for match in PHONE_PATTERN.finditer(self.text)]

    def extract_person_names(self) -> List[str]:
        names = []
        for candidate in NAME_LINE_PATTERN.findall(self.text):
            words = candidate.split()
            if any(word.lower() in NON_NAME_WORDS for word in words):
                continue
            if candidate in KNOWN_PLACES:
                continue
            names.append(" ".join(words))
        return names

    def extract_place_names(self) -> List[str]:
        found = []
        for pattern in (REGION_SUFFIX_PATTERN, _KNOWN_PLACE_PATTERN):
            for match in pattern.finditer(self.text):
                found.append((match.start(), match.group(1)))
        # Keep text order; a "City, QC" span wins over the bare city at the same position
        found.sort(key=lambda item: (item[0], -len(item[1])))
        places: List[str] = []
        covered_until = -1
        for start, place in found:
            if start < covered_until:
                continue
            places.append(place)
            covered_until = start + len(place)
        return places

    def extract_matches(self, pattern: Union[str, Pattern[str]]) -> List[str]:
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        matches = []
        for match in compiled.finditer(self.text):
            value = match.group(1) if compiled.groups else match.group(0)
            if value:
                matches.append(value)
        return matches
