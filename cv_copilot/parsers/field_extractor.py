"""Keyword and pattern based extraction of CV fields from raw text."""

import re
from typing import Callable, Iterable, List, Optional, Pattern, Tuple

from .text_document import KNOWN_PLACES, RegexTextDocument, TextDocument
from .vocabulary import (
    CERTIFICATION_CUES,
    CERTIFICATION_KEYWORDS,
    CERTIFICATION_VENDORS,
    CONTEXTUAL_LANGUAGE_NAMES,
    LANGUAGE_NAMES,
    PROFICIENCY_WORDS,
    SKILL_CATEGORY_WORDS,
    SKILL_MODIFIER_STOPWORDS,
    SKILL_VOCABULARY,
)
from ..models.profile import (
    MAX_CERTIFICATIONS,
    MAX_COMPANIES,
    MAX_DEGREES,
    MAX_EDUCATION_SNIPPETS,
    MAX_EXPERIENCE_SNIPPETS,
    MAX_INSTITUTIONS,
    MAX_JOB_TITLES,
    MAX_SKILLS,
    ExtractedFields,
    PersonalInfo,
)

CONTEXT_WINDOW = 50

_ROLE_NOUNS = (
    "manager|analyst|engineer|developer|designer|consultant|coordinator|specialist|"
    "director|assistant|administrator|representative|technician|advisor|officer"
)
_TITLE_NOUNS = (
    "Manager|Engineer|Developer|Analyst|Designer|Consultant|Specialist|Director|"
    "Coordinator|Officer|Architect|Scientist|Representative|Administrator"
)
_WORD_RUN = r"[A-Za-zÀ-ÿ&]+(?:[ \t]+(?!from\b|at\b|à\b|with\b|de\b|chez\b)[A-Za-zÀ-ÿ&]+)*"
_I = re.IGNORECASE

EXPERIENCE_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"\b(?:worked|working)[ \t]+as[ \t]+(?:an?[ \t]+)?([^\n.;]+)", _I),
    re.compile(r"\b(?:position|role|poste|rôle)[ \t]*:[ \t]*([^\n]+)", _I),
    re.compile(r"\b(?:employed|worked|working)[ \t]+(?:at|for)[ \t]+([^\n.;]+)", _I),
    re.compile(r"\bexperience[ \t]+as[ \t]+(?:an?[ \t]+)?([^\n.;]+)", _I),
    re.compile(r"\b(?:travaillé|travaille)[ \t]+(?:comme|en tant que)[ \t]+([^\n.;]+)", _I),
    re.compile(r"\b((?:senior|junior|lead|principal|chief|head)[ \t]+[A-Za-zÀ-ÿ][^\n,.;]*)", _I),
)
ROLE_NOUN_PATTERN = re.compile(rf"\b((?:[A-Z][\w&-]*[ \t]+){{0,2}}(?i:{_ROLE_NOUNS})s?)\b")

EDUCATION_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(
        r"\b((?:bachelor|master|doctorate|doctor|ph\.?d|mba|diploma|degree|licence|"
        r"maîtrise|baccalauréat|doctorat|diplôme)\b[^\n]*)",
        _I,
    ),
    re.compile(r"\b(?:graduated|studied|diplômée?)[ \t]+(?:from|at|de|à)[ \t]+([^\n.;]+)", _I),
    re.compile(
        r"\b((?:university|université|college|collège|cégep|cegep|institute|institut|école|school)\b[^\n,;]*)",
        _I,
    ),
    re.compile(r"\b((?:DEC|DEP|AEC)\b[^\n]*)"),
)

JOB_TITLE_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"\b(?:title|position|poste|role|rôle|titre)[ \t]*:[ \t]*([^\n,;|]+)", _I),
    re.compile(
        r"\b((?:senior|junior|lead|principal|chief|head|associate|assistant)[ \t]+"
        r"(?:[A-Za-z]+[ \t]+){0,2}?(?:manager|engineer|developer|analyst|designer|consultant|"
        r"specialist|director|coordinator|officer|architect|scientist))\b",
        _I,
    ),
    re.compile(rf"\b((?:[A-Z][A-Za-z&/-]*[ \t]+){{1,2}}(?:{_TITLE_NOUNS}))\b"),
    re.compile(
        r"\b((?:directeur|directrice|gestionnaire|chargé|chargée|analyste|développeur|développeuse|"
        r"conseiller|conseillère|coordonnateur|coordonnatrice|ingénieur|ingénieure)[ \t]+"
        r"(?:de[ \t]+|d'|du[ \t]+|des[ \t]+|en[ \t]+)?[A-Za-zÀ-ÿ]+)",
        _I,
    ),
)

COMPANY_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"(?<![\w@.])(?:at|chez|@)[ \t]+([A-ZÀ-Ý][\w&'.-]*(?:[ \t]+(?:[A-ZÀ-Ý][\w&'.-]*|&))*)"),
    re.compile(
        r"\b([A-ZÀ-Ý][\w&'-]*(?:[ \t]+[A-ZÀ-Ý][\w&'-]*){0,3}[ \t]+"
        r"(?:Inc|Corp|Corporation|Ltd|LLC|Ltée|Limited|Group|Groupe|Technologies|Solutions|"
        r"Consulting|Bank|Banque)\b\.?)"
    ),
    re.compile(r"\b(?:company|employer|entreprise|employeur|organization|organisation)[ \t]*:[ \t]*([^\n,;|]+)", _I),
)

DEGREE_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(
        rf"\b((?:bachelor|master|doctor|diploma|associate)(?:'s)?(?:[ \t]+degree)?[ \t]+(?:of|in)[ \t]+{_WORD_RUN})",
        _I,
    ),
    re.compile(
        rf"\b((?:B\.?Sc|M\.?Sc|B\.?A|M\.?A|B\.?Eng|M\.?Eng|B\.?Com|MBA|Ph\.?D|DEC|DEP|AEC|DESS)\b\.?"
        rf"(?:[ \t]+(?:in|en)[ \t]+{_WORD_RUN})?)"
    ),
    re.compile(
        rf"\b((?:baccalauréat|maîtrise|doctorat|licence|diplôme|certificat)[ \t]+(?:en|de|d'|in)[ \t]*{_WORD_RUN})",
        _I,
    ),
)

INSTITUTION_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(
        r"\b((?:University|Université|College|Collège|Cégep|Cegep|Institute|Institut|École|Ecole|School)"
        r"[ \t]+(?:of[ \t]+|de[ \t]+|du[ \t]+|des[ \t]+|d')?[A-ZÀ-Ý][\w'-]*(?:[ \t]+[A-ZÀ-Ý][\w'-]*){0,3})"
    ),
    re.compile(r"\b((?:[A-ZÀ-Ý][\w'-]*[ \t]+){1,3}(?:University|College|Institute|School|Polytechnique))\b"),
    re.compile(r"\b(HEC[ \t]+Montréal|Polytechnique[ \t]+Montréal|McGill|Concordia|UQAM|ÉTS)(?!\w)"),
)

_PROFICIENCY = "|".join(PROFICIENCY_WORDS)
LANGUAGE_PROFICIENCY_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(rf"\b([A-Za-zÀ-ÿ]+)[ \t]*[:(–-]?[ \t]*(?:{_PROFICIENCY})(?!\w)", _I),
    re.compile(rf"\b(?:{_PROFICIENCY})[ \t]+(?:in|en)[ \t]+([A-Za-zÀ-ÿ]+)", _I),
)

CERTIFICATION_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"\bcertified[ \t]+(?:in|as)[ \t]+[^\n,.;()]{2,60}", _I),
    re.compile(r"\bcertifiée?[ \t]+(?:en|comme)[ \t]+[^\n,.;()]{2,60}", _I),
    re.compile(
        r"\b(?:" + "|".join(CERTIFICATION_VENDORS) + r")[ \t]+Certified\b[^\n,.;()]{0,60}", _I
    ),
)

SKILL_CATEGORY_PATTERN = re.compile(
    r"\b([A-Za-z]+)[ \t]+(" + "|".join(SKILL_CATEGORY_WORDS) + r")\b", _I
)

_EDGE_CHARS = " \t\r\n-–—|,.;:()•*"


def keyword_pattern(keyword: str) -> Pattern[str]:
    """Compile a case-insensitive pattern matching a keyword as a whole token.

    Used for credential names, which are short acronyms (``cpa``, ``pmp``).
    """
    return re.compile(r"(?<![\w'’])" + re.escape(keyword) + r"(?!\w)", _I)


def clean_fragment(value: str) -> str:
    """Collapse whitespace and trim punctuation from both ends."""
    return re.sub(r"\s+", " ", value).strip(_EDGE_CHARS)


def collect(
    values: Iterable[str],
    cap: int,
    min_length: int = 1,
    max_length: Optional[int] = None,
    accept: Optional[Callable[[str], bool]] = None,
) -> Tuple[str, ...]:
    """Clean, length-filter and deduplicate values case-insensitively, keeping order.

    Args:
        values: Candidate values in detection order
        cap: Maximum number of values to keep
        min_length: Minimum cleaned length
        max_length: Maximum cleaned length
        accept: Optional extra predicate on the cleaned value

    Returns:
        At most ``cap`` distinct values
    """
    seen = set()
    kept: List[str] = []
    for value in values:
        cleaned = clean_fragment(value)
        if len(cleaned) < min_length or (max_length is not None and len(cleaned) > max_length):
            continue
        if accept is not None and not accept(cleaned):
            continue
        key = cleaned.casefold()
        if key in seen:
            continue
        seen.add(key)
        kept.append(cleaned)
        if len(kept) >= cap:
            break
    return tuple(kept)


class FieldExtractor:
    """Pulls skills, history, education, languages and contact details out of CV text.

    Every heuristic is a stateless pattern match, so the same text always
    yields the same fields. A missing field is an empty collection, never an
    error.
    """

    def __init__(self, document_factory: Callable[[str], TextDocument] = RegexTextDocument):
        """Initialize the extractor.

        Args:
            document_factory: Builds the TextDocument used for entity lookups
        """
        self.document_factory = document_factory
        self._certification_patterns = [
            (keyword, keyword_pattern(keyword)) for keyword in CERTIFICATION_KEYWORDS
        ]
        self._certification_cue_patterns = [keyword_pattern(cue) for cue in CERTIFICATION_CUES]

    def extract_fields(self, text: str) -> ExtractedFields:
        """Extract every field from raw CV text.

        Args:
            text: Raw CV text

        Returns:
            ExtractedFields with capped, deduplicated collections
        """
        document = self.document_factory(text or "")
        return ExtractedFields(
            skills=self.extract_skills(document),
            experience_snippets=self.extract_experience(document),
            education_snippets=self.extract_education(document),
            languages=self.extract_languages(document),
            certifications=self.extract_certifications(document),
            job_titles=self.extract_job_titles(document),
            companies=self.extract_companies(document),
            degrees=self.extract_degrees(document),
            institutions=self.extract_institutions(document),
            personal_info=self.extract_personal_info(document),
        )

    def extract_skills(self, document: TextDocument) -> Tuple[str, ...]:
        """Vocabulary terms found anywhere in the text, then "<modifier> <category word>" phrases."""
        lowered = document.text.lower()
        found = [skill for skill in SKILL_VOCABULARY if skill in lowered]
        for match in SKILL_CATEGORY_PATTERN.finditer(document.text):
            modifier, head = match.group(1).lower(), match.group(2).lower()
            if len(modifier) < 3 or modifier in SKILL_MODIFIER_STOPWORDS:
                continue
            found.append(f"{modifier} {head}")
        return collect(found, MAX_SKILLS)

    def extract_experience(self, document: TextDocument) -> Tuple[str, ...]:
        """Role phrases stripped of their cue, then bare role nouns."""
        snippets = collect(self._run_patterns(document, EXPERIENCE_PATTERNS), MAX_EXPERIENCE_SNIPPETS, 10, 200)
        role_nouns = document.extract_matches(ROLE_NOUN_PATTERN)
        return collect(list(snippets) + role_nouns, MAX_EXPERIENCE_SNIPPETS, 4)

    def extract_education(self, document: TextDocument) -> Tuple[str, ...]:
        return collect(self._run_patterns(document, EDUCATION_PATTERNS), MAX_EDUCATION_SNIPPETS, 5, 150)

    def extract_languages(self, document: TextDocument) -> Tuple[str, ...]:
        """Lowercase language names, direct mentions first, then proficiency statements."""
        lowered = document.text.lower()
        languages = [language for name, language in LANGUAGE_NAMES.items() if name in lowered]
        for candidate in self._run_patterns(document, LANGUAGE_PROFICIENCY_PATTERNS):
            word = candidate.lower()
            language = LANGUAGE_NAMES.get(word) or CONTEXTUAL_LANGUAGE_NAMES.get(word)
            if language:
                languages.append(language)
        return tuple(dict.fromkeys(languages))

    def extract_certifications(self, document: TextDocument) -> Tuple[str, ...]:
        """Known credentials, "certified in X" phrases and the context around each keyword."""
        text = document.text
        found = []
        first_positions = []
        for keyword, pattern in self._certification_patterns:
            match = pattern.search(text)
            if match:
                found.append(CERTIFICATION_KEYWORDS[keyword])
                first_positions.append(match)
        found.extend(self._run_patterns(document, CERTIFICATION_PATTERNS))
        for pattern in self._certification_cue_patterns:
            match = pattern.search(text)
            if match:
                first_positions.append(match)
        for match in first_positions:
            start = max(0, match.start() - CONTEXT_WINDOW)
            found.append(text[start:match.end() + CONTEXT_WINDOW])
        return collect(found, MAX_CERTIFICATIONS, 2)

    def extract_job_titles(self, document: TextDocument) -> Tuple[str, ...]:
        return collect(self._run_patterns(document, JOB_TITLE_PATTERNS), MAX_JOB_TITLES, 3, 100)

    def extract_companies(self, document: TextDocument) -> Tuple[str, ...]:
        return collect(
            self._run_patterns(document, COMPANY_PATTERNS),
            MAX_COMPANIES,
            2,
            80,
            accept=lambda value: value not in KNOWN_PLACES,
        )

    def extract_degrees(self, document: TextDocument) -> Tuple[str, ...]:
        return collect(self._run_patterns(document, DEGREE_PATTERNS), MAX_DEGREES, 3, 120)

    def extract_institutions(self, document: TextDocument) -> Tuple[str, ...]:
        return collect(self._run_patterns(document, INSTITUTION_PATTERNS), MAX_INSTITUTIONS, 3, 120)

    def extract_personal_info(self, document: TextDocument) -> PersonalInfo:
        """First email, phone, person name and place; each one is optional."""
        return PersonalInfo(
            name=_first(document.extract_person_names()),
            email=_first(document.extract_emails()),
            phone=_first(document.extract_phones()),
            location=_first(document.extract_place_names()),
        )

    def _run_patterns(self, document: TextDocument, patterns: Iterable[Pattern[str]]) -> List[str]:
        matches: List[str] = []
        for pattern in patterns:
            matches.extend(document.extract_matches(pattern))
        return matches


def _first(values: List[str]) -> Optional[str]:
    return values[0] if values else None
