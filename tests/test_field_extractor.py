import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cv_copilot.models.profile import (  # noqa: E402
    MAX_CERTIFICATIONS,
    MAX_COMPANIES,
    MAX_DEGREES,
    MAX_EDUCATION_SNIPPETS,
    MAX_EXPERIENCE_SNIPPETS,
    MAX_INSTITUTIONS,
    MAX_JOB_TITLES,
    MAX_SKILLS,
    PersonalInfo,
)
from cv_copilot.parsers.field_extractor import FieldExtractor, collect, keyword_pattern  # noqa: E402
from cv_copilot.parsers.text_document import RegexTextDocument  # noqa: E402
from cv_copilot.parsers.vocabulary import SKILL_VOCABULARY  # noqa: E402

SAMPLE_CV = """Marie Tremblay
marie.tremblay@example.com | 514-555-1234
Montréal, QC

Professional Summary
Marketing specialist with 6 years of experience in digital marketing and social media.

Work Experience
Position: Marketing Coordinator at Acme Media Inc.
Responsible for managing campaigns on social media and email
Helped the sales team with market research and analytics

Education
Bachelor of Commerce in Marketing
HEC Montréal

Skills
SEO, content creation, Google Analytics, Excel, communication, writing

Certifications
Google Analytics Certified Professional

Languages
French (native), English (fluent), Polish (intermediate)
"""

NO_HITS = "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor."


class SkillTests(unittest.TestCase):
    def setUp(self):
        self.extractor = FieldExtractor()

    def test_vocabulary_hits(self):
        fields = self.extractor.extract_fields(SAMPLE_CV)
        for skill in ("marketing", "digital marketing", "social media", "seo", "google analytics", "excel"):
            self.assertIn(skill, fields.skills)

    def test_keywords_match_inside_longer_words(self):
        fields = self.extractor.extract_fields("JavaScript developer, Englishman, leadership training, emailing")
        for skill in ("javascript", "java", "leadership", "ai"):
            self.assertIn(skill, fields.skills)
        self.assertEqual(fields.languages, ("english",))

    def test_category_word_phrases(self):
        fields = self.extractor.extract_fields("Led brand management and the team strategy for retail clients.")
        self.assertIn("brand management", fields.skills)
        self.assertNotIn("team strategy", fields.skills)

    def test_skills_are_capped_and_unique(self):
        text = ", ".join(SKILL_VOCABULARY) + "\n" + ", ".join(skill.upper() for skill in SKILL_VOCABULARY)
        skills = self.extractor.extract_fields(text).skills
        self.assertEqual(len(skills), MAX_SKILLS)
        self.assertEqual(len({skill.casefold() for skill in skills}), len(skills))


class ExperienceAndEducationTests(unittest.TestCase):
    def setUp(self):
        self.extractor = FieldExtractor()

    def test_cue_phrase_is_stripped(self):
        fields = self.extractor.extract_fields(SAMPLE_CV)
        self.assertEqual(fields.experience_snippets[0], "Marketing Coordinator at Acme Media Inc")
        self.assertIn("Marketing specialist", fields.experience_snippets)

    def test_experience_is_capped(self):
        text = "\n".join(f"Worked as a regional sales associate number {i}" for i in range(20))
        snippets = self.extractor.extract_fields(text).experience_snippets
        self.assertEqual(len(snippets), MAX_EXPERIENCE_SNIPPETS)

    def test_french_experience_cue(self):
        fields = self.extractor.extract_fields("J'ai travaillé comme conseillère en communication pendant trois ans.")
        self.assertIn("conseillère en communication pendant trois ans", fields.experience_snippets)

    def test_education(self):
        fields = self.extractor.extract_fields(SAMPLE_CV)
        self.assertIn("Bachelor of Commerce in Marketing", fields.education_snippets)
        self.assertIn("Bachelor of Commerce in Marketing", fields.degrees)
        self.assertIn("HEC Montréal", fields.institutions)

    def test_no_vocabulary_hits(self):
        fields = self.extractor.extract_fields(NO_HITS)
        self.assertEqual(fields.skills, ())
        self.assertEqual(fields.experience_snippets, ())
        self.assertEqual(fields.education_snippets, ())
        self.assertEqual(fields.languages, ())


class LanguageAndCertificationTests(unittest.TestCase):
    def setUp(self):
        self.extractor = FieldExtractor()

    def test_languages_are_lowercase_and_unique(self):
        fields = self.extractor.extract_fields(SAMPLE_CV + "\nFrançais, anglais, FRENCH")
        self.assertEqual(fields.languages, ("english", "french", "polish"))

    def test_contextual_language_needs_proficiency(self):
        fields = self.extractor.extract_fields("Polished the Polish translation of our brochure.")
        self.assertNotIn("polish", fields.languages)
        fields = self.extractor.extract_fields("Fluent in Polish and basic Dutch")
        self.assertIn("polish", fields.languages)

    def test_certifications(self):
        fields = self.extractor.extract_fields(SAMPLE_CV)
        self.assertEqual(fields.certifications[0], "Google Analytics")
        self.assertTrue(any("Certified Professional" in cert for cert in fields.certifications))
        self.assertLessEqual(len(fields.certifications), 8)


class PersonalInfoTests(unittest.TestCase):
    def test_contact_details(self):
        info = FieldExtractor().extract_fields(SAMPLE_CV).personal_info
        self.assertEqual(info.name, "Marie Tremblay")
        self.assertEqual(info.email, "marie.tremblay@example.com")
        self.assertEqual(info.phone, "514-555-1234")
        self.assertEqual(info.location, "Montréal, QC")

    def test_missing_contact_details(self):
        info = FieldExtractor().extract_fields(NO_HITS).personal_info
        self.assertEqual(info, PersonalInfo())

    def test_text_document_matches(self):
        document = RegexTextDocument("Call (418) 555-0199 or +1 514 555 0100.")
        self.assertEqual(document.extract_phones(), ["(418) 555-0199", "+1 514 555 0100"])
        self.assertEqual(document.extract_matches(r"\d{3}"), ["418", "555", "019", "514", "555", "010"])
        self.assertEqual(document.extract_matches(r"\+(\d)"), ["1"])


class OverflowTests(unittest.TestCase):
    """Long CVs stop at the per-field limits and never repeat a value."""

    SUBJECTS = ("History", "Physics", "Chemistry", "Biology", "Economics", "Philosophy", "Geography", "Music")
    CITIES = ("Toronto", "Ottawa", "Calgary", "Regina", "Victoria", "Halifax", "Winnipeg", "Moncton")

    def setUp(self):
        self.extractor = FieldExtractor()

    def lines(self, template, count=20):
        return "\n".join(template.format(i) for i in range(count))

    def test_certifications_capped(self):
        fields = self.extractor.extract_fields(self.lines("Certified in compliance area {}"))
        self.assertEqual(len(fields.certifications), MAX_CERTIFICATIONS)
        self.assertEqual(fields.certifications[0], "Certified in compliance area 0")

    def test_job_titles_capped(self):
        fields = self.extractor.extract_fields(self.lines("Title: Regional role {}"))
        self.assertEqual(len(fields.job_titles), MAX_JOB_TITLES)
        self.assertEqual(fields.job_titles[0], "Regional role 0")

    def test_companies_capped(self):
        fields = self.extractor.extract_fields(self.lines("Employer: Northern Firm {}"))
        self.assertEqual(len(fields.companies), MAX_COMPANIES)
        self.assertEqual(fields.companies[0], "Northern Firm 0")

    def test_degrees_and_education_capped(self):
        text = "\n".join(f"Bachelor of {subject}" for subject in self.SUBJECTS)
        fields = self.extractor.extract_fields(text)
        self.assertEqual(fields.degrees, tuple(f"Bachelor of {subject}" for subject in self.SUBJECTS[:MAX_DEGREES]))
        self.assertEqual(len(fields.education_snippets), MAX_EDUCATION_SNIPPETS)

    def test_institutions_capped(self):
        text = "\n".join(f"University of {city}" for city in self.CITIES)
        fields = self.extractor.extract_fields(text)
        self.assertEqual(
            fields.institutions, tuple(f"University of {city}" for city in self.CITIES[:MAX_INSTITUTIONS])
        )

    def test_languages_never_repeat_across_case_and_locale(self):
        names = ["English", "anglais", "ENGLISH", "Français", "french", "FRANCAIS", "Espagnol", "spanish",
                 "Allemand", "GERMAN", "italien", "Italian", "Portugais", "portuguese"]
        text = ", ".join(names * 5) + "\nFluent in English, Polish (intermediate)"
        fields = self.extractor.extract_fields(text)
        self.assertEqual(
            fields.languages, ("english", "french", "spanish", "german", "italian", "portuguese", "polish")
        )


class HelperTests(unittest.TestCase):
    def test_collect_dedupes_case_insensitively_in_order(self):
        self.assertEqual(collect([" Excel ", "excel", "SQL;", "sql", "Go"], cap=5, min_length=3), ("Excel", "SQL"))

    def test_keyword_pattern_respects_boundaries(self):
        pattern = keyword_pattern("c++")
        self.assertTrue(pattern.search("Languages: C++ and Python"))
        self.assertFalse(keyword_pattern("java").search("javascript"))

    def test_extraction_is_deterministic(self):
        extractor = FieldExtractor()
        self.assertEqual(extractor.extract_fields(SAMPLE_CV), extractor.extract_fields(SAMPLE_CV))


if __name__ == "__main__":
    unittest.main()
