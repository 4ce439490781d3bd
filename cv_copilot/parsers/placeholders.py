"""Placeholder CV bodies used when a PDF yields no extractable text.

Image-only or unusual PDFs often decode without any text layer. Instead of
failing, the extractor returns one of these bodies, chosen from the file
name, and flags the result as a placeholder so callers can tell it apart
from real content.
"""

from typing import Tuple

PLACEHOLDER_HEADER = "Sample CV (no text layer could be read from the uploaded PDF)"

MARKETING_PLACEHOLDER = f"""{PLACEHOLDER_HEADER}

Professional Summary
Marketing professional with 5 years of experience in digital marketing, social media and content creation.

Work Experience
Position: Marketing Coordinator
Worked as a marketing coordinator for a consumer retail brand
Responsible for managing campaigns on social media and email
Helped the sales team with market research and analytics

Education
Bachelor of Commerce in Marketing
Graduated from a business school

Skills
Digital marketing, SEO, social media, content creation, analytics, Canva, WordPress, communication

Languages
English (fluent)
"""

TECHNICAL_PLACEHOLDER = f"""{PLACEHOLDER_HEADER}

Professional Summary
Software developer with 4 years of experience building web applications.

Work Experience
Position: Software Developer
Worked as a developer on web and mobile applications
Worked on REST APIs, automated testing and code reviews

Education
Bachelor of Science in Computer Science
Graduated from a university computer science program

Skills
Python, JavaScript, React, Node.js, SQL, Git, Docker, agile, scrum

Languages
English (fluent)
"""

GENERIC_PLACEHOLDER = f"""{PLACEHOLDER_HEADER}

Professional Summary
Professional with 3 years of experience in customer service, planning and project coordination.

Work Experience
Position: Project Coordinator
Worked as a coordinator supporting operations and customer service teams
Responsible for planning schedules and reporting

Education
Diploma in Business Administration

Skills
Communication, customer service, planning, Excel, PowerPoint, teamwork

Languages
English (fluent)
"""

# Ordered: the first group with a keyword in the file name wins
_FILE_NAME_CLASSES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("marketing", "communication", "social"), MARKETING_PLACEHOLDER),
    (("developer", "developpeur", "développeur", "software", "engineer", "dev", "tech"), TECHNICAL_PLACEHOLDER),
)


def placeholder_for(file_name: str) -> str:
    """Pick a placeholder CV body from a coarse classification of the file name."""
    lowered = (file_name or "").lower()
    for keywords, body in _FILE_NAME_CLASSES:
        if any(keyword in lowered for keyword in keywords):
            return body
    return GENERIC_PLACEHOLDER
