"""Keyword dictionaries used by the field extractor."""

from typing import Dict, Tuple

SKILL_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    "technical": (
        "javascript", "typescript", "python", "java", "c#", "c++", "php", "ruby",
        "react", "angular", "vue.js", "node.js", "django", "flask", "sql", "mysql",
        "postgresql", "mongodb", "html", "css", "git", "docker", "kubernetes",
        "aws", "azure", "google cloud", "linux", "rest api", "graphql",
    ),
    "marketing": (
        "marketing", "digital marketing", "social media", "content creation", "seo",
        "sem", "google ads", "google analytics", "email marketing", "copywriting",
        "branding", "public relations", "market research", "community management",
        "influencer marketing",
    ),
    "business": (
        "project management", "leadership", "communication", "analytics",
        "data analysis", "customer service", "sales", "business development",
        "strategy", "planning", "negotiation", "budgeting", "accounting", "crm",
        "salesforce", "supply chain", "logistics", "human resources", "recruitment",
        "teamwork", "problem solving", "writing", "creativity",
    ),
    "design": (
        "photoshop", "illustrator", "indesign", "figma", "sketch", "canva",
        "ux design", "ui design", "graphic design", "adobe xd", "video editing",
        "after effects", "premiere pro",
    ),
    "language": (
        "french", "english", "spanish", "arabic", "mandarin", "german", "italian",
    ),
    "office": (
        "excel", "powerpoint", "word", "outlook", "teams", "slack", "zoom", "trello",
        "jira", "asana", "wordpress", "shopify", "sharepoint",
    ),
    "methodology": (
        "agile", "scrum", "kanban", "lean", "six sigma", "quality assurance",
        "testing", "devops", "itil",
    ),
    "data_ml": (
        "machine learning", "deep learning", "ai", "artificial intelligence",
        "data science", "statistics", "tableau", "power bi", "pandas",
        "tensorflow", "nlp",
    ),
}

SKILL_VOCABULARY: Tuple[str, ...] = tuple(
    skill for skills in SKILL_CATEGORIES.values() for skill in skills
)

# Head nouns for the "<modifier> <category word>" skill scan
SKILL_CATEGORY_WORDS: Tuple[str, ...] = (
    "management", "marketing", "design", "development", "analysis", "analytics",
    "engineering", "strategy",
)

SKILL_MODIFIER_STOPWORDS = frozenset(
    """
    a an the and or of in on at as to for with from into by our my your their
    his her its this that these those de la le les des du en et au aux sur
    senior junior strong good excellent solid proven team new led managed
    including experienced skilled various other key overall
    """.split()
)

# Languages matched anywhere in the text, with French spellings folded in
LANGUAGE_NAMES: Dict[str, str] = {
    "english": "english", "anglais": "english",
    "french": "french", "français": "french", "francais": "french",
    "spanish": "spanish", "espagnol": "spanish",
    "arabic": "arabic", "arabe": "arabic",
    "mandarin": "mandarin",
    "chinese": "chinese", "chinois": "chinese",
    "cantonese": "cantonese",
    "german": "german", "allemand": "german",
    "italian": "italian", "italien": "italian",
    "portuguese": "portuguese", "portugais": "portuguese",
    "russian": "russian", "russe": "russian",
    "japanese": "japanese", "japonais": "japanese",
    "korean": "korean", "coréen": "korean",
    "hindi": "hindi",
    "bengali": "bengali",
    "urdu": "urdu", "ourdou": "urdu",
    "punjabi": "punjabi",
    "persian": "persian", "farsi": "persian",
    "turkish": "turkish", "turc": "turkish",
    "vietnamese": "vietnamese", "vietnamien": "vietnamese",
    "tagalog": "tagalog",
    "romanian": "romanian", "roumain": "romanian",
    "ukrainian": "ukrainian", "ukrainien": "ukrainian",
    "hebrew": "hebrew", "hébreu": "hebrew",
}

# Names that double as ordinary words; only trusted next to a proficiency level
CONTEXTUAL_LANGUAGE_NAMES: Dict[str, str] = {
    "polish": "polish", "polonais": "polish",
    "dutch": "dutch", "néerlandais": "dutch",
    "greek": "greek", "grec": "greek",
    "creole": "creole", "créole": "creole",
    "swahili": "swahili",
    "tamil": "tamil",
    "czech": "czech", "tchèque": "czech",
    "swedish": "swedish", "suédois": "swedish",
    "norwegian": "norwegian",
    "danish": "danish",
    "finnish": "finnish",
    "hungarian": "hungarian",
    "thai": "thai",
    "malay": "malay",
    "indonesian": "indonesian",
    "wolof": "wolof",
    "lingala": "lingala",
    "amharic": "amharic",
    "somali": "somali",
}

PROFICIENCY_WORDS: Tuple[str, ...] = (
    "native", "fluent", "bilingual", "proficient", "intermediate", "advanced",
    "basic", "beginner", "conversational", "professional", "maternelle",
    "natif", "courant", "bilingue", "intermédiaire", "avancé",
    "débutant", "notions",
)

# Credentials reported as-is when present
CERTIFICATION_KEYWORDS: Dict[str, str] = {
    "pmp": "PMP",
    "prince2": "PRINCE2",
    "scrum master": "Scrum Master",
    "six sigma": "Six Sigma",
    "itil": "ITIL",
    "cpa": "CPA",
    "cfa": "CFA",
    "ccna": "CCNA",
    "comptia": "CompTIA",
    "togaf": "TOGAF",
    "iso 9001": "ISO 9001",
    "google analytics": "Google Analytics",
    "google ads": "Google Ads",
    "hubspot": "HubSpot",
}

# Words that introduce a certification without naming it
CERTIFICATION_CUES: Tuple[str, ...] = (
    "certification", "certified", "certificate", "certifié", "certifiée",
    "certificat", "accreditation", "accréditation", "license",
)

CERTIFICATION_VENDORS: Tuple[str, ...] = (
    "AWS", "Azure", "Google", "Microsoft", "Adobe", "Cisco", "Salesforce",
    "HubSpot", "Oracle", "Scrum", "Meta",
)
