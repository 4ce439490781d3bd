"""Job archetypes of the Quebec job market used for recommendations."""

from dataclasses import dataclass
from typing import Dict, Tuple

from ..models.enums import Locale


@dataclass(frozen=True)
class JobArchetype:
    """A target role with the skill keywords that indicate a fit."""
    title: str
    keywords: Tuple[str, ...]
    reasons: Dict[Locale, str]


JOB_CATALOG: Tuple[JobArchetype, ...] = (
    JobArchetype(
        title="Marketing Manager",
        keywords=("marketing", "digital marketing", "social media", "content creation", "seo"),
        reasons={
            Locale.FR: "Vos compétences en marketing digital et gestion de contenu correspondent "
                       "parfaitement aux besoins du marché québécois.",
            Locale.EN: "Your digital marketing and content management skills perfectly match "
                       "Quebec market needs.",
        },
    ),
    JobArchetype(
        title="Digital Marketing Specialist",
        keywords=("digital marketing", "social media", "seo", "analytics", "content creation"),
        reasons={
            Locale.FR: "Le marché québécois recherche activement des spécialistes en marketing "
                       "digital avec vos compétences.",
            Locale.EN: "The Quebec market is actively seeking digital marketing specialists with "
                       "your skills.",
        },
    ),
    JobArchetype(
        title="Project Manager",
        keywords=("project management", "leadership", "planning", "agile", "scrum"),
        reasons={
            Locale.FR: "Votre expérience en gestion de projet est très recherchée dans les "
                       "entreprises québécoises.",
            Locale.EN: "Your project management experience is highly sought after in Quebec companies.",
        },
    ),
    JobArchetype(
        title="Business Analyst",
        keywords=("analytics", "data analysis", "strategy", "planning", "excel"),
        reasons={
            Locale.FR: "Les entreprises québécoises ont besoin d'analystes d'affaires avec vos "
                       "compétences analytiques.",
            Locale.EN: "Quebec companies need business analysts with your analytical skills.",
        },
    ),
    JobArchetype(
        title="Content Creator",
        keywords=("content creation", "social media", "writing", "communication", "creativity"),
        reasons={
            Locale.FR: "Le secteur créatif québécois recherche des créateurs de contenu bilingues "
                       "comme vous.",
            Locale.EN: "The Quebec creative sector is seeking bilingual content creators like you.",
        },
    ),
    JobArchetype(
        title="Software Developer",
        keywords=("python", "javascript", "java", "react", "sql", "docker"),
        reasons={
            Locale.FR: "Le secteur technologique de Montréal et de Québec recrute activement des "
                       "développeurs avec votre profil technique.",
            Locale.EN: "The Montreal and Quebec City tech sector is actively hiring developers "
                       "with your technical profile.",
        },
    ),
    JobArchetype(
        title="Data Analyst",
        keywords=("data analysis", "sql", "excel", "tableau", "power bi", "statistics"),
        reasons={
            Locale.FR: "Les organisations québécoises misent sur les données et recherchent des "
                       "analystes maîtrisant vos outils.",
            Locale.EN: "Quebec organizations are investing in data and look for analysts who "
                       "master your tools.",
        },
    ),
    JobArchetype(
        title="Graphic Designer",
        keywords=("graphic design", "photoshop", "illustrator", "indesign", "figma", "canva"),
        reasons={
            Locale.FR: "Les agences créatives québécoises recherchent des designers à l'aise avec "
                       "vos logiciels.",
            Locale.EN: "Quebec creative agencies are looking for designers comfortable with your tools.",
        },
    ),
)
