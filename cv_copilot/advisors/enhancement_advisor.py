"""Rewrite advice for a fragment of CV text selected by the user."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .localization import LocaleLike, localize, resolve_locale
from ..models.advice import EnhancementSuggestion
from ..models.enums import Locale
from ..models.profile import CVProfile

HIGH_IMPACT = {Locale.FR: "Élevé", Locale.EN: "High"}
MEDIUM_IMPACT = {Locale.FR: "Moyen", Locale.EN: "Medium"}


@dataclass(frozen=True)
class EnhancementRule:
    """Advice triggered by any of its markers appearing in a fragment."""
    markers: Tuple[str, ...]
    suggestion: Dict[Locale, str]
    reason: Dict[Locale, str]
    impact: Dict[Locale, str]

    def matches(self, lowered_fragment: str) -> bool:
        return any(marker in lowered_fragment for marker in self.markers)


ENHANCEMENT_RULES: Tuple[EnhancementRule, ...] = (
    EnhancementRule(
        markers=("responsible for", "responsable de"),
        suggestion={
            Locale.FR: "Remplacez \"responsable de\" par des verbes d'action plus forts comme "
                       "\"dirigé\", \"géré\", \"développé\"",
            Locale.EN: "Replace \"responsible for\" with stronger action verbs like "
                       "\"led\", \"managed\", \"developed\"",
        },
        reason={
            Locale.FR: "Les verbes d'action sont plus impactants et montrent mieux vos réalisations.",
            Locale.EN: "Action verbs are more impactful and better showcase your achievements.",
        },
        impact=HIGH_IMPACT,
    ),
    EnhancementRule(
        markers=("helped", "aidé"),
        suggestion={
            Locale.FR: "Quantifiez votre impact avec des chiffres concrets "
                       "(ex: \"augmenté les ventes de 25%\")",
            Locale.EN: "Quantify your impact with concrete numbers (e.g., \"increased sales by 25%\")",
        },
        reason={
            Locale.FR: "Les employeurs québécois recherchent des résultats mesurables et quantifiables.",
            Locale.EN: "Quebec employers look for measurable and quantifiable results.",
        },
        impact=HIGH_IMPACT,
    ),
    EnhancementRule(
        markers=("worked on", "travaillé sur"),
        suggestion={
            Locale.FR: "Spécifiez votre rôle exact et les technologies utilisées",
            Locale.EN: "Specify your exact role and technologies used",
        },
        reason={
            Locale.FR: "Plus de détails techniques montrent votre expertise spécifique.",
            Locale.EN: "More technical details show your specific expertise.",
        },
        impact=MEDIUM_IMPACT,
    ),
)

DEFAULT_RULE = EnhancementRule(
    markers=(),
    suggestion={
        Locale.FR: "Ajoutez des chiffres concrets et des résultats mesurables pour renforcer "
                   "cette affirmation",
        Locale.EN: "Add concrete numbers and measurable results to strengthen this statement",
    },
    reason={
        Locale.FR: "Les employeurs québécois privilégient les candidats qui peuvent démontrer "
                   "leur impact quantifiable.",
        Locale.EN: "Quebec employers prefer candidates who can demonstrate their quantifiable impact.",
    },
    impact=MEDIUM_IMPACT,
)


class EnhancementAdvisor:
    """Matches a fragment against marker phrases, first rule wins."""

    def __init__(self, rules: Tuple[EnhancementRule, ...] = ENHANCEMENT_RULES,
                 default_rule: EnhancementRule = DEFAULT_RULE):
        self.rules = rules
        self.default_rule = default_rule

    def rule_for(self, fragment: str) -> EnhancementRule:
        lowered = (fragment or "").lower()
        for rule in self.rules:
            if rule.matches(lowered):
                return rule
        return self.default_rule

    def suggest(self, profile: Optional[CVProfile], fragment: str, locale: LocaleLike) -> EnhancementSuggestion:
        """Build advice for ``fragment``.

        ``profile`` is accepted for context and does not influence the
        result, so the same fragment always gets the same advice.
        """
        locale = resolve_locale(locale)
        rule = self.rule_for(fragment)
        return EnhancementSuggestion(
            original_text=fragment,
            suggestion=localize(rule.suggestion, locale),
            reason=localize(rule.reason, locale),
            impact=localize(rule.impact, locale),
        )
