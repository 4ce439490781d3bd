"""Locale handling shared by the advisors."""

from typing import Mapping, Union

from ..models.enums import Locale

LocaleLike = Union[Locale, str]


def resolve_locale(locale: LocaleLike) -> Locale:
    """Normalize a locale given as an enum member or a code such as "fr"."""
    if isinstance(locale, Locale):
        return locale
    return Locale(locale)


def localize(texts: Mapping[Locale, str], locale: LocaleLike) -> str:
    """Pick the rendering of a message for a locale."""
    return texts[resolve_locale(locale)]
