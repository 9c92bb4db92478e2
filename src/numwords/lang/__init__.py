"""
Языки numwords

Закрытый набор языков: тег Lang разрешается в конкретный рендерер один раз
на запрос, вместе с его параметрами из предпочтений пользователя.
"""

from enum import Enum
from typing import Optional, Sequence

from numwords.core.domain.errors import InvalidLanguage
from numwords.lang.base import Language, check_scale
from numwords.lang.en import English, EnglishOptions
from numwords.lang.fr import French, FrenchOptions, RegionFrench
from numwords.lang.uk import Ukrainian


class Lang(str, Enum):
    """Поддерживаемый язык / региональный вариант"""

    ENGLISH = "en"
    FRENCH = "fr"
    FRENCH_BE = "fr_BE"
    FRENCH_CH = "fr_CH"
    UKRAINIAN = "uk"

    @classmethod
    def parse(cls, code: str) -> Optional["Lang"]:
        """
        Язык по коду ("en", "fr_BE", ...).

        Returns:
            Lang или None если код неизвестен
        """
        try:
            return cls(code)
        except ValueError:
            return None


_FRENCH_REGIONS = {
    Lang.FRENCH: RegionFrench.FR,
    Lang.FRENCH_BE: RegionFrench.BE,
    Lang.FRENCH_CH: RegionFrench.CH,
}


def resolve_language(lang: Lang | str, preferences: Sequence[str] = ()) -> Language:
    """
    Рендерер для языка с учётом предпочтений.

    Args:
        lang: Lang или его код
        preferences: Свободные строки ("oh", "feminine", "родовий", ...);
                     нераспознанные игнорируются

    Returns:
        Экземпляр Language

    Raises:
        InvalidLanguage: Если код языка неизвестен
    """
    if not isinstance(lang, Lang):
        parsed = Lang.parse(lang)
        if parsed is None:
            raise InvalidLanguage(f"Unknown language: {lang!r}")
        lang = parsed

    if lang is Lang.ENGLISH:
        return English(EnglishOptions.from_preferences(preferences))
    if lang is Lang.UKRAINIAN:
        return Ukrainian.from_preferences(preferences)
    return French(FrenchOptions.from_preferences(preferences, region=_FRENCH_REGIONS[lang]))


__all__ = [
    # Dispatch
    "Lang",
    "resolve_language",
    # Interface
    "Language",
    "check_scale",
    # Languages
    "English",
    "EnglishOptions",
    "French",
    "FrenchOptions",
    "RegionFrench",
    "Ukrainian",
]
