"""
Grammar — грамматический профиль и согласование с числом

Профиль (род, число, падеж) нужен языкам с морфологическим согласованием.
Immutable Pydantic модель: каждое согласование создаёт новый профиль,
базовый профиль можно переиспользовать для всех троек одного числа.

Правило согласования (славянское 1 / 2-4 / 5+):
- единицы 0 или > 4, либо десятки == 1 (11-19) → множественное число;
  именительный падеж переходит в родительный ("пʼять доларів")
- единицы == 1 → единственное число, падеж без изменений
- единицы 2-4 → множественное число, падеж без изменений
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from numwords.core.math.triplets import last_two_digits


# =============================================================================
# ENUMS
# =============================================================================


class Gender(str, Enum):
    """Грамматический род"""

    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"

    @property
    def table_index(self) -> int:
        return _GENDER_ORDER.index(self)

    @classmethod
    def parse(cls, token: str) -> Optional["Gender"]:
        """Род по предпочтению пользователя или None."""
        return _GENDER_TOKENS.get(token.lower())


class GrammaticalNumber(str, Enum):
    """Грамматическое число"""

    SINGULAR = "singular"
    PLURAL = "plural"

    @property
    def table_index(self) -> int:
        return 0 if self is GrammaticalNumber.SINGULAR else 1

    @classmethod
    def parse(cls, token: str) -> Optional["GrammaticalNumber"]:
        """Число по предпочтению пользователя или None."""
        return _NUMBER_TOKENS.get(token.lower())


class Declension(str, Enum):
    """Падеж"""

    NOMINATIVE = "nominative"
    GENITIVE = "genitive"
    DATIVE = "dative"
    ACCUSATIVE = "accusative"
    INSTRUMENTAL = "instrumental"
    LOCATIVE = "locative"

    @property
    def table_index(self) -> int:
        return _DECLENSION_ORDER.index(self)

    @classmethod
    def parse(cls, token: str) -> Optional["Declension"]:
        """Падеж по предпочтению пользователя или None."""
        return _DECLENSION_TOKENS.get(token.lower())


_GENDER_ORDER = (Gender.MASCULINE, Gender.FEMININE, Gender.NEUTER)

_DECLENSION_ORDER = (
    Declension.NOMINATIVE,
    Declension.GENITIVE,
    Declension.DATIVE,
    Declension.ACCUSATIVE,
    Declension.INSTRUMENTAL,
    Declension.LOCATIVE,
)

_GENDER_TOKENS = {
    **dict.fromkeys(("ч", "чол", "чоловічий", "m", "masculine"), Gender.MASCULINE),
    **dict.fromkeys(("ж", "жін", "жіночий", "f", "feminine"), Gender.FEMININE),
    **dict.fromkeys(("с", "сер", "середній", "n", "neuter"), Gender.NEUTER),
}

_NUMBER_TOKENS = {
    **dict.fromkeys(("од", "однина", "sing", "singular"), GrammaticalNumber.SINGULAR),
    **dict.fromkeys(("мн", "множина", "pl", "plural"), GrammaticalNumber.PLURAL),
}

_DECLENSION_TOKENS = {
    **dict.fromkeys(("н", "називний", "nom", "nominative"), Declension.NOMINATIVE),
    **dict.fromkeys(("р", "родовий", "gen", "genitive"), Declension.GENITIVE),
    **dict.fromkeys(("д", "давальний", "dat", "dative"), Declension.DATIVE),
    **dict.fromkeys(("з", "знахідний", "acc", "accusative"), Declension.ACCUSATIVE),
    **dict.fromkeys(("о", "орудний", "ins", "instrumental"), Declension.INSTRUMENTAL),
    **dict.fromkeys(("м", "місцевий", "loc", "locative"), Declension.LOCATIVE),
}


# =============================================================================
# GRAMMATICAL PROFILE
# =============================================================================


class GrammaticalProfile(BaseModel):
    """
    Грамматический профиль: род, число, падеж.

    Immutable модель (frozen=True). Все "изменения" создают новый экземпляр
    через model_copy, поэтому базовый профиль безопасно переиспользуется.
    """

    gender: Gender = Field(default=Gender.MASCULINE, description="Род")
    number: GrammaticalNumber = Field(default=GrammaticalNumber.SINGULAR, description="Число")
    declension: Declension = Field(default=Declension.NOMINATIVE, description="Падеж")

    model_config = {"frozen": True}

    @classmethod
    def from_preferences(cls, preferences: list[str] | tuple[str, ...]) -> "GrammaticalProfile":
        """
        Профиль из свободных предпочтений.

        Для каждого измерения побеждает последнее подходящее предпочтение;
        нераспознанные строки игнорируются.

        Args:
            preferences: Строки вроде "f", "genitive", "множина"

        Returns:
            GrammaticalProfile
        """
        fields = {}
        for token in preferences:
            gender = Gender.parse(token)
            if gender is not None:
                fields["gender"] = gender
            number = GrammaticalNumber.parse(token)
            if number is not None:
                fields["number"] = number
            declension = Declension.parse(token)
            if declension is not None:
                fields["declension"] = declension
        return cls(**fields)

    # -------------------------------------------------------------------------
    # Copy-with-override
    # -------------------------------------------------------------------------

    def masculine(self) -> "GrammaticalProfile":
        return self.model_copy(update={"gender": Gender.MASCULINE})

    def feminine(self) -> "GrammaticalProfile":
        return self.model_copy(update={"gender": Gender.FEMININE})

    def singular(self) -> "GrammaticalProfile":
        return self.model_copy(update={"number": GrammaticalNumber.SINGULAR})

    def plural(self) -> "GrammaticalProfile":
        return self.model_copy(update={"number": GrammaticalNumber.PLURAL})

    def with_declension(self, declension: Declension) -> "GrammaticalProfile":
        return self.model_copy(update={"declension": declension})

    def is_plural(self) -> bool:
        return self.number is GrammaticalNumber.PLURAL

    # -------------------------------------------------------------------------
    # Согласование
    # -------------------------------------------------------------------------

    def agree_with_units(self, tens: int, units: int) -> "GrammaticalProfile":
        """
        Профиль слова, следующего за числом с данными последними цифрами.

        Args:
            tens: Цифра десятков (0-9)
            units: Цифра единиц (0-9)

        Returns:
            Новый профиль

        Examples:
            пʼять (0, 5): nominative → plural genitive
            двадцять одна (2, 1): singular, падеж без изменений
            одинадцять (1, 1): plural
        """
        if units == 0 or units > 4 or tens == 1:
            if self.declension is Declension.NOMINATIVE:
                return self.plural().with_declension(Declension.GENITIVE)
            return self.plural()
        if units == 1:
            return self.singular()
        return self.plural()

    def agree_with_number(self, magnitude: int | None) -> "GrammaticalProfile":
        """
        Согласование по целому числу.

        Args:
            magnitude: Целое или None для бесконечности (ведёт себя как 0)

        Returns:
            Новый профиль
        """
        tens, units = last_two_digits(magnitude or 0)
        return self.agree_with_units(tens, units)
