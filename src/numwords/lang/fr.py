"""French — рендерер французского языка (Франция, Бельгия, Швейцария)

Региональные различия касаются только десятков 70-90:
- FR: soixante-dix, quatre-vingts, quatre-vingt-dix (двадцатеричный счёт)
- BE: septante, quatre-vingts, nonante
- CH: septante, huitante, nonante

Правила:
- "cent" и "mille" без "un"; "mille" не изменяется
- million и выше: "un million", множественное "millions"
- "et" при единице после 20-60 и в 71 (и в septante/huitante/nonante)
- "quatre-vingts" и "deux cents" получают "s" в конце числа или перед
  существительным разряда (не перед "mille")
- reformed (орфография 1990): все слова через дефис, "-et-"
- в сумме числительное согласуется с родом валюты ("une livre sterling")
"""

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Final, Optional, Sequence

from numwords.core.domain.currency import Currency, NameTemplate, apply_plural_marker
from numwords.core.domain.number import Number
from numwords.core.math.triplets import split_thousands, split_triplet
from numwords.lang.base import Language, check_scale


# =============================================================================
# ЛЕКСИКА
# =============================================================================

UNITS: Final[tuple[str, ...]] = (
    "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf",
)

TEENS: Final[tuple[str, ...]] = (
    "dix", "onze", "douze", "treize", "quatorze",
    "quinze", "seize", "dix-sept", "dix-huit", "dix-neuf",
)

# Десятки 10..60 общие для всех регионов
TENS_COMMON: Final[tuple[str, ...]] = (
    "dix", "vingt", "trente", "quarante", "cinquante", "soixante",
)

MEGAS: Final[tuple[str, ...]] = (
    "mille",
    "million",
    "milliard",
    "billion",
    "billiard",
    "trillion",
    "trilliard",
    "quadrillion",
    "quadrilliard",
    "quintillion",
    "quintilliard",
    "sextillion",
    "sextilliard",
    "septillion",
    "septilliard",
    "octillion",
    "octilliard",
    "nonillion",
    "nonilliard",
    "décillion",
    "décilliard",
    "unodécillion",
    "unodécilliard",
    "duodécillion",
    "duodécilliard",
    "trédécillion",
    "trédécilliard",
    "quattuordécillion",
    "quattuordécilliard",
    "quindécillion",
    "quindécilliard",
    "sexdécillion",
    "sexdécilliard",
)

HUNDRED: Final[str] = "cent"
FEMININE_ONE: Final[str] = "une"
MINUS: Final[str] = "moins"
ZERO: Final[str] = "zéro"
POINT: Final[str] = "virgule"
INFINITY: Final[str] = "infinité"
AND: Final[str] = "et"
ERA_BC: Final[str] = "avant JC"

FIRST_MASCULINE: Final[str] = "premier"
FIRST_FEMININE: Final[str] = "première"
ORDINAL_SUFFIX: Final[str] = "ième"

CENTIME: Final[str] = "centime{}"

# Французские названия валют; "{}" маркер множественного числа
CURRENCY_NAMES: Final[dict[Currency, NameTemplate]] = {
    Currency.ARS: "peso{} argentin{}",
    Currency.AUD: "dollar{} australien{}",
    Currency.BRL: ("réal", "réaux"),
    Currency.CAD: "dollar{} canadien{}",
    Currency.CLP: "peso{} chilien{}",
    Currency.COP: "peso{} colombien{}",
    Currency.DZD: "dinar{} algérien{}",
    Currency.GBP: "livre{} sterling",
    Currency.HKD: "dollar{} de Hong Kong",
    Currency.IDR: "roupie{} indonésienne{}",
    Currency.ILS: "shekel{}",
    Currency.INR: "roupie{}",
    Currency.KWD: "dinar{} koweïtien{}",
    Currency.MXN: "peso{} mexicain{}",
    Currency.NOK: "couronne{} norvégienne{}",
    Currency.NZD: ("dollar néo-zélandais", "dollars néo-zélandais"),
    Currency.PHP: "peso{} philippin{}",
    Currency.PLN: "złoty{}",
    Currency.QAR: "riyal{} qatarien{}",
    Currency.RUB: "rouble{}",
    Currency.SAR: "riyal{} saoudien{}",
    Currency.SGD: "dollar{} de Singapour",
    Currency.THB: "baht{}",
    Currency.TRY: "livre{} turque{}",
    Currency.TWD: "dollar{} de Taïwan",
    Currency.UAH: "hryvnia{}",
    Currency.USD: "dollar{} américain{}",
    Currency.UYU: "peso{} uruguayen{}",
}

SUBUNIT_NAMES: Final[dict[Currency, NameTemplate]] = {
    Currency.UAH: "kopeck{}",
}

# Валюты женского рода: "une livre", "vingt et une roupies"
FEMININE_CURRENCIES: Final[frozenset[Currency]] = frozenset(
    {Currency.GBP, Currency.IDR, Currency.INR, Currency.NOK, Currency.TRY, Currency.UAH}
)

PREFERENCES_FEMININE: Final[frozenset[str]] = frozenset({"feminine", "feminin", "féminin", "f"})
PREFERENCES_REFORMED: Final[frozenset[str]] = frozenset(
    {"reformed", "1990", "rectifié", "rectification"}
)


# =============================================================================
# REGIONS
# =============================================================================


class RegionFrench(str, Enum):
    """Регион французского языка"""

    FR = "FR"
    BE = "BE"
    CH = "CH"


# Названия 70, 80, 90; None: двадцатеричная форма (база + дюжина)
_REGIONAL_TENS: Final[dict[RegionFrench, tuple[Optional[str], str, Optional[str]]]] = {
    RegionFrench.FR: (None, "quatre-vingt", None),
    RegionFrench.BE: ("septante", "quatre-vingt", "nonante"),
    RegionFrench.CH: ("septante", "huitante", "nonante"),
}


# =============================================================================
# OPTIONS
# =============================================================================


@dataclass(frozen=True)
class FrenchOptions:
    """Предпочтения французского рендерера."""

    feminine: bool = False
    reformed: bool = False
    region: RegionFrench = RegionFrench.FR

    @classmethod
    def from_preferences(
        cls,
        preferences: Sequence[str],
        region: RegionFrench = RegionFrench.FR,
    ) -> "FrenchOptions":
        return cls(
            feminine=any(p in PREFERENCES_FEMININE for p in preferences),
            reformed=any(p in PREFERENCES_REFORMED for p in preferences),
            region=region,
        )


# =============================================================================
# FRENCH
# =============================================================================


class French(Language):
    """Рендерер французского языка."""

    def __init__(self, options: FrenchOptions | None = None):
        self.options = options or FrenchOptions()
        self._seventy, self._eighty, self._ninety = _REGIONAL_TENS[self.options.region]

    @property
    def separator(self) -> str:
        return "-" if self.options.reformed else " "

    def _with_gender(self, feminine: bool) -> "French":
        """Тот же рендерер с другим родом (регион и орфография сохраняются)."""
        if self.options.feminine == feminine:
            return self
        return French(replace(self.options, feminine=feminine))

    def _masculine(self) -> "French":
        return self._with_gender(False)

    # -------------------------------------------------------------------------
    # Cardinal
    # -------------------------------------------------------------------------

    def _unit(self, units: int, final: bool) -> str:
        if units == 1 and final and self.options.feminine:
            return FEMININE_ONE
        return UNITS[units - 1]

    def _tens_units(self, tens: int, units: int, final: bool, pluralize: bool) -> str:
        """Десятки и единицы тройки (tens + units > 0)."""
        et = "-et-" if self.options.reformed else f" {AND} "

        if tens == 0:
            return self._unit(units, final)
        if tens == 1:
            return TEENS[units]

        if tens == 7 and self._seventy is None:
            # soixante-dix, soixante et onze, soixante-douze
            joiner = et if units == 1 else "-"
            return f"{TENS_COMMON[5]}{joiner}{TEENS[units]}"
        if tens == 9 and self._ninety is None:
            # quatre-vingt-dix, quatre-vingt-onze
            return f"{self._eighty}-{TEENS[units]}"
        if tens == 8 and self._eighty == "quatre-vingt":
            if units == 0:
                return f"{self._eighty}s" if pluralize else self._eighty
            # quatre-vingt-un без "et"
            return f"{self._eighty}-{self._unit(units, final)}"

        tens_word = (
            TENS_COMMON[tens - 1]
            if tens <= 6
            else (self._seventy, self._eighty, self._ninety)[tens - 7]
        )
        if units == 0:
            return tens_word
        joiner = et if units == 1 else "-"
        return f"{tens_word}{joiner}{self._unit(units, final)}"

    def int_to_cardinal(self, value: int) -> str:
        """Количественное для целого."""
        if value == 0:
            return ZERO

        words = []
        if value < 0:
            words.append(MINUS)
            value = -value

        triplets = split_thousands(value)
        check_scale(len(triplets) - 1, MEGAS)

        for i in reversed(range(len(triplets))):
            triplet = triplets[i]
            if triplet == 0:
                continue
            hundreds, tens, units = split_triplet(triplet)
            # "s" у cents / quatre-vingts: в конце числа или перед million и выше
            pluralize = i != 1

            if hundreds > 0:
                if hundreds != 1:
                    words.append(UNITS[hundreds - 1])
                if tens == 0 and units == 0 and hundreds > 1 and pluralize:
                    words.append(f"{HUNDRED}s")
                else:
                    words.append(HUNDRED)

            # 1000 → "mille", не "un mille"
            skip_one = i == 1 and triplet == 1
            if (tens != 0 or units != 0) and not skip_one:
                words.append(self._tens_units(tens, units, i == 0, pluralize))

            if i != 0:
                mega = MEGAS[i - 1]
                if i != 1 and triplet != 1:
                    mega = f"{mega}s"
                words.append(mega)

        return self.separator.join(words)

    def float_to_cardinal(self, num: Number) -> str:
        """Количественное для нецелого: целая часть, "virgule", цифры дроби."""
        words = []
        if num.is_negative():
            words.append(MINUS)

        magnitude = num.magnitude()
        if magnitude != 0:
            words.append(self.int_to_cardinal(magnitude))

        words.append(POINT)
        for digit in num.fractional_digits():
            words.append(ZERO if digit == "0" else UNITS[int(digit) - 1])

        return " ".join(words)

    def to_cardinal(self, num: Number) -> str:
        if num.is_infinite():
            return f"{MINUS} {INFINITY}" if num.is_negative() else INFINITY
        if num.is_integral():
            return self.int_to_cardinal(num.to_int())
        return self.float_to_cardinal(num)

    # -------------------------------------------------------------------------
    # Ordinal
    # -------------------------------------------------------------------------

    def to_ordinal(self, num: Number) -> str:
        if num.is_one():
            return FIRST_FEMININE if self.options.feminine else FIRST_MASCULINE

        # порядковое строится от мужской формы: vingt et unième
        cardinal = self._masculine().int_to_cardinal(num.to_int())
        return f"{self._ordinal_stem(cardinal)}{ORDINAL_SUFFIX}"

    @staticmethod
    def _ordinal_stem(cardinal: str) -> str:
        stem = cardinal
        last = re.split(r"[ -]", stem)[-1]
        if last in ("vingts", "cents") or (last.endswith("s") and last[:-1] in MEGAS):
            # deux centième, deux millionième
            stem = stem[:-1]
        if stem.endswith("e"):
            return stem[:-1]
        if stem.endswith("q"):
            # cinquième
            return f"{stem}u"
        if stem.endswith("f"):
            # neuvième
            return f"{stem[:-1]}v"
        return stem

    def to_ordinal_num(self, num: Number) -> str:
        value = num.to_int()
        if value == 1:
            return f"{value}{'re' if self.options.feminine else 'er'}"
        return f"{value}ème"

    # -------------------------------------------------------------------------
    # Year
    # -------------------------------------------------------------------------

    def to_year(self, num: Number) -> str:
        value = num.to_int()
        if value < 0:
            return f"{self.int_to_cardinal(-value)} {ERA_BC}"
        return self.int_to_cardinal(value)

    # -------------------------------------------------------------------------
    # Currency
    # -------------------------------------------------------------------------

    def currency_name(self, currency: Currency, plural: bool) -> str:
        template = CURRENCY_NAMES.get(currency)
        if template is None:
            return currency.default_name(plural)
        return apply_plural_marker(template, plural)

    def subunit_name(self, currency: Currency, plural: bool) -> str:
        template = SUBUNIT_NAMES.get(currency)
        if template is None:
            return currency.default_subunit_name(CENTIME, plural)
        return apply_plural_marker(template, plural)

    def to_currency(self, num: Number, currency: Currency) -> str:
        if num.is_infinite():
            sign = f"{MINUS} " if num.is_negative() else ""
            return f"{sign}une {INFINITY} de {self.currency_name(currency, True)}"

        if num.is_negative():
            return f"{MINUS} {self.to_currency(abs(num), currency)}"

        # род числительного задаёт валюта, разменная единица (centime) мужского рода
        amount = self._with_gender(currency in FEMININE_CURRENCIES)
        subunit_amount = self._masculine()

        whole = num.to_int()
        whole_words = f"{amount.int_to_cardinal(whole)} {self.currency_name(currency, whole != 1)}"
        if num.is_integral():
            return whole_words

        cents = num.subunits()
        if cents == 0:
            return whole_words

        cents_words = (
            f"{subunit_amount.int_to_cardinal(cents)} {self.subunit_name(currency, cents != 1)}"
        )
        if whole == 0:
            return cents_words
        return f"{whole_words} {AND} {cents_words}"
