"""English — рендерер английского языка

Количественные: тройки от старшей к младшей, десятки и единицы через дефис,
"and" перед десятками/единицами последней тройки, если есть старшие тройки
("nine hundred and thirty-two" внутри большого числа).

Порядковые: суффикс к последнему слову количественного
(one → first, twenty → twentieth, seventy-three → seventy-third).

Годы: деление на "век" и остаток (1901 → nineteen oh-one), иначе количественное.
"""

from dataclasses import dataclass
from typing import Final, Sequence

from numwords.core.domain.currency import Currency, NameTemplate, apply_plural_marker
from numwords.core.domain.number import Number
from numwords.core.math.triplets import split_thousands, split_triplet
from numwords.lang.base import Language, check_scale


# =============================================================================
# ЛЕКСИКА
# =============================================================================

UNITS: Final[tuple[str, ...]] = (
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
)

TENS: Final[tuple[str, ...]] = (
    "ten", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)

TEENS: Final[tuple[str, ...]] = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)

MEGAS: Final[tuple[str, ...]] = (
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
    "undecillion",
    "duodecillion",
    "tredecillion",
    "quattuordecillion",
)

IRREGULAR_ORDINALS: Final[dict[str, str]] = {
    "one": "first",
    "two": "second",
    "three": "third",
    "four": "fourth",
    "five": "fifth",
    "six": "sixth",
    "seven": "seventh",
    "eight": "eighth",
    "nine": "ninth",
    "ten": "tenth",
    "eleven": "eleventh",
    "twelve": "twelfth",
}

HUNDRED: Final[str] = "hundred"
AND: Final[str] = "and"
MINUS: Final[str] = "minus"
POINT: Final[str] = "point"
INFINITY: Final[str] = "infinity"
ERA_BC: Final[str] = "BC"

ZERO: Final[str] = "zero"
ZERO_OH: Final[str] = "oh"
ZERO_NIL: Final[str] = "nil"

CENT: Final[str] = "cent{}"

# Валюты с неизменяемым множественным числом в английском
CURRENCY_OVERRIDES: Final[dict[Currency, NameTemplate]] = {
    Currency.CNY: "yuan",
    Currency.JPY: "yen",
    Currency.KZT: "tenge",
    Currency.THB: "baht",
}


# =============================================================================
# OPTIONS
# =============================================================================


@dataclass(frozen=True)
class EnglishOptions:
    """Предпочтения английского рендерера.

    prefer_oh: ноль как "oh" (и в цифрах дробной части)
    prefer_nil: ноль как "nil"
    """

    prefer_oh: bool = False
    prefer_nil: bool = False

    @classmethod
    def from_preferences(cls, preferences: Sequence[str]) -> "EnglishOptions":
        """Побеждает последнее из "oh" / "nil"."""
        for token in reversed(preferences):
            if token in (ZERO_OH, ZERO_NIL):
                return cls(prefer_oh=token == ZERO_OH, prefer_nil=token == ZERO_NIL)
        return cls()


# =============================================================================
# ENGLISH
# =============================================================================


class English(Language):
    """Рендерер английского языка."""

    def __init__(self, options: EnglishOptions | None = None):
        self.options = options or EnglishOptions()

    @property
    def zero_word(self) -> str:
        if self.options.prefer_oh:
            return ZERO_OH
        if self.options.prefer_nil:
            return ZERO_NIL
        return ZERO

    # -------------------------------------------------------------------------
    # Cardinal
    # -------------------------------------------------------------------------

    def int_to_cardinal(self, value: int) -> str:
        """Количественное для целого."""
        if value == 0:
            return self.zero_word

        words = []
        if value < 0:
            words.append(MINUS)
            value = -value

        triplets = split_thousands(value)
        check_scale(len(triplets) - 1, MEGAS)
        has_higher = len(triplets) > 1

        for i in reversed(range(len(triplets))):
            triplet = triplets[i]
            hundreds, tens, units = split_triplet(triplet)

            if hundreds > 0:
                words.append(UNITS[hundreds - 1])
                words.append(HUNDRED)

            if tens != 0 or units != 0:
                if i == 0 and has_higher:
                    words.append(AND)

                if tens == 0:
                    # 102 → [one hundred] two
                    words.append(UNITS[units - 1])
                elif tens == 1:
                    # 112 → [one hundred] twelve
                    words.append(TEENS[units])
                elif units == 0:
                    words.append(TENS[tens - 1])
                else:
                    # 142 → [one hundred] forty-two
                    words.append(f"{TENS[tens - 1]}-{UNITS[units - 1]}")

            if i != 0 and triplet != 0:
                words.append(MEGAS[i - 1])

        return " ".join(words)

    def float_to_cardinal(self, num: Number) -> str:
        """Количественное для нецелого: целая часть, "point", цифры дроби."""
        words = []
        if num.is_negative():
            words.append(MINUS)

        magnitude = num.magnitude()
        if magnitude != 0:
            words.append(self.int_to_cardinal(magnitude))

        digit_zero = ZERO_OH if self.options.prefer_oh else ZERO
        words.append(POINT)
        for digit in num.fractional_digits():
            words.append(digit_zero if digit == "0" else UNITS[int(digit) - 1])

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
        value = num.to_int()
        if value == 0:
            return f"{ZERO}th"

        words = self.int_to_cardinal(value).split(" ")
        last = words[-1]
        if "-" in last:
            # seventy-three → seventy-third
            prefix, _, tail = last.rpartition("-")
            words[-1] = f"{prefix}-{self._ordinal_word(tail)}"
        else:
            words[-1] = self._ordinal_word(last)

        return " ".join(words)

    @staticmethod
    def _ordinal_word(word: str) -> str:
        if word in IRREGULAR_ORDINALS:
            return IRREGULAR_ORDINALS[word]
        if word.endswith("y"):
            return f"{word[:-1]}ieth"
        return f"{word}th"

    def to_ordinal_num(self, num: Number) -> str:
        value = num.to_int()
        if value % 100 in (11, 12, 13):
            suffix = "th"
        else:
            suffix = {1: "st", 2: "nd", 3: "rd"}.get(value % 10, "th")
        return f"{value}{suffix}"

    # -------------------------------------------------------------------------
    # Year
    # -------------------------------------------------------------------------

    def to_year(self, num: Number) -> str:
        value = num.to_int()
        era = ""
        if value < 0:
            value = -value
            era = f" {ERA_BC}"

        high, low = divmod(value, 100)
        if high == 0 or (high % 10 == 0 and low < 10) or high >= 100:
            # 1004, 2001, 12345 не делятся естественно
            return f"{self.int_to_cardinal(value)}{era}"

        if low == 0:
            low_words = HUNDRED
        elif low < 10:
            low_words = f"{ZERO_OH}-{UNITS[low - 1]}"
        else:
            low_words = self.int_to_cardinal(low)

        return f"{self.int_to_cardinal(high)} {low_words}{era}"

    # -------------------------------------------------------------------------
    # Currency
    # -------------------------------------------------------------------------

    def currency_name(self, currency: Currency, plural: bool) -> str:
        template = CURRENCY_OVERRIDES.get(currency)
        if template is None:
            return currency.default_name(plural)
        return apply_plural_marker(template, plural)

    def subunit_name(self, currency: Currency, plural: bool) -> str:
        return currency.default_subunit_name(CENT, plural)

    def to_currency(self, num: Number, currency: Currency) -> str:
        if num.is_infinite():
            sign = f"{MINUS} " if num.is_negative() else ""
            return f"{sign}an {INFINITY} of {self.currency_name(currency, True)}"

        if num.is_negative():
            return f"{MINUS} {self.to_currency(abs(num), currency)}"

        whole = num.to_int()
        whole_words = f"{self.int_to_cardinal(whole)} {self.currency_name(currency, whole != 1)}"
        if num.is_integral():
            return whole_words

        cents = num.subunits()
        if cents == 0:
            return whole_words

        cents_words = f"{self.int_to_cardinal(cents)} {self.subunit_name(currency, cents != 1)}"
        if whole == 0:
            return cents_words
        return f"{whole_words} {AND} {cents_words}"
