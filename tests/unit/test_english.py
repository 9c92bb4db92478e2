"""
Тесты для English — рендерер английского языка

Покрытие:
- Количественные: ноль (zero / oh / nil), знак, "and" перед последней тройкой
- Дробные: "point" и цифры
- Порядковые и порядковые цифрами (11/12/13 → th)
- Годы: "oh-", "hundred", BC
- Валюта: единственное/множественное, центы, бесконечность
- Потолок слов разряда → CannotConvert
"""

import pytest

from numwords.core.domain.currency import Currency
from numwords.core.domain.errors import CannotConvert
from numwords.core.domain.number import Number
from numwords.lang.en import English, EnglishOptions


@pytest.fixture
def english():
    return English()


def n(value):
    return Number.of(value)


# =============================================================================
# ТЕСТЫ: Cardinal
# =============================================================================


class TestCardinal:
    """Количественные числительные."""

    def test_zero(self, english):
        assert english.to_cardinal(n(0)) == "zero"

    def test_zero_preferences(self):
        assert English(EnglishOptions(prefer_oh=True)).to_cardinal(n(0)) == "oh"
        assert English(EnglishOptions(prefer_nil=True)).to_cardinal(n(0)) == "nil"

    def test_last_zero_preference_wins(self):
        assert EnglishOptions.from_preferences(["oh", "nil"]) == EnglishOptions(prefer_nil=True)
        assert EnglishOptions.from_preferences(["nil", "oh"]) == EnglishOptions(prefer_oh=True)
        assert EnglishOptions.from_preferences(["feminine"]) == EnglishOptions()

    @pytest.mark.parametrize(
        "value, expected",
        [
            (7, "seven"),
            (13, "thirteen"),
            (20, "twenty"),
            (42, "forty-two"),
            (100, "one hundred"),
            (102, "one hundred two"),
            (112, "one hundred twelve"),
            (1000, "one thousand"),
            (1001, "one thousand and one"),
            (1000000, "one million"),
            (2000500, "two million five hundred"),
        ],
    )
    def test_values(self, english, value, expected):
        assert english.to_cardinal(n(value)) == expected

    def test_large_number(self, english):
        assert english.to_cardinal(n(38123147081932)) == (
            "thirty-eight trillion one hundred twenty-three billion one hundred "
            "forty-seven million eighty-one thousand nine hundred and thirty-two"
        )

    def test_negative(self, english):
        assert english.to_cardinal(n(-10)) == "minus ten"

    @pytest.mark.parametrize("value", [1, 21, 999, 123456])
    def test_sign_invariant(self, english, value):
        assert english.to_cardinal(n(-value)) == f"minus {english.to_cardinal(n(value))}"

    def test_infinity(self, english):
        assert english.to_cardinal(n("inf")) == "infinity"
        assert english.to_cardinal(n("-inf")) == "minus infinity"

    def test_scale_ceiling(self, english):
        assert english.to_cardinal(n(10**47)).startswith("one hundred quattuordecillion")
        with pytest.raises(CannotConvert):
            english.to_cardinal(n(10**48))


# =============================================================================
# ТЕСТЫ: Float
# =============================================================================


class TestFloat:
    """Дробные числа."""

    def test_float(self, english):
        assert english.to_cardinal(n(12.51)) == "twelve point five one"

    def test_zero_integral_part_omitted(self, english):
        assert english.to_cardinal(n(0.5)) == "point five"
        assert english.to_cardinal(n(-0.5)) == "minus point five"

    def test_zero_digits(self, english):
        assert english.to_cardinal(n("1.05")) == "one point zero five"
        oh = English(EnglishOptions(prefer_oh=True))
        assert oh.to_cardinal(n("1.05")) == "one point oh five"


# =============================================================================
# ТЕСТЫ: Ordinal
# =============================================================================


class TestOrdinal:
    """Порядковые числительные."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "zeroth"),
            (1, "first"),
            (2, "second"),
            (12, "twelfth"),
            (13, "thirteenth"),
            (20, "twentieth"),
            (73, "seventy-third"),
            (102, "one hundred second"),
            (1000, "one thousandth"),
        ],
    )
    def test_ordinal(self, english, value, expected):
        assert english.to_ordinal(n(value)) == expected

    def test_zeroth_ignores_zero_preference(self):
        assert English(EnglishOptions(prefer_nil=True)).to_ordinal(n(0)) == "zeroth"

    @pytest.mark.parametrize(
        "value, expected",
        [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"),
         (13, "13th"), (21, "21st"), (102, "102nd"), (111, "111th"), (1013, "1013th")],
    )
    def test_ordinal_num(self, english, value, expected):
        assert english.to_ordinal_num(n(value)) == expected


# =============================================================================
# ТЕСТЫ: Year
# =============================================================================


class TestYear:
    """Годы."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1901, "nineteen oh-one"),
            (1990, "nineteen ninety"),
            (2001, "two thousand and one"),
            (2023, "twenty twenty-three"),
            (5500, "fifty-five hundred"),
            (1004, "one thousand and four"),
            (44, "forty-four"),
            (-44, "forty-four BC"),
            (-500, "five hundred BC"),
            (12345, "twelve thousand three hundred and forty-five"),
        ],
    )
    def test_year(self, english, value, expected):
        assert english.to_year(n(value)) == expected


# =============================================================================
# ТЕСТЫ: Currency
# =============================================================================


class TestCurrency:
    """Суммы в валюте."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.01, "one dollar and one cent"),
            (0.20, "twenty cents"),
            (0, "zero dollars"),
            (1, "one dollar"),
            (2, "two dollars"),
            (0.01, "one cent"),
            (3.999, "three dollars"),
            (-1.5, "minus one dollar and fifty cents"),
        ],
    )
    def test_dollar(self, english, value, expected):
        assert english.to_currency(n(value), Currency.DOLLAR) == expected

    def test_catalog_names(self, english):
        assert english.to_currency(n(2), Currency.EUR) == "two euros"
        assert english.to_currency(n(2.5), Currency.MXN) == "two mexican pesos and fifty centavos"
        assert english.to_currency(n(1), Currency.BRL) == "one real"
        assert english.to_currency(n(3), Currency.BRL) == "three reais"

    def test_invariant_plurals(self, english):
        assert english.to_currency(n(100), Currency.JPY) == "one hundred yen"
        assert english.to_currency(n(5), Currency.CNY) == "five yuan"

    def test_half_up_cents(self, english):
        assert english.to_currency(n("0.205"), Currency.DOLLAR) == "twenty-one cents"

    def test_infinity(self, english):
        assert english.to_currency(n("inf"), Currency.DOLLAR) == "an infinity of dollars"
        assert english.to_currency(n("-inf"), Currency.EUR) == "minus an infinity of euros"
