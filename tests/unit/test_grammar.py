"""
Тесты для GrammaticalProfile и согласования с числом

Покрытие:
- Разбор предпочтений (украинские, английские, сокращённые токены)
- Immutable профиль: copy-with-override
- Правило 1 / 2-4 / 5+ (включая 11-19)
- Согласование с бесконечностью как с нулём
"""

import pytest
from pydantic import ValidationError

from numwords.core.domain.grammar import (
    Declension,
    Gender,
    GrammaticalNumber,
    GrammaticalProfile,
)


def profile(gender=Gender.MASCULINE, number=GrammaticalNumber.SINGULAR, declension=Declension.NOMINATIVE):
    return GrammaticalProfile(gender=gender, number=number, declension=declension)


# =============================================================================
# ТЕСТЫ: Токены
# =============================================================================


class TestTokens:
    """Тесты parse для род / число / падеж."""

    @pytest.mark.parametrize("token", ["ж", "жін", "ЖІНОЧИЙ", "f", "Feminine"])
    def test_feminine_tokens(self, token):
        assert Gender.parse(token) is Gender.FEMININE

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("р", Declension.GENITIVE),
            ("давальний", Declension.DATIVE),
            ("acc", Declension.ACCUSATIVE),
            ("орудний", Declension.INSTRUMENTAL),
            ("loc", Declension.LOCATIVE),
            ("nominative", Declension.NOMINATIVE),
        ],
    )
    def test_declension_tokens(self, token, expected):
        assert Declension.parse(token) is expected

    def test_number_tokens(self):
        assert GrammaticalNumber.parse("множина") is GrammaticalNumber.PLURAL
        assert GrammaticalNumber.parse("sing") is GrammaticalNumber.SINGULAR

    def test_unknown_token(self):
        assert Gender.parse("oh") is None
        assert Declension.parse("feminine") is None

    def test_table_index(self):
        assert Gender.NEUTER.table_index == 2
        assert Declension.LOCATIVE.table_index == 5
        assert GrammaticalNumber.PLURAL.table_index == 1


# =============================================================================
# ТЕСТЫ: Профиль
# =============================================================================


class TestProfile:
    """Тесты GrammaticalProfile."""

    def test_defaults(self):
        default = GrammaticalProfile()
        assert default.gender is Gender.MASCULINE
        assert default.number is GrammaticalNumber.SINGULAR
        assert default.declension is Declension.NOMINATIVE

    def test_from_preferences(self):
        result = GrammaticalProfile.from_preferences(["f", "ins", "reformed"])
        assert result == profile(Gender.FEMININE, declension=Declension.INSTRUMENTAL)

    def test_last_preference_wins(self):
        result = GrammaticalProfile.from_preferences(["ч", "ж", "р", "д"])
        assert result.gender is Gender.FEMININE
        assert result.declension is Declension.DATIVE

    def test_frozen(self):
        base = GrammaticalProfile()
        with pytest.raises(ValidationError):
            base.gender = Gender.FEMININE

    def test_copy_with_override_keeps_base(self):
        base = GrammaticalProfile()
        feminine = base.feminine().plural().with_declension(Declension.GENITIVE)
        assert base == GrammaticalProfile()
        assert feminine == profile(Gender.FEMININE, GrammaticalNumber.PLURAL, Declension.GENITIVE)
        assert feminine.masculine().singular().gender is Gender.MASCULINE
        assert feminine.is_plural()


# =============================================================================
# ТЕСТЫ: Согласование
# =============================================================================


class TestAgreement:
    """Тесты agree_with_units / agree_with_number."""

    def test_zero_nominative_becomes_genitive_plural(self):
        assert profile().agree_with_units(0, 0) == profile(
            number=GrammaticalNumber.PLURAL, declension=Declension.GENITIVE
        )

    def test_one_is_singular(self):
        assert profile().agree_with_units(0, 1) == profile()
        assert profile(Gender.FEMININE).agree_with_units(0, 1) == profile(Gender.FEMININE)

    def test_two_to_four_plural_same_case(self):
        assert profile(Gender.FEMININE).agree_with_units(8, 2) == profile(
            Gender.FEMININE, GrammaticalNumber.PLURAL
        )
        assert profile(Gender.FEMININE, declension=Declension.INSTRUMENTAL).agree_with_units(
            5, 4
        ) == profile(Gender.FEMININE, GrammaticalNumber.PLURAL, Declension.INSTRUMENTAL)

    def test_teens_plural(self):
        assert profile(declension=Declension.DATIVE).agree_with_units(1, 1) == profile(
            number=GrammaticalNumber.PLURAL, declension=Declension.DATIVE
        )
        assert profile().agree_with_units(1, 8) == profile(
            number=GrammaticalNumber.PLURAL, declension=Declension.GENITIVE
        )

    def test_agree_with_number(self):
        assert profile().agree_with_number(21) == profile()
        assert profile().agree_with_number(1000).declension is Declension.GENITIVE

    def test_infinity_behaves_like_zero(self):
        assert profile().agree_with_number(None) == profile().agree_with_number(0)
