"""
Тесты для Converter — диспетчеризация запросов

Покрытие:
- to_words: языки, виды вывода, коды валют в "to"
- Предусловия до рендеринга (бесконечность / дробь / знак)
- Ошибки входа: язык, вид вывода, валюта, число
- ConversionRequest: immutable, with_currency, prefer, from_payload
- Логирование на границе диспетчеризации
"""

import logging

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from numwords import (
    CannotConvert,
    ConversionRequest,
    Currency,
    ErrorKind,
    FloatingOrdinal,
    FloatingYear,
    InfiniteOrdinal,
    InfiniteYear,
    InvalidLanguage,
    InvalidNumber,
    InvalidOutput,
    Lang,
    NegativeOrdinal,
    Number,
    OutputKind,
    build_request,
    convert,
    describe,
    parse_output,
    resolve_language,
    to_words,
)
from numwords.lang import English, RegionFrench, Ukrainian


# =============================================================================
# ТЕСТЫ: to_words
# =============================================================================


class TestToWords:
    """Сквозные сценарии."""

    def test_english_scenarios(self):
        assert to_words(0) == "zero"
        assert to_words(-10) == "minus ten"
        assert to_words(102, to="ordinal") == "one hundred second"
        assert to_words(102, to="ordinal_num") == "102nd"
        assert to_words(1901, to="year") == "nineteen oh-one"
        assert to_words(12.51) == "twelve point five one"

    def test_currency_output(self):
        assert to_words(1.01, to="currency") == "one dollar and one cent"
        assert to_words(0.20, to="currency") == "twenty cents"
        assert to_words(0, to="currency") == "zero dollars"

    def test_currency_code_in_to(self):
        assert to_words(2, to="EUR") == "two euros"
        assert to_words(2, to="eur") == "two euros"

    def test_currency_argument_selects_currency_output(self):
        assert to_words(2, currency="EUR") == "two euros"
        assert to_words(2, currency=Currency.JPY) == "two yen"

    def test_explicit_to_wins_over_currency(self):
        assert to_words(2, to="cardinal", currency="EUR") == "two"

    def test_languages(self):
        assert to_words(71, lang="fr") == "soixante et onze"
        assert to_words(71, lang="fr_BE") == "septante et un"
        assert to_words(80, lang="fr_CH") == "huitante"
        assert to_words(2023, lang="uk", to="year") == "дві тисячі двадцять третій рік"
        assert to_words(1, lang=Lang.UKRAINIAN, preferences=["f"]) == "одна"

    def test_preferences(self):
        assert to_words(0, preferences=["oh"]) == "oh"
        assert to_words(21, lang="fr", preferences=["feminine", "reformed"]) == "vingt-et-une"
        assert to_words(934.42, lang="uk", to="UAH", preferences=["орудний"]) == (
            "девʼятьмастами тридцятьма чотирма гривнями сорока двома копійками"
        )

    def test_string_values(self):
        assert to_words("1e3") == "one thousand"
        assert to_words("-inf") == "minus infinity"

    def test_deterministic(self):
        assert to_words(38123147081932) == to_words(38123147081932)


# =============================================================================
# ТЕСТЫ: Предусловия
# =============================================================================


class TestPreconditions:
    """Отказ до рендеринга."""

    @pytest.mark.parametrize("to", ["ordinal", "ordinal_num"])
    def test_ordinal_errors(self, to):
        with pytest.raises(InfiniteOrdinal):
            to_words(float("inf"), to=to)
        with pytest.raises(FloatingOrdinal):
            to_words(1.5, to=to)
        with pytest.raises(NegativeOrdinal):
            to_words(-3, to=to)

    def test_infinite_checked_before_sign(self):
        with pytest.raises(InfiniteOrdinal):
            to_words("-inf", to="ordinal")

    def test_floating_checked_before_sign(self):
        with pytest.raises(FloatingOrdinal):
            to_words(-1.5, to="ordinal")

    def test_year_errors(self):
        with pytest.raises(InfiniteYear):
            to_words("inf", to="year")
        with pytest.raises(FloatingYear):
            to_words(1.1, lang="uk", to="year")

    def test_negative_year_allowed(self):
        assert to_words(-44, to="year") == "forty-four BC"

    def test_negative_ordinal_in_every_language(self):
        for lang in Lang:
            with pytest.raises(NegativeOrdinal):
                to_words(-10000, lang=lang, to="ordinal", preferences=["ж"])

    def test_cannot_convert_propagates(self):
        with pytest.raises(CannotConvert):
            to_words(10**48, to="ordinal")
        with pytest.raises(CannotConvert):
            to_words(10**48, to="currency")

    def test_errors_compare_by_kind(self):
        assert NegativeOrdinal() == NegativeOrdinal("custom message")
        assert NegativeOrdinal() != FloatingOrdinal()
        assert NegativeOrdinal().kind is ErrorKind.NEGATIVE_ORDINAL
        assert str(InfiniteYear()) == describe(ErrorKind.INFINITE_YEAR)
        assert describe(ErrorKind.CANNOT_CONVERT) == "cannot convert number"


# =============================================================================
# ТЕСТЫ: Ошибки входа
# =============================================================================


class TestInputErrors:
    """Ошибки разбора запроса."""

    def test_unknown_language(self):
        with pytest.raises(InvalidLanguage):
            to_words(1, lang="de")

    def test_unknown_output(self):
        with pytest.raises(InvalidOutput):
            to_words(1, to="roman")

    def test_unknown_currency(self):
        with pytest.raises(InvalidOutput):
            to_words(1, currency="XYZ")

    def test_invalid_number(self):
        with pytest.raises(InvalidNumber):
            to_words("twelve")
        with pytest.raises(InvalidNumber):
            to_words(float("nan"))

    def test_parse_output(self):
        assert parse_output("year") == (OutputKind.YEAR, None)
        assert parse_output("Ordinal_Num") == (OutputKind.ORDINAL_NUM, None)
        assert parse_output("usd") == (OutputKind.CURRENCY, Currency.USD)


# =============================================================================
# ТЕСТЫ: Языки
# =============================================================================


class TestResolveLanguage:
    """Разрешение тега языка в рендерер."""

    def test_resolve(self):
        assert isinstance(resolve_language(Lang.ENGLISH), English)
        assert isinstance(resolve_language("uk"), Ukrainian)

    def test_french_regions(self):
        assert resolve_language("fr").options.region is RegionFrench.FR
        assert resolve_language("fr_BE").options.region is RegionFrench.BE
        assert resolve_language("fr_CH", ["f"]).options.feminine

    def test_unknown(self):
        with pytest.raises(InvalidLanguage):
            resolve_language("xx")

    def test_lang_parse(self):
        assert Lang.parse("fr_BE") is Lang.FRENCH_BE
        assert Lang.parse("FR") is None


# =============================================================================
# ТЕСТЫ: ConversionRequest
# =============================================================================


class TestConversionRequest:
    """Тесты модели запроса."""

    def test_defaults(self):
        request = ConversionRequest(value=42)
        assert request.value == Number.of(42)
        assert request.lang is Lang.ENGLISH
        assert request.output is OutputKind.CARDINAL
        assert request.currency is Currency.DOLLAR
        assert request.preferences == ()
        assert convert(request) == "forty-two"

    def test_frozen(self):
        request = ConversionRequest(value=1)
        with pytest.raises(ValidationError):
            request.lang = Lang.FRENCH

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            ConversionRequest(value="nan")

    def test_with_currency_switches_output(self):
        request = ConversionRequest(value=2).with_currency(Currency.EUR)
        assert request.output is OutputKind.CURRENCY
        assert convert(request) == "two euros"

    def test_prefer_appends(self):
        request = ConversionRequest(value=1, lang=Lang.UKRAINIAN).prefer("f").prefer("ins")
        assert request.preferences == ("f", "ins")
        assert convert(request) == "одною"

    def test_build_request(self):
        request = build_request(5, lang="fr", to="GBP", preferences=["x"])
        assert request.lang is Lang.FRENCH
        assert request.output is OutputKind.CURRENCY
        assert request.currency is Currency.GBP
        assert request.preferences == ("x",)

    def test_from_payload(self):
        request = ConversionRequest.from_payload(
            {"value": "1.01", "lang": "en", "to": "currency", "currency": "usd"}
        )
        assert convert(request) == "one US dollar and one cent"

    def test_from_payload_currency_only(self):
        request = ConversionRequest.from_payload({"value": 3, "currency": "EUR"})
        assert request.output is OutputKind.CURRENCY
        assert convert(request) == "three euros"

    def test_from_payload_schema_violation(self):
        """Нарушение схемы → ошибка входа по полю."""
        with pytest.raises(InvalidLanguage):
            ConversionRequest.from_payload({"value": 1, "lang": "de"})
        with pytest.raises(InvalidNumber):
            ConversionRequest.from_payload({"lang": "en"})
        with pytest.raises(InvalidNumber):
            ConversionRequest.from_payload({"value": True})
        with pytest.raises(InvalidOutput):
            ConversionRequest.from_payload({"value": 1, "currency": "US$"})
        with pytest.raises(InvalidOutput):
            ConversionRequest.from_payload({"value": 1, "gender": "f"})

    def test_from_payload_keeps_schema_error_as_cause(self):
        with pytest.raises(InvalidLanguage) as exc_info:
            ConversionRequest.from_payload({"value": 1, "lang": "de"})
        assert isinstance(exc_info.value.__cause__, SchemaValidationError)

    def test_from_payload_bad_number(self):
        with pytest.raises(InvalidNumber):
            ConversionRequest.from_payload({"value": "abc"})


# =============================================================================
# ТЕСТЫ: Логирование
# =============================================================================


class TestLogging:
    """Debug-записи на границе диспетчеризации."""

    def test_conversion_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="numwords.converter"):
            to_words(7, lang="fr")
        assert any("French" in record.getMessage() for record in caplog.records)

    def test_rejection_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="numwords.converter"):
            with pytest.raises(NegativeOrdinal):
                to_words(-1, to="ordinal")
        assert any("negative_ordinal" in record.getMessage() for record in caplog.records)
