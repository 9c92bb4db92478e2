"""
Converter — диспетчеризация запроса конвертации

Поток:
1. Запрос (число, язык, вид вывода, валюта, предпочтения)
2. Проверка предусловий (до любого рендеринга)
3. Язык → рендерер с параметрами из предпочтений
4. Вызов метода рендерера по виду вывода

Предусловия:
- ordinal / ordinal_num: бесконечность → InfiniteOrdinal,
  нецелое → FloatingOrdinal, отрицательное → NegativeOrdinal
- year: бесконечность → InfiniteYear, нецелое → FloatingYear
"""

import logging
from enum import Enum
from typing import Any, Optional, Sequence

from pydantic import BaseModel, Field, field_validator

from numwords.core.contracts.validators import check_conversion_request
from numwords.core.domain.currency import Currency
from numwords.core.domain.errors import (
    FloatingOrdinal,
    FloatingYear,
    InfiniteOrdinal,
    InfiniteYear,
    InvalidLanguage,
    InvalidOutput,
    NegativeOrdinal,
    Num2WordsError,
)
from numwords.core.domain.number import Number
from numwords.lang import Lang, resolve_language

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class OutputKind(str, Enum):
    """Вид вывода"""

    CARDINAL = "cardinal"
    ORDINAL = "ordinal"
    ORDINAL_NUM = "ordinal_num"
    YEAR = "year"
    CURRENCY = "currency"


def parse_output(tag: str) -> tuple[OutputKind, Optional[Currency]]:
    """
    Вид вывода по тегу.

    Код валюты означает вывод в валюте ("EUR" → CURRENCY, EUR).

    Args:
        tag: "cardinal", "ordinal", "ordinal_num", "year", "currency" или код валюты

    Returns:
        (OutputKind, Currency или None)

    Raises:
        InvalidOutput: Если тег не вид вывода и не код валюты
    """
    try:
        return OutputKind(tag.lower()), None
    except ValueError:
        pass

    currency = Currency.parse(tag)
    if currency is None:
        raise InvalidOutput(f"Unknown output kind or currency: {tag!r}")
    return OutputKind.CURRENCY, currency


def parse_currency(code: str) -> Currency:
    """Валюта по коду или InvalidOutput."""
    currency = Currency.parse(code)
    if currency is None:
        raise InvalidOutput(f"Unknown currency: {code!r}")
    return currency


# =============================================================================
# REQUEST
# =============================================================================


class ConversionRequest(BaseModel):
    """
    Запрос конвертации.

    Immutable модель (frozen=True). Создаётся один раз на вызов.
    """

    value: Number = Field(..., description="Число")
    lang: Lang = Field(default=Lang.ENGLISH, description="Язык")
    output: OutputKind = Field(default=OutputKind.CARDINAL, description="Вид вывода")
    currency: Currency = Field(default=Currency.DOLLAR, description="Валюта для вывода currency")
    preferences: tuple[str, ...] = Field(default=(), description="Предпочтения языка")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> Number:
        """int, float, Decimal или строка → Number (NaN отвергается)"""
        return Number.of(v)

    def with_currency(self, currency: Currency) -> "ConversionRequest":
        """Выбор валюты переключает вывод на currency."""
        return self.model_copy(update={"currency": currency, "output": OutputKind.CURRENCY})

    def prefer(self, *preferences: str) -> "ConversionRequest":
        return self.model_copy(update={"preferences": self.preferences + preferences})

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "ConversionRequest":
        """
        Запрос из JSON-словаря.

        Словарь сначала проверяется по схеме conversion_request; нарушение
        схемы поднимается той же ошибкой входа, что и у build_request.

        Args:
            data: {"value": ..., "lang": ..., "to": ..., "currency": ..., "preferences": [...]}

        Returns:
            ConversionRequest

        Raises:
            InvalidNumber: Если value отсутствует или не число
            InvalidLanguage: Если язык неизвестен
            InvalidOutput: Если вид вывода, валюта или форма запроса неверны
        """
        check_conversion_request(data)
        return build_request(
            data["value"],
            lang=data.get("lang", Lang.ENGLISH.value),
            to=data.get("to"),
            currency=data.get("currency"),
            preferences=data.get("preferences", ()),
        )


def build_request(
    value: Any,
    lang: Lang | str = Lang.ENGLISH,
    to: Optional[str] = None,
    currency: Currency | str | None = None,
    preferences: Sequence[str] = (),
) -> ConversionRequest:
    """
    Сборка запроса из свободных аргументов.

    Ошибки входа поднимаются как InvalidNumber / InvalidLanguage / InvalidOutput.
    """
    number = Number.of(value)

    if not isinstance(lang, Lang):
        parsed = Lang.parse(lang)
        if parsed is None:
            raise InvalidLanguage(f"Unknown language: {lang!r}")
        lang = parsed

    selected: Optional[Currency] = None
    if currency is not None:
        selected = currency if isinstance(currency, Currency) else parse_currency(currency)

    if to is None:
        output = OutputKind.CURRENCY if selected is not None else OutputKind.CARDINAL
    else:
        output, tagged = parse_output(to)
        if tagged is not None:
            selected = tagged

    return ConversionRequest(
        value=number,
        lang=lang,
        output=output,
        currency=selected or Currency.DOLLAR,
        preferences=tuple(preferences),
    )


# =============================================================================
# PRECONDITIONS
# =============================================================================


def check_preconditions(num: Number, output: OutputKind) -> None:
    """
    Проверка, что вид вывода определён для числа.

    Raises:
        InfiniteOrdinal, FloatingOrdinal, NegativeOrdinal: для ordinal / ordinal_num
        InfiniteYear, FloatingYear: для year
    """
    error: Optional[Num2WordsError] = None

    if output in (OutputKind.ORDINAL, OutputKind.ORDINAL_NUM):
        if num.is_infinite():
            error = InfiniteOrdinal()
        elif not num.is_integral():
            error = FloatingOrdinal()
        elif num.is_negative():
            error = NegativeOrdinal()
    elif output is OutputKind.YEAR:
        if num.is_infinite():
            error = InfiniteYear()
        elif not num.is_integral():
            error = FloatingYear()

    if error is not None:
        logger.debug("Rejected %s for %s: %s", output.value, num, error.kind.value)
        raise error


# =============================================================================
# CONVERSION
# =============================================================================


def convert(request: ConversionRequest) -> str:
    """
    Выполнение запроса.

    Args:
        request: ConversionRequest

    Returns:
        Число словами

    Raises:
        Num2WordsError: Предусловие не выполнено или число слишком велико
    """
    num = request.value
    check_preconditions(num, request.output)

    language = resolve_language(request.lang, request.preferences)
    logger.debug(
        "Converting %s to %s with %s (preferences=%s)",
        num,
        request.output.value,
        type(language).__name__,
        list(request.preferences),
    )

    if request.output is OutputKind.CARDINAL:
        return language.to_cardinal(num)
    if request.output is OutputKind.ORDINAL:
        return language.to_ordinal(num)
    if request.output is OutputKind.ORDINAL_NUM:
        return language.to_ordinal_num(num)
    if request.output is OutputKind.YEAR:
        return language.to_year(num)
    return language.to_currency(num, request.currency)


def to_words(
    value: Any,
    lang: Lang | str = Lang.ENGLISH,
    to: Optional[str] = None,
    currency: Currency | str | None = None,
    preferences: Sequence[str] = (),
) -> str:
    """
    Число словами.

    Args:
        value: int, float, Decimal или строка ("1e3", "-12.5", "inf")
        lang: Код языка ("en", "fr", "fr_BE", "fr_CH", "uk")
        to: Вид вывода или код валюты; по умолчанию cardinal
            (или currency, если задана валюта)
        currency: Валюта для вывода currency (по умолчанию DOLLAR)
        preferences: Предпочтения языка ("oh", "feminine", "родовий", ...)

    Returns:
        Число словами

    Examples:
        >>> to_words(42)
        'forty-two'
        >>> to_words(1.01, to="currency")
        'one dollar and one cent'
        >>> to_words(2023, lang="uk", to="year")
        'дві тисячі двадцять третій рік'
    """
    return convert(build_request(value, lang, to, currency, preferences))
