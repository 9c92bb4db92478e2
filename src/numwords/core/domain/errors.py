"""
Errors — таксономия ошибок конвертации

Два класса ошибок:
- Структурная невозможность (CannotConvert): величина требует слова
  разряда, которого нет в таблице языка.
- Несоответствие запроса (NegativeOrdinal, FloatingOrdinal, InfiniteOrdinal,
  FloatingYear, InfiniteYear): запрошенный вид вывода не определён для
  данного числа. Проверяется до начала рендеринга.

Каждая ошибка несёт ErrorKind, поэтому вызывающий код может сравнивать
ошибки по значению, а не только по типу.
"""

from enum import Enum
from typing import Final


# =============================================================================
# ERROR KINDS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид ошибки конвертации"""

    CANNOT_CONVERT = "cannot_convert"
    NEGATIVE_ORDINAL = "negative_ordinal"
    FLOATING_ORDINAL = "floating_ordinal"
    FLOATING_YEAR = "floating_year"
    INFINITE_ORDINAL = "infinite_ordinal"
    INFINITE_YEAR = "infinite_year"


ERROR_MESSAGES: Final[dict[ErrorKind, str]] = {
    ErrorKind.CANNOT_CONVERT: "cannot convert number",
    ErrorKind.NEGATIVE_ORDINAL: "cannot treat negative number as ordinal",
    ErrorKind.FLOATING_ORDINAL: "cannot treat float as ordinal",
    ErrorKind.FLOATING_YEAR: "cannot treat float as year",
    ErrorKind.INFINITE_ORDINAL: "cannot treat infinity as ordinal",
    ErrorKind.INFINITE_YEAR: "cannot treat infinity as year",
}


def describe(kind: ErrorKind) -> str:
    """
    Однострочное сообщение для пользователя.

    Args:
        kind: Вид ошибки

    Returns:
        Человекочитаемое описание ошибки
    """
    return ERROR_MESSAGES[kind]


# =============================================================================
# CONVERSION ERRORS
# =============================================================================


class Num2WordsError(Exception):
    """
    Базовая ошибка конвертации числа в слова.

    Наследники задают kind; сообщение по умолчанию берётся из ERROR_MESSAGES.
    """

    kind: ErrorKind = ErrorKind.CANNOT_CONVERT

    def __init__(self, message: str | None = None):
        super().__init__(message or describe(self.kind))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Num2WordsError):
            return self.kind == other.kind
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.kind)


class CannotConvert(Num2WordsError):
    """Величина требует слова разряда за пределами таблицы языка."""

    kind = ErrorKind.CANNOT_CONVERT


class NegativeOrdinal(Num2WordsError):
    """Порядковое числительное запрошено для отрицательного числа."""

    kind = ErrorKind.NEGATIVE_ORDINAL


class FloatingOrdinal(Num2WordsError):
    """Порядковое числительное запрошено для нецелого числа."""

    kind = ErrorKind.FLOATING_ORDINAL


class FloatingYear(Num2WordsError):
    """Год запрошен для нецелого числа."""

    kind = ErrorKind.FLOATING_YEAR


class InfiniteOrdinal(Num2WordsError):
    """Порядковое числительное запрошено для бесконечности."""

    kind = ErrorKind.INFINITE_ORDINAL


class InfiniteYear(Num2WordsError):
    """Год запрошен для бесконечности."""

    kind = ErrorKind.INFINITE_YEAR


# =============================================================================
# INPUT ERRORS
# =============================================================================


class InvalidNumber(ValueError):
    """Вход не является числом (NaN, пустая строка, мусор)."""

    pass


class InvalidLanguage(ValueError):
    """Неизвестный код языка."""

    pass


class InvalidOutput(ValueError):
    """Неизвестный вид вывода или код валюты."""

    pass
