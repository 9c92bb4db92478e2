"""
Number — числовое значение запроса

Неизменяемая обёртка над Decimal произвольной точности.
Создаётся один раз на запрос и потребляется одним рендерером
(возможно рекурсивно: валютный рендерер вызывает себя на целой и дробной частях).

Допустимые значения: +/- бесконечность, ноль, целые и нецелые любого знака.
NaN отвергается при создании.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from numwords.core.math.decimal_ops import (
    fractional_digits,
    integral_part,
    is_integral,
    parse_decimal,
    subunits,
)


@dataclass(frozen=True)
class Number:
    """
    Числовое значение (Decimal, не NaN).

    Immutable: все операции возвращают новый экземпляр.
    """

    value: Decimal

    def __post_init__(self) -> None:
        # Нормализуем вход через общий парсер (отвергает NaN и не-числа)
        object.__setattr__(self, "value", parse_decimal(self.value))

    @classmethod
    def of(cls, value: Any) -> "Number":
        """
        Создание из int, float, Decimal, строки или другого Number.

        Args:
            value: Исходное значение

        Returns:
            Number

        Raises:
            InvalidNumber: Если значение не число или NaN
        """
        if isinstance(value, Number):
            return value
        return cls(parse_decimal(value))

    # -------------------------------------------------------------------------
    # Проверки
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.value.is_finite() and self.value == 0

    def is_negative(self) -> bool:
        return self.value < 0

    def is_infinite(self) -> bool:
        return self.value.is_infinite()

    def is_integral(self) -> bool:
        return is_integral(self.value)

    def is_one(self) -> bool:
        return self.value.is_finite() and self.value == 1

    # -------------------------------------------------------------------------
    # Части
    # -------------------------------------------------------------------------

    def integral_part(self) -> int:
        """Целая часть (усечение к нулю), точный int."""
        return integral_part(self.value)

    def fractional_digits(self) -> str:
        """Цифры дробной части модуля без хвостовых нулей."""
        return fractional_digits(self.value)

    def subunits(self) -> int:
        """Центы: round_half_up(|value| * 100) mod 100."""
        return subunits(self.value)

    def to_int(self) -> int:
        """Усекающее преобразование в int."""
        return self.integral_part()

    def magnitude(self) -> int:
        """Модуль целой части."""
        return abs(self.integral_part())

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __abs__(self) -> "Number":
        return Number(abs(self.value))

    def __neg__(self) -> "Number":
        return Number(-self.value)

    def __str__(self) -> str:
        return str(self.value)
