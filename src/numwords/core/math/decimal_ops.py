"""
Decimal Ops — точные операции над Decimal

Все операции над числами выполняются в decimal.Decimal, без двоичной
плавающей точки:
- Парсинг входа (int, float, Decimal, строка в десятичной/экспоненциальной записи)
- Отказ от NaN на входе
- Точное разбиение на целую часть и цифры дробной части
- Округление half-up для копеек/центов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN никогда не проходит парсинг
2. Целая часть и цифры дроби извлекаются без потери точности
3. Разложение дроби по цифрам всегда конечно (читается из кортежа цифр)
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Final

from numwords.core.domain.errors import InvalidNumber


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество минимальных единиц в основной (центы в долларе)
SUBUNITS_PER_UNIT: Final[int] = 100

# Запас точности контекста сверх количества цифр операнда
PRECISION_MARGIN: Final[int] = 10


# =============================================================================
# ПАРСИНГ
# =============================================================================


def parse_decimal(value: Any) -> Decimal:
    """
    Преобразование входа в Decimal.

    float переводится через repr, чтобы 12.51 оставалось 12.51,
    а не ближайшим двоичным приближением.

    Args:
        value: int, float, Decimal или строка

    Returns:
        Decimal (конечный или бесконечный, но не NaN)

    Raises:
        InvalidNumber: Если вход пустой, не число или NaN

    Examples:
        >>> parse_decimal(42)
        Decimal('42')
        >>> parse_decimal(12.51)
        Decimal('12.51')
        >>> parse_decimal("1e3")
        Decimal('1E+3')
    """
    if isinstance(value, bool):
        raise InvalidNumber(f"bool is not a number: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            raise InvalidNumber("Value is required")
        try:
            result = Decimal(raw)
        except InvalidOperation:
            raise InvalidNumber(f"Invalid number format: {value!r}")
    else:
        raise InvalidNumber(f"Unsupported number type: {type(value).__name__}")

    if not is_valid_decimal(result):
        raise InvalidNumber(f"NaN is not a valid number: {value!r}")

    return result


def is_valid_decimal(value: Decimal) -> bool:
    """
    Проверка, что значение не NaN (бесконечность допустима).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение не NaN
    """
    return not value.is_nan()


# =============================================================================
# РАЗБИЕНИЕ НА ЧАСТИ
# =============================================================================


def integral_part(value: Decimal) -> int:
    """
    Целая часть с отбрасыванием дроби (к нулю).

    Args:
        value: Конечное значение

    Returns:
        Точная целая часть как int

    Raises:
        ValueError: Если значение бесконечно
    """
    if value.is_infinite():
        raise ValueError(f"Infinite value has no integral part: {value}")
    return int(value)


def fractional_digits(value: Decimal) -> str:
    """
    Цифры дробной части модуля значения без хвостовых нулей.

    Examples:
        >>> fractional_digits(Decimal("12.51"))
        '51'
        >>> fractional_digits(Decimal("-0.050"))
        '05'
        >>> fractional_digits(Decimal("7"))
        ''
    """
    if value.is_infinite():
        raise ValueError(f"Infinite value has no fractional part: {value}")

    _, digits, exponent = value.as_tuple()
    if exponent >= 0:
        return ""

    places = -exponent
    text = "".join(str(d) for d in digits).rjust(places, "0")
    return text[-places:].rstrip("0")


def is_integral(value: Decimal) -> bool:
    """Конечное значение без дробной части."""
    return value.is_finite() and fractional_digits(value) == ""


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(value: Decimal) -> int:
    """
    Округление до целого по правилу half-up (от нуля на середине).

    Examples:
        >>> round_half_up(Decimal("2.5"))
        3
        >>> round_half_up(Decimal("-2.5"))
        -3
    """
    if value.is_infinite():
        raise ValueError(f"Cannot round infinite value: {value}")

    with localcontext() as ctx:
        ctx.prec = len(value.as_tuple().digits) + PRECISION_MARGIN
        return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def subunits(value: Decimal, per_unit: int = SUBUNITS_PER_UNIT) -> int:
    """
    Количество минимальных единиц (центов): round_half_up(|value| * per_unit) mod per_unit.

    Args:
        value: Конечная сумма
        per_unit: Минимальных единиц в основной (default: 100)

    Returns:
        Число в диапазоне [0, per_unit)

    Examples:
        >>> subunits(Decimal("1.01"))
        1
        >>> subunits(Decimal("0.205"))
        21
    """
    with localcontext() as ctx:
        ctx.prec = len(value.as_tuple().digits) + PRECISION_MARGIN
        scaled = abs(value) * per_unit
    return round_half_up(scaled) % per_unit
