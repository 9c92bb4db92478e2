"""
Triplets — разложение величины на тройки цифр

Величина раскладывается по основанию 1000, младшая тройка первой.
Индекс тройки определяет слово разряда (нет, тысяча, миллион, ...).
"""

from typing import Final

TRIPLET_BASE: Final[int] = 1000


def split_thousands(magnitude: int) -> list[int]:
    """
    Разложение неотрицательной величины на тройки (младшая первой).

    Ноль даёт пустой список: нулевой случай обрабатывают вызывающие.

    Args:
        magnitude: Неотрицательное целое

    Returns:
        Список троек 0..999

    Raises:
        ValueError: Если magnitude < 0

    Examples:
        >>> split_thousands(38123147081932)
        [932, 81, 147, 123, 38]
        >>> split_thousands(0)
        []
    """
    if magnitude < 0:
        raise ValueError(f"magnitude must be non-negative, got {magnitude}")

    triplets = []
    while magnitude > 0:
        magnitude, triplet = divmod(magnitude, TRIPLET_BASE)
        triplets.append(triplet)
    return triplets


def split_triplet(triplet: int) -> tuple[int, int, int]:
    """
    Сотни, десятки и единицы тройки.

    Examples:
        >>> split_triplet(932)
        (9, 3, 2)
    """
    return triplet // 100 % 10, triplet // 10 % 10, triplet % 10


def last_two_digits(magnitude: int) -> tuple[int, int]:
    """
    Десятки и единицы последних двух цифр (для согласования).

    Examples:
        >>> last_two_digits(1024)
        (2, 4)
    """
    tail = abs(magnitude) % 100
    return tail // 10, tail % 10
