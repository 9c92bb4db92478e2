"""Language — общий интерфейс рендереров языков.

Каждый язык реализует пять операций над Number:
- to_cardinal: количественное ("forty-two")
- to_ordinal: порядковое ("forty-second")
- to_ordinal_num: цифры + суффикс ("42nd")
- to_year: год ("nineteen oh-one")
- to_currency: сумма в валюте ("forty-two dollars and one cent")

Предусловия (отрицательные/нецелые/бесконечные порядковые и годы) проверяются
в диспетчере до вызова рендерера. Ошибки рендеринга (CannotConvert)
пробрасываются без изменений.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from numwords.core.domain.currency import Currency
from numwords.core.domain.errors import CannotConvert
from numwords.core.domain.number import Number


class Language(ABC):
    """Базовый класс рендерера языка."""

    @abstractmethod
    def to_cardinal(self, num: Number) -> str:
        ...

    @abstractmethod
    def to_ordinal(self, num: Number) -> str:
        ...

    @abstractmethod
    def to_ordinal_num(self, num: Number) -> str:
        ...

    @abstractmethod
    def to_year(self, num: Number) -> str:
        ...

    @abstractmethod
    def to_currency(self, num: Number, currency: Currency) -> str:
        ...


def check_scale(index: int, scale_words: Sequence[str]) -> None:
    """
    Проверка, что для тройки с индексом index есть слово разряда.

    Args:
        index: Индекс тройки (0 = единицы, 1 = тысячи, ...)
        scale_words: Таблица слов разряда языка (начиная с тысячи)

    Raises:
        CannotConvert: Если величина больше, чем умеет назвать язык
    """
    if index > len(scale_words):
        raise CannotConvert(
            f"cannot convert number: triplet {index} exceeds {len(scale_words)} scale words"
        )
