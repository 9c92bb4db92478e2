"""
Currency — каталог валют

Каждый трёхбуквенный код — ISO 4217. Исключения DINAR, DOLLAR, PESO, RIYAL —
обобщённые названия соответствующих валют.

Каталог хранит английские названия по умолчанию в виде шаблонов с маркером
множественного числа "{}" ("dollar{}" → "dollar" / "dollars"). Языки
переопределяют названия для своих нужд.
"""

from enum import Enum
from typing import Final, Optional, Union

PLURAL_MARKER: Final[str] = "{}"

# Шаблон либо пара (единственное, множественное) для неправильных форм
NameTemplate = Union[str, tuple[str, str]]


def apply_plural_marker(template: NameTemplate, plural: bool, suffix: str = "s") -> str:
    """
    Подстановка маркера множественного числа.

    Args:
        template: "dollar{}" или ("real", "reais")
        plural: Множественное число
        suffix: Окончание множественного числа для маркера

    Returns:
        Готовое название

    Examples:
        >>> apply_plural_marker("dollar{}", True)
        'dollars'
        >>> apply_plural_marker(("real", "reais"), False)
        'real'
    """
    if isinstance(template, tuple):
        return template[1] if plural else template[0]
    return template.replace(PLURAL_MARKER, suffix if plural else "")


class Currency(str, Enum):
    """Валюта"""

    AED = "AED"  # Dirham
    ARS = "ARS"  # Argentine peso
    AUD = "AUD"  # Australian dollar
    BRL = "BRL"  # Brazilian real
    CAD = "CAD"  # Canadian dollar
    CHF = "CHF"  # Swiss franc
    CLP = "CLP"  # Chilean peso
    CNY = "CNY"  # Chinese yuan
    COP = "COP"  # Colombian peso
    CRC = "CRC"  # Costa Rican colón
    DINAR = "DINAR"
    DOLLAR = "DOLLAR"
    DZD = "DZD"  # Algerian dinar
    EUR = "EUR"
    GBP = "GBP"
    HKD = "HKD"
    IDR = "IDR"
    ILS = "ILS"  # Israeli new shekel
    INR = "INR"
    JPY = "JPY"
    KRW = "KRW"
    KWD = "KWD"
    KZT = "KZT"
    MXN = "MXN"
    MYR = "MYR"
    NOK = "NOK"
    NZD = "NZD"
    PEN = "PEN"  # Peruvian sol
    PESO = "PESO"
    PHP = "PHP"
    PLN = "PLN"
    QAR = "QAR"
    RIYAL = "RIYAL"
    RUB = "RUB"
    SAR = "SAR"
    SGD = "SGD"
    THB = "THB"
    TRY = "TRY"
    TWD = "TWD"
    UAH = "UAH"
    USD = "USD"
    UYU = "UYU"
    VND = "VND"
    ZAR = "ZAR"

    @classmethod
    def parse(cls, code: str) -> Optional["Currency"]:
        """
        Валюта по коду (без учёта регистра).

        Args:
            code: "USD", "eur", "DOLLAR", ...

        Returns:
            Currency или None если код неизвестен
        """
        try:
            return cls(code.upper())
        except ValueError:
            return None

    def default_name(self, plural: bool) -> str:
        """
        Название валюты по умолчанию.

        Многие языки называют валюту одинаково (euro), поэтому удобно
        иметь общее значение и переопределять только отличия.
        """
        return apply_plural_marker(_DEFAULT_NAMES[self], plural)

    def default_subunit_name(self, cent: NameTemplate, plural: bool) -> str:
        """
        Название разменной единицы по умолчанию.

        Args:
            cent: Общий шаблон языка для "центов" ("cent{}", "centime{}")
            plural: Множественное число

        Returns:
            Название разменной единицы
        """
        return apply_plural_marker(_DEFAULT_SUBUNIT_NAMES.get(self, cent), plural)


# =============================================================================
# КАТАЛОГ
# =============================================================================

_DEFAULT_NAMES: Final[dict[Currency, NameTemplate]] = {
    Currency.AED: "dirham{}",
    Currency.ARS: "argentine peso{}",
    Currency.AUD: "australian dollar{}",
    Currency.BRL: ("real", "reais"),
    Currency.CAD: "canadian dollar{}",
    Currency.CHF: "franc{}",
    Currency.CLP: "chilean peso{}",
    Currency.CNY: "yuan{}",
    Currency.COP: "colombian peso{}",
    Currency.CRC: ("colón", "colones"),
    Currency.DINAR: "dinar{}",
    Currency.DOLLAR: "dollar{}",
    Currency.DZD: "algerian dinar{}",
    Currency.EUR: "euro{}",
    Currency.GBP: "pound{}",
    Currency.HKD: "hong kong dollar{}",
    Currency.IDR: "indonesian rupiah{}",
    Currency.ILS: "new shekel{}",
    Currency.INR: "rupee{}",
    Currency.JPY: "yen{}",
    Currency.KRW: "won{}",
    Currency.KWD: "kuwaiti dinar{}",
    Currency.KZT: "tenge{}",
    Currency.MXN: "mexican peso{}",
    Currency.MYR: "ringgit{}",
    Currency.NOK: "norwegian krone{}",
    Currency.NZD: "new zealand dollar{}",
    Currency.PEN: ("sol", "soles"),
    Currency.PESO: "peso{}",
    Currency.PHP: "philippine peso{}",
    Currency.PLN: "zloty{}",
    Currency.QAR: "qatari riyal{}",
    Currency.RIYAL: "riyal{}",
    Currency.RUB: "ruble{}",
    Currency.SAR: "saudi riyal{}",
    Currency.SGD: "singapore dollar{}",
    Currency.THB: "baht{}",
    Currency.TRY: "lira{}",
    Currency.TWD: "taiwan dollar{}",
    Currency.UAH: "hryvnia{}",
    Currency.USD: "US dollar{}",
    Currency.UYU: "uruguayan peso{}",
    Currency.VND: "dong{}",
    Currency.ZAR: "rand{}",
}

_DEFAULT_SUBUNIT_NAMES: Final[dict[Currency, NameTemplate]] = {
    Currency.AED: "fils",
    Currency.KWD: "fils",
    Currency.ARS: "centavo{}",
    Currency.BRL: "centavo{}",
    Currency.CLP: "centavo{}",
    Currency.COP: "centavo{}",
    Currency.MXN: "centavo{}",
    Currency.CRC: "céntimo{}",
    Currency.IDR: "sen{}",
    Currency.MYR: "sen{}",
    Currency.KRW: "jeon{}",
    Currency.SAR: "halalat{}",
    Currency.THB: "satang{}",
    Currency.UAH: "kopiyok{}",
    Currency.UYU: "centesimo{}",
    Currency.VND: "xu{}",
}
