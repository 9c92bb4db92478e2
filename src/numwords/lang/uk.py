"""
Ukrainian — рендерер украинского языка с грамматическим согласованием

Источник правил: Український правопис 2019
- § 38. Складні числівники
- § 105. Відмінювання кількісних числівників
- § 106. Відмінювання порядкових числівників
- § 107. Відмінювання дробових числівників

Каждое слово выбирается из таблиц по индексам профиля
(род, число, падеж). Профиль не изменяется: согласование с каждой
тройкой создаёт новый профиль (GrammaticalProfile.agree_with_units).

Тройки:
- младшая тройка согласуется с профилем запроса
- тройка тысяч — с женским родом (тисяча)
- мільйон и выше — с мужским родом
"""

from typing import Final, Sequence

from numwords.core.domain.currency import Currency
from numwords.core.domain.grammar import Declension, Gender, GrammaticalProfile
from numwords.core.domain.number import Number
from numwords.core.math.triplets import split_thousands, split_triplet
from numwords.lang.base import Language, check_scale


# =============================================================================
# ЛЕКСИКА: КОЛИЧЕСТВЕННЫЕ
# =============================================================================

MINUS: Final[str] = "мінус"

INFINITY: Final[tuple[str, ...]] = (
    "нескінченність",
    "нескінченності",
    "нескінченності",
    "нескінченність",
    "нескінченністю",
    "нескінченності",
)

ZERO: Final[tuple[str, ...]] = ("нуль", "нуля", "нулю", "нуль", "нулем", "нулі")

# [один|два][род][падеж]
GENDERED: Final[tuple[tuple[tuple[str, ...], ...], ...]] = (
    (
        ("один", "одного", "одному", "один", "одним", "одному"),
        ("одна", "одної", "одній", "одну", "одною", "одній"),
        ("одне", "одного", "одному", "одне", "одним", "одному"),
    ),
    (
        ("два", "двох", "двом", "два", "двома", "двох"),
        ("дві", "двох", "двом", "дві", "двома", "двох"),
        ("два", "двох", "двом", "два", "двома", "двох"),
    ),
)

# три..девʼять по падежам
UNITS: Final[tuple[tuple[str, ...], ...]] = (
    ("три", "трьох", "трьом", "три", "трьома", "трьох"),
    ("чотири", "чотирьох", "чотирьом", "чотири", "чотирма", "чотирьох"),
    ("пʼять", "пʼяти", "пʼяти", "пʼять", "пʼятьма", "пʼяти"),
    ("шість", "шести", "шісти", "шість", "шістьма", "шести"),
    ("сім", "семи", "семи", "сім", "сімома", "семи"),
    ("вісім", "восьми", "восьми", "вісім", "вісьма", "восьми"),
    ("девʼять", "девʼяти", "девʼяти", "девʼять", "девʼятьма", "девʼяти"),
)

TEENS_BASES: Final[tuple[str, ...]] = (
    "десят",
    "одинадцят",
    "дванадцят",
    "тринадцят",
    "чотирнадцят",
    "пʼятнадцят",
    "шістнадцят",
    "сімнадцят",
    "вісімнадцят",
    "девʼятнадцят",
)

TEENS_FLEXIONS: Final[tuple[str, ...]] = ("ь", "и", "и", "ь", "ьма", "и")

# двадцять..девʼяносто по падежам
TENS: Final[tuple[tuple[str, ...], ...]] = (
    ("двадцять", "двадцяти", "двадцяти", "двадцять", "двадцятьма", "двадцяти"),
    ("тридцять", "тридцяти", "тридцяти", "тридцять", "тридцятьма", "тридцяти"),
    ("сорок", "сорока", "сорока", "сорок", "сорока", "сорока"),
    ("пʼятдесят", "пʼятдесяти", "пʼятдесяти", "пʼятдесят", "пʼятдесятьма", "пʼятдесяти"),
    ("шістдесят", "шістдесяти", "шістдесяти", "шістдесят", "шістдесятьма", "шістдесяти"),
    ("сімдесят", "сімдесяти", "сімдесяти", "сімдесят", "сімдесятьма", "сімдесяти"),
    ("вісімдесят", "вісімдесяти", "вісімдесяти", "вісімдесят", "вісімдесятьма", "вісімдесяти"),
    ("девʼяносто", "девʼяноста", "девʼяноста", "девʼяносто", "девʼяноста", "девʼяноста"),
)

HUNDREDS: Final[tuple[tuple[str, ...], ...]] = (
    ("сто", "ста", "ста", "сто", "ста", "ста"),
    ("двісті", "двохсот", "двомстам", "двісті", "двомастами", "двохстах"),
    ("триста", "трьохсот", "трьомстам", "триста", "трьомастами", "трьохстах"),
    ("чотириста", "чотирьохсот", "чотирьомстам", "чотириста", "чотирмастами", "чотирьохстах"),
    ("пʼятсот", "пʼятисот", "пʼятистам", "пʼятсот", "пʼятьмастами", "пʼятистах"),
    ("шістсот", "шестисот", "шестистам", "шістсот", "шістьмастами", "шестистах"),
    ("сімсот", "семисот", "семистам", "сімсот", "сімомастами", "семистах"),
    ("вісімсот", "восьмисот", "восьмистам", "вісімсот", "восьмистами", "восьмистах"),
    ("девʼятсот", "девʼятисот", "девʼятистам", "девʼятсот", "девʼятьмастами", "девʼятистах"),
)

# [число][падеж]
THOUSAND_FLEXIONS: Final[tuple[tuple[str, ...], ...]] = (
    ("а", "і", "і", "у", "ею", "і"),
    ("і", "", "ам", "і", "ами", "ах"),
)

# Назви за "правилом n-1": https://uk.wikipedia.org/wiki/Іменні_назви_степенів_тисячі
MEGA_BASES: Final[tuple[str, ...]] = (
    "тисяч",
    "мільйон",
    "мільярд",
    "трильйон",
    "квадрильйон",
    "квінтильйон",
    "секстильйон",
    "септильйон",
    "октильйон",
    "нонильйон",
    "децильйон",
    "ундецильйон",
    "додецильйон",
    "тредецильйон",
    "кваттуордецильйон",
    "квіндецильйон",
    "седецильйон",
    "септдецильйон",
    "дуодевігінтильйон",
    "ундевігінтильйон",
    "вігінтильйон",
)

MEGA_FLEXIONS: Final[tuple[tuple[str, ...], ...]] = (
    ("", "а", "у", "", "ом", "і"),
    ("и", "ів", "ам", "и", "ами", "и"),
)

FRACTION_BASE: Final[str] = "ціл"


# =============================================================================
# ЛЕКСИКА: ПОРЯДКОВЫЕ
# =============================================================================

ORDINAL_ZERO_BASE: Final[str] = "нульов"
ORDINAL_ONE_BASE: Final[str] = "одно"
ORDINAL_HUNDRED_BASE: Final[str] = "сот"
ORDINAL_SCALE_SUFFIX: Final[str] = "н"

ORDINAL_UNIT_BASES: Final[tuple[str, ...]] = (
    "перш",
    "друг",
    "трет",
    "четверт",
    "пʼят",
    "шост",
    "сьом",
    "восьм",
    "девʼят",
)

ORDINAL_TENS_BASES: Final[tuple[str, ...]] = (
    "десят",
    "двадцят",
    "тридцят",
    "сороков",
    "пʼятдесят",
    "шістдесят",
    "сімдесят",
    "вісімдесят",
    "девʼяност",
)

# [род][падеж]
ADJECTIVE_HARD_SINGULAR: Final[tuple[tuple[str, ...], ...]] = (
    ("ий", "ого", "ому", "ий", "им", "ому"),
    ("а", "ої", "ій", "у", "ою", "ій"),
    ("е", "ого", "ому", "е", "им", "ому"),
)

ADJECTIVE_HARD_PLURAL: Final[tuple[str, ...]] = ("і", "их", "им", "их", "ими", "их")

ADJECTIVE_SOFT_SINGULAR: Final[tuple[tuple[str, ...], ...]] = (
    ("ій", "ього", "ьому", "ій", "ім", "ьому"),
    ("я", "ьої", "ій", "ю", "ьою", "ій"),
    ("є", "ього", "ьому", "є", "ім", "ьому"),
)

ADJECTIVE_SOFT_PLURAL: Final[tuple[str, ...]] = ("і", "іх", "ім", "іх", "іми", "іх")

# Короткие окончания для "23-ій" → "23-й"
ORDINAL_HARD_SINGULAR_SHORT: Final[tuple[tuple[str, ...], ...]] = (
    ("й", "го", "му", "й", "м", "му"),
    ("а", "ї", "й", "у", "ою", "й"),
    ("е", "го", "му", "е", "м", "му"),
)

ORDINAL_SOFT_SINGULAR_SHORT: Final[tuple[tuple[str, ...], ...]] = (
    ("й", "го", "му", "й", "м", "му"),
    ("я", "ї", "й", "ю", "ою", "й"),
    ("є", "го", "му", "є", "м", "му"),
)

ORDINAL_PLURAL_SHORT: Final[tuple[str, ...]] = ("і", "х", "м", "х", "ми", "х")


# =============================================================================
# ЛЕКСИКА: ГОДЫ И ВАЛЮТЫ
# =============================================================================

YEAR: Final[tuple[tuple[str, ...], ...]] = (
    ("рік", "року", "року", "рік", "роком", "році"),
    ("роки", "років", "рокам", "роки", "роками", "роках"),
)

ERA_BC: Final[str] = "до н.е."

# [число][падеж]
NOUN_2ND_HARD: Final[tuple[tuple[str, ...], ...]] = (  # долар
    ("", "а", "у", "а", "ом", "і"),
    ("и", "ів", "ам", "и", "ами", "ах"),
)

NOUN_2ND_SOFT: Final[tuple[tuple[str, ...], ...]] = (  # юань
    ("ь", "я", "ю", "я", "єм", "і"),
    ("і", "ів", "ям", "і", "ями", "ях"),
)

NOUN_1ST_SOFT_VOWEL: Final[tuple[tuple[str, ...], ...]] = (  # рупія
    ("я", "ї", "ї", "я", "єю", "ї"),
    ("ї", "й", "ям", "ї", "ями", "ях"),
)

NOUN_1ST_HARD: Final[tuple[tuple[str, ...], ...]] = (  # єна
    ("а", "и", "і", "а", "ою", "і"),
    ("и", "", "ам", "и", "ами", "ах"),
)

HRYVNIAS: Final[tuple[tuple[str, ...], ...]] = (
    ("гривня", "гривні", "гривні", "гривню", "гривнею", "гривні"),
    ("гривні", "гривень", "гривням", "гривні", "гривнями", "гривнях"),
)

KOPIYKAS: Final[tuple[tuple[str, ...], ...]] = (
    ("копійка", "копійки", "копійці", "копійку", "копійкою", "копійці"),
    ("копійки", "копійок", "копійкам", "копійки", "копійками", "копійках"),
)

RUBLES: Final[tuple[tuple[str, ...], ...]] = (
    ("рубль", "рубля", "рублю", "рубль", "рублем", "рублі"),
    ("рублі", "рублів", "рублям", "рублі", "рублями", "рублях"),
)

# Несклоняемые названия
_INDECLINABLE_NAMES: Final[dict[Currency, str]] = {
    Currency.ARS: "песо",
    Currency.CLP: "песо",
    Currency.COP: "песо",
    Currency.MXN: "песо",
    Currency.PESO: "песо",
    Currency.PHP: "песо",
    Currency.UYU: "песо",
    Currency.EUR: "євро",
    Currency.KZT: "тенге",
}

# Основа + таблица окончаний
_DECLINED_NAMES: Final[dict[Currency, tuple[str, tuple[tuple[str, ...], ...]]]] = {
    Currency.AED: ("дирхам", NOUN_2ND_HARD),
    Currency.AUD: ("долар", NOUN_2ND_HARD),
    Currency.CAD: ("долар", NOUN_2ND_HARD),
    Currency.DOLLAR: ("долар", NOUN_2ND_HARD),
    Currency.HKD: ("долар", NOUN_2ND_HARD),
    Currency.NZD: ("долар", NOUN_2ND_HARD),
    Currency.SGD: ("долар", NOUN_2ND_HARD),
    Currency.TWD: ("долар", NOUN_2ND_HARD),
    Currency.USD: ("долар", NOUN_2ND_HARD),
    Currency.BRL: ("реал", NOUN_2ND_HARD),
    Currency.CHF: ("франк", NOUN_2ND_HARD),
    Currency.CNY: ("юан", NOUN_2ND_SOFT),
    Currency.CRC: ("колон", NOUN_2ND_HARD),
    Currency.DINAR: ("динар", NOUN_2ND_HARD),
    Currency.DZD: ("динар", NOUN_2ND_HARD),
    Currency.KWD: ("динар", NOUN_2ND_HARD),
    Currency.GBP: ("фунт", NOUN_2ND_HARD),
    Currency.IDR: ("рупі", NOUN_1ST_SOFT_VOWEL),
    Currency.INR: ("рупі", NOUN_1ST_SOFT_VOWEL),
    Currency.JPY: ("єн", NOUN_1ST_HARD),
    Currency.KRW: ("вон", NOUN_1ST_HARD),
    Currency.MYR: ("рингіт", NOUN_2ND_HARD),
    Currency.NOK: ("крон", NOUN_1ST_HARD),
    Currency.PEN: ("сол", NOUN_2ND_SOFT),
    Currency.QAR: ("ріал", NOUN_2ND_HARD),
    Currency.RIYAL: ("ріал", NOUN_2ND_HARD),
    Currency.SAR: ("ріал", NOUN_2ND_HARD),
    Currency.THB: ("бат", NOUN_2ND_HARD),
    Currency.TRY: ("куруш", NOUN_1ST_HARD),
    Currency.VND: ("донг", NOUN_2ND_HARD),
    Currency.ZAR: ("ранд", NOUN_2ND_HARD),
}

_INDECLINABLE_SUBUNITS: Final[dict[Currency, str]] = {
    Currency.ARS: "сентаво",
    Currency.BRL: "сентаво",
    Currency.CLP: "сентаво",
    Currency.COP: "сентаво",
    Currency.MXN: "сентаво",
    Currency.PESO: "сентаво",
    Currency.PHP: "сентаво",
    Currency.UYU: "сентаво",
    Currency.CRC: "сантимо",
    Currency.NOK: "оре",
    Currency.PEN: "сентімо",
    Currency.VND: "су",
}

_DECLINED_SUBUNITS: Final[dict[Currency, tuple[str, tuple[tuple[str, ...], ...]]]] = {
    Currency.AED: ("філс", NOUN_2ND_HARD),
    Currency.DINAR: ("філс", NOUN_2ND_HARD),
    Currency.DZD: ("філс", NOUN_2ND_HARD),
    Currency.KWD: ("філс", NOUN_2ND_HARD),
    Currency.QAR: ("філс", NOUN_2ND_HARD),
    Currency.RIYAL: ("філс", NOUN_2ND_HARD),
    Currency.SAR: ("філс", NOUN_2ND_HARD),
    Currency.AUD: ("цент", NOUN_2ND_HARD),
    Currency.CAD: ("цент", NOUN_2ND_HARD),
    Currency.DOLLAR: ("цент", NOUN_2ND_HARD),
    Currency.HKD: ("цент", NOUN_2ND_HARD),
    Currency.NZD: ("цент", NOUN_2ND_HARD),
    Currency.SGD: ("цент", NOUN_2ND_HARD),
    Currency.TWD: ("цент", NOUN_2ND_HARD),
    Currency.USD: ("цент", NOUN_2ND_HARD),
    Currency.ZAR: ("цент", NOUN_2ND_HARD),
    Currency.CHF: ("сантим", NOUN_2ND_HARD),
    Currency.CNY: ("фен", NOUN_2ND_SOFT),
    Currency.EUR: ("євроцент", NOUN_2ND_HARD),
    Currency.GBP: ("пенс", NOUN_2ND_HARD),
    Currency.IDR: ("сен", NOUN_2ND_HARD),
    Currency.JPY: ("сен", NOUN_2ND_HARD),
    Currency.MYR: ("сен", NOUN_2ND_HARD),
    Currency.INR: ("пайс", NOUN_2ND_HARD),
    Currency.ILS: ("агор", NOUN_1ST_HARD),
    Currency.KRW: ("чон", NOUN_2ND_HARD),
    Currency.KZT: ("тиїн", NOUN_2ND_HARD),
    Currency.PLN: ("грош", NOUN_2ND_HARD),
    Currency.THB: ("сатанг", NOUN_2ND_HARD),
    Currency.TRY: ("лір", NOUN_1ST_HARD),
}

# Валюты женского рода; остальные мужского
FEMININE_CURRENCIES: Final[frozenset[Currency]] = frozenset(
    {Currency.INR, Currency.JPY, Currency.KRW, Currency.NOK, Currency.TRY, Currency.UAH}
)

FEMININE_SUBUNITS: Final[frozenset[Currency]] = frozenset(
    {Currency.ILS, Currency.TRY, Currency.RUB, Currency.UAH}
)


# =============================================================================
# HELPERS
# =============================================================================


def _adjective_hard(profile: GrammaticalProfile, gender: Gender) -> str:
    """Твёрдое окончание прилагательного (нов-і, ціл-а)."""
    if profile.is_plural():
        return ADJECTIVE_HARD_PLURAL[profile.declension.table_index]
    return ADJECTIVE_HARD_SINGULAR[gender.table_index][profile.declension.table_index]


def _is_soft(value: int) -> bool:
    """третій — единственное числительное с мягкой основой."""
    tail = value % 100
    return tail % 10 == 3 and tail != 13


def ordinal_flexion(value: int, profile: GrammaticalProfile) -> str:
    """Полное окончание порядкового числительного."""
    declension = profile.declension.table_index
    soft = _is_soft(value)
    if profile.is_plural():
        return (ADJECTIVE_SOFT_PLURAL if soft else ADJECTIVE_HARD_PLURAL)[declension]
    table = ADJECTIVE_SOFT_SINGULAR if soft else ADJECTIVE_HARD_SINGULAR
    return table[profile.gender.table_index][declension]


def ordinal_flexion_short(value: int, profile: GrammaticalProfile) -> str:
    """Короткое окончание для записи цифрами (23-й, 23-ою)."""
    declension = profile.declension.table_index
    if profile.is_plural():
        return ORDINAL_PLURAL_SHORT[declension]
    table = ORDINAL_SOFT_SINGULAR_SHORT if _is_soft(value) else ORDINAL_HARD_SINGULAR_SHORT
    return table[profile.gender.table_index][declension]


def _scale_word(index: int, profile: GrammaticalProfile) -> str:
    """Слово разряда (тисяча, мільйон, ...) в форме согласованного профиля."""
    flexions = THOUSAND_FLEXIONS if index == 1 else MEGA_FLEXIONS
    flexion = flexions[profile.number.table_index][profile.declension.table_index]
    return f"{MEGA_BASES[index - 1]}{flexion}"


def _scale_profile(index: int, base: GrammaticalProfile) -> GrammaticalProfile:
    """Базовый профиль тройки: тисяча женского рода, мільйон и выше мужского."""
    if index == 0:
        return base
    if index == 1:
        return base.feminine()
    return base.masculine()


# =============================================================================
# UKRAINIAN
# =============================================================================


class Ukrainian(Language):
    """
    Рендерер украинского языка.

    Профиль запроса (род, число, падеж) задаёт форму числительного
    и существительного валюты. По умолчанию: чоловічий, однина, називний.
    """

    def __init__(self, profile: GrammaticalProfile | None = None):
        self.profile = profile or GrammaticalProfile()

    @classmethod
    def from_preferences(cls, preferences: Sequence[str]) -> "Ukrainian":
        return cls(GrammaticalProfile.from_preferences(list(preferences)))

    # -------------------------------------------------------------------------
    # Cardinal
    # -------------------------------------------------------------------------

    def int_to_cardinal(self, value: int, profile: GrammaticalProfile | None = None) -> str:
        """
        Количественное для целого.

        Args:
            value: Целое число
            profile: Профиль согласования (по умолчанию профиль запроса)

        Returns:
            Слова через пробел

        Raises:
            CannotConvert: Если нет слова разряда для старшей тройки
        """
        profile = profile if profile is not None else self.profile
        declension = profile.declension.table_index

        if value == 0:
            return ZERO[declension]

        words = []
        if value < 0:
            words.append(MINUS)
            value = -value

        triplets = split_thousands(value)
        check_scale(len(triplets) - 1, MEGA_BASES)

        for i in reversed(range(len(triplets))):
            triplet = triplets[i]
            hundreds, tens, units = split_triplet(triplet)

            if hundreds > 0:
                words.append(HUNDREDS[hundreds - 1][declension])

            agreed = _scale_profile(i, profile).agree_with_units(tens, units)

            if tens == 1:
                words.append(f"{TEENS_BASES[units]}{TEENS_FLEXIONS[declension]}")
            else:
                if tens > 1:
                    words.append(TENS[tens - 2][declension])
                if units in (1, 2):
                    # младшая тройка берёт род и падеж профиля запроса
                    word_profile = profile if i == 0 else agreed
                    words.append(
                        GENDERED[units - 1][word_profile.gender.table_index][
                            word_profile.declension.table_index
                        ]
                    )
                elif units > 0:
                    words.append(UNITS[units - 3][declension])

            if i != 0 and triplet != 0:
                words.append(_scale_word(i, agreed))

        return " ".join(words)

    def float_to_cardinal(self, num: Number, profile: GrammaticalProfile | None = None) -> str:
        """
        Дробное: "<целое> ціл<ая> <числитель> <знаменатель>".

        Examples:
            1.1 → "одна ціла одна десята"
            -12.321 (д, мн) → "мінус дванадцяти цілим трьомстам двадцяти одній тисячній"
        """
        profile = profile if profile is not None else self.profile

        digits = num.fractional_digits()
        whole = num.magnitude()
        numerator = int(digits)
        denominator = 10 ** len(digits)

        whole_agreed = profile.agree_with_number(whole)
        whole_flexion = _adjective_hard(whole_agreed, Gender.FEMININE)
        denominator_profile = profile.agree_with_number(numerator).feminine()

        words = []
        if num.is_negative():
            words.append(MINUS)
        words.append(self.int_to_cardinal(whole, profile.feminine()))
        words.append(f"{FRACTION_BASE}{whole_flexion}")
        words.append(self.int_to_cardinal(numerator, profile.feminine()))
        words.append(self.int_to_ordinal(denominator, denominator_profile))
        return " ".join(words)

    def to_cardinal(self, num: Number) -> str:
        if num.is_infinite():
            word = INFINITY[self.profile.declension.table_index]
            return f"{MINUS} {word}" if num.is_negative() else word
        if num.is_integral():
            return self.int_to_cardinal(num.to_int())
        return self.float_to_cardinal(num)

    # -------------------------------------------------------------------------
    # Ordinal
    # -------------------------------------------------------------------------

    def _fused_prefix(self, hundreds: int, tens: int, units: int) -> str:
        """Родительная основа тройки для сложного слова (пʼятисоттридцятитрьох...)."""
        genitive = Declension.GENITIVE.table_index
        word = ""
        if hundreds > 0:
            word += "сто" if hundreds == 1 else HUNDREDS[hundreds - 1][genitive]
        if tens == 1:
            word += f"{TEENS_BASES[units]}{TEENS_FLEXIONS[genitive]}"
            return word
        if tens > 1:
            word += TENS[tens - 2][genitive]
        if units == 1:
            word += ORDINAL_ONE_BASE
        elif units == 2:
            word += GENDERED[1][Gender.MASCULINE.table_index][genitive]
        elif units > 2:
            word += UNITS[units - 3][genitive]
        return word

    def int_to_ordinal(self, value: int, profile: GrammaticalProfile | None = None) -> str:
        """
        Порядковое для неотрицательного целого.

        Старшие тройки — обычные количественные в именительном падеже,
        последняя ненулевая тройка — порядковое слово (или одно сложное слово,
        если это тройка разряда: "чотирьохсотпʼятдесятишеститисячний").
        """
        profile = profile if profile is not None else self.profile
        flexion = ordinal_flexion(value, profile)

        if value == 0:
            return f"{ORDINAL_ZERO_BASE}{flexion}"

        triplets = split_thousands(value)
        check_scale(len(triplets) - 1, MEGA_BASES)
        last_nonzero = next(i for i, t in enumerate(triplets) if t != 0)

        # ровно одна тысяча / мільйон / ...: "мільйонний"
        if last_nonzero > 0 and triplets[last_nonzero] == 1 and len(triplets) == last_nonzero + 1:
            return f"{MEGA_BASES[last_nonzero - 1]}{ORDINAL_SCALE_SUFFIX}{flexion}"

        nominative = Declension.NOMINATIVE.table_index
        words = []

        for i in reversed(range(len(triplets))):
            triplet = triplets[i]
            hundreds, tens, units = split_triplet(triplet)

            if i == last_nonzero:
                if i != 0:
                    prefix = self._fused_prefix(hundreds, tens, units)
                    words.append(f"{prefix}{MEGA_BASES[i - 1]}{ORDINAL_SCALE_SUFFIX}{flexion}")
                elif tens == 0 and units == 0:
                    # сотий, двохсотий
                    if hundreds == 1:
                        words.append(f"{ORDINAL_HUNDRED_BASE}{flexion}")
                    else:
                        genitive = HUNDREDS[hundreds - 1][Declension.GENITIVE.table_index]
                        words.append(f"{genitive}{flexion}")
                else:
                    if hundreds > 0:
                        words.append(HUNDREDS[hundreds - 1][nominative])
                    if tens == 1:
                        words.append(f"{TEENS_BASES[units]}{flexion}")
                    elif units == 0:
                        words.append(f"{ORDINAL_TENS_BASES[tens - 1]}{flexion}")
                    else:
                        if tens > 1:
                            words.append(TENS[tens - 2][nominative])
                        unit_flexion = ordinal_flexion(units, profile)
                        words.append(f"{ORDINAL_UNIT_BASES[units - 1]}{unit_flexion}")
                break

            if hundreds > 0:
                words.append(HUNDREDS[hundreds - 1][nominative])

            agreed = _scale_profile(i, GrammaticalProfile()).agree_with_units(tens, units)

            if tens == 1:
                words.append(f"{TEENS_BASES[units]}{TEENS_FLEXIONS[nominative]}")
            else:
                if tens > 1:
                    words.append(TENS[tens - 2][nominative])
                if units in (1, 2):
                    words.append(GENDERED[units - 1][agreed.gender.table_index][nominative])
                elif units > 0:
                    words.append(UNITS[units - 3][nominative])

            if triplet != 0:
                words.append(_scale_word(i, agreed))

        return " ".join(words)

    def to_ordinal(self, num: Number) -> str:
        return self.int_to_ordinal(num.to_int())

    def to_ordinal_num(self, num: Number) -> str:
        value = num.to_int()
        return f"{value}-{ordinal_flexion_short(value, self.profile)}"

    # -------------------------------------------------------------------------
    # Year
    # -------------------------------------------------------------------------

    def to_year(self, num: Number) -> str:
        value = num.to_int()
        year_word = YEAR[self.profile.number.table_index][self.profile.declension.table_index]
        ordinal = self.int_to_ordinal(abs(value), self.profile.masculine())
        if value < 0:
            return f"{ordinal} {year_word} {ERA_BC}"
        return f"{ordinal} {year_word}"

    # -------------------------------------------------------------------------
    # Currency
    # -------------------------------------------------------------------------

    def currency_profile(self, currency: Currency) -> GrammaticalProfile:
        if currency in FEMININE_CURRENCIES:
            return self.profile.feminine()
        return self.profile.masculine()

    def subunit_profile(self, currency: Currency) -> GrammaticalProfile:
        if currency in FEMININE_SUBUNITS:
            return self.profile.feminine()
        return self.profile.masculine()

    @staticmethod
    def currency_name(currency: Currency, profile: GrammaticalProfile) -> str:
        """Название валюты в форме профиля."""
        number = profile.number.table_index
        declension = profile.declension.table_index

        if currency is Currency.UAH:
            return HRYVNIAS[number][declension]
        if currency is Currency.RUB:
            return RUBLES[number][declension]
        if currency is Currency.ILS:
            adjective = _adjective_hard(profile, Gender.MASCULINE)
            return f"нов{adjective} шекел{NOUN_2ND_SOFT[number][declension]}"
        if currency is Currency.PLN:
            return f"злот{_adjective_hard(profile, Gender.MASCULINE)}"
        if currency in _INDECLINABLE_NAMES:
            return _INDECLINABLE_NAMES[currency]

        base, flexions = _DECLINED_NAMES[currency]
        return f"{base}{flexions[number][declension]}"

    @staticmethod
    def subunit_name(currency: Currency, profile: GrammaticalProfile) -> str:
        """Название разменной единицы в форме профиля."""
        number = profile.number.table_index
        declension = profile.declension.table_index

        if currency in (Currency.UAH, Currency.RUB):
            return KOPIYKAS[number][declension]
        if currency in _INDECLINABLE_SUBUNITS:
            return _INDECLINABLE_SUBUNITS[currency]

        base, flexions = _DECLINED_SUBUNITS[currency]
        return f"{base}{flexions[number][declension]}"

    def _amount(self, amount: int, currency: Currency) -> str:
        profile = self.currency_profile(currency)
        name = self.currency_name(currency, profile.agree_with_number(amount))
        return f"{self.int_to_cardinal(amount, profile)} {name}"

    def _subunit_amount(self, amount: int, currency: Currency) -> str:
        profile = self.subunit_profile(currency)
        name = self.subunit_name(currency, profile.agree_with_number(amount))
        return f"{self.int_to_cardinal(amount, profile)} {name}"

    def to_currency(self, num: Number, currency: Currency) -> str:
        if num.is_infinite():
            profile = self.currency_profile(currency)
            infinity = INFINITY[profile.declension.table_index]
            # "нескінченність" управляет родительным множественного: нескінченності доларів
            name = self.currency_name(
                currency, profile.plural().with_declension(Declension.GENITIVE)
            )
            sign = f"{MINUS} " if num.is_negative() else ""
            return f"{sign}{infinity} {name}"

        if num.is_negative():
            return f"{MINUS} {self.to_currency(abs(num), currency)}"

        whole = num.to_int()
        if num.is_integral():
            return self._amount(whole, currency)

        cents = num.subunits()
        if cents == 0:
            return self._amount(whole, currency)
        if whole == 0:
            return self._subunit_amount(cents, currency)
        return f"{self._amount(whole, currency)} {self._subunit_amount(cents, currency)}"
