"""
numwords — числа словами

Количественные, порядковые, порядковые цифрами, годы и суммы в валюте
на английском, французском (Франция, Бельгия, Швейцария) и украинском.

    >>> from numwords import to_words
    >>> to_words(42)
    'forty-two'
    >>> to_words(21, lang="fr", to="ordinal")
    'vingt et unième'
"""

from numwords.converter import (
    ConversionRequest,
    OutputKind,
    build_request,
    check_preconditions,
    convert,
    parse_output,
    to_words,
)
from numwords.core.domain import (
    CannotConvert,
    Currency,
    ErrorKind,
    FloatingOrdinal,
    FloatingYear,
    InfiniteOrdinal,
    InfiniteYear,
    InvalidLanguage,
    InvalidNumber,
    InvalidOutput,
    NegativeOrdinal,
    Num2WordsError,
    describe,
)
from numwords.core.domain.number import Number
from numwords.lang import Lang, resolve_language

__version__ = "0.1.0"

__all__ = [
    # Conversion
    "to_words",
    "convert",
    "build_request",
    "parse_output",
    "check_preconditions",
    "ConversionRequest",
    "OutputKind",
    "Lang",
    "resolve_language",
    # Values
    "Number",
    "Currency",
    # Errors
    "ErrorKind",
    "describe",
    "Num2WordsError",
    "CannotConvert",
    "NegativeOrdinal",
    "FloatingOrdinal",
    "FloatingYear",
    "InfiniteOrdinal",
    "InfiniteYear",
    "InvalidNumber",
    "InvalidLanguage",
    "InvalidOutput",
]
