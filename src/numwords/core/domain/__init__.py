"""
Domain models and value objects.

Contains errors, the grammatical profile with its agreement rule and the
currency catalog. The Number value type lives in numwords.core.domain.number.
"""

from numwords.core.domain.errors import (
    ERROR_MESSAGES,
    CannotConvert,
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
from numwords.core.domain.grammar import (
    Declension,
    Gender,
    GrammaticalNumber,
    GrammaticalProfile,
)
from numwords.core.domain.currency import Currency, apply_plural_marker

__all__ = [
    # Errors
    "ERROR_MESSAGES",
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
    # Grammar
    "Gender",
    "GrammaticalNumber",
    "Declension",
    "GrammaticalProfile",
    # Currency
    "Currency",
    "apply_plural_marker",
]
