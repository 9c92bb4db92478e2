"""
Core math modules для numwords

Точные операции над Decimal и разложение величины на тройки цифр.
"""

# Decimal Ops
from numwords.core.math.decimal_ops import (
    PRECISION_MARGIN,
    SUBUNITS_PER_UNIT,
    fractional_digits,
    integral_part,
    is_integral,
    is_valid_decimal,
    parse_decimal,
    round_half_up,
    subunits,
)

# Triplets
from numwords.core.math.triplets import (
    TRIPLET_BASE,
    last_two_digits,
    split_thousands,
    split_triplet,
)

__all__ = [
    # Decimal Ops — Constants
    "PRECISION_MARGIN",
    "SUBUNITS_PER_UNIT",
    # Decimal Ops — Functions
    "parse_decimal",
    "is_valid_decimal",
    "integral_part",
    "fractional_digits",
    "is_integral",
    "round_half_up",
    "subunits",
    # Triplets
    "TRIPLET_BASE",
    "split_thousands",
    "split_triplet",
    "last_two_digits",
]
