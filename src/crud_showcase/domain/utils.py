"""Domain Utilities - Formatting and lookup helpers.

Small pure functions used by several records and programs.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from crud_showcase.domain.enums import LetterGrade

# Minimum score (inclusive) for each grade, checked top-down.
GRADE_THRESHOLDS: tuple[tuple[int, LetterGrade], ...] = (
    (80, LetterGrade.A),
    (70, LetterGrade.B),
    (60, LetterGrade.C),
    (50, LetterGrade.D),
)

_CENT = Decimal("0.01")


def letter_grade(score: int) -> LetterGrade:
    """Map a 0-100 score to its letter grade.

    Parameters:
        score: Score to bucket

    Returns:
        LetterGrade: A for 80 and above, B for 70-79, C for 60-69,
        D for 50-59 and F otherwise
    """
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return LetterGrade.F


def format_currency(amount: Union[Decimal, int, float], symbol: str = "$") -> str:
    """Format an amount as currency with thousands separators and two decimals.

    Parameters:
        amount: Amount to format
        symbol: Currency symbol placed before the digits

    Returns:
        str: e.g. "$1,234.50", or "-$5.00" for negative amounts
    """
    value = Decimal(str(amount)).quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"
