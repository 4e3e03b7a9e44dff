"""Spending Summary Service - totals per transaction category."""

from decimal import Decimal
from typing import Sequence

import pandas as pd

from crud_showcase.domain.finance import Transaction


def summarize_spending(transactions: Sequence[Transaction]) -> dict[str, Decimal]:
    """Total the amounts of ``transactions`` per category.

    Categories appear in the order they were first seen. Amounts stay
    Decimal so the totals print without float rounding.
    """
    if not transactions:
        return {}

    frame = pd.DataFrame({
        "category": [transaction.category for transaction in transactions],
        "amount": pd.Series([transaction.amount for transaction in transactions], dtype=object),
    })
    totals = frame.groupby("category", sort=False)["amount"].agg(
        lambda amounts: sum(amounts, Decimal("0"))
    )
    return {category: total for category, total in totals.items()}
