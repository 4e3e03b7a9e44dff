"""Domain Services.

This package contains domain services that implement business logic
without infrastructure dependencies.
"""

from crud_showcase.domain.services.grade_summary import GradeSummary, summarize_scores
from crud_showcase.domain.services.spending_summary import summarize_spending
from crud_showcase.domain.services.transaction_processors import (
    BankTransferProcessor,
    CryptoWalletProcessor,
    MobileMoneyProcessor,
    TransactionProcessor,
)

__all__ = [
    'GradeSummary',
    'summarize_scores',
    'summarize_spending',
    'TransactionProcessor',
    'BankTransferProcessor',
    'MobileMoneyProcessor',
    'CryptoWalletProcessor',
]
