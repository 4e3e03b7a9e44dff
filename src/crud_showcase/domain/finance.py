"""Finance Records - Transactions and Accounts.

A Transaction is an immutable pydantic record. Accounts are plain classes
because their balance changes as transactions are applied.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from crud_showcase.domain.ports import InsufficientFundsError

logger = logging.getLogger(__name__)


class Transaction(BaseModel):
    """A single spending transaction.

    Parameters:
        id: Transaction identifier
        date: When the transaction happened
        amount: Positive amount to debit
        category: Spending category (e.g., "Groceries")
    """

    id: int = Field(..., description="Transaction identifier")
    date: datetime = Field(default_factory=datetime.now, description="Transaction timestamp")
    amount: Decimal = Field(..., gt=0, description="Amount to debit (positive)")
    category: str = Field(..., min_length=1, description="Spending category")

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: str) -> str:
        """Strip the category and reject whitespace-only values."""
        v_stripped = v.strip()
        if not v_stripped:
            raise ValueError("Category cannot be empty or whitespace only")
        return v_stripped

    model_config = ConfigDict(frozen=True)


class Account:
    """A bank account that debits every transaction applied to it.

    Parameters:
        account_number: Account identifier
        initial_balance: Opening balance
    """

    def __init__(self, account_number: str, initial_balance: Union[Decimal, int, str]):
        if not account_number or not account_number.strip():
            raise ValueError("account_number must be a non-empty string")

        self.account_number = account_number.strip()
        self._balance = Decimal(str(initial_balance))

    @property
    def balance(self) -> Decimal:
        return self._balance

    def apply_transaction(self, transaction: Transaction) -> Decimal:
        """Debit the transaction amount.

        Returns:
            Decimal: The new balance
        """
        self._balance -= transaction.amount
        logger.info(
            f"Account {self.account_number}: applied transaction {transaction.id}, "
            f"balance now {self._balance}"
        )
        return self._balance


class SavingsAccount(Account):
    """An account that never goes overdrawn."""

    def apply_transaction(self, transaction: Transaction) -> Decimal:
        """Debit the transaction amount if the balance covers it.

        Raises:
            InsufficientFundsError: If the amount exceeds the balance; the
                balance is left unchanged
        """
        if transaction.amount > self._balance:
            logger.warning(
                f"Account {self.account_number}: declined transaction {transaction.id} "
                f"({transaction.amount} > {self._balance})"
            )
            raise InsufficientFundsError(self._balance, transaction.amount)
        return super().apply_transaction(transaction)
