"""Finance Program - processes sample transactions against a savings account."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, Sequence

from rich.console import Console

from crud_showcase.apps.base import ConsoleProgram
from crud_showcase.domain.finance import SavingsAccount, Transaction
from crud_showcase.domain.ports import InsufficientFundsError
from crud_showcase.domain.services import (
    BankTransferProcessor,
    CryptoWalletProcessor,
    MobileMoneyProcessor,
    TransactionProcessor,
    summarize_spending,
)
from crud_showcase.domain.utils import format_currency

logger = logging.getLogger(__name__)


class FinanceApp(ConsoleProgram):
    """Runs four sample transactions through different payment channels.

    The fourth transaction is larger than the remaining balance and is
    declined by the savings account.
    """

    ACCOUNT_NUMBER = "SAV123456"

    def __init__(
        self,
        console: Optional[Console] = None,
        opening_balance: Decimal = Decimal("1000.00"),
        currency_symbol: str = "$",
        clock: Callable[[], datetime] = datetime.now
    ):
        super().__init__(console)
        self.opening_balance = opening_balance
        self.currency_symbol = currency_symbol
        self.clock = clock
        self.transactions: list[Transaction] = []
        self.declined: list[Transaction] = []

    def money(self, amount: Decimal) -> str:
        return format_currency(amount, self.currency_symbol)

    def sample_transactions(self) -> list[Transaction]:
        now = self.clock()
        return [
            Transaction(id=1, date=now, amount=Decimal("150.50"), category="Groceries"),
            Transaction(id=2, date=now, amount=Decimal("75.25"), category="Utilities"),
            Transaction(id=3, date=now, amount=Decimal("50.00"), category="Entertainment"),
            Transaction(id=4, date=now, amount=Decimal("1000.00"), category="Large Purchase"),
        ]

    def default_processors(self) -> list[TransactionProcessor]:
        return [
            MobileMoneyProcessor(self.currency_symbol),
            BankTransferProcessor(self.currency_symbol),
            CryptoWalletProcessor(self.currency_symbol),
            BankTransferProcessor(self.currency_symbol),
        ]

    def process(
        self,
        account: SavingsAccount,
        transaction: Transaction,
        processor: TransactionProcessor
    ) -> bool:
        """Process one transaction and apply it to ``account``.

        Returns:
            bool: True if the account accepted the debit
        """
        self.write()
        self.rule("=")
        self.write(f"PROCESSING TRANSACTION {transaction.id}")
        self.write(f"Date: {transaction.date:%Y-%m-%d %H:%M:%S}")
        self.write(f"Category: {transaction.category}")
        self.write(f"Amount: {self.money(transaction.amount)}")
        self.rule("-", 30)

        self.write(processor.process(transaction))
        self.transactions.append(transaction)

        try:
            new_balance = account.apply_transaction(transaction)
        except InsufficientFundsError:
            self.declined.append(transaction)
            self.write("Insufficient funds")
            applied = False
        else:
            self.write(f"Transaction applied. New balance: {self.money(new_balance)}")
            applied = True

        self.write(f"Current Balance: {self.money(account.balance)}")
        self.rule("=")
        return applied

    def run(
        self,
        transactions: Optional[Sequence[Transaction]] = None,
        processors: Optional[Sequence[TransactionProcessor]] = None
    ) -> SavingsAccount:
        """Open the account, process every transaction and print a summary.

        Each run starts a fresh account and clears the previous run's
        ``transactions`` and ``declined`` lists.

        Parameters:
            transactions: Transactions to process (default: the samples)
            processors: One processor per transaction (default: Mobile Money,
                Bank Transfer, Crypto Wallet, Bank Transfer)

        Returns:
            SavingsAccount: The account after all transactions
        """
        transactions = list(transactions if transactions is not None else self.sample_transactions())
        processors = list(processors if processors is not None else self.default_processors())
        if len(processors) != len(transactions):
            raise ValueError(
                f"Need one processor per transaction, got {len(processors)} for {len(transactions)}"
            )

        self.transactions = []
        self.declined = []

        account = SavingsAccount(self.ACCOUNT_NUMBER, self.opening_balance)
        self.write(
            f"Account {account.account_number} created with initial balance: {self.money(account.balance)}"
        )

        applied = [
            transaction
            for transaction, processor in zip(transactions, processors)
            if self.process(account, transaction, processor)
        ]

        self.write()
        self.write("--- Transaction Summary ---")
        self.write(f"Total transactions processed: {len(self.transactions)}")
        self.write(f"Declined transactions: {len(self.declined)}")
        self.write(f"Final account balance: {self.money(account.balance)}")

        spending = summarize_spending(applied)
        if spending:
            self.write()
            self.write("Spending by category:")
            for category, total in spending.items():
                self.write(f"  {category}: {self.money(total)}")

        logger.info(
            f"Processed {len(self.transactions)} transactions, {len(self.declined)} declined"
        )
        return account
