"""Transaction Processors.

Each processor stands for one payment channel. Processing only produces the
confirmation line; debiting the account is the account's job.
"""

import logging
from abc import ABC, abstractmethod

from crud_showcase.domain.enums import PaymentChannel
from crud_showcase.domain.finance import Transaction
from crud_showcase.domain.utils import format_currency

logger = logging.getLogger(__name__)


class TransactionProcessor(ABC):
    """Abstract contract for payment channels.

    Subclasses declare their ``channel`` as a class attribute; override
    ``process`` when a channel needs more than a confirmation line.
    """

    def __init__(self, currency_symbol: str = "$"):
        self.currency_symbol = currency_symbol

    @property
    @abstractmethod
    def channel(self) -> PaymentChannel:
        """Payment channel this processor handles."""
        pass

    def process(self, transaction: Transaction) -> str:
        """Process a transaction and return its confirmation line.

        Parameters:
            transaction: Transaction to process

        Returns:
            str: e.g. "[Bank Transfer] Processed $150.50 for Groceries (ID: 1)"
        """
        logger.debug(f"{self.channel.value}: processing transaction {transaction.id}")
        amount = format_currency(transaction.amount, self.currency_symbol)
        return f"[{self.channel.value}] Processed {amount} for {transaction.category} (ID: {transaction.id})"


class BankTransferProcessor(TransactionProcessor):
    channel = PaymentChannel.BANK_TRANSFER


class MobileMoneyProcessor(TransactionProcessor):
    channel = PaymentChannel.MOBILE_MONEY


class CryptoWalletProcessor(TransactionProcessor):
    channel = PaymentChannel.CRYPTO_WALLET
