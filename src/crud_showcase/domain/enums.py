"""Enumerations shared by the domain records."""

from enum import Enum


class Gender(str, Enum):
    """Administrative gender of a patient."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class LetterGrade(str, Enum):
    """Letter grade buckets, declared best first."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class PaymentChannel(str, Enum):
    """Channels a transaction can be processed through."""
    BANK_TRANSFER = "Bank Transfer"
    MOBILE_MONEY = "Mobile Money"
    CRYPTO_WALLET = "Crypto Wallet"
