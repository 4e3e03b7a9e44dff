"""Tests for the domain services: processors and summaries."""

from decimal import Decimal

import pytest

from crud_showcase.domain.enums import LetterGrade, PaymentChannel
from crud_showcase.domain.finance import Transaction
from crud_showcase.domain.grading import Student
from crud_showcase.domain.services import (
    BankTransferProcessor,
    CryptoWalletProcessor,
    MobileMoneyProcessor,
    TransactionProcessor,
    summarize_scores,
    summarize_spending,
)


class TestTransactionProcessors:
    """Test suite for the payment channel processors."""

    @pytest.mark.parametrize("processor_cls,label", [
        (BankTransferProcessor, "Bank Transfer"),
        (MobileMoneyProcessor, "Mobile Money"),
        (CryptoWalletProcessor, "Crypto Wallet"),
    ])
    def test_confirmation_line(self, processor_cls, label):
        """Test each channel labels its confirmation line."""
        txn = Transaction(id=1, amount=Decimal("150.50"), category="Groceries")
        assert processor_cls().process(txn) == f"[{label}] Processed $150.50 for Groceries (ID: 1)"

    def test_custom_currency_symbol(self):
        """Test the currency symbol is configurable."""
        txn = Transaction(id=7, amount=Decimal("1234.5"), category="Rent")
        assert BankTransferProcessor("€").process(txn) == "[Bank Transfer] Processed €1,234.50 for Rent (ID: 7)"

    def test_channel(self):
        """Test each processor exposes its channel."""
        assert MobileMoneyProcessor().channel == PaymentChannel.MOBILE_MONEY

    def test_base_class_is_abstract(self):
        """Test the base processor cannot be instantiated."""
        with pytest.raises(TypeError):
            TransactionProcessor()


class TestSummarizeSpending:
    """Test suite for spending per category."""

    def test_totals_per_category_in_first_seen_order(self):
        """Test amounts are summed per category as Decimals."""
        transactions = [
            Transaction(id=1, amount=Decimal("10.10"), category="Food"),
            Transaction(id=2, amount=Decimal("5.00"), category="Travel"),
            Transaction(id=3, amount=Decimal("0.20"), category="Food"),
        ]
        totals = summarize_spending(transactions)

        assert list(totals) == ["Food", "Travel"]
        assert totals["Food"] == Decimal("10.30")
        assert isinstance(totals["Food"], Decimal)

    def test_empty(self):
        """Test no transactions yields no totals."""
        assert summarize_spending([]) == {}


class TestSummarizeScores:
    """Test suite for the grade summary."""

    @pytest.fixture
    def students(self):
        return [
            Student(id=101, full_name="Alice Smith", score=84),
            Student(id=102, full_name="Bob Jones", score=67),
            Student(id=103, full_name="Carol White", score=91),
            Student(id=104, full_name="Dan Brown", score=45),
        ]

    def test_statistics(self, students):
        """Test count, average, highest and lowest."""
        summary = summarize_scores(students)

        assert summary.total_students == 4
        assert summary.average_score == pytest.approx(71.75)
        assert summary.highest.full_name == "Carol White"
        assert summary.lowest.full_name == "Dan Brown"
        assert not summary.is_empty

    def test_distribution_best_grade_first(self, students):
        """Test the distribution omits empty grades and is ordered A to F."""
        summary = summarize_scores(students)
        assert list(summary.distribution.items()) == [
            (LetterGrade.A, 2),
            (LetterGrade.C, 1),
            (LetterGrade.F, 1),
        ]

    def test_ties_go_to_first_in_input_order(self):
        """Test the first student wins a tie for highest or lowest."""
        students = [
            Student(id=1, full_name="First", score=70),
            Student(id=2, full_name="Second", score=70),
        ]
        summary = summarize_scores(students)
        assert summary.highest.id == 1
        assert summary.lowest.id == 1

    def test_empty(self):
        """Test an empty input yields an empty summary."""
        summary = summarize_scores([])
        assert summary.is_empty
        assert summary.average_score is None
        assert summary.distribution == {}
