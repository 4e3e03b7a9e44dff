"""Domain Ports - Result Type and Error Contracts.

This module defines the contracts the five programs share: a Result type for
reporting per-record outcomes without raising, and the exception hierarchy
every layer raises and every program loop catches.

Architecture:
    - Pure domain module with zero infrastructure dependencies
    - Adapters (file reader, JSON logger) raise the ingestion/storage errors
    - Repositories raise the keyed-lookup errors
    - Programs catch ShowcaseError at their outermost loop and print it
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

# Type variable for Result generic
T = TypeVar('T')


# ============================================================================
# Result Type for Success/Failure Communication
# ============================================================================

@dataclass(frozen=True)
class Result(Generic[T]):
    """Result type for communicating success or failure without exceptions.

    Used by the lenient student parser so one malformed line is reported
    alongside the good ones instead of aborting the whole file.

    Attributes:
        success: True if the operation succeeded, False otherwise
        value: The successful result value (only present if success=True)
        error: Error message (only present if success=False)
        error_type: Name of the error class (MissingFieldError, ...)
        error_details: Additional error context (source, line_number, ...)

    Example:
        ```python
        for result in reader.iter_results("students.txt"):
            if result.is_success():
                students.append(result.value)
            else:
                print(result.error_details["line_number"], result.error)
        ```
    """

    success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    error_details: Optional[dict] = None

    @classmethod
    def success_result(cls, value: T) -> 'Result[T]':
        """Create a successful result.

        Parameters:
            value: The successful result value

        Returns:
            Result: Success result with the value
        """
        return cls(
            success=True,
            value=value,
            error=None,
            error_type=None,
            error_details=None
        )

    @classmethod
    def failure_result(
        cls,
        error: Union[str, Exception],
        error_type: Optional[str] = None,
        error_details: Optional[dict] = None
    ) -> 'Result[T]':
        """Create a failure result.

        Parameters:
            error: Error message or exception
            error_type: Type of error (e.g., "InvalidScoreFormatError")
            error_details: Additional context (source, line_number, etc.)

        Returns:
            Result: Failure result with error information
        """
        error_message = str(error) if isinstance(error, Exception) else error
        error_type_name = error_type or (type(error).__name__ if isinstance(error, Exception) else "UnknownError")

        return cls(
            success=False,
            value=None,
            error=error_message,
            error_type=error_type_name,
            error_details=error_details or {}
        )

    def is_success(self) -> bool:
        """Check if result is successful."""
        return self.success

    def is_failure(self) -> bool:
        """Check if result is a failure."""
        return not self.success


# ============================================================================
# Custom Exception Hierarchy
# ============================================================================

class ShowcaseError(Exception):
    """Base exception for every error the programs raise on purpose."""
    pass


class RepositoryError(ShowcaseError):
    """Base exception for keyed repository lookups.

    Attributes:
        item_id: The key the operation was attempted with
    """

    def __init__(self, message: str, item_id: Optional[int] = None):
        super().__init__(message)
        self.item_id = item_id


class DuplicateItemError(RepositoryError):
    """Raised when adding an item whose ID is already stored."""

    def __init__(self, item_id: int, message: Optional[str] = None):
        super().__init__(
            message or f"An item with ID {item_id} already exists in the inventory.",
            item_id=item_id
        )


class ItemNotFoundError(RepositoryError):
    """Raised when an ID is looked up, updated or removed but not stored."""

    def __init__(self, item_id: int, message: Optional[str] = None):
        super().__init__(
            message or f"Item with ID {item_id} was not found in the inventory.",
            item_id=item_id
        )


class InvalidQuantityError(ShowcaseError, ValueError):
    """Raised when a stock quantity would become negative."""

    def __init__(self, message: str = "Quantity cannot be negative."):
        super().__init__(message)


class InsufficientFundsError(ShowcaseError):
    """Raised when an account cannot cover a transaction.

    Attributes:
        balance: Balance at the time of the attempt
        amount: Amount that was requested
    """

    def __init__(self, balance, amount, message: Optional[str] = None):
        super().__init__(message or f"Insufficient funds: balance {balance} is less than {amount}.")
        self.balance = balance
        self.amount = amount


class IngestionError(ShowcaseError):
    """Base exception for errors raised while reading an input file."""
    pass


class SourceNotFoundError(IngestionError):
    """Raised when the input file cannot be found.

    Attributes:
        source: The path that was not found
    """

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class InvalidScoreFormatError(IngestionError):
    """Raised when a numeric field of an input line is not an integer.

    Attributes:
        line_number: 1-based line the error was found on
    """

    def __init__(
        self,
        message: str = "Invalid score format. Score must be a valid integer.",
        line_number: Optional[int] = None
    ):
        super().__init__(message)
        self.line_number = line_number


class MissingFieldError(IngestionError):
    """Raised when a required field of an input line is missing or empty.

    Attributes:
        field_name: Name of the missing field
        line_number: 1-based line the error was found on
    """

    def __init__(self, field_name: str, line_number: int, message: Optional[str] = None):
        super().__init__(
            message or f"Missing required field '{field_name}' on line {line_number}."
        )
        self.field_name = field_name
        self.line_number = line_number


class RecordValidationError(IngestionError):
    """Raised when a well-formed line still fails record validation.

    Attributes:
        line_number: 1-based line the error was found on
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number


class StorageError(ShowcaseError):
    """Raised when persisting or restoring records fails.

    Attributes:
        source: File path involved in the failed operation
    """

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source
