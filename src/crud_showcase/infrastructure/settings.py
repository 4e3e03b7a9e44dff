"""Application Settings and Configuration.

This module provides application-wide settings read from environment
variables, with defaults matching the file names the programs have always
used.

Environment variables (all optional):
    CS_APP_NAME, CS_LOG_LEVEL, CS_LOG_JSON, CS_STUDENTS_FILE, CS_REPORT_FILE,
    CS_INVENTORY_FILE, CS_CURRENCY_SYMBOL, CS_OPENING_BALANCE,
    CS_REPORT_PREVIEW_LINES
"""

import os
from decimal import Decimal, InvalidOperation
from pathlib import Path

# Application metadata
APP_NAME = "crud-showcase"
APP_VERSION = "1.0.0"

# Default file names, resolved against the working directory
DEFAULT_STUDENTS_FILE = "students.txt"
DEFAULT_REPORT_FILE = "grade_report.txt"
DEFAULT_INVENTORY_FILE = "inventory_data.json"

DEFAULT_CURRENCY_SYMBOL = "$"
DEFAULT_OPENING_BALANCE = "1000.00"

# Number of report lines echoed to the console after writing a grade report
DEFAULT_REPORT_PREVIEW_LINES = 5


class Settings:
    """Application settings loaded from the environment.

    A fresh instance re-reads the environment, which is how tests exercise
    overrides.
    """

    def __init__(self):
        """Initialize settings from environment."""
        self.app_name = os.getenv("CS_APP_NAME", APP_NAME)

        # Logging
        self.log_level = os.getenv("CS_LOG_LEVEL", "WARNING")
        self.log_json = os.getenv("CS_LOG_JSON", "false").lower() == "true"

        # File locations
        self.students_file = os.getenv("CS_STUDENTS_FILE", DEFAULT_STUDENTS_FILE)
        self.report_file = os.getenv("CS_REPORT_FILE", DEFAULT_REPORT_FILE)
        self.inventory_file = os.getenv("CS_INVENTORY_FILE", DEFAULT_INVENTORY_FILE)

        # Finance
        self.currency_symbol = os.getenv("CS_CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL)
        self.opening_balance = self._parse_decimal(
            "CS_OPENING_BALANCE", os.getenv("CS_OPENING_BALANCE", DEFAULT_OPENING_BALANCE)
        )

        # Grading
        self.report_preview_lines = int(
            os.getenv("CS_REPORT_PREVIEW_LINES", str(DEFAULT_REPORT_PREVIEW_LINES))
        )

    @staticmethod
    def _parse_decimal(name: str, raw: str) -> Decimal:
        try:
            return Decimal(raw)
        except InvalidOperation:
            raise ValueError(f"{name} must be a decimal number, got {raw!r}") from None

    @staticmethod
    def resolve(path: str) -> Path:
        """Resolve a configured path against the current working directory."""
        candidate = Path(path)
        return candidate if candidate.is_absolute() else Path.cwd() / candidate


# Global settings instance
settings = Settings()
