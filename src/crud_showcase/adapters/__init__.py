"""File adapters for crud-showcase.

This module contains the adapters that read and write files: the student
results reader, the grade report writer and the JSON inventory logger.
"""

from crud_showcase.adapters.grade_report_writer import GradeReportWriter
from crud_showcase.adapters.inventory_logger import InventoryLogger
from crud_showcase.adapters.student_reader import StudentFileReader

__all__ = ["GradeReportWriter", "InventoryLogger", "StudentFileReader"]
