"""Grading Program - reads student results and writes the grade report."""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console

from crud_showcase.adapters.grade_report_writer import GradeReportWriter
from crud_showcase.adapters.student_reader import StudentFileReader
from crud_showcase.apps.base import ConsoleProgram
from crud_showcase.domain.grading import Student
from crud_showcase.domain.ports import Result

logger = logging.getLogger(__name__)


class GradingApp(ConsoleProgram):
    """Reads ``input_path``, writes the report to ``output_path`` and previews it."""

    def __init__(
        self,
        console: Optional[Console] = None,
        reader: Optional[StudentFileReader] = None,
        writer: Optional[GradeReportWriter] = None
    ):
        super().__init__(console)
        self.reader = reader or StudentFileReader()
        self.writer = writer or GradeReportWriter()

    def load(
        self,
        input_path: Union[str, Path],
        skip_invalid: bool = False
    ) -> tuple[list[Student], list[Result]]:
        """Read students from ``input_path``.

        In strict mode the first bad line raises and nothing is rejected. With
        ``skip_invalid`` bad lines are collected as failure results instead.

        Returns:
            tuple: (students, rejected failure results)
        """
        if not skip_invalid:
            return self.reader.read_students(input_path), []

        students: list[Student] = []
        rejected: list[Result] = []
        for result in self.reader.iter_results(input_path):
            if result.is_success():
                students.append(result.value)
            else:
                rejected.append(result)
        return students, rejected

    def run(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
        skip_invalid: bool = False,
        preview_lines: int = 5
    ) -> Path:
        """Read, report and preview.

        Parameters:
            input_path: Student results file
            output_path: Report file to write
            skip_invalid: Skip malformed lines and list them in the report
            preview_lines: Number of report lines echoed to the console

        Returns:
            Path: The report file

        Raises:
            SourceNotFoundError: If ``input_path`` does not exist
            IngestionError: On the first malformed line unless ``skip_invalid``
            StorageError: If the report cannot be written
        """
        self.write("=== Student Grading System ===")
        self.write(f"Input file: {input_path}")
        self.write(f"Output file: {output_path}")
        self.write()

        self.write("Reading student data...")
        students, rejected = self.load(input_path, skip_invalid)
        self.write(f"Processed {len(students)} student records.")
        if rejected:
            self.write(f"Skipped {len(rejected)} invalid lines.")

        self.write("Generating grade report...")
        report_file = self.writer.write(students, output_path, rejected)
        self.write(f"Report successfully generated: {report_file}")

        self.preview(report_file, preview_lines)
        return report_file

    def preview(self, report_file: Path, preview_lines: int) -> None:
        if preview_lines <= 0:
            return

        lines = report_file.read_text(encoding='utf-8').splitlines()
        self.write()
        self.write("=== REPORT PREVIEW ===")
        for line in lines[:preview_lines]:
            self.write(line)

        remaining = len(lines) - preview_lines
        if remaining > 0:
            self.write(f"... and {remaining} more lines")
