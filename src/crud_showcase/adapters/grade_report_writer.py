"""Grade Report Writer.

Renders students and their summary into the plain-text grade report and
writes it to disk.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Sequence, Union

from crud_showcase.domain.grading import Student
from crud_showcase.domain.ports import Result, StorageError
from crud_showcase.domain.services import summarize_scores

logger = logging.getLogger(__name__)


class GradeReportWriter:
    """Writes the student grade report.

    Report layout:
        === STUDENT GRADE REPORT ===
        Generated: 2024-05-01 10:00:00

        Alice Smith (ID: 101): Score = 84, Grade = A
        ...

        === SUMMARY ===
        Total Students: 4
        Average Score: 71.25
        Highest Score: 84 (Alice Smith)
        Lowest Score: 45 (Dan Brown)

        Grade Distribution:
        A: 1 students
        ...
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        """Initialize the writer.

        Parameters:
            clock: Source of the "Generated" timestamp
        """
        self.clock = clock

    def render(self, students: Sequence[Student], rejected: Sequence[Result] = ()) -> list[str]:
        """Render the report as a list of lines.

        Parameters:
            students: Students to report on, in input order
            rejected: Failure results from lenient parsing, listed at the end
        """
        lines = [
            "=== STUDENT GRADE REPORT ===",
            f"Generated: {self.clock():%Y-%m-%d %H:%M:%S}",
            "",
        ]

        for student in sorted(students, key=lambda s: (s.full_name.casefold(), s.full_name)):
            lines.append(
                f"{student.full_name} (ID: {student.id}): "
                f"Score = {student.score}, Grade = {student.grade.value}"
            )

        summary = summarize_scores(students)
        lines += ["", "=== SUMMARY ===", f"Total Students: {summary.total_students}"]

        if summary.is_empty:
            lines.append("No student records to summarise.")
        else:
            lines += [
                f"Average Score: {summary.average_score:.2f}",
                f"Highest Score: {summary.highest.score} ({summary.highest.full_name})",
                f"Lowest Score: {summary.lowest.score} ({summary.lowest.full_name})",
                "",
                "Grade Distribution:",
            ]
            lines += [f"{grade.value}: {count} students" for grade, count in summary.distribution.items()]

        if rejected:
            lines += ["", "=== REJECTED LINES ==="]
            for result in rejected:
                line_number = (result.error_details or {}).get("line_number", "?")
                lines.append(f"Line {line_number}: {result.error}")

        return lines

    def write(
        self,
        students: Sequence[Student],
        output_path: Union[str, Path],
        rejected: Sequence[Result] = ()
    ) -> Path:
        """Render the report and write it to ``output_path``.

        Missing parent directories are created.

        Returns:
            Path: The file that was written

        Raises:
            StorageError: If the file cannot be written
        """
        output_file = Path(output_path)
        content = "\n".join(self.render(students, rejected)) + "\n"

        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(content, encoding='utf-8')
        except OSError as e:
            raise StorageError(
                f"Failed to write report to {output_file}: {e}",
                source=str(output_file)
            ) from e

        logger.info(f"Wrote grade report for {len(students)} students to {output_file}")
        return output_file
