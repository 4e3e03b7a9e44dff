"""Tests for the grading program."""

import io
from datetime import datetime

import pytest
from rich.console import Console

from crud_showcase.adapters.grade_report_writer import GradeReportWriter
from crud_showcase.apps.grading_app import GradingApp
from crud_showcase.domain.ports import InvalidScoreFormatError, SourceNotFoundError


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def app(output):
    return GradingApp(
        console=Console(file=output, width=200, color_system=None),
        writer=GradeReportWriter(clock=lambda: datetime(2024, 5, 1, 10, 0, 0)),
    )


@pytest.fixture
def students_file(tmp_path):
    path = tmp_path / "students.txt"
    path.write_text(
        "101, Alice Smith, 84\n"
        "102, Bob Jones, 67\n"
        "103, Carol White, 91\n",
        encoding="utf-8",
    )
    return path


class TestGradingApp:
    """Test reading, reporting and previewing."""

    def test_run_writes_report(self, app, students_file, tmp_path, output):
        """Test the report is written and the console shows progress."""
        report = app.run(students_file, tmp_path / "grade_report.txt")

        assert report.read_text(encoding="utf-8").startswith("=== STUDENT GRADE REPORT ===")
        text = output.getvalue()
        assert "Reading student data..." in text
        assert "Processed 3 student records." in text
        assert "Generating grade report..." in text

    def test_preview(self, app, students_file, tmp_path, output):
        """Test the first lines are echoed with a count of the rest."""
        report = app.run(students_file, tmp_path / "grade_report.txt", preview_lines=2)

        total = len(report.read_text(encoding="utf-8").splitlines())
        lines = output.getvalue().splitlines()
        preview_start = lines.index("=== REPORT PREVIEW ===")
        assert lines[preview_start + 1:preview_start + 3] == [
            "=== STUDENT GRADE REPORT ===",
            "Generated: 2024-05-01 10:00:00",
        ]
        assert lines[-1] == f"... and {total - 2} more lines"

    def test_preview_disabled(self, app, students_file, tmp_path, output):
        """Test a zero preview prints no preview section."""
        app.run(students_file, tmp_path / "grade_report.txt", preview_lines=0)
        assert "REPORT PREVIEW" not in output.getvalue()

    def test_strict_mode_stops_at_bad_line(self, app, tmp_path):
        """Test a malformed line aborts the run without writing a report."""
        source = tmp_path / "students.txt"
        source.write_text("101, Alice Smith, 84\n102, Bob Jones, sixty\n", encoding="utf-8")
        report = tmp_path / "grade_report.txt"

        with pytest.raises(InvalidScoreFormatError):
            app.run(source, report)
        assert not report.exists()

    def test_skip_invalid_lists_rejected_lines(self, app, tmp_path, output):
        """Test lenient mode reports good lines and lists the bad ones."""
        source = tmp_path / "students.txt"
        source.write_text("101, Alice Smith, 84\n102, Bob Jones, sixty\n", encoding="utf-8")

        report = app.run(source, tmp_path / "grade_report.txt", skip_invalid=True)

        content = report.read_text(encoding="utf-8")
        assert "Total Students: 1" in content
        assert "=== REJECTED LINES ===" in content
        assert "Line 2: Invalid score format on line 2. Score must be an integer." in content
        assert "Skipped 1 invalid lines." in output.getvalue()

    def test_missing_input(self, app, tmp_path):
        """Test a missing input file propagates."""
        with pytest.raises(SourceNotFoundError):
            app.run(tmp_path / "missing.txt", tmp_path / "grade_report.txt")
