"""Unit tests for the student results file reader.

Tests cover:
- Parsing well-formed lines
- Line-numbered errors for each kind of malformed line
- Lenient iteration with failure results
- Missing files and blank lines
- Byte order marks and undecodable lines
"""

import pytest

from crud_showcase.adapters.student_reader import StudentFileReader
from crud_showcase.domain.ports import (
    InvalidScoreFormatError,
    MissingFieldError,
    RecordValidationError,
    SourceNotFoundError,
)


@pytest.fixture
def reader():
    return StudentFileReader()


def write_lines(tmp_path, *lines, name="students.txt"):
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestParseLine:
    """Test single-line parsing."""

    def test_valid_line(self, reader):
        """Test fields are stripped and converted."""
        student = reader.parse_line(" 101 ,  Alice Smith , 84 ", 1)
        assert student.id == 101
        assert student.full_name == "Alice Smith"
        assert student.score == 84

    def test_too_few_fields(self, reader):
        """Test a line with two fields reports the count."""
        with pytest.raises(MissingFieldError) as exc_info:
            reader.parse_line("101, Alice Smith", 3)
        assert str(exc_info.value) == (
            "Expected 3 fields (ID, Name, Score) on line 3, but found 2 fields."
        )
        assert exc_info.value.line_number == 3

    def test_too_many_fields(self, reader):
        """Test a line with four fields is rejected."""
        with pytest.raises(MissingFieldError, match="but found 4 fields"):
            reader.parse_line("101, Alice, Smith, 84", 1)

    def test_invalid_id(self, reader):
        """Test a non-integer ID."""
        with pytest.raises(InvalidScoreFormatError, match="Invalid ID format on line 2"):
            reader.parse_line("abc, Alice Smith, 84", 2)

    def test_empty_name(self, reader):
        """Test an empty name."""
        with pytest.raises(MissingFieldError) as exc_info:
            reader.parse_line("101,   , 84", 4)
        assert exc_info.value.field_name == "name"
        assert str(exc_info.value) == "Missing required field 'name' on line 4."

    @pytest.mark.parametrize("score", ["eighty", "84.5", ""])
    def test_invalid_score(self, reader, score):
        """Test scores that are not integers."""
        with pytest.raises(InvalidScoreFormatError) as exc_info:
            reader.parse_line(f"101, Alice Smith, {score}", 5)
        assert str(exc_info.value) == "Invalid score format on line 5. Score must be an integer."
        assert exc_info.value.line_number == 5

    def test_score_out_of_range(self, reader):
        """Test an integer score outside 0-100 fails record validation."""
        with pytest.raises(RecordValidationError) as exc_info:
            reader.parse_line("101, Alice Smith, 120", 6)
        assert str(exc_info.value) == "Error processing line 6: Score must be between 0 and 100."

    def test_custom_delimiter(self):
        """Test a semicolon-separated line."""
        student = StudentFileReader(delimiter=";").parse_line("7; Grace Hopper; 99", 1)
        assert student.full_name == "Grace Hopper"


class TestReadStudents:
    """Test strict file reading."""

    def test_reads_in_file_order(self, reader, tmp_path):
        """Test every line becomes a student in order."""
        path = write_lines(tmp_path, "101, Alice Smith, 84", "102, Bob Jones, 67")
        students = reader.read_students(path)
        assert [s.id for s in students] == [101, 102]

    def test_blank_lines_skipped_but_counted(self, reader, tmp_path):
        """Test blank lines do not shift the reported line numbers."""
        path = write_lines(tmp_path, "101, Alice Smith, 84", "", "   ", "bad line")
        with pytest.raises(MissingFieldError) as exc_info:
            reader.read_students(path)
        assert exc_info.value.line_number == 4

    def test_empty_file(self, reader, tmp_path):
        """Test an empty file yields no students."""
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        assert reader.read_students(path) == []

    def test_missing_file(self, reader, tmp_path):
        """Test a missing file raises SourceNotFoundError."""
        missing = tmp_path / "nope.txt"
        with pytest.raises(SourceNotFoundError) as exc_info:
            reader.read_students(missing)
        assert exc_info.value.source == str(missing)
        assert "Input file not found" in str(exc_info.value)

    def test_windows_line_endings(self, reader, tmp_path):
        """Test CRLF line endings are handled."""
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"101, Alice Smith, 84\r\n102, Bob Jones, 67\r\n")
        assert [s.score for s in reader.read_students(path)] == [84, 67]


class TestIterResults:
    """Test lenient iteration."""

    def test_mixed_lines(self, reader, tmp_path):
        """Test bad lines become failure results with their line number."""
        path = write_lines(
            tmp_path,
            "101, Alice Smith, 84",
            "102, Bob Jones, abc",
            "103, Carol White, 91",
        )
        results = list(reader.iter_results(path))

        assert [r.is_success() for r in results] == [True, False, True]
        failure = results[1]
        assert failure.error_type == "InvalidScoreFormatError"
        assert failure.error_details == {"source": str(path), "line_number": 2}
        assert "line 2" in failure.error

    def test_missing_file_raises_on_iteration(self, reader, tmp_path):
        """Test the missing-file error surfaces when iteration starts."""
        results = reader.iter_results(tmp_path / "nope.txt")
        with pytest.raises(SourceNotFoundError):
            next(results)


class TestEncoding:
    """Test byte order marks and undecodable lines."""

    def test_utf8_bom_is_dropped(self, reader, tmp_path):
        """Test a BOM-prefixed file parses its first line."""
        path = tmp_path / "students.txt"
        path.write_text("\ufeff101, Alice Smith, 84\n102, Bob Jones, 67\n", encoding="utf-8")

        students = reader.read_students(path)
        assert [s.id for s in students] == [101, 102]

    def test_non_ascii_names(self, reader, tmp_path):
        """Test UTF-8 names are read intact."""
        path = tmp_path / "students.txt"
        path.write_text("101, Renée Smith, 84\n", encoding="utf-8")
        assert reader.read_students(path)[0].full_name == "Renée Smith"

    def test_undecodable_line_strict(self, reader, tmp_path):
        """Test a Latin-1 line is a line-numbered validation error."""
        path = tmp_path / "students.txt"
        path.write_bytes(b"100, Ann Lee, 70\n101, Ren\xe9e Smith, 84\n")

        with pytest.raises(RecordValidationError) as exc_info:
            reader.read_students(path)
        assert exc_info.value.line_number == 2
        assert "line is not valid utf-8-sig text" in str(exc_info.value)

    def test_undecodable_line_lenient(self, reader, tmp_path):
        """Test lenient reading rejects only the undecodable line."""
        path = tmp_path / "students.txt"
        path.write_bytes(b"101, Ren\xe9e Smith, 84\n102, Bob Jones, 67\n")

        results = list(reader.iter_results(path))
        assert [r.is_success() for r in results] == [False, True]
        assert results[0].error_type == "RecordValidationError"
        assert results[0].error_details["line_number"] == 1

    def test_latin1_encoding(self, tmp_path):
        """Test a configured encoding decodes the file."""
        path = tmp_path / "students.txt"
        path.write_bytes(b"101, Ren\xe9e Smith, 84\n")
        students = StudentFileReader(encoding="latin-1").read_students(path)
        assert students[0].full_name == "Renée Smith"
