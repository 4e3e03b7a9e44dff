"""Student Result File Reader.

Reads the comma-separated student results file (one "ID, Name, Score" record
per line) into Student records.

Architecture:
    - Two entry points over the same line parser:
      ``read_students`` is strict and raises on the first bad line,
      ``iter_results`` is lenient and yields a Result per line
    - Every error carries the 1-based line number it was found on
    - Lines are decoded one at a time, so a line that is not valid text in
      the configured encoding is rejected like any other malformed line
    - A leading UTF-8 byte order mark is dropped
    - Blank and whitespace-only lines are skipped but still counted

Input Format:
    101, Alice Smith, 84
    102, Bob Jones, 67
"""

import logging
import re
from pathlib import Path
from typing import Iterator, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from crud_showcase.domain.grading import Student
from crud_showcase.domain.ports import (
    IngestionError,
    InvalidScoreFormatError,
    MissingFieldError,
    RecordValidationError,
    Result,
    SourceNotFoundError,
)

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+")


class StudentFileReader:
    """Parser for student result files with line-numbered error reporting.

    Example Usage:
        ```python
        reader = StudentFileReader()
        students = reader.read_students("students.txt")

        # Keep going past bad lines
        for result in reader.iter_results("students.txt"):
            ...
        ```
    """

    EXPECTED_FIELDS = 3

    def __init__(self, delimiter: str = ',', encoding: str = 'utf-8-sig'):
        """Initialize the reader.

        Parameters:
            delimiter: Field separator (default: ',')
            encoding: File encoding; must be ASCII-compatible since lines are
                split on raw newline bytes (default: 'utf-8-sig', which also
                accepts plain UTF-8)
        """
        self.delimiter = delimiter
        self.encoding = encoding

    def read_students(self, source: Union[str, Path]) -> list[Student]:
        """Read every student from ``source``, stopping at the first bad line.

        Parameters:
            source: Path to the input file

        Returns:
            list[Student]: Students in file order

        Raises:
            SourceNotFoundError: If the file does not exist
            IngestionError: If the file cannot be read
            MissingFieldError: If a line has the wrong field count or an empty name
            InvalidScoreFormatError: If the ID or score is not an integer
            RecordValidationError: If a line is not valid text or its values
                fail record validation
        """
        students = []
        for line_number, raw_line in self._lines(source):
            student = self.parse_raw_line(raw_line, line_number)
            if student is not None:
                students.append(student)

        logger.info(f"Read {len(students)} student records from {source}")
        return students

    def iter_results(self, source: Union[str, Path]) -> Iterator[Result[Student]]:
        """Yield one Result per non-blank line of ``source``.

        Bad lines become failure results carrying ``source`` and
        ``line_number`` in ``error_details``.

        Raises:
            SourceNotFoundError: If the file does not exist
            IngestionError: If the file cannot be read
        """
        for line_number, raw_line in self._lines(source):
            try:
                student = self.parse_raw_line(raw_line, line_number)
            except IngestionError as e:
                logger.warning(
                    f"Rejected line {line_number} of {source}: {e}",
                    extra={"extra_fields": {"source": str(source), "line_number": line_number}}
                )
                yield Result.failure_result(
                    e,
                    error_details={"source": str(source), "line_number": line_number}
                )
                continue

            if student is not None:
                yield Result.success_result(student)

    def parse_raw_line(self, raw_line: bytes, line_number: int) -> Optional[Student]:
        """Decode and parse one line as read from the file.

        Returns:
            Optional[Student]: The parsed record, or None for a blank line

        Raises:
            RecordValidationError: If the line is not valid text in ``encoding``
        """
        try:
            line = raw_line.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise RecordValidationError(
                f"Error processing line {line_number}: line is not valid {self.encoding} text ({e.reason}).",
                line_number=line_number
            ) from e

        if not line.strip():
            return None
        return self.parse_line(line, line_number)

    def parse_line(self, line: str, line_number: int) -> Student:
        """Parse one "ID, Name, Score" line.

        Parameters:
            line: Raw line without its line terminator
            line_number: 1-based line number used in error messages

        Returns:
            Student: The parsed record
        """
        parts = line.split(self.delimiter)

        if len(parts) != self.EXPECTED_FIELDS:
            raise MissingFieldError(
                "student record",
                line_number,
                f"Expected {self.EXPECTED_FIELDS} fields (ID, Name, Score) on line {line_number}, "
                f"but found {len(parts)} fields."
            )

        id_text, name, score_text = (part.strip() for part in parts)

        if not _INTEGER.fullmatch(id_text):
            raise InvalidScoreFormatError(
                f"Invalid ID format on line {line_number}. ID must be an integer.",
                line_number=line_number
            )

        if not name:
            raise MissingFieldError("name", line_number)

        if not _INTEGER.fullmatch(score_text):
            raise InvalidScoreFormatError(
                f"Invalid score format on line {line_number}. Score must be an integer.",
                line_number=line_number
            )

        try:
            return Student(id=int(id_text), full_name=name, score=int(score_text))
        except PydanticValidationError as e:
            raise RecordValidationError(
                f"Error processing line {line_number}: {_describe(e)}",
                line_number=line_number
            ) from e

    def _lines(self, source: Union[str, Path]) -> Iterator[tuple[int, bytes]]:
        source_path = Path(source)
        if not source_path.is_file():
            raise SourceNotFoundError(f"Input file not found: {source}", source=str(source))

        try:
            with open(source_path, 'rb') as f:
                for line_number, raw_line in enumerate(f, start=1):
                    yield line_number, raw_line.rstrip(b'\r\n')
        except OSError as e:
            raise IngestionError(f"Failed to read input file {source}: {e}") from e


def _describe(error: PydanticValidationError) -> str:
    """Join pydantic error messages without their "Value error, " prefix."""
    messages = [detail["msg"].removeprefix("Value error, ") for detail in error.errors()]
    return "; ".join(messages)
