"""Grade Summary Service.

Computes the statistics printed at the bottom of a grade report: count,
average, highest and lowest scorer, and how many students fall in each
letter grade.

Architecture:
    - Pure domain service; students are loaded into a DataFrame once and
      every statistic is a vectorized pandas operation over it
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

import pandas as pd

from crud_showcase.domain.enums import LetterGrade
from crud_showcase.domain.grading import Student

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GradeSummary:
    """Summary statistics for a list of students.

    Attributes:
        total_students: Number of students summarised
        average_score: Mean score, None when there are no students
        highest: Top scorer (first in input order on ties)
        lowest: Bottom scorer (first in input order on ties)
        distribution: Student count per letter grade, best grade first;
            grades nobody received are omitted
    """
    total_students: int
    average_score: Optional[float] = None
    highest: Optional[Student] = None
    lowest: Optional[Student] = None
    distribution: dict[LetterGrade, int] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return self.total_students == 0


def summarize_scores(students: Sequence[Student]) -> GradeSummary:
    """Summarise a list of students.

    Parameters:
        students: Students in input order

    Returns:
        GradeSummary: Statistics over the students; an empty input yields a
        summary with ``total_students == 0`` and no statistics
    """
    if not students:
        return GradeSummary(total_students=0)

    frame = pd.DataFrame({
        "score": [student.score for student in students],
        "grade": [student.grade.value for student in students],
    })

    # idxmax/idxmin return the first matching row, so ties go to input order
    highest = students[int(frame["score"].idxmax())]
    lowest = students[int(frame["score"].idxmin())]

    counts = frame.groupby("grade", sort=True).size()
    distribution = {LetterGrade(grade): int(count) for grade, count in counts.items()}

    summary = GradeSummary(
        total_students=len(frame),
        average_score=float(frame["score"].mean()),
        highest=highest,
        lowest=lowest,
        distribution=distribution,
    )
    logger.debug(f"Summarised {summary.total_students} students, average {summary.average_score:.2f}")
    return summary
