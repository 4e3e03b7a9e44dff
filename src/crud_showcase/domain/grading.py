"""Grading Records - Students and their letter grades."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from crud_showcase.domain.enums import LetterGrade
from crud_showcase.domain.utils import letter_grade


class Student(BaseModel):
    """A student result line.

    Parameters:
        id: Student identifier
        full_name: Student's full name
        score: Exam score between 0 and 100 inclusive
    """

    id: int = Field(..., description="Student identifier")
    full_name: str = Field(..., description="Full name")
    score: int = Field(..., description="Score (0-100)")

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        v_stripped = v.strip()
        if not v_stripped:
            raise ValueError("Full name cannot be empty or whitespace only")
        return v_stripped

    @field_validator("score")
    @classmethod
    def validate_score(cls, v: int) -> int:
        if v < 0 or v > 100:
            raise ValueError("Score must be between 0 and 100.")
        return v

    @property
    def grade(self) -> LetterGrade:
        return letter_grade(self.score)

    model_config = ConfigDict(frozen=True)
