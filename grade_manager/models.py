"""
Pydantic models for the Grade Manager.

Defines the student record loaded from the roster file and the summary
returned by the lowest/highest queries.
"""

from pydantic import BaseModel, Field, field_validator

from .config import ASSIGNMENT_COUNT


class Student(BaseModel):
    """
    A single roster entry.

    Attributes:
        name: Display name as written in the roster file (trimmed).
        grades: One grade per assignment, index 0 holds assignment 1.
    """

    name: str = Field(..., min_length=1, description="Student display name")
    grades: list[float] = Field(
        ...,
        min_length=ASSIGNMENT_COUNT,
        max_length=ASSIGNMENT_COUNT,
        description="Grades for assignments 1..10",
    )

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Student name must not be blank")
        return value

    def matches(self, name: str) -> bool:
        """Case-insensitive exact name comparison."""
        return self.name.lower() == name.strip().lower()


class StudentSummary(BaseModel):
    """
    A student's name paired with their average grade.

    Attributes:
        name: Student display name.
        average: Mean of the student's grades.
    """

    name: str = Field(..., description="Student display name")
    average: float = Field(..., description="Per-student average grade")
