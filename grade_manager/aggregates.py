"""
Aggregate queries over the roster.

All functions are pure: they read the roster and never modify it.
"""

from collections.abc import Iterable, Sequence

from .config import MAX_ASSIGNMENT, MIN_ASSIGNMENT
from .models import Student, StudentSummary


def average(values: Iterable[float]) -> float:
    """
    Arithmetic mean of the given values.

    Args:
        values: Numbers to average.

    Returns:
        The mean, or 0.0 when there are no values.
    """
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def student_average(student: Student) -> float:
    """Mean of one student's grades."""
    return average(student.grades)


def class_average(students: Sequence[Student]) -> float:
    """
    Mean over every grade of every student pooled together.

    This weights each grade equally; it is not the mean of per-student
    averages.
    """
    return average(grade for student in students for grade in student.grades)


def assignment_average(students: Sequence[Student], assignment: int) -> float:
    """
    Mean of one assignment across all students.

    Args:
        students: The roster.
        assignment: 1-based assignment number.

    Returns:
        The mean, or 0.0 if the assignment is out of range or no student
        has a grade for it.
    """
    if not MIN_ASSIGNMENT <= assignment <= MAX_ASSIGNMENT:
        return 0.0

    index = assignment - 1
    return average(s.grades[index] for s in students if index < len(s.grades))


def _summarize(student: Student | None) -> StudentSummary | None:
    if student is None:
        return None
    return StudentSummary(name=student.name, average=student_average(student))


def lowest(students: Sequence[Student]) -> StudentSummary | None:
    """
    Student with the lowest average.

    Ties go to whoever appears first in the roster. Returns None for an
    empty roster.
    """
    return _summarize(min(students, key=student_average, default=None))


def highest(students: Sequence[Student]) -> StudentSummary | None:
    """
    Student with the highest average.

    Ties go to whoever appears first in the roster. Returns None for an
    empty roster.
    """
    return _summarize(max(students, key=student_average, default=None))


def filter_by_range(
    students: Sequence[Student], min_grade: float, max_grade: float
) -> list[Student]:
    """
    Students whose average lies within [min_grade, max_grade].

    Both bounds are inclusive and roster order is preserved.
    """
    return [s for s in students if min_grade <= student_average(s) <= max_grade]


def find_student(students: Sequence[Student], name: str) -> Student | None:
    """Return the first student whose name matches, ignoring case."""
    return next((s for s in students if s.matches(name)), None)
