"""
In-place grade edits.

Changes made here live only in memory; nothing is written back to the
roster file.
"""

import logging
from collections.abc import Sequence

from .aggregates import find_student
from .config import MAX_ASSIGNMENT, MIN_ASSIGNMENT
from .errors import InvalidAssignmentError, InvalidGradeError, StudentNotFoundError
from .models import Student
from .parsing import parse_integer, parse_number

logger = logging.getLogger(__name__)


def parse_assignment_number(value: int | str) -> int:
    """
    Validate an assignment number.

    Args:
        value: Assignment number as an int or as typed by the user.

    Returns:
        The assignment number, between 1 and 10.

    Raises:
        InvalidAssignmentError: If the value is not an integer in range.
    """
    if isinstance(value, bool):
        raise InvalidAssignmentError(f"Invalid assignment number: {value!r}")
    try:
        assignment = value if isinstance(value, int) else parse_integer(value)
    except ValueError as e:
        raise InvalidAssignmentError(f"Invalid assignment number: {value!r}") from e

    if not MIN_ASSIGNMENT <= assignment <= MAX_ASSIGNMENT:
        raise InvalidAssignmentError(
            f"Assignment number must be between {MIN_ASSIGNMENT} and {MAX_ASSIGNMENT}, got {assignment}"
        )
    return assignment


def parse_grade(value: float | str) -> float:
    """
    Validate a grade value.

    Raises:
        InvalidGradeError: If the value is not a number.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    try:
        return parse_number(value)
    except ValueError as e:
        raise InvalidGradeError(f"Invalid grade input: {value!r}") from e


def set_grade(
    students: Sequence[Student],
    student_name: str,
    assignment: int | str,
    new_grade: float | str,
) -> Student:
    """
    Overwrite one assignment grade for a student.

    All inputs are validated before anything changes, so a rejected call
    leaves the roster untouched.

    Args:
        students: The roster; the matching student is modified in place.
        student_name: Name to look up, ignoring case. First match wins.
        assignment: 1-based assignment number.
        new_grade: Replacement grade.

    Returns:
        The updated student.

    Raises:
        StudentNotFoundError: If no student has that name.
        InvalidAssignmentError: If the assignment number is out of range.
        InvalidGradeError: If the grade is not a number.
    """
    student = find_student(students, student_name)
    if student is None:
        raise StudentNotFoundError(student_name)

    assignment = parse_assignment_number(assignment)
    grade = parse_grade(new_grade)

    old_grade = student.grades[assignment - 1]
    student.grades[assignment - 1] = grade
    logger.info(
        "Assignment %d for %s changed from %.2f to %.2f",
        assignment,
        student.name,
        old_grade,
        grade,
    )
    return student
