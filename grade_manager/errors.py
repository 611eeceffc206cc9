"""
Exceptions raised for invalid user input.

The shell catches these and turns them into console messages.
"""


class GradeManagerError(Exception):
    """Base class for Grade Manager errors."""


class StudentNotFoundError(GradeManagerError, LookupError):
    """No student in the roster has the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Student '{name}' does not exist.")
        self.name = name


class InvalidAssignmentError(GradeManagerError, ValueError):
    """Assignment number is not an integer between 1 and 10."""


class InvalidGradeError(GradeManagerError, ValueError):
    """Grade value does not parse as a number."""
