"""
Interactive menu for querying and editing the roster.

Input and output are injected so the menu can be driven by a script of
responses instead of the console.
"""

import logging
from collections.abc import Callable

from .aggregates import (
    assignment_average,
    class_average,
    filter_by_range,
    find_student,
    highest,
    lowest,
    student_average,
)
from .config import (
    GRADE_FORMAT,
    GRADE_SEPARATOR,
    MAX_ASSIGNMENT,
    MENU_MAX_CHOICE,
    MENU_MIN_CHOICE,
    MIN_ASSIGNMENT,
    NO_STUDENTS_LABEL,
    QUIT_CHOICE,
)
from .editor import parse_assignment_number, parse_grade, set_grade
from .errors import InvalidAssignmentError, InvalidGradeError
from .models import Student, StudentSummary
from .parsing import parse_integer

logger = logging.getLogger(__name__)

MENU_TEXT = f"""
Welcome to the Grade Manager!

What would you like to do? (Enter the number):
1. Display grade of a single student
2. Display all grades for a student
3. Display all grades of ALL students
4. Find the average grade of the class
5. Find the average grade of an assignment
6. Find the lowest grade in the class
7. Find the highest grade of the class
8. Filter students by grade range
9. Change a specific assignment grade for a student
{QUIT_CHOICE}. Quit"""


def format_grade(value: float) -> str:
    """Format a grade or average with two decimals."""
    return GRADE_FORMAT.format(value)


def format_grades(grades: list[float]) -> str:
    """Format a list of grades as a comma-separated line."""
    return GRADE_SEPARATOR.join(format_grade(g) for g in grades)


class GradeShell:
    """
    Menu-driven loop over an in-memory roster.

    The shell holds the only reference to the roster for the session and
    passes it to the editor for grade changes.
    """

    def __init__(
        self,
        students: list[Student],
        input_func: Callable[[str], str] | None = None,
        output_func: Callable[[str], None] | None = None,
    ) -> None:
        """
        Initialize the shell.

        Args:
            students: Roster to query and edit.
            input_func: Reads one line of user input, given a prompt.
                Defaults to the built-in input().
            output_func: Writes one line of output. Defaults to print().
        """
        self.students = students
        self.read = input_func or input
        self.write = output_func or print
        self.actions: dict[int, Callable[[], None]] = {
            1: self.show_student_average,
            2: self.show_student_grades,
            3: self.show_all_grades,
            4: self.show_class_average,
            5: self.show_assignment_average,
            6: self.show_lowest,
            7: self.show_highest,
            8: self.show_range,
            9: self.change_grade,
        }

    def run(self) -> None:
        """Show the menu and dispatch choices until the user quits."""
        while True:
            self.write(MENU_TEXT)
            choice = self.get_menu_choice()
            if choice == QUIT_CHOICE:
                self.write("Goodbye!")
                return
            logger.debug("Menu choice %d", choice)
            self.actions[choice]()

    # Input handling

    def get_menu_choice(self) -> int:
        """Prompt until the user enters a valid menu number."""
        while True:
            text = self.read(f"\nEnter your choice ({MENU_MIN_CHOICE}-{MENU_MAX_CHOICE}): ")
            try:
                choice = parse_integer(text)
            except ValueError:
                choice = None
            if choice is not None and MENU_MIN_CHOICE <= choice <= MENU_MAX_CHOICE:
                return choice
            self.write(
                f"Invalid option. Please enter a number between {MENU_MIN_CHOICE} and {MENU_MAX_CHOICE}."
            )

    def get_student(self) -> Student:
        """
        Prompt until the user names an existing student.

        There is no way to cancel; the prompt repeats until a known name
        (ignoring case) is entered.
        """
        while True:
            name = self.read("\nEnter the student's name: ").strip()
            if not name:
                self.write("Please enter a valid name.")
                continue

            student = find_student(self.students, name)
            if student is not None:
                return student
            self.write(f"Student '{name}' does not exist. Please try again.")

    def get_assignment(self) -> int | None:
        """Prompt once for an assignment number; None if it is invalid."""
        text = self.read(f"Enter assignment number ({MIN_ASSIGNMENT}-{MAX_ASSIGNMENT}): ")
        try:
            return parse_assignment_number(text)
        except InvalidAssignmentError:
            self.write("Invalid assignment number.")
            return None

    def get_number(self, prompt: str) -> float | None:
        """Prompt once for a number; None if it does not parse."""
        try:
            return parse_grade(self.read(prompt))
        except InvalidGradeError:
            self.write("Invalid input.")
            return None

    # Menu actions

    def show_student_average(self) -> None:
        student = self.get_student()
        self.write(f"{student.name}'s average grade: {format_grade(student_average(student))}")

    def show_student_grades(self) -> None:
        student = self.get_student()
        self.write(f"{student.name}'s grades: {format_grades(student.grades)}")

    def show_all_grades(self) -> None:
        for student in self.students:
            self.write(f"{student.name}: {format_grades(student.grades)}")

    def show_class_average(self) -> None:
        self.write(f"Class average: {format_grade(class_average(self.students))}")

    def show_assignment_average(self) -> None:
        assignment = self.get_assignment()
        if assignment is None:
            return
        avg = assignment_average(self.students, assignment)
        self.write(f"Assignment {assignment} average: {format_grade(avg)}")

    def _show_extreme(self, label: str, summary: StudentSummary | None) -> None:
        if summary is None:
            self.write(f"{label}: {NO_STUDENTS_LABEL}")
        else:
            self.write(f"{label}: {summary.name} with {format_grade(summary.average)}")

    def show_lowest(self) -> None:
        self._show_extreme("Lowest grade", lowest(self.students))

    def show_highest(self) -> None:
        self._show_extreme("Highest grade", highest(self.students))

    def show_range(self) -> None:
        min_grade = self.get_number("Enter minimum grade: ")
        if min_grade is None:
            return
        max_grade = self.get_number("Enter maximum grade: ")
        if max_grade is None:
            return

        matches = filter_by_range(self.students, min_grade, max_grade)
        if not matches:
            self.write("No students found in the specified range.")
            return
        for student in matches:
            self.write(f"{student.name}: {format_grade(student_average(student))}")

    def change_grade(self) -> None:
        student = self.get_student()
        assignment = self.get_assignment()
        if assignment is None:
            return

        text = self.read(f"Enter new grade for Assignment {assignment}: ")
        try:
            updated = set_grade(self.students, student.name, assignment, text)
        except InvalidGradeError:
            self.write("Invalid grade input.")
            return
        self.write(f"Grade updated successfully for {updated.name}.")
