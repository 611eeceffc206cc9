"""
Roster file loader.

Reads `name,grade1,...,grade10` lines into Student records. Lines that do not
describe a complete student are dropped without complaint.
"""

import logging
from pathlib import Path

from .config import ASSIGNMENT_COUNT, CSV_DELIMITER
from .models import Student
from .parsing import parse_number

logger = logging.getLogger(__name__)


def parse_student_line(line: str) -> Student | None:
    """
    Parse one roster line.

    Fields after the tenth grade are ignored. Quoted fields are not
    supported, so a comma always separates fields.

    Args:
        line: A single line from the roster file.

    Returns:
        The Student, or None if the line is not a valid record.
    """
    fields = line.split(CSV_DELIMITER)
    if len(fields) < ASSIGNMENT_COUNT + 1:
        return None

    name = fields[0].strip()
    if not name:
        return None

    try:
        grades = [parse_number(field.strip()) for field in fields[1 : ASSIGNMENT_COUNT + 1]]
    except ValueError:
        return None

    return Student(name=name, grades=grades)


def load_students(path: Path) -> list[Student]:
    """
    Load the roster from a comma-delimited file.

    A missing or unreadable file is reported on the console and yields an
    empty roster; the caller decides whether that is fatal.

    Args:
        path: Path to the roster file.

    Returns:
        Students in file order. Duplicate names are kept.
    """
    path = Path(path)
    if not path.exists():
        print("CSV file not found!")
        logger.info("Roster file not found: %s", path)
        return []

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading CSV file: {e}")
        logger.info("Could not read roster file %s: %s", path, e)
        return []

    students: list[Student] = []
    skipped = 0
    for line in content.splitlines():
        if not line:
            continue
        student = parse_student_line(line)
        if student is None:
            skipped += 1
            continue
        students.append(student)

    if skipped:
        logger.debug("Skipped %d malformed line(s) in %s", skipped, path)
    logger.info("Loaded %d student(s) from %s", len(students), path)
    return students
