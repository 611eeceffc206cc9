"""
Pytest configuration and fixtures
"""
import logging
import sys
from pathlib import Path

import pytest

# Add project root to Python path so main.py is importable
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from grade_manager.config import LOGGER_NAME
from grade_manager.models import Student


ALICE_BOB_CSV = (
    "Alice,90,80,70,60,50,40,30,20,10,0\n"
    "Bob,10,20,30,40,50,60,70,80,90,100"
)


def make_student(name: str, grade: float) -> Student:
    """Student whose ten grades are all the same value."""
    return Student(name=name, grades=[grade] * 10)


@pytest.fixture
def write_csv(tmp_path):
    """Write roster content to a temporary CSV file and return its path."""
    def _write(content: str, name: str = "students.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def alice_bob():
    return [
        Student(name="Alice", grades=[90, 80, 70, 60, 50, 40, 30, 20, 10, 0]),
        Student(name="Bob", grades=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100]),
    ]


@pytest.fixture
def ranked_roster():
    """Five students with averages 65, 70, 85, 90 and 95."""
    return [
        make_student("Eve", 65),
        make_student("Frank", 70),
        make_student("Grace", 85),
        make_student("Heidi", 90),
        make_student("Ivan", 95),
    ]


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Remove handlers added by setup_logging so they don't outlive a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
