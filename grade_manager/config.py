"""
Configuration constants for the Grade Manager.
"""

from pathlib import Path


# Roster shape
ASSIGNMENT_COUNT: int = 10
MIN_ASSIGNMENT: int = 1
MAX_ASSIGNMENT: int = ASSIGNMENT_COUNT

# File patterns
CSV_DELIMITER: str = ","
STUDENTS_FILENAME: str = "students.csv"
CONFIG_FILENAME: str = "grade_manager.yml"

# Default paths (can be overridden via CLI or config file)
DEFAULT_STUDENTS_PATH: Path = Path(".") / STUDENTS_FILENAME
DEFAULT_CONFIG_PATH: Path = Path(CONFIG_FILENAME)

# Menu
MENU_MIN_CHOICE: int = 1
MENU_MAX_CHOICE: int = 10
QUIT_CHOICE: int = MENU_MAX_CHOICE

# Display
GRADE_FORMAT: str = "{:.2f}"
GRADE_SEPARATOR: str = ", "
NO_STUDENTS_LABEL: str = "No students"

# Logging
LOGGER_NAME: str = "grade_manager"
DEFAULT_LOG_LEVEL: str = "WARNING"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: str = "%H:%M:%S"
