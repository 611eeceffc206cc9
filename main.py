"""
Grade Manager: Interactive grade queries over a student roster

Usage:
  main.py [--config=PATH] [--students=PATH] [--verbose]
  main.py (-h | --help)
  main.py --version

Options:
  --config=PATH    Path to YAML configuration file [default: grade_manager.yml].
  --students=PATH  Path to the roster CSV file (overrides the config file).
  --verbose        Enable debug logging.
  -h --help        Show this screen.
  --version        Show version.
"""

import sys
from pathlib import Path

from docopt import docopt

from grade_manager import __version__
from grade_manager.config import DEFAULT_CONFIG_PATH
from grade_manager.config_loader import ManagerConfig, load_config
from grade_manager.logging_config import setup_logging
from grade_manager.roster_loader import load_students
from grade_manager.shell import GradeShell


def resolve_config(arguments: dict) -> ManagerConfig:
    """
    Build the effective configuration from CLI arguments.

    The default config file is optional; an explicitly named one must exist.

    Args:
        arguments: Parsed docopt arguments.

    Returns:
        ManagerConfig with CLI overrides applied.

    Raises:
        FileNotFoundError: If a non-default config file is missing.
    """
    config_path = Path(arguments["--config"])

    if config_path == DEFAULT_CONFIG_PATH and not config_path.exists():
        config = ManagerConfig()
    else:
        config = load_config(config_path)

    if arguments["--students"]:
        config.students_path = Path(arguments["--students"])
    if arguments["--verbose"]:
        config.verbose = True
    return config


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entrypoint.

    Returns:
        Exit code (0 for success, 1 for a configuration error).
    """
    arguments = docopt(__doc__, argv=argv, version=__version__)

    try:
        config = resolve_config(arguments)
        logger = setup_logging(
            "DEBUG" if config.verbose else config.log_level,
            log_file=config.log_file,
        )
    except Exception as e:
        print(f"Error loading config: {e}")
        return 1

    students = load_students(config.students_path)
    if not students:
        print("No students loaded. Exiting program.")
        return 0

    shell = GradeShell(students)
    try:
        shell.run()
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye!")
        logger.info("Session ended by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
