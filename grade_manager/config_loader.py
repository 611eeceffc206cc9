"""
Configuration loader for the Grade Manager.

Handles parsing and validation of the optional YAML configuration file.
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from .config import DEFAULT_LOG_LEVEL, DEFAULT_STUDENTS_PATH


class ManagerConfig(BaseModel):
    """
    Configuration model for the Grade Manager.
    """
    students_path: Path = Field(DEFAULT_STUDENTS_PATH, description="Path to the roster CSV file")
    log_level: str = Field(DEFAULT_LOG_LEVEL, description="Logging level name")
    log_file: Optional[Path] = Field(None, description="Optional file to write logs to")
    verbose: bool = Field(False, description="Enable debug logging")


def load_config(config_path: Path) -> ManagerConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        ManagerConfig object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If config file is invalid YAML.
        ValidationError: If config data is invalid.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f)

    if not config_data:
        return ManagerConfig()

    if not isinstance(config_data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {config_path}")

    # Resolve paths relative to the config file location (unless absolute)
    config_dir = config_path.parent
    for path_field in ["students_path", "log_file"]:
        if path_field in config_data and config_data[path_field]:
            path = Path(config_data[path_field])
            if not path.is_absolute():
                config_data[path_field] = config_dir / path

    return ManagerConfig(**config_data)
