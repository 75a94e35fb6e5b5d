"""Configuration settings for document turnover analysis."""

import json
import os
import re
from datetime import date
from pathlib import Path


class Config:
    """Application configuration settings."""

    # Directories (defaults, can be overridden by environment)
    SOURCE_DIR = Path("documents")
    OUTPUT_DIR = Path("output")
    INVALID_DIR_NAME = "invalid"

    # Eligibility
    TEXT_EXTENSION = ".txt"
    FILTER_YEAR = str(date.today().year)

    # Processing
    MAX_FILE_SIZE_MB = 100

    # Export
    STATS_FILE_NAME = "total_amount.txt"
    INVALID_REPORT_FILE_NAME = "invalid_files_report.txt"

    # Session check
    SESSION_TOKEN_LENGTH = 64

    # Logging
    LOG_LEVEL = "INFO"
    LOG_FILE = "turnover.log"

    # Environment tracking
    CURRENT_ENVIRONMENT = None

    @classmethod
    def load_environment(
        cls, env_name: str = None, config_file: str = "environments.json"
    ):
        """
        Load configuration from environments.json file.

        Args:
            env_name: Name of the environment to load (e.g., 'office', 'laptop').
                     If None, uses TURNOVER_ENV or the default from the config file.
            config_file: Path to the environments configuration file.

        Raises:
            FileNotFoundError: If environments.json doesn't exist.
            ValueError: If specified environment doesn't exist in config.
        """
        config_path = Path(config_file)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Environment configuration file not found: {config_file}\n"
                "Create environments.json with your computer-specific settings."
            )

        with open(config_path) as f:
            env_config = json.load(f)

        # Priority: explicit argument, TURNOVER_ENV, default from file
        if env_name is None:
            env_name = os.getenv("TURNOVER_ENV", env_config.get("default"))

        if env_name not in env_config["environments"]:
            available = ", ".join(env_config["environments"].keys())
            raise ValueError(
                f"Environment '{env_name}' not found in {config_file}.\n"
                f"Available environments: {available}"
            )

        env_settings = env_config["environments"][env_name]

        cls.SOURCE_DIR = Path(env_settings["source_dir"])
        cls.OUTPUT_DIR = Path(env_settings.get("output_dir", cls.OUTPUT_DIR))
        cls.FILTER_YEAR = cls.validate_year(
            str(env_settings.get("filter_year", cls.FILTER_YEAR))
        )
        cls.MAX_FILE_SIZE_MB = cls.validate_max_size(
            env_settings.get("max_file_size_mb", cls.MAX_FILE_SIZE_MB)
        )
        cls.CURRENT_ENVIRONMENT = env_name

        # Still allow environment variable overrides
        cls._apply_env_overrides()

        return env_name

    @classmethod
    def _apply_env_overrides(cls):
        """Apply environment variable overrides after loading base config."""
        if os.getenv("SOURCE_DIR"):
            cls.SOURCE_DIR = Path(os.getenv("SOURCE_DIR"))
        if os.getenv("OUTPUT_DIR"):
            cls.OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR"))
        if os.getenv("FILTER_YEAR"):
            cls.FILTER_YEAR = cls.validate_year(os.getenv("FILTER_YEAR"))
        if os.getenv("MAX_FILE_SIZE_MB"):
            cls.MAX_FILE_SIZE_MB = cls.validate_max_size(os.getenv("MAX_FILE_SIZE_MB"))
        if os.getenv("LOG_LEVEL"):
            cls.LOG_LEVEL = os.getenv("LOG_LEVEL")

    @classmethod
    def load_from_env(cls):
        """
        Load configuration from environment variables only.

        For new code, prefer load_environment() which uses environments.json.
        """
        cls.SOURCE_DIR = Path(os.getenv("SOURCE_DIR", cls.SOURCE_DIR))
        cls.OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", cls.OUTPUT_DIR))
        cls.FILTER_YEAR = cls.validate_year(os.getenv("FILTER_YEAR", cls.FILTER_YEAR))
        cls.MAX_FILE_SIZE_MB = cls.validate_max_size(
            os.getenv("MAX_FILE_SIZE_MB", cls.MAX_FILE_SIZE_MB)
        )
        cls.LOG_LEVEL = os.getenv("LOG_LEVEL", cls.LOG_LEVEL)

    @classmethod
    def list_environments(cls, config_file: str = "environments.json") -> dict:
        """
        List all available environments from config file.

        Args:
            config_file: Path to the environments configuration file.

        Returns:
            Dict mapping environment names to their descriptions and settings.
        """
        config_path = Path(config_file)

        if not config_path.exists():
            return {}

        with open(config_path) as f:
            env_config = json.load(f)

        return {
            name: {
                "description": settings.get("description", "No description"),
                "source_dir": settings["source_dir"],
                "is_default": name == env_config.get("default"),
            }
            for name, settings in env_config["environments"].items()
        }

    @classmethod
    def ensure_directories(cls):
        """Create necessary directories if they don't exist."""
        cls.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    @classmethod
    def max_file_size_bytes(cls) -> int:
        """Maximum accepted document size in bytes."""
        return int(cls.MAX_FILE_SIZE_MB) * 1024 * 1024

    @classmethod
    def stats_file(cls) -> Path:
        """Path of the turnover statistics export."""
        return cls.OUTPUT_DIR / cls.STATS_FILE_NAME

    @classmethod
    def report_file(cls) -> Path:
        """Path of the invalid-file report export."""
        return cls.OUTPUT_DIR / cls.INVALID_REPORT_FILE_NAME

    @staticmethod
    def validate_year(value: str) -> str:
        value = str(value).strip()
        if not re.fullmatch(r"\d{4}", value):
            raise ValueError(f"FILTER_YEAR must be a four-digit year, got '{value}'")
        return value

    @staticmethod
    def validate_max_size(value) -> int:
        size = int(value)
        if size <= 0:
            raise ValueError(f"MAX_FILE_SIZE_MB must be positive, got {size}")
        return size
