#!/usr/bin/env python3
"""
Configuration Management for Medical Expense Tracking

Handles environment-based configuration with secure defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class SearchConfig:
    """Category search configuration."""

    max_results: int = 10


@dataclass
class DeductionConfig:
    """Schedule A deduction configuration."""

    # Fraction of AGI medical expenses must exceed (7.5% for 2023+)
    agi_threshold_rate: Decimal = Decimal("0.075")


@dataclass
class Config:
    """
    Main configuration class for the medexpense application.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    output_dir: Path

    # Component configurations
    search: SearchConfig
    deductions: DeductionConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("MEDEXPENSE_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_medexpense"
            base_dir = Path(os.getenv("MEDEXPENSE_DATA_DIR", str(default_test_dir)))
        else:
            base_dir = Path(os.getenv("MEDEXPENSE_DATA_DIR", "./data")).expanduser().resolve()

        data_dir = base_dir
        output_dir = data_dir / "schedule_a"

        for directory in [data_dir, output_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        search = SearchConfig(
            max_results=int(os.getenv("MEDEXPENSE_MAX_RESULTS", "10")),
        )

        deductions = DeductionConfig(
            agi_threshold_rate=_parse_decimal(os.getenv("MEDEXPENSE_AGI_RATE", "0.075")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            output_dir=output_dir,
            search=search,
            deductions=deductions,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        for name, path in [
            ("data_dir", self.data_dir),
            ("output_dir", self.output_dir),
        ]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        if self.search.max_results <= 0:
            errors.append("Search max_results must be positive")

        rate = self.deductions.agi_threshold_rate
        if rate.is_nan() or rate <= 0 or rate >= 1:
            errors.append(f"AGI threshold rate must be between 0 and 1, got {rate}")

        if self.log_level not in logging.getLevelNamesMapping():
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, Enum):
                result[field_name] = {
                    nested_name: _plain(nested_value)
                    for nested_name, nested_value in field_value.__dict__.items()
                }
            else:
                result[field_name] = _plain(field_value)

        return result


def _plain(value: Any) -> Any:
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    return value


def _parse_decimal(value: str) -> Decimal:
    """Parse a decimal setting, returning NaN so validate() can report it."""
    try:
        return Decimal(value.strip())
    except (InvalidOperation, AttributeError):
        return Decimal("NaN")


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def get_output_dir() -> Path:
    """Get the Schedule A output directory path."""
    return get_config().output_dir


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
