#!/usr/bin/env python3
"""
Configuration Management for SubTrack

Handles environment-based configuration with defaults and validation.
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
class RenewalConfig:
    """Renewal window settings."""

    timeline_horizon_days: int = 30
    upcoming_window_days: int = 7


@dataclass
class InsightConfig:
    """Thresholds for insight generation."""

    max_insights: int = 4
    yearly_discount_rate: Decimal = Decimal("0.15")
    savings_threshold: Decimal = Decimal("10")
    category_concentration_percent: Decimal = Decimal("40")
    review_count_threshold: int = 10


@dataclass
class Config:
    """
    Main configuration class for SubTrack.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Core paths
    data_dir: Path
    subscriptions_file: Path
    output_dir: Path

    # Component configurations
    renewals: RenewalConfig
    insights: InsightConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("SUBTRACK_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_subtrack"
            data_dir = Path(os.getenv("SUBTRACK_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("SUBTRACK_DATA_DIR", "./data")).expanduser().resolve()

        output_dir = data_dir / "reports"

        for directory in [data_dir, output_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        subscriptions_file = Path(
            os.getenv("SUBTRACK_SUBSCRIPTIONS_FILE", str(data_dir / "subscriptions.json"))
        ).expanduser()

        renewals = RenewalConfig(
            timeline_horizon_days=int(os.getenv("TIMELINE_HORIZON_DAYS", "30")),
            upcoming_window_days=int(os.getenv("UPCOMING_WINDOW_DAYS", "7")),
        )

        insights = InsightConfig(
            max_insights=int(os.getenv("MAX_INSIGHTS", "4")),
            yearly_discount_rate=_parse_decimal(os.getenv("YEARLY_DISCOUNT_RATE", "0.15")),
            savings_threshold=_parse_decimal(os.getenv("SAVINGS_THRESHOLD", "10")),
            category_concentration_percent=_parse_decimal(os.getenv("CATEGORY_CONCENTRATION_PERCENT", "40")),
            review_count_threshold=int(os.getenv("REVIEW_COUNT_THRESHOLD", "10")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            subscriptions_file=subscriptions_file,
            output_dir=output_dir,
            renewals=renewals,
            insights=insights,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        for name, path in [("data_dir", self.data_dir), ("output_dir", self.output_dir)]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        if self.renewals.timeline_horizon_days < 0:
            errors.append("Timeline horizon days must be non-negative")
        if self.renewals.upcoming_window_days < 0:
            errors.append("Upcoming window days must be non-negative")
        if self.insights.max_insights < 0:
            errors.append("Max insights must be non-negative")
        if not Decimal("0") <= self.insights.yearly_discount_rate <= Decimal("1"):
            errors.append("Yearly discount rate must be between 0 and 1")
        if not Decimal("0") <= self.insights.category_concentration_percent <= Decimal("100"):
            errors.append("Category concentration percent must be between 0 and 100")

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
        """Convert configuration to a JSON-friendly dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                # Nested dataclass
                result[field_name] = {
                    nested_name: _plain(nested_value) for nested_name, nested_value in field_value.__dict__.items()
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
    try:
        return Decimal(value.strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid decimal configuration value: {value!r}") from e


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


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None


def get_subscriptions_file() -> Path:
    """Get the subscriptions JSON file path."""
    return get_config().subscriptions_file
