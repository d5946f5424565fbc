"""
Configuration for the Registrar example driver.
"""

import json
import logging
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.enums import PaymentMode
from .core.exceptions import ConfigurationError


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RegistrarConfig(BaseModel):
    payment_mode: PaymentMode = PaymentMode.RANDOM
    seed: Optional[int] = None
    log_level: str = "INFO"
    min_age: int = Field(21, ge=0)
    prerequisite: Optional[str] = "CS101"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_config(path: Optional[str] = None, **overrides: Any) -> RegistrarConfig:
    """Build the configuration from an optional JSON file plus CLI overrides.

    Overrides whose value is None are ignored, so unset command-line flags
    leave the file (or default) value in place.
    """
    data = {}
    if path:
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}",
                                     error_code="CONFIG_UNREADABLE")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Configuration file {path} is not valid JSON: {e}",
                                     error_code="CONFIG_INVALID_JSON")
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object",
                                     error_code="CONFIG_INVALID_JSON")

    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return RegistrarConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}",
                                 error_code="CONFIG_INVALID",
                                 details={'errors': e.errors()})


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr so stdout carries only enrollment output."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("registrar")
    for old_handler in list(package_logger.handlers):
        package_logger.removeHandler(old_handler)
        old_handler.close()
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.propagate = False
