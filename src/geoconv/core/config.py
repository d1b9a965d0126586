"""
Configuration settings for geoconv.
"""

from typing import Any, Literal, Optional

from pydantic import ValidationError as PydanticValidationError
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from geoconv.core.errors import ConfigurationError


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    Attributes:
        environment: Deployment environment, controls console log format
        log_level: Log level name; defaults by environment when unset
        default_mgrs_precision: Digits per axis used when formatting MGRS text
        dms_seconds_decimals: Decimal places for seconds in DMS text
        strict_validation: Whether the dispatcher validates ranges first
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="GEOCONV_",
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Optional[str] = None

    # Formatting
    default_mgrs_precision: int = 5
    dms_seconds_decimals: int = 3

    # Validation
    strict_validation: bool = False

    @field_validator("default_mgrs_precision")
    @classmethod
    def check_mgrs_precision(cls, value: int) -> int:
        """MGRS carries at most five digits per axis."""
        if not 0 <= value <= 5:
            raise ValueError(f"default_mgrs_precision must be between 0 and 5, got {value}")
        return value

    @field_validator("dms_seconds_decimals")
    @classmethod
    def check_seconds_decimals(cls, value: int) -> int:
        """Seconds decimals must be non-negative."""
        if value < 0:
            raise ValueError(f"dms_seconds_decimals must be >= 0, got {value}")
        return value

    @property
    def effective_log_level(self) -> str:
        """Log level to use, falling back to the environment default."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.environment == "development" else "INFO"


def load_settings(**overrides: Any) -> Settings:
    """
    Build a Settings instance, reporting invalid values as ConfigurationError.

    Args:
        **overrides: Explicit values taking precedence over the environment

    Returns:
        Validated Settings

    Raises:
        ConfigurationError: If any setting fails validation
    """
    try:
        return Settings(**overrides)
    except PydanticValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid configuration: {first.get('msg')}",
            config_key=key or None,
            details={"errors": e.errors(include_url=False)},
        ) from e


# Global settings instance
settings = load_settings()
