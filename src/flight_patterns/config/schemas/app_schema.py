"""Main application configuration schema."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from flight_patterns.domain.core.exceptions import ConfigurationError

from .logging_schema import LoggingConfig


class DemoConfig(BaseModel):
    """Defaults used by the passenger commands when options are omitted."""

    passenger_name: str = Field("Okan Yücel", description="Passenger name used for quotes")
    extra_baggage_kg: float = Field(10.0, description="Extra baggage weight in kilograms")
    wraps: List[str] = Field(
        default_factory=lambda: ["economic", "business"],
        description="Decorators applied to the standard profile, innermost first",
    )

    @field_validator("wraps")
    @classmethod
    def normalise_wraps(cls, v: List[str]) -> List[str]:
        return [name.strip().lower() for name in v]


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    environment: str = Field("development", description="Environment")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    demo: DemoConfig = Field(default_factory=lambda: DemoConfig())

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "staging", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create a validated configuration, wrapping errors in ConfigurationError."""
        return validate_config(data)


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """Validate raw configuration data."""
    try:
        return AppConfig.model_validate(data)
    except PydanticValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e
