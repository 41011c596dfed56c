"""Configuration settings for Stretchpath."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class OutputConfig(BaseModel):
    """Configuration for written SVG files."""

    precision: int = Field(
        default=3,
        ge=0,
        le=8,
        description="Decimal places kept for path coordinates",
    )
    fill: str = Field(
        default="black",
        description="Fill color of the written path",
    )
    padding: float = Field(
        default=0.0,
        ge=0.0,
        description="Space added around the path bounds in the viewBox",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        """Accept level names in any case."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level


class StretchPathSettings(BaseModel):
    """Main application settings."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> StretchPathSettings:
    """Get default application settings."""
    return StretchPathSettings()
