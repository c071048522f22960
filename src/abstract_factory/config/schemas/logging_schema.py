"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_DESTINATIONS = ("console", "file", "both")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Log level")
    destination: str = Field("console", description="Log destination: console, file or both")
    file_path: str = Field(
        "${AF_LOG_DIR:logs}/abstract_factory.log", description="Log file path"
    )
    max_size_mb: int = Field(10, gt=0, description="Maximum log file size before rotation")
    backup_count: int = Field(5, ge=0, description="Number of rotated log files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        destination = v.lower()
        if destination not in VALID_DESTINATIONS:
            raise ValueError(
                f"Invalid log destination: {v}. Must be one of {VALID_DESTINATIONS}"
            )
        return destination
