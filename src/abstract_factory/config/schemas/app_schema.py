"""Main application configuration schema."""

from typing import List

from pydantic import BaseModel, Field, field_validator

from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    demo_factories: List[str] = Field(
        default_factory=lambda: ["1", "2"],
        description="Registered factory names run by the demonstration, in order",
    )

    @field_validator("demo_factories")
    @classmethod
    def validate_demo_factories(cls, v: List[str]) -> List[str]:
        """The demonstration compares a first and a second factory type."""
        if len(v) != 2:
            raise ValueError("demo_factories must name exactly two factories")
        return v
