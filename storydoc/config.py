"""
Configuration for storydoc.

Settings come from keyword arguments first, then STORYDOC_* environment
variables (or a .env file in the working directory), then defaults.

Example:
    ```bash
    export STORYDOC_PACKAGES_DIR=packages
    export STORYDOC_OUTPUT_DIR=docs/components
    export STORYDOC_LOG_LEVEL=info
    ```
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Paths and rendering options for a documentation run."""
    packages_dir: Path = Field(
        default=Path("packages"),
        description="Directory holding one subdirectory per component"
    )
    output_dir: Optional[Path] = Field(
        None,
        description="Directory for generated Markdown (default: beside each package)"
    )
    stories_file: str = Field(
        default="src/index.stories.tsx",
        description="Stories file path relative to a component directory"
    )
    examples_heading: str = Field(default="Examples", description="Examples section heading")
    code_language: str = Field(default="tsx", description="Fence language for example code")
    log_level: LogLevel = Field(default="WARNING", description="Default logging level for the CLI")

    model_config = SettingsConfigDict(
        env_prefix="STORYDOC_",
        env_file=".env",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        json_schema_extra={
            "example": {
                "packages_dir": "packages",
                "output_dir": "docs/components",
                "stories_file": "src/index.stories.tsx",
                "examples_heading": "Examples",
                "code_language": "tsx",
                "log_level": "INFO"
            }
        },
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value

    @classmethod
    def from_env(cls, **overrides) -> "Settings":
        """
        Build settings from the environment.

        Args:
            **overrides: Field values that win over the environment; None
                values are ignored

        Returns:
            Settings instance

        Raises:
            pydantic.ValidationError: If a value (e.g. STORYDOC_LOG_LEVEL) is invalid
        """
        return cls(**{key: value for key, value in overrides.items() if value is not None})
