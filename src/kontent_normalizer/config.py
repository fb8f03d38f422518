# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides the Kontent connection options and logging settings for CLI runs

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from kontent_normalizer.core.models import KontentOptions


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="KONTENT_NORMALIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Kontent connection
    project_id: str = Field(default="", description="Kontent project id stamped on models and entries")
    language_codenames: list[str] = Field(
        default_factory=lambda: ["default"], description="Language codenames fetched for the project"
    )
    include_kontent_metadata: bool = Field(
        default=False, description="Attach the raw Kontent item to every normalized entry"
    )
    project_environment: str = Field(default="master", description="Deployment stage stamped on every record")

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")

    def to_options(self, **overrides) -> KontentOptions:
        """Build run options from the configuration, with explicit values taking precedence."""
        values = {
            "project_id": self.project_id,
            "language_codenames": self.language_codenames,
            "include_kontent_metadata": self.include_kontent_metadata,
            "project_environment": self.project_environment,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return KontentOptions(**values)


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
