"""
Configuration management for FSP.

Loads settings from environment variables and input profiles from YAML
files. Uses Pydantic for validation.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fsp.core.exceptions import ConfigurationError
from fsp.core.types import FertilityInput


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values are read from a .env file or the environment.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Presentation
    show_breakdown: bool = Field(
        default=False,
        validation_alias="FSP_SHOW_BREAKDOWN",
        description="Expand the per-factor breakdown on first load",
    )

    # Paths
    profiles_dir: Path = Field(
        default=Path("profiles"),
        validation_alias="FSP_PROFILES_DIR",
        description="Directory searched for relative profile paths",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        validation_alias="FSP_LOG_LEVEL",
        description="Logging level",
    )

    @field_validator("profiles_dir", mode="before")
    @classmethod
    def resolve_path(cls, v: str | Path) -> Path:
        """Convert string to Path and resolve."""
        return Path(v).resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        """Ensure log level is uppercase."""
        return v.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


def _load_yaml(path: Path) -> Any:
    """Load and parse YAML file."""
    if not path.exists():
        raise ConfigurationError(f"Profile file not found: {path}")

    with open(path) as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e


def resolve_profile_path(path: str | Path, settings: Settings | None = None) -> Path:
    """
    Resolve a profile path.

    Existing paths are used as given; otherwise relative paths are looked
    up under the configured profiles directory.
    """
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate

    settings = settings or get_settings()
    return settings.profiles_dir / candidate


def load_profile(path: str | Path, settings: Settings | None = None) -> FertilityInput:
    """
    Load an input profile from a YAML mapping.

    Missing fields take their defaults. An empty file yields the default
    profile.

    Args:
        path: Path to the YAML file
        settings: Settings used to resolve relative paths

    Returns:
        FertilityInput built from the file

    Raises:
        ConfigurationError: If the file is missing, unparsable, or not a mapping
        UnknownFieldError: If the mapping names a field the record lacks
    """
    resolved = resolve_profile_path(path, settings)
    data = _load_yaml(resolved)

    if data is None:
        return FertilityInput()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Profile must be a mapping of field names to values: {resolved}"
        )

    try:
        return FertilityInput.from_dict(data)
    except ValueError as e:
        raise ConfigurationError(f"Invalid value in profile {resolved}: {e}") from e
