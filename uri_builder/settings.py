"""
Pydantic Settings Implementation for the URI builder.

Provides type validation, environment variable loading, and documentation
for the few knobs the library exposes.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings
from pydantic_settings import SettingsConfigDict

from uri_builder.core.constants import DEFAULT_QUERY_SEPARATOR, SUB_DELIMS


class Settings(PydanticBaseSettings):
    """
    Library settings using Pydantic for validation and environment loading.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="",
        extra="ignore",
        validate_assignment=True,
    )

    # Serialization policy
    omit_default_ports: bool = Field(
        default=True,
        description=(
            "Drop a port equal to the scheme's default port instead of "
            "rendering it literally"
        ),
    )

    query_separator: str = Field(
        default=DEFAULT_QUERY_SEPARATOR,
        description="Separator placed between key=value pairs of a query",
        min_length=1,
        max_length=1,
    )

    @field_validator("omit_default_ports", mode="before")
    def parse_boolean(cls, v: any) -> bool:
        """Parse booleans from various string formats with strict validation"""
        if isinstance(v, str):
            lower_v = v.lower()
            if lower_v in ("true", "1", "yes", "on"):
                return True
            elif lower_v in ("false", "0", "no", "off"):
                return False
            else:
                raise ValueError(
                    f"Invalid boolean value: '{v}'. Must be one of: true, false, 1, "
                    "0, yes, no, on, off"
                )
        return bool(v)

    @field_validator("query_separator")
    def check_query_separator(cls, v: str) -> str:
        """Only sub-delims may separate query pairs without being escaped."""
        if v not in SUB_DELIMS or v == "=":
            raise ValueError(
                f"Invalid query separator: '{v}'. Must be one of the RFC 3986 "
                "sub-delims other than '='"
            )
        return v


@lru_cache()
def get_settings() -> Settings:
    """
    Get the library settings instance (singleton pattern).

    Returns:
        Settings: The settings instance
    """
    return Settings()


def reload_settings():
    """
    Reload settings by clearing the cache.
    Useful for testing and dynamic configuration changes.
    """
    get_settings.cache_clear()
