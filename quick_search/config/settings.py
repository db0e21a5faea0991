"""Search index settings and configuration management."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.normalizer import DEFAULT_MINIMUM_KEYWORD_LENGTH
from ..core.policies import AccumulationPolicy, UnmatchedPolicy


class Settings(BaseSettings):
    """Search index settings with environment variable support."""

    # Keyword handling
    minimum_keyword_length: int = Field(default=DEFAULT_MINIMUM_KEYWORD_LENGTH, ge=1)

    # Matching
    unmatched_policy: UnmatchedPolicy = Field(default=UnmatchedPolicy.BACKTRACKING)
    candidate_accumulation_policy: AccumulationPolicy = Field(default=AccumulationPolicy.UNION)
    default_max_results: int = Field(default=10, ge=1)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    model_config = SettingsConfigDict(
        env_prefix="QUICK_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the log level name."""
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log output format."""
        if v.lower() not in ("json", "console"):
            raise ValueError("Log format must be 'json' or 'console'")
        return v.lower()


@lru_cache()
def get_settings() -> Settings:
    """Get cached search settings."""
    return Settings()
