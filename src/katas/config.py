"""Application Configuration

Type-safe configuration using Pydantic Settings for environment variable handling.
The katas themselves are pure in-memory examples, so configuration only covers
the ambient concerns around them: identity of the package and logging output.

Patterns Demonstrated:
- Type-safe environment variable parsing with validation
- Sensible defaults for local runs (no .env required)
- No magic strings in the codebase
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Package settings from environment variables"""

    # =============================================================================
    # APPLICATION
    # =============================================================================

    app_name: str = Field(default="clean-code-katas", alias="KATAS_APP_NAME")
    app_version: str = Field(default="0.1.0", alias="KATAS_APP_VERSION")
    environment: str = Field(default="development", alias="KATAS_ENVIRONMENT")

    # =============================================================================
    # LOGGING
    # =============================================================================

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        alias="KATAS_LOG_LEVEL",
    )
    log_json: bool = Field(default=False, alias="KATAS_LOG_JSON")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v

    model_config = {"env_file": ".env", "case_sensitive": False, "extra": "ignore"}

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.model_validate({})


settings = get_settings()
