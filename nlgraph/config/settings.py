"""Application settings using Pydantic BaseSettings."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

DEFAULT_SCHEMA_FILE_PATH = str(
    Path(__file__).resolve().parent.parent / "generated" / "schema.graphql"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "NLGraph"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @model_validator(mode="after")
    def validate_timeouts_positive(self) -> "Settings":
        for field_name in (
            "inference_timeout",
            "execution_timeout",
            "pipeline_timeout",
            "viz_sample_max_chars",
        ):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(f"{field_name} must be positive, got {value}")
        return self

    @model_validator(mode="after")
    def warn_wildcard_origins(self) -> "Settings":
        if self.allowed_origins == ["*"]:
            logging.getLogger(__name__).warning(
                "allowed_origins is set to ['*'] - consider restricting in production"
            )
        return self

    # OpenAI (completion service)
    openai_api_key: str | None = None
    openai_base_url: str | None = None
    inference_model: str = "gpt-4o-mini"

    # Per call-site sampling
    translation_temperature: float = 0.1
    suggestion_temperature: float = 0.3

    # Inference retries
    inference_max_retries: int = 2
    inference_retry_delay: float = 1.0
    retry_backoff_factor: float = 2.0

    # Execution endpoint
    mcp_endpoint: str = "http://localhost:8000/api/mcp-graphql"
    mcp_api_token: str | None = None
    enable_mock_data_service: bool = True

    # Schema source
    schema_file_path: str = DEFAULT_SCHEMA_FILE_PATH

    # Visualization data sample size (characters of serialized data)
    viz_sample_max_chars: int = 2000

    # Timeouts (seconds)
    inference_timeout: float = 30.0
    execution_timeout: float = 15.0
    pipeline_timeout: float = 90.0

    # CORS
    allowed_origins: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
