"""Application configuration via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "SEO Metadata Generator"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # LLM provider
    llm_provider: Literal["huggingface", "openai", "anthropic"] = "huggingface"
    llm_model: str = "facebook/bart-large-cnn"
    llm_timeout_seconds: float | None = 60.0  # None disables the HTTP timeout

    # LLM API Keys
    huggingface_api_key: str | None = None
    openai_api_key: str | None = None
    anthropic_api_key: str | None = None
    huggingface_inference_url: str = "https://router.huggingface.co/hf-inference/models"

    # Retry policy for remote calls
    llm_max_retries: int = 3
    llm_retry_base_delay_ms: int = 1000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
