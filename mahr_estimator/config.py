"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "mahr-estimator"
    log_level: str = "INFO"
    default_currency: str = "USD"

    # Advisory text service (Gemini)
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_api_base: str = "https://generativelanguage.googleapis.com/v1beta"

    # HTTP Client
    http_timeout_seconds: float = 10.0
    advisory_timeout_seconds: float = 15.0  # Upper bound for the whole advisory call


settings = Settings()
