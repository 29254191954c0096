"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


WIRING_MODES = ("explicit", "annotated")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="IoC Demo", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    # Container wiring
    wiring_mode: str = Field(default="annotated", alias="WIRING_MODE")
    traveller_vehicle: str = Field(
        default="car", alias="TRAVELLER_VEHICLE"
    )  # Qualifier of the vehicle handed to Traveller in explicit wiring

    # API Service
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    api_reload: bool = Field(default=False, alias="API_RELOAD")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_to_file: bool = Field(default=False, alias="LOG_TO_FILE")
    log_dir: str = Field(default="logs", alias="LOG_DIR")

    @field_validator("wiring_mode")
    @classmethod
    def validate_wiring_mode(cls, value: str) -> str:
        value = value.lower()
        if value not in WIRING_MODES:
            raise ValueError(
                f"WIRING_MODE must be one of {', '.join(WIRING_MODES)}, got '{value}'"
            )
        return value


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
