"""
Application Settings
Load from environment variables
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment"""

    # ======================
    # Application
    # ======================
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # ======================
    # Restaurant data source
    # ======================
    RESTAURANT_DATA_URL: str = "https://eccdn.com.au/misc/challengedata.json"
    RESTAURANT_DATA_TIMEOUT_SECONDS: float = 10.0
    RESTAURANT_DATA_RETRIES: int = 2
    RESTAURANT_DATA_BACKOFF_SECONDS: float = 0.4

    # ======================
    # Pydantic v2 config
    # ======================
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="forbid",
    )


settings = Settings()
