"""
Application Settings
Load from environment variables (prefix ``INVESTSIM_``) or a local .env file
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment"""

    model_config = SettingsConfigDict(
        env_prefix="INVESTSIM_",
        env_file=".env",
        extra="ignore",
    )

    # ======================
    # Application
    # ======================
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_PORT: int = 5000

    # browser front end dev servers
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # ======================
    # Display
    # ======================
    CURRENCY: str = "BRL"
    REPORT_TITLE: str = "Investment Report - Consolidated Portfolio"


settings = Settings()
