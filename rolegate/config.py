# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # App
    APP_NAME: str = "Rolegate"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    # Database
    DATABASE_URL: str = "sqlite:///./rolegate.db"

    # Sessions (tokens are issued by the external OAuth flow)
    SESSION_COOKIE_NAME: str = "session"

    # Startup maintenance
    SEED_DEFAULT_ROLES: bool = True
    CLEANUP_EXPIRED_SESSIONS: bool = True


settings = Settings()
