# -*- coding: utf-8 -*-
"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Factsy"
    app_version: str = "0.1.0"
    api_v1_prefix: str = "/api/v1"
    debug: bool = False

    # Storage: "sql" (page-scoped), "json" (extension-scoped) or "memory"
    storage_backend: str = "sql"
    database_url: str = "sqlite:///./data/factsy.db"
    storage_path: str = "./data/factsy_state.json"

    # Google Fact Check Tools
    google_fact_check_api_key: str = ""
    fact_check_api_url: str = "https://factchecktools.googleapis.com/v1alpha1/claims:search"
    fact_check_language: str = ""
    fact_check_page_size: int = 20
    fact_check_timeout: float = 10.0
    fact_check_cache_ttl: int = 300  # 5 minutes

    # Clients
    default_factsy_url: str = "https://your-factsy-app-url.com"
    suggestion_debounce_ms: int = 300

    @property
    def is_sqlite(self) -> bool:
        """Whether the database is SQLite."""
        return self.database_url.startswith("sqlite")

    @property
    def is_postgresql(self) -> bool:
        """Whether the database is PostgreSQL."""
        return self.database_url.startswith(("postgresql", "postgres"))


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings instance
    """
    return Settings()
