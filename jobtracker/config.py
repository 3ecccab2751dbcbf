"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str

    # Application
    app_name: str = "Job Tracker API"
    debug: bool = False
    log_level: str = "INFO"

    # Listing
    default_page_size: int = 10

    # Read-only demo account (its jobs can be browsed, never changed)
    demo_user_id: str | None = None

    # CORS
    frontend_cors_origin: str = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite (no server-side pool)."""
        return self.database_url.startswith("sqlite")


# Global settings instance
settings = Settings()
