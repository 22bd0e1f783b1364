# ABOUTME: Centralized configuration using Pydantic Settings.
# ABOUTME: Loads all settings from environment variables and .env file.

from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Events API
    events_api_base_url: str = "https://api.lml.live"
    events_location: str = "melbourne"
    events_timeout: float = 5.0
    events_api_attempts: int = 2
    events_retry_backoff: float = 0.5
    events_days_ahead: int = 0  # 0 queries a single day

    # Selection
    proximity_radius_km: float = 10.0
    max_gigs_per_bulletin: int = 5

    # QR codes and maps
    qr_service_url: str = "https://api.qrserver.com/v1/create-qr-code/"
    qr_size: int = 100
    default_map_url: str = "https://maps.google.com"

    # Content
    source_language: str = "en"
    description_mode: str = "random"  # "random" or "round_robin"
    generation_concurrency: int = 4

    # Email / SMTP (optional - only required for send commands)
    smtp_host: str = "localhost"
    smtp_port: int = 587
    smtp_user: SecretStr | None = None
    smtp_password: SecretStr | None = None
    sender_email: str = "gigs@melbournegigguide.local"
    sender_name: str = "Melbourne Gig Guide"
    email_subject: str = "Melbourne Gig Guide"

    # Database (optional - only required for web and DB persistence)
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "gigguide"
    db_user: str = "gigguide"
    db_password: SecretStr | None = None
    db_pool_size: int = 5
    db_pool_max_overflow: int = 10
    database_url_override: str | None = None

    @property
    def database_url(self) -> str:
        """Build async PostgreSQL connection URL."""
        if self.database_url_override:
            return self.database_url_override
        password = self.db_password.get_secret_value() if self.db_password else ""
        return f"postgresql+asyncpg://{self.db_user}:{password}@{self.db_host}:{self.db_port}/{self.db_name}"

    # Paths
    previews_dir: Path = Path("previews")
    templates_dir: Path = PACKAGE_DIR / "email" / "templates"

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from environment variables and .env file.
    SMTP credentials are optional - only required for email sending.
    """
    return Settings()
