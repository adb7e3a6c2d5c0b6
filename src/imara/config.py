"""Application settings via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables with IMARA_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="IMARA_",
        env_file=".env",
        case_sensitive=False,
    )

    # --- Core ---
    app_name: str = "IMARA Wellness Platform"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 5000
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_origin_regex: str | None = r"https://.*\.vercel\.app"
    log_level: str = "INFO"
    log_format: str = "json"

    # --- Snapshot persistence ---
    data_file: str = "data/data.json"
    snapshot_interval_seconds: float = 30.0

    # --- JWT ---
    jwt_secret: str = "imara_dev_secret_change_this_in_production"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_days: int = 30
    jwt_issuer: str = "imara"

    # --- Password ---
    password_min_length: int = 8
    password_max_length: int = 128

    # --- Calendar / stats ---
    timezone: str = "UTC"
    stats_window_days: int = 30


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
