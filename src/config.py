"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Where family network snapshots are kept."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    backend: str = "memory"  # memory or sqlite
    db_path: str = "data/family_networks.db"


class ApiSettings(BaseSettings):
    """HTTP server settings."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["*"]


class LogSettings(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "FamilyBook - Family Network Platform"
    version: str = "1.0.0"
    environment: str = "development"

    storage: StorageSettings = StorageSettings()
    api: ApiSettings = ApiSettings()
    log: LogSettings = LogSettings()


settings = Settings()
