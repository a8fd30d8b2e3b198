"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./credit_sentinel.db"
    create_schema_on_startup: bool = True
    seed_demo_data: bool = True

    # Service
    service_name: str = "credit-sentinel"
    log_level: str = "INFO"

    # Connection pool (ignored for SQLite)
    db_pool_size: int = 10
    db_max_overflow: int = 10
    db_pool_recycle_seconds: int = 3600


settings = Settings()
