from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PORTFOLIO_",
        extra="ignore",
    )

    app_name: str = "Real Estate Portfolio"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    database_url: str = "postgresql+asyncpg://postgres:postgres@db:5432/portfolio"
    log_level: str = "INFO"
    create_tables: bool = False
    seed_demo: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
