# This project was developed with assistance from AI tools.
"""Database configuration via pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings -- reads from environment variables."""

    model_config = SettingsConfigDict(extra="ignore")

    DATABASE_URL: str = "sqlite:///./applications.db"
    SQL_ECHO: bool = False


db_settings = DatabaseSettings()
