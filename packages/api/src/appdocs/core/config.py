# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
"""

from decimal import Decimal
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_DIR = Path(__file__).resolve().parents[1]
_PROJECT_ROOT = Path(__file__).resolve().parents[5]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "appdocs"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # -- Document content --
    SUPPORT_EMAIL: str = "support@example.com"
    SIGNATURE: str = Field(
        default="Client Services",
        description="Sign-off printed at the end of every document. May be an HTML <img> fragment.",
    )
    TAX_RATE: Decimal = Field(
        default=Decimal("0.15"),
        ge=0,
        le=1,
        description="Fraction applied to each fund's net amount (amount - fees) in portfolio totals.",
    )

    # -- Templates --
    TEMPLATE_BASE_URI: str = Field(
        default=(_PACKAGE_DIR / "templates").as_uri(),
        description="Prefix joined with a template path to build the full template URL.",
    )
    TEMPLATE_PATHS: dict[str, str] = {
        "PendingApplication": "/pending_application.html",
        "ActivatedApplication": "/activated_application.html",
        "InReviewApplication": "/in_review_application.html",
    }
    TEMPLATE_FETCH_TIMEOUT: float = Field(
        default=10.0,
        description="Seconds to wait when fetching templates over HTTP.",
    )


settings = Settings()
