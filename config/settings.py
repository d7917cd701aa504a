"""
Application settings loaded from environment variables.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str                                     # HMAC secret for auth tokens (required)
    jwt_expiry_seconds: int = Field(604800, gt=0)       # 7 days
    bcrypt_rounds: int = Field(10, ge=4, le=31)         # bcrypt work factor

    # ── Database ─────────────────────────────────────────────────────────
    database_url: str                                   # e.g. postgresql+asyncpg://user:pw@host/db

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 3000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    @field_validator("jwt_secret", "database_url")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


def get_settings() -> Settings:
    """Load settings from the environment; raises ``ValidationError`` if incomplete."""
    return Settings()
