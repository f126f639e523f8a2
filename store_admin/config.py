"""
Application settings read from environment variables.

Values are read once at import time, so environment variables must be set
before importing this module.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    env: str = os.getenv("ENV", "development")
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./store_admin.db")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Identity provider
    jwt_secret: str = os.getenv("JWT_SECRET", "change_me")
    jwt_algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Owner of the store seeded in development
    dev_user_id: str = os.getenv("DEV_USER_ID", "dev-user")

    cors_origins: List[str] = field(
        default_factory=lambda: _split(
            os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
        )
    )


settings = Settings()
