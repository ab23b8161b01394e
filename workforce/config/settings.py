# workforce/config/settings.py
# Runtime configuration for the API, database and token signing

import os
from typing import List, Optional

from dotenv import load_dotenv

DEV_JWT_SECRET = "dev-secret-change-me"


class Settings:
    """Application settings, built once at startup and passed to create_app()"""

    def __init__(
        self,
        environment: str = "development",
        database_url: str = "sqlite:///./workforce.db",
        jwt_secret: Optional[str] = None,
        jwt_algorithm: str = "HS256",
        jwt_expires_minutes: int = 60,
        bcrypt_rounds: int = 10,
        cors_origins: Optional[List[str]] = None,
        log_level: str = "INFO",
    ):
        self.environment = environment
        self.database_url = database_url
        self.jwt_algorithm = jwt_algorithm
        self.jwt_expires_minutes = jwt_expires_minutes
        self.bcrypt_rounds = bcrypt_rounds
        self.cors_origins = cors_origins or [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]
        self.log_level = log_level

        # Only development builds may fall back to the well-known secret
        if not jwt_secret and self.is_development:
            jwt_secret = DEV_JWT_SECRET
        self.jwt_secret = jwt_secret

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the process environment (and a .env file if present)"""
        load_dotenv()

        origins = os.getenv("CORS_ORIGINS")
        return cls(
            environment=os.getenv("ENVIRONMENT", "development"),
            database_url=os.getenv("DATABASE_URL", "sqlite:///./workforce.db"),
            jwt_secret=os.getenv("JWT_SECRET"),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            jwt_expires_minutes=int(os.getenv("JWT_EXPIRES_MINUTES", 60)),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", 10)),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()] if origins else None,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> None:
        """Refuse to start without an explicit signing secret outside development"""
        if not self.jwt_secret:
            raise RuntimeError(
                f"JWT_SECRET must be set when ENVIRONMENT={self.environment}"
            )
