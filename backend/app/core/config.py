"""Application configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import os

# Default DB lives next to the backend package
DEFAULT_SQLITE_PATH = str(Path(__file__).parent.parent.parent / "sofi.db")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    app_name: str = "SOFI Dashboard API"
    version: str = "1.0.0"
    api_prefix: str = "/api"
    cors_allow_origins: str = field(default_factory=lambda: os.getenv("SOFI_CORS_ORIGINS", "*"))
    sqlite_path: str = field(default_factory=lambda: os.getenv("SOFI_SQLITE_PATH", DEFAULT_SQLITE_PATH))
    jwt_secret: str = field(default_factory=lambda: os.getenv("SOFI_JWT_SECRET", "sofi-dev-secret-change-in-production"))
    jwt_algorithm: str = "HS256"
    jwt_expiry_minutes: int = field(default_factory=lambda: int(os.getenv("SOFI_JWT_EXPIRY_MINUTES", "60")))
    bcrypt_rounds: int = field(default_factory=lambda: int(os.getenv("SOFI_BCRYPT_ROUNDS", "12")))
    seed_demo_data: bool = field(default_factory=lambda: _env_bool("SOFI_SEED_DEMO", True))
    log_level: str = field(default_factory=lambda: os.getenv("SOFI_LOG_LEVEL", "INFO").upper())
    host: str = field(default_factory=lambda: os.getenv("SOFI_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("SOFI_PORT", "8000")))

    @property
    def cors_origins(self) -> list:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


settings = Settings()
