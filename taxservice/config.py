"""
config.py — service settings.

Usage:
    from taxservice.config import settings
    print(settings.port)

Import the module-level singleton directly; do not inject it via Depends().
"""
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore any extra env vars
    )

    # --- Server ---
    host: str = "0.0.0.0"
    port: int = 3000

    # --- CORS ---
    # Comma-separated list of allowed origins; "*" allows any
    cors_origins: str = "*"

    # --- Application ---
    app_name: str = "Indian Income Tax Calculator Service"
    app_version: str = "1.0.0"
    # True → 500 responses carry the exception message
    debug: bool = False

    @property
    def cors_origins_list(self) -> List[str]:
        """Split comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Module-level singleton — import this throughout the codebase
settings = Settings()
