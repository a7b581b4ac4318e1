"""
Alnwick Community Center - Gateway configuration via Pydantic Settings.

All values from environment variables. NEVER hardcode tokens.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class GatewaySettings(BaseSettings):
    """Gateway configuration loaded from environment variables."""

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    environment: str = "production"
    log_level: str = "INFO"
    log_format: str = "json"  # json | console

    # Authentication (bearer token -> role)
    admin_token: str = ""  # MUST be set via env var
    member_token: str = ""

    # Event store
    event_storage_provider: str = "memory"
    seed_on_startup: bool = True
    seed_year: int = 2025
    seed_config_path: str = ""  # empty = config/seed.yaml

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    model_config = {"env_prefix": "", "case_sensitive": False}


@lru_cache
def get_settings() -> GatewaySettings:
    """Factory for gateway settings (cached singleton)."""
    return GatewaySettings()
