"""
Application configuration for the EventMail web API.

Reads settings from environment variables via python-dotenv.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class AppConfig:
    """Configuration for the EventMail FastAPI application."""

    base_url: str = "https://example.com"
    api_prefix: str = "/api/v1"
    cors_origins: list[str] = field(
        default_factory=lambda: ["http://localhost:5173"]
    )
    demo_mode: bool = False
    unique_slugs: bool = False
    strict_validation: bool = False
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000


def get_app_config() -> AppConfig:
    """Load application config from environment variables."""
    return AppConfig(
        base_url=os.getenv("BASE_URL", "https://example.com"),
        api_prefix=os.getenv("API_PREFIX", "/api/v1"),
        cors_origins=os.getenv(
            "CORS_ORIGINS", "http://localhost:5173"
        ).split(","),
        demo_mode=_env_flag("DEMO_MODE"),
        unique_slugs=_env_flag("UNIQUE_SLUGS"),
        strict_validation=_env_flag("STRICT_VALIDATION"),
        debug=_env_flag("DEBUG"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
