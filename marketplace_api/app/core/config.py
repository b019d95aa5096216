"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so that the API and
the front-end dev server work together out of the box: the API listens
on port 3000 and the dev server (port 5000) proxies ``/api`` to it.
In a production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables.

    Values are read when an instance is created, not when the module is
    imported, so ``Settings.from_env()`` always reflects the current
    environment.
    """

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Marketplace API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    # Empty string disables the file handler.
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))

    host: str = field(default_factory=lambda: _env("API_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("API_PORT", "3000"))

    # Comma‑separated list of allowed origins, e.g.
    # CORS_ORIGINS="http://localhost:5000,https://shop.example.com".
    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))

    # Front-end bundler settings.  The proxy target should point at the
    # address this API is served from.
    frontend_port: int = field(default_factory=lambda: _env_int("FRONTEND_PORT", "5000"))
    frontend_proxy_target: str = field(
        default_factory=lambda: _env("FRONTEND_PROXY_TARGET", "http://localhost:3000")
    )
    frontend_out_dir: str = field(default_factory=lambda: _env("FRONTEND_OUT_DIR", "dist"))

    @classmethod
    def from_env(cls) -> "Settings":
        """Build a fresh ``Settings`` from the current environment."""
        return cls()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
