"""
Configuration management for Hanja-Hangul.

Environment-based configuration using Pydantic BaseSettings. The deployment
mode (dev/prod) selects listener addresses, the HTTPS redirect target and the
TLS certificate paths; any value set explicitly through the environment wins
over the mode default.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hanja_hangul.conversion.constants import FALLBACK_MESSAGE


# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("HH_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

# Default static assets (index.html, css/, js/) bundled with the web package
DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[1] / "web" / "static"

MODE_DEFAULTS: Dict[str, Dict[str, object]] = {
    "dev": {
        "http_host": "127.0.0.1",
        "http_port": 8000,
        "https_host": "127.0.0.1",
        "https_port": 443,
        "https_redirect": "https://127.0.0.1:443",
        "ssl_cert": "cert_local/cert.pem",
        "ssl_key": "cert_local/key.pem",
    },
    "prod": {
        "http_host": "0.0.0.0",
        "http_port": 80,
        "https_host": "0.0.0.0",
        "https_port": 443,
        "https_redirect": "https://badang.xyz",
        "ssl_cert": "/etc/letsencrypt/live/badang.xyz/fullchain.pem",
        "ssl_key": "/etc/letsencrypt/live/badang.xyz/privkey.pem",
    },
}


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the HH_ prefix, e.g. HH_DATA_DIR
    overrides data_dir. ENVIRONMENT and LOG_LEVEL are read without prefix.

    Listener, redirect and certificate fields left unset are filled from
    MODE_DEFAULTS for the active ENVIRONMENT.
    """

    ENVIRONMENT: Literal["dev", "prod"] = Field(
        default="dev",
        validation_alias="ENVIRONMENT",
        description="Deployment mode",
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    app_name: str = Field(default="Hanja-Hangul", description="Application name")

    # Dictionary tables
    data_dir: Optional[str] = Field(
        default=None,
        description="Directory with hanja_char.txt, dueum.txt, hanja_word.txt "
        "(None = bundled tables)",
    )

    # Web boundary
    static_dir: str = Field(
        default=str(DEFAULT_STATIC_DIR),
        description="Directory holding index.html, css/ and js/",
    )
    fallback_message: str = Field(
        default=FALLBACK_MESSAGE,
        description="Response text when nothing could be converted",
    )

    # Listeners (mode dependent, see MODE_DEFAULTS)
    http_host: Optional[str] = Field(default=None, description="HTTP listen host")
    http_port: Optional[int] = Field(default=None, description="HTTP listen port")
    https_host: Optional[str] = Field(default=None, description="HTTPS listen host")
    https_port: Optional[int] = Field(default=None, description="HTTPS listen port")
    https_redirect: Optional[str] = Field(
        default=None, description="Target URL for the HTTP -> HTTPS redirect"
    )
    ssl_cert: Optional[str] = Field(default=None, description="TLS certificate path")
    ssl_key: Optional[str] = Field(default=None, description="TLS private key path")

    @model_validator(mode="after")
    def apply_mode_defaults(self) -> "Settings":
        """Fill unset listener/TLS fields from the active mode's defaults."""
        defaults = MODE_DEFAULTS[self.ENVIRONMENT]
        for name, value in defaults.items():
            if getattr(self, name) is None:
                setattr(self, name, value)
        return self

    @property
    def http_address(self) -> str:
        return f"{self.http_host}:{self.http_port}"

    @property
    def https_address(self) -> str:
        return f"{self.https_host}:{self.https_port}"

    model_config = SettingsConfigDict(
        env_prefix="HH_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and reused for the process lifetime.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
