"""
Application settings.

The ``Settings`` dataclass reads its values from environment variables
when the class is defined, so variables must be exported before this
module is imported.  Every field has a default suitable for local
development; override ``SECRET_KEY`` and ``ADMIN_PASSWORD`` in any
deployment that is reachable from the outside.

Tests and embedding code can build their own ``Settings(...)`` and pass
it to :func:`club_site_api.app.main.create_app` instead of relying on
the module level instance.
"""

import os
from dataclasses import dataclass
from typing import List


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Football Club API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Account created on startup with administrator rights.  The password
    # is hashed before it is stored.
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")

    # Optional long-lived token that authenticates as the administrator
    # above.  Empty disables it.
    admin_static_token: str = os.getenv("ADMIN_STATIC_TOKEN", "")

    allow_registration: bool = _env_flag("ALLOW_REGISTRATION", "true")
    seed_demo_data: bool = _env_flag("SEED_DEMO_DATA")

    # Comma-separated list, "*" allows any origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
