"""
================================================================================
FILE: dps_config/settings.py
================================================================================

PURPOSE:
    Central configuration container for DPS components. One object holds
    every optional configuration value, loaded from environment variables
    when it is constructed.

WORKFLOW:
    1. DpsConfig() reads the process environment once (pydantic-settings)
    2. Each value is parsed leniently: unusable input becomes None
    3. get_<field>() returns the value, or the hardcoded default
    4. set_<field>() overwrites the value; None restores the default
    5. Computed getters rebuild domains/URLs from current values on every call

INPUTS:
    - Environment variables (DPS_* names in constants.py)
    - Boolean variables: "Y" means true, anything else false

OUTPUTS:
    - DpsConfig instance with per-field getters/setters
    - Computed values: api_domain, auth_api_url, session secret bytes

KEY FACTS:
    - All fields are Optional; None means "not configured"
    - NO validation: consumers validate what they read
    - Construction never fails on malformed environment values
    - Computed values are never cached
    - Environment is read at construction only, never afterwards
    - No internal locking: one owner mutates an instance

USAGE:
    from dps_config import DpsConfig

    config = DpsConfig()
    config.set_domain("example.com")
    config.get_api_domain()   # "api.example.com"
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pydantic import Field, ValidationInfo, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dps_config import constants as c
from dps_config.parsing import parse_flag, parse_text, parse_unsigned

logger = logging.getLogger(__name__)

_UNSIGNED_WIDTHS = {
    "auth_api_port": c.U16_BITS,
    "auth_api_sqlite_main_pool_size": c.U16_BITS,
    "auth_api_session_ttl_seconds": c.U64_BITS,
}


class DpsConfig(BaseSettings):
    """
    Configuration store for the DPS ecosystem.

    Every field maps to one DPS_* environment variable through its alias.
    Fields without a safe default (auth_api_port, auth_api_session_secret)
    stay None when unset and their getters return None.
    """

    # ========================================================================
    # Pydantic v2 config
    # ========================================================================

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_ignore_empty=True,
        extra="ignore",
    )

    # ========================================================================
    # GLOBAL
    # ========================================================================

    domain: Optional[str] = Field(
        default=None,
        alias=c.ENV_DOMAIN,
        description="Base domain",
    )

    api_subdomain: Optional[str] = Field(
        default=None,
        alias=c.ENV_API_SUBDOMAIN,
        description="API routing segment (subdomain or path)",
    )

    api_routing_mode: Optional[str] = Field(
        default=None,
        alias=c.ENV_API_ROUTING_MODE,
        description="How the API segment joins service URLs: path | subdomain",
    )

    development_mode: Optional[bool] = Field(
        default=None,
        alias=c.ENV_DEVELOPMENT_MODE,
        description="Development mode flag",
    )

    # ========================================================================
    # DPS AUTH API
    # ========================================================================

    auth_api_subdomain: Optional[str] = Field(
        default=None,
        alias=c.ENV_AUTH_API_SUBDOMAIN,
        description="Auth API subdomain",
    )

    auth_api_port: Optional[int] = Field(
        default=None,
        alias=c.ENV_AUTH_API_PORT,
        description="Auth API port (omitted from the URL when unset)",
    )

    auth_api_protocol: Optional[str] = Field(
        default=None,
        alias=c.ENV_AUTH_API_PROTOCOL,
        description="Auth API protocol (http, https)",
    )

    auth_api_insecure_cookie: Optional[bool] = Field(
        default=None,
        alias=c.ENV_AUTH_API_INSECURE_COOKIE,
        description="Allow session cookies without the Secure attribute",
    )

    auth_api_sqlite_main_file_path: Optional[str] = Field(
        default=None,
        alias=c.ENV_AUTH_API_SQLITE_MAIN_FILE_PATH,
        description="Auth API main SQLite database file",
    )

    auth_api_sqlite_main_pool_size: Optional[int] = Field(
        default=None,
        alias=c.ENV_AUTH_API_SQLITE_MAIN_POOL_SIZE,
        description="Auth API main SQLite connection pool size",
    )

    auth_api_session_secret: Optional[str] = Field(
        default=None,
        alias=c.ENV_AUTH_API_SESSION_SECRET,
        description="Auth API session secret",
        repr=False,
    )

    auth_api_session_ttl_seconds: Optional[int] = Field(
        default=None,
        alias=c.ENV_AUTH_API_SESSION_TTL_SECONDS,
        description="Auth API session lifetime (seconds)",
    )

    # ========================================================================
    # ENVIRONMENT PARSING
    # ========================================================================

    @field_validator(
        "domain",
        "api_subdomain",
        "api_routing_mode",
        "auth_api_subdomain",
        "auth_api_protocol",
        "auth_api_sqlite_main_file_path",
        "auth_api_session_secret",
        mode="before",
    )
    @classmethod
    def _load_text(cls, value: Any) -> Optional[str]:
        return parse_text(value)

    @field_validator("development_mode", "auth_api_insecure_cookie", mode="before")
    @classmethod
    def _load_flag(cls, value: Any) -> Optional[bool]:
        return parse_flag(value)

    @field_validator(*_UNSIGNED_WIDTHS, mode="before")
    @classmethod
    def _load_unsigned(cls, value: Any, info: ValidationInfo) -> Optional[int]:
        bits = _UNSIGNED_WIDTHS[info.field_name]
        parsed = parse_unsigned(value, bits)
        if parsed is None and value is not None:
            logger.debug(
                f"⊘ Ignoring {cls.model_fields[info.field_name].alias}: "
                f"not an unsigned {bits}-bit integer"
            )
        return parsed

    # ========================================================================
    # GLOBAL GETTERS/SETTERS
    # ========================================================================

    def get_domain(self) -> str:
        """Configured domain, or ``"dps.localhost"``."""
        return self.domain if self.domain is not None else c.DEFAULT_DOMAIN

    def set_domain(self, value: Optional[str]) -> None:
        self.domain = value

    def get_api_subdomain(self) -> str:
        """Configured API subdomain, or ``"api"``."""
        if self.api_subdomain is not None:
            return self.api_subdomain
        return c.DEFAULT_API_SUBDOMAIN

    def set_api_subdomain(self, value: Optional[str]) -> None:
        self.api_subdomain = value

    def get_api_routing_mode(self) -> str:
        """
        Configured routing mode, or ``"path"``.

        The raw value is returned; URL composition treats anything other
        than ``"subdomain"`` as ``"path"``.
        """
        if self.api_routing_mode is not None:
            return self.api_routing_mode
        return c.DEFAULT_API_ROUTING_MODE

    def set_api_routing_mode(self, value: Optional[str]) -> None:
        self.api_routing_mode = value

    def get_development_mode(self) -> bool:
        if self.development_mode is not None:
            return self.development_mode
        return c.DEFAULT_DEVELOPMENT_MODE

    def set_development_mode(self, value: Optional[bool]) -> None:
        self.development_mode = value

    # ========================================================================
    # AUTH API GETTERS/SETTERS
    # ========================================================================

    def get_auth_api_subdomain(self) -> str:
        """Configured auth API subdomain, or ``"auth"``."""
        if self.auth_api_subdomain is not None:
            return self.auth_api_subdomain
        return c.DEFAULT_AUTH_API_SUBDOMAIN

    def set_auth_api_subdomain(self, value: Optional[str]) -> None:
        self.auth_api_subdomain = value

    def get_auth_api_port(self) -> Optional[int]:
        """Configured auth API port. No default: None when unset."""
        return self.auth_api_port

    def set_auth_api_port(self, value: Optional[int]) -> None:
        self.auth_api_port = value

    def get_auth_api_protocol(self) -> str:
        """Configured auth API protocol, or ``"https"``."""
        if self.auth_api_protocol is not None:
            return self.auth_api_protocol
        return c.DEFAULT_AUTH_API_PROTOCOL

    def set_auth_api_protocol(self, value: Optional[str]) -> None:
        self.auth_api_protocol = value

    def get_auth_api_insecure_cookie(self) -> bool:
        if self.auth_api_insecure_cookie is not None:
            return self.auth_api_insecure_cookie
        return c.DEFAULT_AUTH_API_INSECURE_COOKIE

    def set_auth_api_insecure_cookie(self, value: Optional[bool]) -> None:
        self.auth_api_insecure_cookie = value

    def get_auth_api_sqlite_main_file_path(self) -> str:
        """
        Main SQLite database file for the auth API, or
        ``"data/main-development.db"``. The path is not checked.
        """
        if self.auth_api_sqlite_main_file_path is not None:
            return self.auth_api_sqlite_main_file_path
        return c.DEFAULT_AUTH_API_SQLITE_MAIN_FILE_PATH

    def set_auth_api_sqlite_main_file_path(self, value: Optional[str]) -> None:
        self.auth_api_sqlite_main_file_path = value

    def get_auth_api_sqlite_main_pool_size(self) -> int:
        """Connection pool size for the main SQLite database, or ``1``."""
        if self.auth_api_sqlite_main_pool_size is not None:
            return self.auth_api_sqlite_main_pool_size
        return c.DEFAULT_AUTH_API_SQLITE_MAIN_POOL_SIZE

    def set_auth_api_sqlite_main_pool_size(self, value: Optional[int]) -> None:
        self.auth_api_sqlite_main_pool_size = value

    def get_auth_api_session_secret(self) -> Optional[str]:
        """Session secret, or None when not configured."""
        return self.auth_api_session_secret

    def set_auth_api_session_secret(self, value: Optional[str]) -> None:
        self.auth_api_session_secret = value

    def get_auth_api_session_ttl_seconds(self) -> int:
        """Session TTL in seconds, or 14 days (``1209600``)."""
        if self.auth_api_session_ttl_seconds is not None:
            return self.auth_api_session_ttl_seconds
        return c.DEFAULT_AUTH_API_SESSION_TTL_SECONDS

    def set_auth_api_session_ttl_seconds(self, value: Optional[int]) -> None:
        self.auth_api_session_ttl_seconds = value

    # ========================================================================
    # COMPUTED
    # ========================================================================

    @computed_field  # type: ignore[misc]
    @property
    def api_domain(self) -> str:
        """
        Shared cookie domain: ``{api_subdomain}.{domain}``.

        Example: ``api.dps.localhost``
        """
        return f"{self.get_api_subdomain()}.{self.get_domain()}"

    @computed_field  # type: ignore[misc]
    @property
    def auth_api_url(self) -> str:
        """
        Full auth API URL.

        Routing mode "path" (default):
            https://auth.dps.localhost/api
            http://auth.dps.localhost:3000/api

        Routing mode "subdomain":
            https://auth.api.dps.localhost
            http://auth.api.dps.localhost:3000

        The port segment is present only when a port is configured.
        """
        protocol = self.get_auth_api_protocol()
        auth_sub = self.get_auth_api_subdomain()
        port = self.get_auth_api_port()
        port_part = f":{port}" if port is not None else ""

        if self.get_api_routing_mode() == c.ROUTING_SUBDOMAIN:
            return f"{protocol}://{auth_sub}.{self.api_domain}{port_part}"

        return (
            f"{protocol}://{auth_sub}.{self.get_domain()}{port_part}"
            f"/{self.get_api_subdomain()}"
        )

    def get_api_domain(self) -> str:
        return self.api_domain

    def get_auth_api_url(self) -> str:
        return self.auth_api_url

    def get_auth_api_session_secret_bytes(self) -> Optional[bytes]:
        """
        Session secret as bytes, for session/encryption libraries.

        Returns the secret's UTF-8 bytes unchanged, or None when no secret
        is configured. An empty secret gives ``b""``, not None.
        """
        if self.auth_api_session_secret is None:
            return None
        return self.auth_api_session_secret.encode("utf-8", "surrogateescape")

    # ========================================================================
    # HELPER METHODS
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert config to dictionary with the session secret redacted.

        Returns:
            Raw field values (None when unset) plus computed values
        """
        d = self.model_dump()
        if d.get("auth_api_session_secret") is not None:
            d["auth_api_session_secret"] = c.REDACTED
        return d


# ============================================================================
# GLOBAL SINGLETON
# ============================================================================

_config_instance: Optional[DpsConfig] = None


def get_config() -> DpsConfig:
    """
    Get or create the process-wide DpsConfig instance.

    The environment is read on the first call only. Use reset_config()
    to force a re-read.
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = DpsConfig()
        logger.info("✅ DpsConfig initialized from environment (singleton)")

    return _config_instance


def reset_config() -> None:
    """Reset the config instance (for testing purposes)."""
    global _config_instance
    _config_instance = None
    logger.debug("DpsConfig reset")
