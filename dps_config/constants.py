"""
================================================================================
FILE: dps_config/constants.py
================================================================================

PURPOSE:
    Environment variable names and hardcoded defaults for every DPS
    configuration field. Getters fall back to these values when a field
    is not configured.

KEY FACTS:
    - No imports from other dps_config modules (prevent circular deps)
    - Defaults are development-friendly, not production-safe
    - Changing a default here is a breaking change for consumers
"""

# ============================================================================
# ENVIRONMENT CONVENTIONS
# ============================================================================

# The only string recognized as boolean true
TRUTHY_TOKEN = "Y"

U16_BITS = 16
U64_BITS = 64

# ============================================================================
# ENVIRONMENT VARIABLE NAMES
# ============================================================================

# Global
ENV_DOMAIN = "DPS_DOMAIN"
ENV_API_SUBDOMAIN = "DPS_API_SUBDOMAIN"
ENV_API_ROUTING_MODE = "DPS_API_ROUTING_MODE"
ENV_DEVELOPMENT_MODE = "DPS_DEVELOPMENT_MODE"

# DpsAuthApi
ENV_AUTH_API_SUBDOMAIN = "DPS_AUTH_API_SUBDOMAIN"
ENV_AUTH_API_PORT = "DPS_AUTH_API_PORT"
ENV_AUTH_API_PROTOCOL = "DPS_AUTH_API_PROTOCOL"
ENV_AUTH_API_INSECURE_COOKIE = "DPS_AUTH_API_INSECURE_COOKIE"
ENV_AUTH_API_SQLITE_MAIN_FILE_PATH = "DPS_AUTH_API_SQLITE_MAIN_FILE_PATH"
ENV_AUTH_API_SQLITE_MAIN_POOL_SIZE = "DPS_AUTH_API_SQLITE_MAIN_POOL_SIZE"
ENV_AUTH_API_SESSION_SECRET = "DPS_AUTH_API_SESSION_SECRET"
ENV_AUTH_API_SESSION_TTL_SECONDS = "DPS_AUTH_API_SESSION_TTL_SECONDS"

ALL_ENV_VARS = (
    ENV_DOMAIN,
    ENV_API_SUBDOMAIN,
    ENV_API_ROUTING_MODE,
    ENV_DEVELOPMENT_MODE,
    ENV_AUTH_API_SUBDOMAIN,
    ENV_AUTH_API_PORT,
    ENV_AUTH_API_PROTOCOL,
    ENV_AUTH_API_INSECURE_COOKIE,
    ENV_AUTH_API_SQLITE_MAIN_FILE_PATH,
    ENV_AUTH_API_SQLITE_MAIN_POOL_SIZE,
    ENV_AUTH_API_SESSION_SECRET,
    ENV_AUTH_API_SESSION_TTL_SECONDS,
)

# ============================================================================
# ROUTING MODES (how the API segment joins the auth URL)
# ============================================================================

ROUTING_PATH = "path"            # https://auth.dps.localhost/api
ROUTING_SUBDOMAIN = "subdomain"  # https://auth.api.dps.localhost

# ============================================================================
# DEFAULTS
# ============================================================================

DEFAULT_DOMAIN = "dps.localhost"
DEFAULT_API_SUBDOMAIN = "api"
DEFAULT_API_ROUTING_MODE = ROUTING_PATH
DEFAULT_DEVELOPMENT_MODE = False

DEFAULT_AUTH_API_SUBDOMAIN = "auth"
DEFAULT_AUTH_API_PROTOCOL = "https"
DEFAULT_AUTH_API_INSECURE_COOKIE = False
DEFAULT_AUTH_API_SQLITE_MAIN_FILE_PATH = "data/main-development.db"
DEFAULT_AUTH_API_SQLITE_MAIN_POOL_SIZE = 1
DEFAULT_AUTH_API_SESSION_TTL_SECONDS = 1209600  # 14 days

REDACTED = "***REDACTED***"
