"""
================================================================================
dps-config - Configuration management for the DPS ecosystem
================================================================================

EXPORTS
-------
    DpsConfig       - Configuration store (env-loaded, getters/setters)
    get_config()    - Process-wide DpsConfig instance
    reset_config()  - Drop the process-wide instance (tests)
    parse_flag / parse_unsigned / parse_text - env parsing helpers

USAGE
-----
from dps_config import DpsConfig

config = DpsConfig()
config.get_domain()        # "dps.localhost"
config.set_domain("example.com")
config.get_api_domain()    # "api.example.com"

Environment conventions:
    - Boolean true is the string "Y"
    - Omitted or empty environment variables are treated as unset
================================================================================
"""

from dps_config.constants import ALL_ENV_VARS, ROUTING_PATH, ROUTING_SUBDOMAIN
from dps_config.parsing import parse_flag, parse_text, parse_unsigned
from dps_config.settings import DpsConfig, get_config, reset_config

__version__ = "0.1.0"

__all__ = [
    "DpsConfig",
    "get_config",
    "reset_config",
    "parse_flag",
    "parse_text",
    "parse_unsigned",
    "ALL_ENV_VARS",
    "ROUTING_PATH",
    "ROUTING_SUBDOMAIN",
]
