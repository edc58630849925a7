"""Constants and default values for ScreenFlow editor configuration.

This module centralizes all configuration constants and environment variable
settings used by the ScreenFlow editing session.
"""

import os
from typing import Final

# =============================================================================
# Environment Variable Names
# =============================================================================

ENV_VAR_PREFIX: Final[str] = "SCREENFLOW_"

# Output settings
ENV_INCLUDE_POSITION: Final[str] = f"{ENV_VAR_PREFIX}INCLUDE_POSITION"
ENV_DEFAULT_FORMAT: Final[str] = f"{ENV_VAR_PREFIX}DEFAULT_FORMAT"

# Editing settings
ENV_STRICT_PROPERTIES: Final[str] = f"{ENV_VAR_PREFIX}STRICT_PROPERTIES"
ENV_ID_LENGTH: Final[str] = f"{ENV_VAR_PREFIX}ID_LENGTH"
ENV_DEFAULT_FLOW_NAME: Final[str] = f"{ENV_VAR_PREFIX}DEFAULT_FLOW_NAME"


# =============================================================================
# Default Configuration Values
# =============================================================================

DEFAULT_INCLUDE_POSITION: Final[bool] = False
DEFAULT_FORMAT: Final[str] = "json"
DEFAULT_STRICT_PROPERTIES: Final[bool] = False
DEFAULT_ID_LENGTH: Final[int] = 7
DEFAULT_FLOW_NAME: Final[str] = "Untitled Flow"

MIN_ID_LENGTH: Final[int] = 4
MAX_ID_LENGTH: Final[int] = 32


# =============================================================================
# Environment Parsing
# =============================================================================

TRUTHY_VALUES: Final[frozenset[str]] = frozenset({"true", "1", "yes", "on"})
FALSY_VALUES: Final[frozenset[str]] = frozenset({"false", "0", "no", "off"})


def _raw_env(env_var: str) -> str | None:
    """Stripped value of a variable; None when unset or blank."""
    value = os.environ.get(env_var)
    if value is None or not value.strip():
        return None
    return value.strip()


def get_env_bool(env_var: str, default: bool) -> bool:
    """
    Read a flag such as ``SCREENFLOW_INCLUDE_POSITION=yes``.

    Values outside TRUTHY_VALUES and FALSY_VALUES leave the default in place.
    """
    raw = _raw_env(env_var)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in TRUTHY_VALUES:
        return True
    if lowered in FALSY_VALUES:
        return False
    return default


def get_env_int(env_var: str, default: int) -> int:
    """Read an integer setting, keeping the default for non-numeric values."""
    raw = _raw_env(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_env_str(env_var: str, default: str) -> str:
    raw = _raw_env(env_var)
    return default if raw is None else raw


# =============================================================================
# Configuration Value Getters (reads from environment)
# =============================================================================


def get_include_position() -> bool:
    """Get the wire position flag from environment or default."""
    return get_env_bool(ENV_INCLUDE_POSITION, DEFAULT_INCLUDE_POSITION)


def get_default_format() -> str:
    """Get default draft format from environment or default."""
    return get_env_str(ENV_DEFAULT_FORMAT, DEFAULT_FORMAT).lower()


def get_strict_properties() -> bool:
    """Get strict property validation flag from environment or default."""
    return get_env_bool(ENV_STRICT_PROPERTIES, DEFAULT_STRICT_PROPERTIES)


def get_id_length() -> int:
    """Get id token length from environment or default."""
    return get_env_int(ENV_ID_LENGTH, DEFAULT_ID_LENGTH)


def get_default_flow_name() -> str:
    """Get the name given to new flows from environment or default."""
    return get_env_str(ENV_DEFAULT_FLOW_NAME, DEFAULT_FLOW_NAME)
