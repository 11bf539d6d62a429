"""
Environment lookup helpers used to populate configuration.
"""

import os
from typing import Any, List, Mapping, Optional

DEFAULT_ENV_PREFIX = "AUTHKEEPER_"

_TRUE_VALUES = ('true', '1', 'yes', 'on')


def get_config_value(key: str, default: Any = None,
                     cast_type: Optional[type] = None,
                     env_prefix: str = DEFAULT_ENV_PREFIX,
                     environ: Optional[Mapping[str, str]] = None) -> Any:
    """
    Get configuration value from environment or return default.
    Optionally cast to specified type; an uncastable value yields the default.
    """
    if environ is None:
        environ = os.environ

    env_key = f"{env_prefix}{key.upper()}"
    value = environ.get(env_key)

    if value is None:
        return default
    if cast_type is None:
        return value

    try:
        if cast_type == bool:
            return value.strip().lower() in _TRUE_VALUES
        elif cast_type == list:
            return [item.strip() for item in value.split(',') if item.strip()]
        else:
            return cast_type(value.strip())
    except (ValueError, TypeError):
        return default


def get_bool_config(key: str, default: bool = False,
                    env_prefix: str = DEFAULT_ENV_PREFIX,
                    environ: Optional[Mapping[str, str]] = None) -> bool:
    """Get boolean configuration value."""
    return get_config_value(key, default, bool, env_prefix, environ)


def get_int_config(key: str, default: int = 0,
                   env_prefix: str = DEFAULT_ENV_PREFIX,
                   environ: Optional[Mapping[str, str]] = None) -> int:
    """Get integer configuration value."""
    return get_config_value(key, default, int, env_prefix, environ)


def get_list_config(key: str, default: Optional[List[str]] = None,
                    env_prefix: str = DEFAULT_ENV_PREFIX,
                    environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Get list configuration value (comma-separated)."""
    if default is None:
        default = []
    return get_config_value(key, default, list, env_prefix, environ)
