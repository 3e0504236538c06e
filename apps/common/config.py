"""
Environment-backed configuration helpers shared by settings and services.
"""
import os
from typing import List


def get_env_list(key: str, default: str = '') -> List[str]:
    """
    Get environment variable as a comma-separated list.

    Args:
        key: Environment variable key
        default: Default value if key is not set

    Returns:
        List of non-empty, stripped strings
    """
    value = os.environ.get(key, default)
    return [item.strip() for item in value.split(',') if item.strip()]


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean ('true', '1', 'yes', 'on')."""
    value = os.environ.get(key, str(default)).lower()
    return value in ('true', '1', 'yes', 'on')


def get_env_int(key: str, default: int = 0) -> int:
    """
    Get environment variable as integer.

    Falls back to ``default`` when the variable is unset or not a number.
    """
    try:
        return int(os.environ.get(key, str(default)))
    except ValueError:
        return default


def get_env_url(key: str, default: str = '') -> str:
    """Get a base URL from the environment without its trailing slash."""
    return os.environ.get(key, default).strip().rstrip('/')
