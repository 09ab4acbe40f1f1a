"""Environment variable helpers."""

import os

from backman.config.errors import MissingRequiredEnvError


def get_env(key: str, default: str = "") -> str:
    """Return the value of `key`, or `default` when unset or empty."""
    value = os.environ.get(key, "")
    if not value:
        return default
    return value


def must_get_env(key: str) -> str:
    """Return the value of `key`.

    Raises:
        MissingRequiredEnvError: If the variable is unset or empty
    """
    value = os.environ.get(key, "")
    if not value:
        raise MissingRequiredEnvError(key)
    return value
