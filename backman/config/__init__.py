"""Configuration loading for Backman.

Configuration is resolved once per process from config.json, the
BACKMAN_CONFIG document and single-value BACKMAN_* variables.

Usage:
    from backman.config import get_config

    config = get_config()
    schedule = config.services["db1"].schedule
"""

import threading

from backman.config.errors import (
    ConfigError,
    FileAccessError,
    InvalidDurationError,
    MalformedDocumentError,
    MissingRequiredEnvError,
)
from backman.config.loader import DEFAULT_CONFIG_PATH, resolve_config
from backman.config.models import BackmanConfig, ServiceConfig

_config: BackmanConfig | None = None
_config_lock = threading.Lock()


def get_config() -> BackmanConfig:
    """Get the process-wide configuration, resolving it on first access.

    Concurrent first callers block until the first resolution finishes and
    then all observe the same instance. A failed resolution is not cached,
    the ConfigError propagates to the caller.

    Returns:
        Resolved configuration
    """
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = resolve_config(DEFAULT_CONFIG_PATH)
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next access resolves again.

    Intended for tests.
    """
    global _config
    with _config_lock:
        _config = None


__all__ = [
    "BackmanConfig",
    "ConfigError",
    "FileAccessError",
    "InvalidDurationError",
    "MalformedDocumentError",
    "MissingRequiredEnvError",
    "ServiceConfig",
    "get_config",
    "reset_config",
    "resolve_config",
]
