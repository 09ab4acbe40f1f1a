"""Configuration error hierarchy.

All configuration failures inherit from ConfigError. The resolver raises
these instead of exiting; only the process entry point decides whether a
failure is fatal.
"""


class ConfigError(Exception):
    """Base exception for configuration errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class FileAccessError(ConfigError):
    """Raised when the config file exists but cannot be read."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class MalformedDocumentError(ConfigError):
    """Raised when a JSON document fails to parse or validate."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class InvalidDurationError(ConfigError, ValueError):
    """Raised when a duration is neither a number nor a duration string.

    Also a ValueError so that pydantic reports it as a field validation
    failure of the enclosing document.
    """


class MissingRequiredEnvError(ConfigError):
    """Raised when a required environment variable is absent."""

    def __init__(self, key: str) -> None:
        super().__init__(f"required variable [{key}] is missing")
        self.key = key
