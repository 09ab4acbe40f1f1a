"""Root configuration model."""

from pydantic import Field

from backman.config.models.base import ConfigModel
from backman.config.models.notifications import NotificationsConfig
from backman.config.models.services import ServiceConfig
from backman.config.models.storage import S3Config

DEFAULT_LOG_LEVEL = "info"


class BackmanConfig(ConfigModel):
    """Resolved process-wide configuration.

    Mirrors the JSON schema of config.json and BACKMAN_CONFIG.
    """

    log_level: str = Field(default="", description=f"Log level (default '{DEFAULT_LOG_LEVEL}')")
    logging_timestamp: bool = Field(default=False, description="Add timestamps to log lines")
    username: str = Field(default="", description="Basic auth username")
    password: str = Field(default="", description="Basic auth password")
    disable_web: bool = Field(default=False, description="Disable the web UI")
    disable_metrics: bool = Field(default=False, description="Disable the metrics endpoint")
    unprotected_metrics: bool = Field(
        default=False,
        description="Serve metrics without basic auth",
    )
    foreground: bool = Field(default=False, description="Run backups in the foreground")
    notifications: NotificationsConfig = Field(default_factory=NotificationsConfig)
    s3: S3Config = Field(default_factory=S3Config)
    services: dict[str, ServiceConfig] = Field(
        default_factory=dict,
        description="Per-service overrides keyed by service instance name",
    )
