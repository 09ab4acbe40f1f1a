"""Configuration model exports.

    from backman.config.models import BackmanConfig, ServiceConfig
"""

from backman.config.models.base import ConfigModel
from backman.config.models.notifications import (
    NotificationsConfig,
    TeamsNotificationConfig,
)
from backman.config.models.root import DEFAULT_LOG_LEVEL, BackmanConfig
from backman.config.models.services import RetentionConfig, ServiceConfig
from backman.config.models.storage import DEFAULT_S3_SERVICE_LABEL, S3Config

__all__ = [
    "BackmanConfig",
    "ConfigModel",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_S3_SERVICE_LABEL",
    "NotificationsConfig",
    "RetentionConfig",
    "S3Config",
    "ServiceConfig",
    "TeamsNotificationConfig",
]
