"""Notification configuration models."""

from pydantic import Field

from backman.config.models.base import ConfigModel


class TeamsNotificationConfig(ConfigModel):
    """MS Teams webhook notifications."""

    webhook: str = Field(default="", description="Incoming webhook URL")
    events: tuple[str, ...] = Field(
        default=(),
        description="Event names that trigger a notification",
    )


class NotificationsConfig(ConfigModel):
    """Top-level notifications configuration."""

    teams: TeamsNotificationConfig = Field(default_factory=TeamsNotificationConfig)
