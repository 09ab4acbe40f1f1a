"""Environment-sourced configuration overrides.

These variables take precedence over both config.json and the
BACKMAN_CONFIG document.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_ENV_VAR = "BACKMAN_CONFIG"


class EnvironmentOverrides(BaseSettings):
    """Single-value BACKMAN_* environment variables.

    A field is None when its variable is not defined at all, which keeps
    "unset" apart from "set to an empty string".
    """

    model_config = SettingsConfigDict(
        env_prefix="BACKMAN_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    document: str | None = Field(
        default=None,
        validation_alias=CONFIG_ENV_VAR,
        description="JSON configuration document merged over config.json",
    )
    username: str | None = Field(default=None, description="Basic auth username")
    password: str | None = Field(default=None, description="Basic auth password")
    encryption_key: str | None = Field(default=None, description="S3 encryption key")
    teams_webhook: str | None = Field(default=None, description="MS Teams webhook URL")
    teams_events: str | None = Field(
        default=None,
        description="Comma-separated MS Teams event names",
    )

    def events(self) -> tuple[str, ...] | None:
        """Split the event list, or None when the variable is not defined."""
        if self.teams_events is None:
            return None
        if not self.teams_events:
            return ()
        return tuple(self.teams_events.split(","))
