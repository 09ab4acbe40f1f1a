"""Per-service backup configuration models."""

from datetime import timedelta

from pydantic import Field

from backman.config.duration import Duration
from backman.config.models.base import ConfigModel


class RetentionConfig(ConfigModel):
    """How many days and files of backups to keep. Zero means unset."""

    days: int = Field(default=0, description="Maximum age of backups in days")
    files: int = Field(default=0, description="Maximum number of backup files")


class ServiceConfig(ConfigModel):
    """Configuration override for a single bound service instance."""

    schedule: str = Field(default="", description="6-field cron schedule")
    timeout: Duration = Field(
        default=timedelta(0),
        description="Backup timeout, nanoseconds or duration string",
    )
    retention: RetentionConfig = Field(default_factory=RetentionConfig)
    direct_s3: bool = Field(default=False, description="Stream backups directly to S3")
    disable_column_statistics: bool = Field(
        default=False,
        description="Pass --column-statistics=0 to mysqldump",
    )
    log_stderr: bool = Field(default=False, description="Log backup tool stderr")
    force_import: bool = Field(default=False, description="Force restore import")
    local_backup_path: str = Field(
        default="",
        description="Local path for intermediate backup files",
    )
    backup_options: tuple[str, ...] = Field(
        default=(),
        description="Extra arguments for the backup tool",
    )
    restore_options: tuple[str, ...] = Field(
        default=(),
        description="Extra arguments for the restore tool",
    )
