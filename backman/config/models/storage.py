"""Object storage configuration models."""

from pydantic import Field

from backman.config.models.base import ConfigModel

DEFAULT_S3_SERVICE_LABEL = "dynstrg"


class S3Config(ConfigModel):
    """S3-compatible object store used to persist backups."""

    disable_ssl: bool = Field(default=False, description="Use plain HTTP")
    skip_ssl_verification: bool = Field(
        default=False,
        description="Skip TLS certificate verification",
    )
    service_label: str = Field(
        default="",
        description=f"Catalog label of the S3 binding (default '{DEFAULT_S3_SERVICE_LABEL}')",
    )
    service_name: str = Field(default="", description="Catalog name of the S3 binding")
    bucket_name: str = Field(default="", description="Bucket for backup files")
    encryption_key: str = Field(
        default="",
        description="Client-side encryption key (from BACKMAN_ENCRYPTION_KEY)",
    )
