"""Effective service descriptors and the read-only registry over them.

Each supported catalog entry is combined with its per-service
configuration and built-in defaults into an EffectiveService, which is
what schedulers and API handlers consume.
"""

import random
import time
from collections.abc import Iterable, Iterator
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field

from backman.config.duration import Duration
from backman.config.loader import MIN_TIMEOUT
from backman.config.models import BackmanConfig, ServiceConfig
from backman.observability.logging import get_logger
from backman.service.catalog import CatalogEntry
from backman.service.types import ServiceType, is_valid_service_type, parse_service_type

logger = get_logger(__name__)

DEFAULT_TIMEOUT = timedelta(hours=1)
DEFAULT_RETENTION_DAYS = 31
DEFAULT_RETENTION_FILES = 100

# Seeded once per process; only read during derivation
_schedule_rng = random.Random(time.time_ns())


class Retention(BaseModel):
    """Resolved retention policy, both values strictly positive."""

    model_config = ConfigDict(frozen=True)

    days: int = Field(..., gt=0)
    files: int = Field(..., gt=0)


class EffectiveService(BaseModel):
    """Ready-to-use operational parameters for one bound service."""

    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    plan: str = ""
    tags: tuple[str, ...] = ()
    timeout: Duration
    schedule: str
    retention: Retention

    # Passed through from the service's configuration override
    direct_s3: bool = False
    disable_column_statistics: bool = False
    log_stderr: bool = False
    force_import: bool = False
    local_backup_path: str = ""
    backup_options: tuple[str, ...] = ()
    restore_options: tuple[str, ...] = ()

    @property
    def type(self) -> ServiceType | None:
        """Service type parsed from the label."""
        return parse_service_type(self.label)


def random_daily_schedule(rng: random.Random | None = None) -> str:
    """Generate a once-daily 6-field cron schedule at a random time.

    Spreading unscheduled services over the day avoids every backup
    starting at the same moment.
    """
    if rng is None:
        rng = _schedule_rng
    second = rng.randint(0, 59)
    minute = rng.randint(0, 59)
    hour = rng.randint(0, 23)
    return f"{second} {minute} {hour} * * *"


def derive_service(
    entry: CatalogEntry,
    override: ServiceConfig | None,
    rng: random.Random | None = None,
) -> EffectiveService:
    """Combine a catalog entry with its override and the defaults."""
    cfg = override or ServiceConfig()

    timeout = cfg.timeout if cfg.timeout > MIN_TIMEOUT else DEFAULT_TIMEOUT
    schedule = cfg.schedule or random_daily_schedule(rng)
    days = cfg.retention.days if cfg.retention.days > 0 else DEFAULT_RETENTION_DAYS
    files = cfg.retention.files if cfg.retention.files > 0 else DEFAULT_RETENTION_FILES

    return EffectiveService(
        name=entry.name,
        label=entry.label,
        plan=entry.plan,
        tags=entry.tags,
        timeout=timeout,
        schedule=schedule,
        retention=Retention(days=days, files=files),
        direct_s3=cfg.direct_s3,
        disable_column_statistics=cfg.disable_column_statistics,
        log_stderr=cfg.log_stderr,
        force_import=cfg.force_import,
        local_backup_path=cfg.local_backup_path,
        backup_options=cfg.backup_options,
        restore_options=cfg.restore_options,
    )


def derive_services(
    catalog: Iterable[CatalogEntry],
    config: BackmanConfig,
    rng: random.Random | None = None,
) -> list[EffectiveService]:
    """Derive effective services for every supported catalog entry.

    Entries with unsupported labels are dropped silently. Catalog order is
    preserved.

    Args:
        catalog: Bound service instances
        config: Resolved configuration holding per-service overrides
        rng: Generator for default schedules, the process-wide one if omitted

    Returns:
        Effective service descriptors
    """
    services = [
        derive_service(entry, config.services.get(entry.name), rng)
        for entry in catalog
        if is_valid_service_type(entry.label)
    ]
    logger.debug(
        "services_loaded",
        services=[f"{s.label}/{s.name}" for s in services],
    )
    return services


class ServiceRegistry:
    """Read-only lookup over the derived service descriptors."""

    def __init__(self, services: Iterable[EffectiveService]) -> None:
        self._services: tuple[EffectiveService, ...] = tuple(services)

    @classmethod
    def from_catalog(
        cls,
        catalog: Iterable[CatalogEntry],
        config: BackmanConfig,
        rng: random.Random | None = None,
    ) -> "ServiceRegistry":
        """Build a registry by deriving descriptors from a catalog."""
        return cls(derive_services(catalog, config, rng))

    def __iter__(self) -> Iterator[EffectiveService]:
        return iter(self._services)

    def __len__(self) -> int:
        return len(self._services)

    def all(self) -> list[EffectiveService]:
        """All services in derivation order."""
        return list(self._services)

    def by_type(self, label: str) -> list[EffectiveService]:
        """Services with the given label, in derivation order."""
        return [s for s in self._services if s.label == label]

    def by_name(self, name: str) -> list[EffectiveService]:
        """The service with the given name, as a list of at most one."""
        for service in self._services:
            if service.name == name:
                return [service]
        return []

    def get(self, label: str, name: str) -> EffectiveService | None:
        """The service matching both label and name, or None."""
        for service in self._services:
            if service.label == label and service.name == name:
                return service
        return None

    def get_services(
        self,
        service_type: str = "",
        service_name: str = "",
    ) -> list[EffectiveService]:
        """List services the way API handlers filter them.

        A name takes precedence over a type; with neither, all services
        are returned.
        """
        if service_name:
            return self.by_name(service_name)
        if service_type:
            return self.by_type(service_type)
        return self.all()
