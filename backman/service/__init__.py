"""Bound service instances and their effective backup parameters.

Usage:
    from backman.service import get_registry

    registry = get_registry()
    for service in registry.by_type("postgres"):
        print(service.name, service.schedule)
"""

import threading

from backman.config import get_config
from backman.service.catalog import CatalogEntry, load_catalog, parse_catalog
from backman.service.registry import (
    EffectiveService,
    Retention,
    ServiceRegistry,
    derive_services,
    random_daily_schedule,
)
from backman.service.types import ServiceType, is_valid_service_type, parse_service_type

_registry: ServiceRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> ServiceRegistry:
    """Get the process-wide registry, deriving it on first access.

    Reads the catalog from VCAP_SERVICES and the per-service overrides
    from the resolved configuration. Concurrent first callers block until
    derivation finishes and all observe the same registry.

    Raises:
        MissingRequiredEnvError: If VCAP_SERVICES is not set
        MalformedDocumentError: If the catalog or configuration is invalid
    """
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = ServiceRegistry.from_catalog(load_catalog(), get_config())
    return _registry


def reset_registry() -> None:
    """Drop the cached registry. Intended for tests."""
    global _registry
    with _registry_lock:
        _registry = None


__all__ = [
    "CatalogEntry",
    "EffectiveService",
    "Retention",
    "ServiceRegistry",
    "ServiceType",
    "derive_services",
    "get_registry",
    "is_valid_service_type",
    "load_catalog",
    "parse_catalog",
    "parse_service_type",
    "random_daily_schedule",
    "reset_registry",
]
