"""Process startup for Backman.

Resolves configuration, configures logging from it and derives the
service registry. `main` is the only place where a configuration error
terminates the process.

Example usage:

    from backman.bootstrap import bootstrap

    ctx = bootstrap()
    for service in ctx.registry.all():
        print(service.name, service.schedule)
"""

import sys
from dataclasses import dataclass
from pathlib import Path

from backman.config import BackmanConfig, ConfigError, resolve_config
from backman.config.loader import DEFAULT_CONFIG_PATH
from backman.observability.logging import get_logger, setup_logging
from backman.service import ServiceRegistry, load_catalog

logger = get_logger(__name__)


@dataclass(frozen=True)
class BootstrapContext:
    """Configuration and registry constructed at startup."""

    config: BackmanConfig
    registry: ServiceRegistry


def bootstrap(
    config_path: Path | str = DEFAULT_CONFIG_PATH,
    log_format: str = "json",
) -> BootstrapContext:
    """Resolve configuration and build the service registry.

    Args:
        config_path: Location of the optional configuration file
        log_format: "json" or "console"

    Returns:
        Context holding the resolved configuration and registry

    Raises:
        ConfigError: If configuration or catalog cannot be loaded
    """
    config = resolve_config(config_path)
    setup_logging(
        level=config.log_level,
        format=log_format,
        timestamps=config.logging_timestamp,
    )
    registry = ServiceRegistry.from_catalog(load_catalog(), config)
    logger.info("bootstrap_complete", services=len(registry))
    return BootstrapContext(config=config, registry=registry)


def main() -> None:
    """Entry point: bootstrap or exit with status 1 on misconfiguration."""
    try:
        bootstrap()
    except ConfigError as e:
        logger.error("startup_failed", error=e.message, error_type=type(e).__name__)
        sys.exit(1)
