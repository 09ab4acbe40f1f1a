"""JSON configuration loader with presence-based merge.

Resolution order (lowest to highest precedence):
1. config.json in the working directory (optional)
2. BACKMAN_CONFIG environment variable holding a JSON document
3. Single-value BACKMAN_* environment variables
Built-in defaults fill whatever is still unset afterwards.
"""

import json
from datetime import timedelta
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from backman.config.errors import FileAccessError, MalformedDocumentError
from backman.config.models import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_S3_SERVICE_LABEL,
    BackmanConfig,
)
from backman.config.settings import CONFIG_ENV_VAR, EnvironmentOverrides
from backman.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path("config.json")

# Timeouts of one second or less are treated as unset
MIN_TIMEOUT = timedelta(seconds=1)

M = TypeVar("M", bound=BaseModel)


def load_document(text: str | bytes, source: str) -> BackmanConfig:
    """Parse and validate a JSON configuration document.

    Args:
        text: Raw JSON document
        source: Where the document came from, used in error messages

    Returns:
        Validated configuration

    Raises:
        MalformedDocumentError: If the JSON is invalid, the root is not an
            object, or a field fails validation (including durations)
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDocumentError(f"could not parse {source}: {e}", source=source) from e

    if not isinstance(data, dict):
        raise MalformedDocumentError(
            f"could not parse {source}: root must be an object, got {type(data).__name__}",
            source=source,
        )

    try:
        return BackmanConfig.model_validate(data)
    except ValidationError as e:
        raise MalformedDocumentError(f"could not parse {source}: {e}", source=source) from e


def load_file(path: Path) -> BackmanConfig | None:
    """Load the configuration file, or return None if it does not exist.

    Raises:
        FileAccessError: If the file exists but cannot be read
        MalformedDocumentError: If the file content is invalid
    """
    if not path.exists():
        logger.debug("config_file_missing", path=str(path))
        return None

    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileAccessError(f"could not load '{path}': {e}", path=str(path)) from e

    config = load_document(data, source=f"'{path}'")
    logger.debug("config_file_loaded", path=str(path))
    return config


def is_present(value: Any) -> bool:
    """Whether an override value counts as set.

    Empty strings and collections, False, non-positive numbers and
    timeouts of at most one second are all "unset".
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return value > 0
    if isinstance(value, timedelta):
        return value > MIN_TIMEOUT
    if isinstance(value, str | tuple | list | dict):
        return len(value) > 0
    return value is not None


def _merge_mapping(base: dict[str, M], override: dict[str, M]) -> dict[str, M]:
    merged = dict(base)
    for key, value in override.items():
        existing = base.get(key)
        if existing is None:
            existing = type(value)()
        merged[key] = merge_models(existing, value)
    return merged


def merge_models(base: M, override: M) -> M:
    """Merge two models of the same type field by field.

    Nested models merge recursively, mappings of models merge key by key,
    and any other field takes the override value only when it is present.
    Lists are replaced wholesale, never appended. Neither input is
    modified.
    """
    updates: dict[str, Any] = {}
    for name in type(base).model_fields:
        base_value = getattr(base, name)
        override_value = getattr(override, name)

        if isinstance(base_value, BaseModel):
            updates[name] = merge_models(base_value, override_value)
        elif isinstance(base_value, dict):
            updates[name] = _merge_mapping(base_value, override_value)
        elif is_present(override_value):
            updates[name] = override_value

    return base.model_copy(update=updates)


def merge_config(base: BackmanConfig, override: BackmanConfig) -> BackmanConfig:
    """Merge an override document over a base configuration."""
    return merge_models(base, override)


def apply_defaults(config: BackmanConfig) -> BackmanConfig:
    """Fill fields that are still unset after merging."""
    updates: dict[str, Any] = {}
    if not config.log_level:
        updates["log_level"] = DEFAULT_LOG_LEVEL
    if not config.s3.service_label:
        updates["s3"] = config.s3.model_copy(
            update={"service_label": DEFAULT_S3_SERVICE_LABEL}
        )
    return config.model_copy(update=updates)


def apply_env_overrides(
    config: BackmanConfig,
    overrides: EnvironmentOverrides,
) -> BackmanConfig:
    """Apply single-value environment variables over the configuration.

    Non-empty variables always win. The event list is replaced whenever
    its variable is defined, so an empty value clears it.
    """
    updates: dict[str, Any] = {}
    if overrides.username:
        updates["username"] = overrides.username
    if overrides.password:
        updates["password"] = overrides.password
    if overrides.encryption_key:
        updates["s3"] = config.s3.model_copy(
            update={"encryption_key": overrides.encryption_key}
        )

    teams_updates: dict[str, Any] = {}
    if overrides.teams_webhook:
        teams_updates["webhook"] = overrides.teams_webhook
    events = overrides.events()
    if events is not None:
        teams_updates["events"] = events
    if teams_updates:
        teams = config.notifications.teams.model_copy(update=teams_updates)
        updates["notifications"] = config.notifications.model_copy(update={"teams": teams})

    if updates:
        logger.debug("config_env_overrides_applied", fields=sorted(updates))
    return config.model_copy(update=updates)


def resolve_config(
    config_path: Path | str = DEFAULT_CONFIG_PATH,
    overrides: EnvironmentOverrides | None = None,
) -> BackmanConfig:
    """Resolve the effective configuration from all sources.

    Args:
        config_path: Location of the optional configuration file
        overrides: Environment overrides, read from os.environ if omitted

    Returns:
        Fully resolved configuration

    Raises:
        FileAccessError: If the file exists but cannot be read
        MalformedDocumentError: If the file or BACKMAN_CONFIG is invalid
    """
    if overrides is None:
        overrides = EnvironmentOverrides()

    config = load_file(Path(config_path)) or BackmanConfig()

    if overrides.document:
        env_config = load_document(
            overrides.document,
            source=f"environment variable '{CONFIG_ENV_VAR}'",
        )
        config = merge_config(config, env_config)
        logger.debug("config_env_document_merged", services=sorted(env_config.services))

    config = apply_defaults(config)
    config = apply_env_overrides(config, overrides)

    logger.info(
        "config_resolved",
        log_level=config.log_level,
        services=len(config.services),
        s3_service_label=config.s3.service_label,
    )
    return config
