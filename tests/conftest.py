"""Shared test fixtures for the Backman test suite."""

import json
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog

BACKMAN_ENV_VARS = (
    "BACKMAN_CONFIG",
    "BACKMAN_USERNAME",
    "BACKMAN_PASSWORD",
    "BACKMAN_ENCRYPTION_KEY",
    "BACKMAN_TEAMS_WEBHOOK",
    "BACKMAN_TEAMS_EVENTS",
    "VCAP_SERVICES",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every variable the resolver or catalog reads."""
    for key in BACKMAN_ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def clear_singletons() -> Generator[None, None, None]:
    """Clear the cached config and registry before and after each test."""
    from backman.config import reset_config
    from backman.service import reset_registry

    reset_config()
    reset_registry()
    yield
    reset_config()
    reset_registry()


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Restore structlog defaults so no test keeps another test's stream."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict[str, Any] | str], Path]:
    """Factory fixture writing a config.json into a temporary directory.

    Usage:
        def test_something(write_config):
            path = write_config({"log_level": "debug"})
    """

    def _write(content: dict[str, Any] | str) -> Path:
        path = tmp_path / "config.json"
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def vcap_services() -> Callable[[dict[str, list[dict[str, Any]]]], str]:
    """Factory fixture building a VCAP_SERVICES document."""

    def _build(services: dict[str, list[dict[str, Any]]]) -> str:
        return json.dumps(services)

    return _build

