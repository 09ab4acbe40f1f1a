"""Unit tests for process bootstrap."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from backman.bootstrap import BootstrapContext, bootstrap, main
from backman.config.errors import MalformedDocumentError, MissingRequiredEnvError


class TestBootstrap:
    """Tests for bootstrap function."""

    def test_builds_context(
        self,
        write_config: Callable[..., Path],
        monkeypatch: pytest.MonkeyPatch,
        vcap_services: Callable[..., str],
    ) -> None:
        """Returns resolved configuration and the derived registry."""
        path = write_config({"log_level": "warning", "services": {"db1": {"schedule": "1 2 3 * * *"}}})
        monkeypatch.setenv("VCAP_SERVICES", vcap_services({
            "postgres": [{"name": "db1", "label": "postgres"}],
            "rabbitmq": [{"name": "queue", "label": "rabbitmq"}],
        }))

        ctx = bootstrap(path)

        assert isinstance(ctx, BootstrapContext)
        assert ctx.config.log_level == "warning"
        assert [s.name for s in ctx.registry.all()] == ["db1"]
        assert ctx.registry.all()[0].schedule == "1 2 3 * * *"

    def test_missing_catalog_raises(self, tmp_path: Path) -> None:
        """Without VCAP_SERVICES bootstrap fails with a config error."""
        with pytest.raises(MissingRequiredEnvError):
            bootstrap(tmp_path / "config.json")

    def test_malformed_config_raises(
        self, write_config: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A malformed file surfaces as MalformedDocumentError."""
        path = write_config("{broken")
        monkeypatch.setenv("VCAP_SERVICES", json.dumps({}))
        with pytest.raises(MalformedDocumentError):
            bootstrap(path)


class TestMain:
    """Tests for main entry point."""

    def test_exits_on_config_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Configuration errors terminate with status 1."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BACKMAN_CONFIG", "not json")

        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1

    def test_runs_without_exiting(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A valid environment bootstraps without exiting."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("VCAP_SERVICES", json.dumps({"redis": [{"name": "cache"}]}))

        assert main() is None

    def test_exits_on_oversized_duration(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """An out-of-range timeout is reported as a configuration error."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BACKMAN_CONFIG", '{"services": {"db1": {"timeout": "3000000h"}}}')
        monkeypatch.setenv("VCAP_SERVICES", json.dumps({}))

        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
