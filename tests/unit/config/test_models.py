"""Unit tests for configuration Pydantic models."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from backman.config.models import (
    BackmanConfig,
    NotificationsConfig,
    RetentionConfig,
    S3Config,
    ServiceConfig,
)


class TestBackmanConfig:
    """Tests for BackmanConfig model."""

    def test_defaults_are_zero_values(self) -> None:
        """Unset fields hold zero values until defaults are applied."""
        config = BackmanConfig()
        assert config.log_level == ""
        assert config.logging_timestamp is False
        assert config.disable_web is False
        assert config.s3 == S3Config()
        assert config.notifications == NotificationsConfig()
        assert config.services == {}

    def test_frozen(self) -> None:
        """Models reject assignment."""
        config = BackmanConfig()
        with pytest.raises(ValidationError):
            config.log_level = "debug"  # type: ignore[misc]

    def test_json_dump_encodes_durations(self) -> None:
        """Dumped configuration carries human-readable durations."""
        config = BackmanConfig.model_validate({"services": {"db1": {"timeout": "90m"}}})
        dumped = config.model_dump(mode="json")
        assert dumped["services"]["db1"]["timeout"] == "1h30m"

    def test_dump_validates_back(self) -> None:
        """A dumped configuration validates to an equal model."""
        config = BackmanConfig.model_validate({
            "username": "admin",
            "services": {"db1": {"timeout": "2h", "backup_options": ["--x"]}},
        })
        assert BackmanConfig.model_validate(config.model_dump(mode="json")) == config


class TestServiceConfig:
    """Tests for ServiceConfig model."""

    def test_defaults(self) -> None:
        """Every field starts unset."""
        config = ServiceConfig()
        assert config.schedule == ""
        assert config.timeout == timedelta(0)
        assert config.retention == RetentionConfig(days=0, files=0)
        assert config.backup_options == ()
        assert config.restore_options == ()

    def test_lists_become_tuples(self) -> None:
        """Option lists are stored immutably."""
        config = ServiceConfig.model_validate({"backup_options": ["--a", "--b"]})
        assert config.backup_options == ("--a", "--b")

    def test_retention_requires_integers(self) -> None:
        """Retention values must be integers."""
        with pytest.raises(ValidationError):
            ServiceConfig.model_validate({"retention": {"days": "many"}})
