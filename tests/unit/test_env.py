"""Unit tests for environment variable helpers."""

import pytest

from backman.config.errors import MissingRequiredEnvError
from backman.env import get_env, must_get_env


class TestGetEnv:
    """Tests for get_env function."""

    def test_returns_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Returns the variable when set."""
        monkeypatch.setenv("BACKMAN_TEST_VAR", "value")
        assert get_env("BACKMAN_TEST_VAR", "fallback") == "value"

    def test_returns_default_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Returns the default when unset."""
        monkeypatch.delenv("BACKMAN_TEST_VAR", raising=False)
        assert get_env("BACKMAN_TEST_VAR", "fallback") == "fallback"

    def test_returns_default_when_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Empty values count as unset."""
        monkeypatch.setenv("BACKMAN_TEST_VAR", "")
        assert get_env("BACKMAN_TEST_VAR", "fallback") == "fallback"


class TestMustGetEnv:
    """Tests for must_get_env function."""

    def test_returns_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Returns the variable when set."""
        monkeypatch.setenv("BACKMAN_TEST_VAR", "value")
        assert must_get_env("BACKMAN_TEST_VAR") == "value"

    def test_missing_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Missing variables raise MissingRequiredEnvError."""
        monkeypatch.delenv("BACKMAN_TEST_VAR", raising=False)
        with pytest.raises(MissingRequiredEnvError, match="BACKMAN_TEST_VAR") as exc_info:
            must_get_env("BACKMAN_TEST_VAR")
        assert exc_info.value.key == "BACKMAN_TEST_VAR"
