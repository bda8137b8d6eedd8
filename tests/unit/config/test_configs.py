"""
Unit tests for discovery configuration.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from servicebinding.config.configs import DiscoveryConfig
from servicebinding.errors.errors import ConfigurationError


class TestDiscoveryConfig:
    def test_defaults(self) -> None:
        config = DiscoveryConfig()
        assert config.root is None
        assert config.cache is False

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            DiscoveryConfig(root="/bindings", watch=True)

    def test_is_frozen(self) -> None:
        config = DiscoveryConfig(root="/bindings")
        with pytest.raises(ValidationError):
            config.cache = True  # type: ignore[misc]


class TestFromEnv:
    def test_empty_environment(self) -> None:
        config = DiscoveryConfig.from_env({})
        assert config.root is None
        assert config.cache is False

    def test_reads_root(self) -> None:
        config = DiscoveryConfig.from_env({"SERVICE_BINDING_ROOT": "/bindings"})
        assert config.root == Path("/bindings")

    def test_empty_root_is_unset(self) -> None:
        assert DiscoveryConfig.from_env({"SERVICE_BINDING_ROOT": ""}).root is None

    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", "yes", "on", " On "])
    def test_cache_enabled(self, raw: str) -> None:
        assert DiscoveryConfig.from_env({"SERVICE_BINDING_CACHE": raw}).cache is True

    @pytest.mark.parametrize("raw", ["", "0", "false", "No", "off"])
    def test_cache_disabled(self, raw: str) -> None:
        assert DiscoveryConfig.from_env({"SERVICE_BINDING_CACHE": raw}).cache is False

    def test_invalid_cache_value(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            DiscoveryConfig.from_env({"SERVICE_BINDING_CACHE": "sometimes"})
        assert "SERVICE_BINDING_CACHE must be a boolean" in str(exc_info.value)
        assert exc_info.value.field == "cache"

    def test_defaults_to_process_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("SERVICE_BINDING_ROOT", "/bindings")
        assert DiscoveryConfig.from_env().root == Path("/bindings")
