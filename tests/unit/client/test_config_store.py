"""Unit tests for ClientConfig and ConfigStore."""

import pytest
from pydantic import ValidationError

from agent_score_mcp.client.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    ClientConfig,
    ConfigStore,
)


class TestClientConfig:
    """Tests for ClientConfig model."""

    def test_defaults(self) -> None:
        """Defaults to the public API and a 10 second timeout."""
        config = ClientConfig()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout_ms == 10_000

    def test_base_url_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """DJD_BASE_URL overrides the fallback base URL."""
        monkeypatch.setenv("DJD_BASE_URL", "https://staging.example")
        assert ClientConfig().base_url == "https://staging.example"

    def test_rejects_relative_base_url(self) -> None:
        """base_url must be absolute."""
        with pytest.raises(ValidationError):
            ClientConfig(base_url="/v1")

    def test_rejects_non_http_scheme(self) -> None:
        """base_url must use http or https."""
        with pytest.raises(ValidationError):
            ClientConfig(base_url="ftp://api.example")

    @pytest.mark.parametrize("timeout_ms", [0, -5])
    def test_rejects_non_positive_timeout(self, timeout_ms: int) -> None:
        """timeout_ms must be positive."""
        with pytest.raises(ValidationError):
            ClientConfig(timeout_ms=timeout_ms)

    def test_is_frozen(self) -> None:
        """Config objects cannot be mutated in place."""
        config = ClientConfig()
        with pytest.raises(ValidationError):
            config.timeout_ms = 1  # type: ignore[misc]


class TestConfigStore:
    """Tests for ConfigStore."""

    def test_default_store(self) -> None:
        """A store built without arguments uses default config."""
        store = ConfigStore()
        assert store.get_config().timeout_ms == DEFAULT_TIMEOUT_MS

    def test_set_timeout_preserves_base_url(self) -> None:
        """Overriding timeout keeps the previous base URL."""
        store = ConfigStore(ClientConfig(base_url="https://api.example", timeout_ms=50))

        store.set_config(timeout_ms=5000)
        config = store.get_config()

        assert config.base_url == "https://api.example"
        assert config.timeout_ms == 5000

    def test_set_config_accepts_mapping(self) -> None:
        """Overrides can be passed as a mapping."""
        store = ConfigStore()
        store.set_config({"base_url": "http://localhost:8080"})
        assert store.get_config().base_url == "http://localhost:8080"

    def test_set_config_returns_new_config(self) -> None:
        """set_config returns the effective configuration."""
        store = ConfigStore()
        result = store.set_config(timeout_ms=250)
        assert result.timeout_ms == 250

    def test_none_values_are_not_overrides(self) -> None:
        """None means 'not provided'."""
        store = ConfigStore(ClientConfig(base_url="https://api.example", timeout_ms=50))
        store.set_config(base_url=None, timeout_ms=75)
        assert store.get_config().base_url == "https://api.example"
        assert store.get_config().timeout_ms == 75

    def test_invalid_override_leaves_config_untouched(self) -> None:
        """A rejected override does not partially apply."""
        store = ConfigStore(ClientConfig(base_url="https://api.example", timeout_ms=50))

        with pytest.raises(ValidationError):
            store.set_config(base_url="https://other.example", timeout_ms=-1)

        config = store.get_config()
        assert config.base_url == "https://api.example"
        assert config.timeout_ms == 50

    def test_unknown_field_rejected(self) -> None:
        """Only known fields can be overridden."""
        store = ConfigStore()
        with pytest.raises(ValidationError):
            store.set_config(retries=3)

    def test_get_config_returns_copy(self) -> None:
        """Returned config is not the stored instance."""
        store = ConfigStore()
        first = store.get_config()
        second = store.get_config()
        assert first == second
        assert first is not second

    def test_earlier_snapshot_unaffected_by_override(self) -> None:
        """A snapshot taken before an override keeps its values."""
        store = ConfigStore(ClientConfig(base_url="https://api.example", timeout_ms=50))
        snapshot = store.get_config()

        store.set_config(timeout_ms=9000)

        assert snapshot.timeout_ms == 50
        assert store.get_config().timeout_ms == 9000
