"""Root settings model for the Agent Score MCP server."""

from typing import Any, Literal

from pydantic import Field, PositiveInt
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from agent_score_mcp.client.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS, ClientConfig
from agent_score_mcp.config.models.observability import ObservabilityConfig

Transport = Literal["stdio", "http"]

# Module-level variable to store TOML config for settings source
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration to be used by Settings."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that reads from TOML configuration."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        """Get field value from TOML config."""
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        """Return the TOML config values."""
        return _toml_config.copy()


class Settings(BaseSettings):
    """Process configuration for the MCP server.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{DJD_ENV}.toml (environment overrides)
    4. DJD_* environment variables (runtime overrides)
    """

    model_config = SettingsConfigDict(
        env_prefix="DJD_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream API
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the DJD Agent Score REST API",
    )
    timeout_ms: PositiveInt = Field(
        default=DEFAULT_TIMEOUT_MS,
        description="Per-request timeout in milliseconds",
    )

    # Transport
    transport: Transport = Field(default="stdio", description="MCP transport to serve")
    host: str = Field(default="0.0.0.0", description="Bind host for the HTTP transport")
    port: int = Field(default=3000, ge=1, le=65535, description="Bind port for the HTTP transport")
    mcp_path: str = Field(default="/mcp", description="Route serving Streamable HTTP")

    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    def client_config(self) -> ClientConfig:
        """Build the request executor configuration from these settings."""
        return ClientConfig(base_url=self.base_url, timeout_ms=self.timeout_ms)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include TOML config.

        Priority order (highest to lowest):
        1. init_settings (constructor arguments)
        2. env_settings (DJD_* environment variables)
        3. toml_settings (config/*.toml files)
        4. (defaults from model)
        """
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
