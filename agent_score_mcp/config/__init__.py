"""Configuration loading for the Agent Score MCP server.

Configuration is loaded from optional TOML files with environment variable
overrides.

Usage:
    from agent_score_mcp.config import get_settings

    settings = get_settings()
    client_config = settings.client_config()
"""

from functools import lru_cache

from agent_score_mcp.config.loader import load_config
from agent_score_mcp.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{DJD_ENV}.toml (environment overrides)
    4. DJD_* environment variables (runtime overrides)

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.

    Returns:
        Settings instance with all configuration loaded and validated
    """
    config_dict = load_config()
    set_toml_config(config_dict)

    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration.

    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
