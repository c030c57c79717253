"""Configuration section models."""

from agent_score_mcp.config.models.observability import (
    LoggingConfig,
    LogFormat,
    LogLevel,
    ObservabilityConfig,
)

__all__ = ["LoggingConfig", "LogFormat", "LogLevel", "ObservabilityConfig"]
