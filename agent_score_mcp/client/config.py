"""Request executor configuration.

The store is constructed once at process start and injected into the
executor. Overrides replace the whole (frozen) config object, so a reader
always sees either the previous or the next configuration, never a mix.
"""

import os
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

DEFAULT_BASE_URL = "https://djd-agent-score.fly.dev"
DEFAULT_TIMEOUT_MS = 10_000


def _default_base_url() -> str:
    return os.environ.get("DJD_BASE_URL") or DEFAULT_BASE_URL


class ClientConfig(BaseModel):
    """Effective base endpoint and timeout for upstream calls."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = Field(
        default_factory=_default_base_url,
        description="Absolute URL of the upstream scoring API",
    )
    timeout_ms: PositiveInt = Field(
        default=DEFAULT_TIMEOUT_MS,
        description="Wall-clock bound for one request, in milliseconds",
    )

    @field_validator("base_url")
    @classmethod
    def _require_absolute_url(cls, value: str) -> str:
        url = httpx.URL(value)
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"base_url must be an absolute http(s) URL, got {value!r}")
        return value


class ConfigStore:
    """Holds the current ClientConfig.

    Mutated only through set_config(); get_config() hands out copies.
    """

    def __init__(self, config: ClientConfig | None = None) -> None:
        self._config = config or ClientConfig()

    def set_config(
        self,
        overrides: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> ClientConfig:
        """Merge overrides over the current configuration.

        Fields that are not provided (or provided as None) keep their
        current value. Invalid overrides raise pydantic.ValidationError and
        leave the current configuration untouched.

        Args:
            overrides: Mapping of field name to new value
            **kwargs: Field overrides, applied after ``overrides``

        Returns:
            The new effective configuration
        """
        provided = {
            key: value
            for key, value in {**(overrides or {}), **kwargs}.items()
            if value is not None
        }
        merged = {**self._config.model_dump(), **provided}
        self._config = ClientConfig.model_validate(merged)
        return self._config.model_copy()

    def get_config(self) -> ClientConfig:
        """Return a copy of the current configuration."""
        return self._config.model_copy()
