"""Request executor for the DJD Agent Score REST API.

Turns a RequestDescriptor into one bounded HTTP call and returns a
Success or a classified Failure. The executor never retries and never
pays: a 402 is surfaced so the calling agent can handle it.
"""

import asyncio
import json
import time
from collections.abc import Mapping

import httpx

from agent_score_mcp.client.config import ClientConfig, ConfigStore
from agent_score_mcp.client.errors import classify_exception, classify_status
from agent_score_mcp.client.models import (
    ApiError,
    Failure,
    HttpMethod,
    Outcome,
    RequestDescriptor,
    Success,
)
from agent_score_mcp.observability.logging import get_logger

logger = get_logger(__name__)

JSON_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def build_url(base_url: str, path: str, params: Mapping[str, str] | None = None) -> httpx.URL:
    """Resolve path against base_url and set each param on the query string.

    Resolution follows RFC 3986, so an absolute path replaces any path
    component of the base URL.
    """
    url = httpx.URL(base_url).join(path)
    if params:
        url = url.copy_merge_params(dict(params))
    return url


class RequestExecutor:
    """Execute upstream requests under a wall-clock timeout.

    The underlying httpx.AsyncClient is created on first use and shared
    across calls; close it with aclose() or use the executor as an async
    context manager.
    """

    def __init__(
        self,
        config_store: ConfigStore,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            config_store: Source of base URL and timeout, read once per call
            client: Optional preconfigured HTTP client
            transport: Optional httpx transport for a lazily created client
        """
        self._config_store = config_store
        self._client = client
        self._transport = transport

    @property
    def config_store(self) -> ConfigStore:
        return self._config_store

    async def __aenter__(self) -> "RequestExecutor":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                transport=self._transport,
                follow_redirects=True,
            )
        return self._client

    async def execute(self, descriptor: RequestDescriptor) -> Outcome:
        """Run one request and classify its outcome.

        Args:
            descriptor: Method, path, query params and body of the call

        Returns:
            Success with parsed JSON (or raw text for non-JSON content),
            or Failure classified as payment-required, HTTP error, timeout
            or network error
        """
        config = self._config_store.get_config()
        log = logger.bind(method=descriptor.method.value, path=descriptor.path)

        log.debug("api_request_started", base_url=config.base_url, timeout_ms=config.timeout_ms)
        start_time = time.perf_counter()

        # An invalid path or an unserializable body is a NETWORK_ERROR too
        try:
            outcome = await asyncio.wait_for(
                self._send(descriptor, config),
                timeout=config.timeout_ms / 1000,
            )
        except (TimeoutError, httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError) as exc:
            outcome = classify_exception(exc, config.timeout_ms)

        elapsed_ms = (time.perf_counter() - start_time) * 1000

        if isinstance(outcome, Failure):
            log.warning(
                "api_request_failed",
                kind=outcome.kind.value,
                status_code=outcome.status_code,
                error=outcome.message,
                elapsed_ms=round(elapsed_ms, 1),
            )
        else:
            log.info("api_request_completed", elapsed_ms=round(elapsed_ms, 1))

        return outcome

    async def request(
        self,
        path: str,
        *,
        method: HttpMethod | str = HttpMethod.GET,
        params: Mapping[str, str] | None = None,
        body: object | None = None,
    ) -> object:
        """Run a request and return its payload, raising ApiError on failure."""
        outcome = await self.execute(
            RequestDescriptor(
                method=HttpMethod(method),
                path=path,
                params=dict(params) if params is not None else None,
                body=body,
            )
        )
        if isinstance(outcome, Failure):
            raise ApiError(outcome.message, outcome.status_code, outcome.kind)
        return outcome.payload

    async def _send(
        self,
        descriptor: RequestDescriptor,
        config: ClientConfig,
    ) -> Outcome:
        """Build the request, issue the call and branch on status and content type."""
        url = build_url(config.base_url, descriptor.path, descriptor.params)
        content = json.dumps(descriptor.body) if descriptor.body is not None else None
        client = await self._ensure_client()

        response = await client.request(
            descriptor.method.value,
            url,
            headers=JSON_HEADERS,
            content=content,
            timeout=config.timeout_ms / 1000,
        )

        if not response.is_success:
            return classify_status(response.status_code, response.text)

        # Some endpoints (badge SVG) return non-JSON
        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            return Success(payload=response.json())
        return Success(payload=response.text)
