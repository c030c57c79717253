"""HTTP client layer for the DJD Agent Score REST API.

Usage:
    from agent_score_mcp.client import ConfigStore, RequestDescriptor, RequestExecutor

    store = ConfigStore()
    store.set_config(timeout_ms=5000)

    async with RequestExecutor(store) as executor:
        outcome = await executor.execute(
            RequestDescriptor(path="/v1/score/basic", params={"wallet": wallet})
        )
        match outcome:
            case Success(payload=payload):
                ...
            case Failure(kind=FailureKind.PAYMENT_REQUIRED, message=message):
                ...
"""

from agent_score_mcp.client.config import ClientConfig, ConfigStore
from agent_score_mcp.client.errors import classify_exception, classify_status, format_error
from agent_score_mcp.client.executor import RequestExecutor, build_url
from agent_score_mcp.client.models import (
    ApiError,
    Failure,
    FailureKind,
    HttpMethod,
    Outcome,
    RequestDescriptor,
    Success,
)

__all__ = [
    "ApiError",
    "ClientConfig",
    "ConfigStore",
    "Failure",
    "FailureKind",
    "HttpMethod",
    "Outcome",
    "RequestDescriptor",
    "RequestExecutor",
    "Success",
    "build_url",
    "classify_exception",
    "classify_status",
    "format_error",
]
