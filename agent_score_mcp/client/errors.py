"""Failure classification.

Maps raw failure context (HTTP status, timeout, transport exception) into
the FailureKind taxonomy with one message format per kind. Every call site
goes through these functions so messages stay consistent.
"""

import httpx

from agent_score_mcp.client.models import ApiError, Failure, FailureKind

PAYMENT_REQUIRED_STATUS = 402


def payment_required(body_text: str) -> Failure:
    """Build the failure for an x402 payment-required response.

    The upstream uses 402 to ask the calling agent for a machine-payable
    fee. The body carries the payment instructions and is passed through
    verbatim so the agent can complete the payment and retry.
    """
    return Failure(
        kind=FailureKind.PAYMENT_REQUIRED,
        message=(
            "Payment required (HTTP 402). This is a paid endpoint that requires x402 payment. "
            "Your agent framework must handle the 402 response and provide payment. "
            f"Details: {body_text}"
        ),
        status_code=PAYMENT_REQUIRED_STATUS,
    )


def http_error(status_code: int, body_text: str) -> Failure:
    """Build the failure for any other non-2xx response."""
    return Failure(
        kind=FailureKind.HTTP_ERROR,
        message=f"API request failed with status {status_code}: {body_text}",
        status_code=status_code,
    )


def timed_out(timeout_ms: int) -> Failure:
    """Build the failure for a request that exceeded its timeout."""
    return Failure(
        kind=FailureKind.TIMEOUT,
        message=f"Request timed out after {timeout_ms}ms. Try again or increase timeout.",
        status_code=0,
    )


def network_error(exc: BaseException) -> Failure:
    """Build the failure for a transport-level error."""
    detail = str(exc) or type(exc).__name__
    return Failure(
        kind=FailureKind.NETWORK_ERROR,
        message=f"Network error: {detail}",
        status_code=0,
    )


def classify_status(status_code: int, body_text: str) -> Failure:
    """Classify a non-2xx HTTP response.

    Args:
        status_code: Response status (must not be 2xx)
        body_text: Response body read as text

    Returns:
        PAYMENT_REQUIRED for 402, HTTP_ERROR otherwise
    """
    if status_code == PAYMENT_REQUIRED_STATUS:
        return payment_required(body_text)
    return http_error(status_code, body_text)


def classify_exception(exc: BaseException, timeout_ms: int) -> Failure:
    """Classify an exception raised while no response was available.

    Both the executor's own wall-clock bound (TimeoutError) and httpx's
    per-phase timeouts count as timeouts. Anything else is a network error.
    """
    if isinstance(exc, ApiError):
        return exc.to_failure()
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)):
        return timed_out(timeout_ms)
    return network_error(exc)


def format_error(error: object) -> str:
    """Render any error as the single message string shown to the agent."""
    if isinstance(error, (Failure, ApiError)):
        return error.message
    return f"Unexpected error: {error}"
