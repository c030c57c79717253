"""Request and outcome models for the request executor."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HttpMethod(str, Enum):
    """HTTP methods used by the upstream API."""

    GET = "GET"
    POST = "POST"


class RequestDescriptor(BaseModel):
    """One outbound call, prior to execution."""

    method: HttpMethod = HttpMethod.GET
    path: str = Field(..., min_length=1, description="Path joined onto the base URL")
    params: dict[str, str] | None = Field(default=None, description="Query parameters")
    body: Any | None = Field(default=None, description="JSON-serializable request body")


class FailureKind(str, Enum):
    """Closed taxonomy of request failures."""

    PAYMENT_REQUIRED = "payment_required"
    HTTP_ERROR = "http_error"
    TIMEOUT = "timeout"
    NETWORK_ERROR = "network_error"


class Success(BaseModel):
    """Successful response: parsed JSON, or raw text for non-JSON bodies."""

    model_config = ConfigDict(frozen=True)

    payload: Any

    @property
    def ok(self) -> bool:
        return True


class Failure(BaseModel):
    """Classified failure.

    status_code is the upstream HTTP status, or 0 when no response was
    received (timeout, transport error).
    """

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    message: str
    status_code: int = Field(default=0, ge=0)

    @property
    def ok(self) -> bool:
        return False

    def to_exception(self) -> "ApiError":
        """Convert to an ApiError for callers using the exception idiom."""
        return ApiError(self.message, self.status_code, self.kind)


Outcome = Success | Failure


class ApiError(Exception):
    """Raised by RequestExecutor.request() for a classified failure."""

    def __init__(self, message: str, status_code: int, kind: FailureKind) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.kind = kind

    def to_failure(self) -> Failure:
        return Failure(kind=self.kind, message=self.message, status_code=self.status_code)
