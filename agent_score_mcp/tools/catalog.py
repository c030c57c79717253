"""Tool catalog: declarations, validation and response envelopes.

A ToolDefinition is declarative: an input model, a function mapping
validated input to one RequestDescriptor, and an optional render step for
the success payload. ToolCatalog.call() validates, runs the request
through the executor exactly once and wraps the outcome in a ToolResponse.
"""

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from agent_score_mcp.client.config import ClientConfig
from agent_score_mcp.client.errors import format_error
from agent_score_mcp.client.executor import RequestExecutor
from agent_score_mcp.client.models import Failure, RequestDescriptor
from agent_score_mcp.observability.logging import get_logger

logger = get_logger(__name__)

RequestBuilder = Callable[[Any], RequestDescriptor]
PayloadRenderer = Callable[[Any, Any, ClientConfig], Any]


class ToolHints(BaseModel):
    """Behavioral hints advertised to the MCP host."""

    read_only: bool = True
    destructive: bool = False
    idempotent: bool = True
    open_world: bool = True


@dataclass(frozen=True)
class ToolDefinition:
    """Declaration of one tool, wrapping one upstream REST operation."""

    name: str
    title: str
    description: str
    input_model: type[BaseModel]
    build_request: RequestBuilder
    hints: ToolHints = field(default_factory=ToolHints)
    render: PayloadRenderer | None = None

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool arguments."""
        return self.input_model.model_json_schema()


class TextContent(BaseModel):
    """A text item in a tool response."""

    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Envelope returned for every tool call."""

    content: list[TextContent] = Field(default_factory=list)
    is_error: bool = False

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content)


def ok(text: str) -> ToolResponse:
    """Success envelope holding one text item."""
    return ToolResponse(content=[TextContent(text=text)])


def err(error: object) -> ToolResponse:
    """Error envelope holding the formatted message."""
    return ToolResponse(content=[TextContent(text=format_error(error))], is_error=True)


def format_validation_error(tool_name: str, exc: ValidationError) -> str:
    """Render pydantic errors as one line per offending field."""
    details = []
    for error in exc.errors():
        field_name = ".".join(str(loc) for loc in error["loc"]) or "arguments"
        cause = error.get("ctx", {}).get("error")
        details.append(f"{field_name}: {cause if cause else error['msg']}")
    return f"Invalid arguments for {tool_name}: " + "; ".join(details)


class ToolCatalog:
    """Registry of tools bound to one request executor."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor
        self._tools: dict[str, ToolDefinition] = {}

    def register(self, tool: ToolDefinition) -> None:
        """Add a tool. Names must be unique."""
        if tool.name in self._tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        self._tools[tool.name] = tool

    def get(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def list_tools(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    async def call(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolResponse:
        """Validate arguments, execute the tool's request and wrap the outcome.

        Validation failures and unknown tools return an error envelope
        without touching the network.
        """
        tool = self._tools.get(name)
        if tool is None:
            logger.warning("tool_not_found", tool=name)
            return ToolResponse(
                content=[TextContent(text=f"Unknown tool: {name}")],
                is_error=True,
            )

        try:
            args = tool.input_model.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            logger.info("tool_validation_failed", tool=name, error_count=exc.error_count())
            return ToolResponse(
                content=[TextContent(text=format_validation_error(name, exc))],
                is_error=True,
            )

        logger.debug("tool_called", tool=name)

        try:
            descriptor = tool.build_request(args)
            outcome = await self._executor.execute(descriptor)
            if isinstance(outcome, Failure):
                return err(outcome)

            payload = outcome.payload
            if tool.render is not None:
                payload = tool.render(payload, args, self._executor.config_store.get_config())
            return ok(json.dumps(payload, indent=2, ensure_ascii=False))
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "tool_unexpected_error",
                tool=name,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return err(exc)
