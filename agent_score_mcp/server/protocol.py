"""MCP server exposing the tool catalog.

Binds a ToolCatalog to the low-level MCP server: tools/list advertises each
ToolDefinition, tools/call delegates to ToolCatalog.call(). Error envelopes
are raised as ToolCallError, which the MCP server turns into a result with
isError set and the message as text content.
"""

from typing import Any

from mcp import types
from mcp.server.lowlevel import Server

from agent_score_mcp import __version__
from agent_score_mcp.client.config import ClientConfig, ConfigStore
from agent_score_mcp.client.executor import RequestExecutor
from agent_score_mcp.observability.logging import get_logger
from agent_score_mcp.tools import ToolCatalog, ToolDefinition, build_catalog

logger = get_logger(__name__)

SERVER_NAME = "djd-agent-score-mcp-server"


class ToolCallError(Exception):
    """A tool call finished with an error envelope."""


def to_mcp_tool(tool: ToolDefinition) -> types.Tool:
    """Describe a catalog tool in MCP terms."""
    return types.Tool(
        name=tool.name,
        title=tool.title,
        description=tool.description,
        inputSchema=tool.input_schema(),
        annotations=types.ToolAnnotations(
            title=tool.title,
            readOnlyHint=tool.hints.read_only,
            destructiveHint=tool.hints.destructive,
            idempotentHint=tool.hints.idempotent,
            openWorldHint=tool.hints.open_world,
        ),
    )


async def call_catalog_tool(
    catalog: ToolCatalog,
    name: str,
    arguments: dict[str, Any] | None,
) -> list[types.TextContent]:
    """Run a catalog tool and translate its envelope for the MCP server.

    Raises:
        ToolCallError: If the envelope is an error
    """
    response = await catalog.call(name, arguments)
    if response.is_error:
        raise ToolCallError(response.text)
    return [types.TextContent(type="text", text=item.text) for item in response.content]


def create_server(catalog: ToolCatalog) -> Server:
    """Create an MCP server with every catalog tool registered.

    Args:
        catalog: Tools bound to a request executor

    Returns:
        Low-level MCP server ready to run on any transport
    """
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [to_mcp_tool(tool) for tool in catalog.list_tools()]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        return await call_catalog_tool(catalog, name, arguments)

    logger.debug("mcp_server_created", tool_count=len(catalog.list_tools()))
    return server


def create_sandbox_server(config: ClientConfig | None = None) -> Server:
    """Create a standalone server for tool scanning.

    Registry scanners only list tools, so the executor is never started.
    """
    executor = RequestExecutor(ConfigStore(config))
    return create_server(build_catalog(executor))
