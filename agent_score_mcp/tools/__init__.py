"""MCP tool catalog for the DJD Agent Score API."""

from agent_score_mcp.client.executor import RequestExecutor
from agent_score_mcp.tools.catalog import (
    TextContent,
    ToolCatalog,
    ToolDefinition,
    ToolHints,
    ToolResponse,
)
from agent_score_mcp.tools.definitions import ALL_TOOLS, register_tools


def build_catalog(executor: RequestExecutor) -> ToolCatalog:
    """Create a catalog with all tools bound to the executor."""
    return register_tools(ToolCatalog(executor))


__all__ = [
    "ALL_TOOLS",
    "TextContent",
    "ToolCatalog",
    "ToolDefinition",
    "ToolHints",
    "ToolResponse",
    "build_catalog",
    "register_tools",
]
