"""MCP server and transports."""

from agent_score_mcp.server.http import create_http_app
from agent_score_mcp.server.protocol import (
    SERVER_NAME,
    ToolCallError,
    call_catalog_tool,
    create_sandbox_server,
    create_server,
    to_mcp_tool,
)

__all__ = [
    "SERVER_NAME",
    "ToolCallError",
    "call_catalog_tool",
    "create_http_app",
    "create_sandbox_server",
    "create_server",
    "to_mcp_tool",
]
