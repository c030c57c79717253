"""DJD Agent Score MCP server.

Exposes the DJD Agent Score REST API as MCP tools so any MCP-compatible
agent can call scoring, fraud and registration endpoints.
"""

__version__ = "1.0.0"
