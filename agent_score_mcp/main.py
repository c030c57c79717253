"""Process entrypoint.

Transports:
  - stdio (default): for desktop clients and local agents
  - http: Streamable HTTP for remote agents, with a /health route

Legacy TRANSPORT and PORT environment variables are honored as defaults
for the matching flags, ahead of the DJD_* settings.
"""

import argparse
import asyncio
import os
import sys

import uvicorn
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from agent_score_mcp import __version__
from agent_score_mcp.client.config import ConfigStore
from agent_score_mcp.client.executor import RequestExecutor
from agent_score_mcp.config import Settings, get_settings
from agent_score_mcp.observability.logging import get_logger, setup_logging
from agent_score_mcp.server.http import create_http_app
from agent_score_mcp.server.protocol import SERVER_NAME, create_server
from agent_score_mcp.tools import build_catalog

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="agent-score-mcp",
        description="Serve the DJD Agent Score API as MCP tools",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default=os.environ.get("TRANSPORT"),
        help="MCP transport (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ["PORT"]) if os.environ.get("PORT") else None,
        help="Port for the HTTP transport",
    )
    parser.add_argument("--host", default=None, help="Bind host for the HTTP transport")
    parser.add_argument("--base-url", default=None, help="Base URL of the scoring API")
    parser.add_argument("--timeout-ms", type=int, default=None, help="Request timeout in ms")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace, settings: Settings | None = None) -> Settings:
    """Apply command-line overrides on top of loaded settings."""
    settings = settings or get_settings()
    overrides = {
        "transport": args.transport,
        "port": args.port,
        "host": args.host,
        "base_url": args.base_url,
        "timeout_ms": args.timeout_ms,
    }
    update = {key: value for key, value in overrides.items() if value is not None}
    if not update:
        return settings
    return Settings.model_validate({**settings.model_dump(), **update})


async def run_stdio(server: Server, executor: RequestExecutor, settings: Settings) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    async with executor:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("mcp_server_running", transport="stdio", base_url=settings.base_url)
            await server.run(read_stream, write_stream, server.create_initialization_options())


def run_http(server: Server, executor: RequestExecutor, settings: Settings) -> None:
    """Serve MCP over Streamable HTTP with uvicorn."""
    app = create_http_app(server, executor, mcp_path=settings.mcp_path)
    logger.info(
        "mcp_server_running",
        transport="http",
        url=f"http://{settings.host}:{settings.port}{settings.mcp_path}",
        base_url=settings.base_url,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


def main(argv: list[str] | None = None) -> int:
    """Run the MCP server. Returns the process exit code."""
    settings = resolve_settings(parse_args(argv))

    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_sensitive=log_config.redact_sensitive,
    )

    executor = RequestExecutor(ConfigStore(settings.client_config()))
    server = create_server(build_catalog(executor))
    logger.info("mcp_server_starting", server=SERVER_NAME, version=__version__)

    try:
        if settings.transport == "http":
            run_http(server, executor, settings)
        else:
            asyncio.run(run_stdio(server, executor, settings))
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        logger.error("server_error", error=str(e), error_type=type(e).__name__)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
