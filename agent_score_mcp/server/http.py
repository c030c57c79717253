"""Streamable HTTP transport.

Serves the MCP server on a FastAPI application: the MCP endpoint is handled
by a stateless StreamableHTTPSessionManager returning plain JSON responses,
next to a /health route.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from mcp.server.lowlevel import Server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.types import Receive, Scope, Send

from agent_score_mcp import __version__
from agent_score_mcp.client.executor import RequestExecutor
from agent_score_mcp.observability.logging import get_logger
from agent_score_mcp.server.health import router as health_router

logger = get_logger(__name__)


class StreamableHTTPEndpoint:
    """ASGI app forwarding requests to the session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager) -> None:
        self._session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self._session_manager.handle_request(scope, receive, send)


def create_http_app(
    server: Server,
    executor: RequestExecutor,
    mcp_path: str = "/mcp",
) -> FastAPI:
    """Create the FastAPI application for the HTTP transport.

    Args:
        server: MCP server with tools registered
        executor: Request executor, closed on shutdown
        mcp_path: Route serving Streamable HTTP

    Returns:
        Configured FastAPI application
    """
    session_manager = StreamableHTTPSessionManager(
        app=server,
        event_store=None,
        json_response=True,
        stateless=True,
    )

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        async with session_manager.run():
            logger.info("http_transport_started", mcp_path=mcp_path)
            try:
                yield
            finally:
                await executor.aclose()
                logger.info("http_transport_stopped")

    app = FastAPI(
        title="DJD Agent Score MCP Server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    app.add_route(
        mcp_path,
        StreamableHTTPEndpoint(session_manager),
        methods=["GET", "POST", "DELETE"],
        include_in_schema=False,
    )
    app.include_router(health_router)

    return app
