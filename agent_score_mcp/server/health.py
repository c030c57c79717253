"""Health check endpoint for the HTTP transport."""

from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from agent_score_mcp import __version__
from agent_score_mcp.observability.logging import get_logger
from agent_score_mcp.server.protocol import SERVER_NAME

logger = get_logger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Liveness payload of this server (not of the upstream API)."""

    status: Literal["ok"] = "ok"
    server: str = SERVER_NAME
    version: str = __version__


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the MCP server process is up."""
    logger.debug("health_check_request")
    return HealthResponse()
