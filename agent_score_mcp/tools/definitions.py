"""The DJD Agent Score tools.

One ToolDefinition per REST endpoint. Descriptions are read by the calling
model to decide when to use each tool, so they spell out pricing, inputs
and the shape of the result.
"""

from typing import Any

from agent_score_mcp.client.config import ClientConfig
from agent_score_mcp.client.executor import build_url
from agent_score_mcp.client.models import HttpMethod, RequestDescriptor
from agent_score_mcp.tools.catalog import ToolCatalog, ToolDefinition, ToolHints
from agent_score_mcp.tools.schemas import (
    NoInput,
    RegisterAgentInput,
    ReportFraudInput,
    WalletInput,
)

READ_ONLY = ToolHints(read_only=True, destructive=False, idempotent=True, open_world=True)
MUTATING = ToolHints(read_only=False, destructive=False, idempotent=False, open_world=True)
MUTATING_IDEMPOTENT = ToolHints(
    read_only=False, destructive=False, idempotent=True, open_world=True
)


def _wallet_query(path: str):
    def build(args: WalletInput) -> RequestDescriptor:
        return RequestDescriptor(path=path, params={"wallet": args.wallet})

    return build


def _badge_path(wallet: str) -> str:
    return f"/v1/badge/{wallet}.svg"


def _report_fraud_request(args: ReportFraudInput) -> RequestDescriptor:
    return RequestDescriptor(
        method=HttpMethod.POST,
        path="/v1/report",
        body={"wallet": args.wallet, "txHashes": args.tx_hashes, "evidence": args.evidence},
    )


def _register_agent_request(args: RegisterAgentInput) -> RequestDescriptor:
    body: dict[str, Any] = {
        "wallet": args.wallet,
        "name": args.name,
        "description": args.description,
    }
    if args.github_url:
        body["githubUrl"] = args.github_url
    return RequestDescriptor(method=HttpMethod.POST, path="/v1/agent/register", body=body)


def _render_badge(svg: Any, args: WalletInput, config: ClientConfig) -> dict[str, Any]:
    return {
        "badgeUrl": str(build_url(config.base_url, _badge_path(args.wallet))),
        "svg": svg,
    }


SCORE_BASIC = ToolDefinition(
    name="score_basic",
    title="Basic Agent Score",
    description="""Get the basic reputation score for an AI agent wallet on Base.

Returns a numeric score (0-1000), tier (e.g. "Trusted", "Neutral", "Risky"),
confidence level, recommendation text, and model version.

This is a FREE endpoint — no x402 payment required.

Args:
  - wallet (string): Ethereum wallet address (0x + 40 hex chars)

Returns:
  { score, tier, confidence, recommendation, modelVersion }

Examples:
  - "What's the reputation of 0xABC...?" -> score_basic with that wallet
  - "Is this agent wallet trustworthy?" -> score_basic to get tier/recommendation""",
    input_model=WalletInput,
    build_request=_wallet_query("/v1/score/basic"),
    hints=READ_ONLY,
)

SCORE_FULL = ToolDefinition(
    name="score_full",
    title="Full Agent Score",
    description="""Get the full reputation score with dimension breakdown for an AI agent wallet.

Returns everything from basic score PLUS:
  - dimensions: { reliability, viability, identity, capability }
  - integrityFlags: flags about suspicious activity
  - dataQuality: metrics about data completeness

PAID endpoint — requires x402 payment ($0.10 USD). If your agent framework
supports x402, the 402 response will contain payment instructions. Complete
the payment and retry the request.

Args:
  - wallet (string): Ethereum wallet address (0x + 40 hex chars)

Returns:
  { score, tier, confidence, recommendation, modelVersion,
    dimensions, integrityFlags, dataQuality }""",
    input_model=WalletInput,
    build_request=_wallet_query("/v1/score/full"),
    hints=READ_ONLY,
)

SCORE_REFRESH = ToolDefinition(
    name="score_refresh",
    title="Refresh Agent Score",
    description="""Force a re-score of an AI agent wallet using the latest on-chain data.

Use this when you suspect the cached score is stale or after known
on-chain activity that should change the score.

PAID endpoint — requires x402 payment ($0.25 USD).

Args:
  - wallet (string): Ethereum wallet address (0x + 40 hex chars)

Returns:
  { score, tier, confidence, recommendation, modelVersion, refreshedAt }""",
    input_model=WalletInput,
    build_request=_wallet_query("/v1/score/refresh"),
    hints=MUTATING,
)

REPORT_FRAUD = ToolDefinition(
    name="report_fraud",
    title="Report Fraud",
    description="""Submit a fraud report for a wallet with supporting transaction hashes and evidence.

PAID endpoint — requires x402 payment ($0.02 USD).

Args:
  - wallet (string): Ethereum wallet address of the suspected fraudster
  - tx_hashes (string[]): Array of transaction hashes as evidence
  - evidence (string): Text description of the fraudulent behavior

Returns:
  { success, reportId, message }""",
    input_model=ReportFraudInput,
    build_request=_report_fraud_request,
    hints=MUTATING,
)

CHECK_BLACKLIST = ToolDefinition(
    name="check_blacklist",
    title="Check Fraud Blacklist",
    description="""Check if a wallet has any fraud reports filed against it.

PAID endpoint — requires x402 payment ($0.05 USD).

Args:
  - wallet (string): Ethereum wallet address to check

Returns:
  { wallet, reported, reportCount, reports[] }""",
    input_model=WalletInput,
    build_request=_wallet_query("/v1/data/fraud/blacklist"),
    hints=READ_ONLY,
)

GET_BADGE = ToolDefinition(
    name="get_badge",
    title="Get Score Badge",
    description="""Get the embeddable SVG badge URL for a wallet's reputation score.

Returns the badge endpoint URL and the raw SVG content. The URL can be
embedded in markdown, HTML, or any context that supports images.

This is a FREE endpoint.

Args:
  - wallet (string): Ethereum wallet address

Returns:
  { badgeUrl, svg }""",
    input_model=WalletInput,
    build_request=lambda args: RequestDescriptor(path=_badge_path(args.wallet)),
    hints=READ_ONLY,
    render=_render_badge,
)

GET_LEADERBOARD = ToolDefinition(
    name="get_leaderboard",
    title="Get Leaderboard",
    description="""Get the leaderboard of top-scored AI agent wallets.

Returns a ranked list of wallets with their scores and tiers.

This is a FREE endpoint.

Returns:
  Array of { wallet, score, tier }""",
    input_model=NoInput,
    build_request=lambda _args: RequestDescriptor(path="/v1/leaderboard"),
    hints=READ_ONLY,
)

REGISTER_AGENT = ToolDefinition(
    name="register_agent",
    title="Register Agent",
    description="""Register an AI agent wallet with metadata (name, description, optional GitHub URL).

This is a FREE endpoint.

Args:
  - wallet (string): Ethereum wallet address to register
  - name (string): Display name for the agent
  - description (string): What this agent does
  - github_url (string, optional): GitHub repository URL

Returns:
  { success, message }""",
    input_model=RegisterAgentInput,
    build_request=_register_agent_request,
    hints=MUTATING_IDEMPOTENT,
)

HEALTH_CHECK = ToolDefinition(
    name="health_check",
    title="Health Check",
    description="""Check the DJD Agent Score API system status.

This is a FREE endpoint.

Returns:
  { status, version, uptime }""",
    input_model=NoInput,
    build_request=lambda _args: RequestDescriptor(path="/health"),
    hints=READ_ONLY,
)

ALL_TOOLS: tuple[ToolDefinition, ...] = (
    SCORE_BASIC,
    SCORE_FULL,
    SCORE_REFRESH,
    REPORT_FRAUD,
    CHECK_BLACKLIST,
    GET_BADGE,
    GET_LEADERBOARD,
    REGISTER_AGENT,
    HEALTH_CHECK,
)


def register_tools(catalog: ToolCatalog) -> ToolCatalog:
    """Register every DJD Agent Score tool on the catalog."""
    for tool in ALL_TOOLS:
        catalog.register(tool)
    return catalog
