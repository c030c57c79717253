"""Input contracts for the MCP tools.

Each tool validates its arguments against one of these models before any
request is made.
"""

import re
from typing import Annotated

from pydantic import AfterValidator, AnyUrl, BaseModel, Field, TypeAdapter

WALLET_PATTERN = r"^0x[a-fA-F0-9]{40}$"
TX_HASH_PATTERN = r"^0x[a-fA-F0-9]{64}$"

_wallet_re = re.compile(WALLET_PATTERN)
_tx_hash_re = re.compile(TX_HASH_PATTERN)
_url_adapter = TypeAdapter(AnyUrl)


def _check_wallet(value: str) -> str:
    if not _wallet_re.fullmatch(value):
        raise ValueError("Must be a valid Ethereum address (0x + 40 hex chars)")
    return value


def _check_tx_hash(value: str) -> str:
    if not _tx_hash_re.fullmatch(value):
        raise ValueError("Must be a valid tx hash")
    return value


def _check_url(value: str) -> str:
    try:
        _url_adapter.validate_python(value)
    except ValueError as exc:
        raise ValueError("Must be a valid URL") from exc
    return value


Wallet = Annotated[
    str,
    AfterValidator(_check_wallet),
    Field(
        description="Ethereum wallet address (e.g. 0xAbC...123)",
        json_schema_extra={"pattern": WALLET_PATTERN},
    ),
]

TxHash = Annotated[
    str,
    AfterValidator(_check_tx_hash),
    Field(json_schema_extra={"pattern": TX_HASH_PATTERN}),
]


class NoInput(BaseModel):
    """Tools that take no arguments."""


class WalletInput(BaseModel):
    """Tools keyed by a single wallet address."""

    wallet: Wallet


class ReportFraudInput(BaseModel):
    """Arguments for report_fraud."""

    wallet: Wallet
    tx_hashes: list[TxHash] = Field(
        ...,
        min_length=1,
        description="Transaction hashes that demonstrate the fraudulent behavior",
    )
    evidence: str = Field(
        ...,
        min_length=10,
        max_length=5000,
        description="Text description of the fraudulent behavior",
    )


class RegisterAgentInput(BaseModel):
    """Arguments for register_agent."""

    wallet: Wallet
    name: str = Field(..., min_length=1, max_length=100, description="Display name for the agent")
    description: str = Field(
        ..., min_length=1, max_length=1000, description="What this agent does"
    )
    github_url: Annotated[str, AfterValidator(_check_url)] | None = Field(
        default=None,
        description="GitHub repository URL for the agent (optional)",
        json_schema_extra={"format": "uri"},
    )
