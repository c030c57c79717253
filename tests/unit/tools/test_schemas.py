"""Unit tests for tool input contracts."""

import pytest
from pydantic import ValidationError

from agent_score_mcp.tools.schemas import (
    WALLET_PATTERN,
    NoInput,
    RegisterAgentInput,
    ReportFraudInput,
    WalletInput,
)

WALLET = "0xAAAAaaaaAAAAaaaaAAAAaaaaAAAAaaaa11111111"
TX_HASH = "0x" + "ab" * 32


class TestWalletInput:
    """Tests for the wallet address contract."""

    def test_accepts_mixed_case_address(self) -> None:
        """Checksummed (mixed case) addresses are valid."""
        assert WalletInput(wallet=WALLET).wallet == WALLET

    @pytest.mark.parametrize(
        "wallet",
        [
            "",
            "0x123",
            "AAAAaaaaAAAAaaaaAAAAaaaaAAAAaaaa1111111111",
            "0xZZZZaaaaAAAAaaaaAAAAaaaaAAAAaaaa11111111",
            WALLET + "1",
            WALLET + "\n",
        ],
    )
    def test_rejects_invalid_address(self, wallet: str) -> None:
        """Anything but 0x + 40 hex chars is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            WalletInput(wallet=wallet)
        assert "Must be a valid Ethereum address" in str(exc_info.value)

    def test_wallet_required(self) -> None:
        """wallet is mandatory."""
        with pytest.raises(ValidationError):
            WalletInput()  # type: ignore[call-arg]

    def test_schema_advertises_pattern(self) -> None:
        """The JSON schema carries the address pattern."""
        schema = WalletInput.model_json_schema()
        assert schema["properties"]["wallet"]["pattern"] == WALLET_PATTERN
        assert schema["required"] == ["wallet"]


class TestReportFraudInput:
    """Tests for report_fraud arguments."""

    def test_valid(self) -> None:
        """A full valid report passes."""
        report = ReportFraudInput(wallet=WALLET, tx_hashes=[TX_HASH], evidence="drained the pool")
        assert report.tx_hashes == [TX_HASH]

    def test_requires_at_least_one_hash(self) -> None:
        """An empty hash list is rejected."""
        with pytest.raises(ValidationError):
            ReportFraudInput(wallet=WALLET, tx_hashes=[], evidence="drained the pool")

    def test_rejects_malformed_hash(self) -> None:
        """Each hash must be 0x + 64 hex chars."""
        with pytest.raises(ValidationError) as exc_info:
            ReportFraudInput(wallet=WALLET, tx_hashes=[TX_HASH, "0xabc"], evidence="drained")
        assert "Must be a valid tx hash" in str(exc_info.value)

    def test_rejects_hash_with_trailing_newline(self) -> None:
        """A trailing newline does not satisfy the hash pattern."""
        with pytest.raises(ValidationError) as exc_info:
            ReportFraudInput(wallet=WALLET, tx_hashes=[TX_HASH + "\n"], evidence="drained the pool")
        assert "Must be a valid tx hash" in str(exc_info.value)

    @pytest.mark.parametrize("evidence", ["too short", "x" * 5001])
    def test_evidence_length_bounds(self, evidence: str) -> None:
        """Evidence must be 10 to 5000 characters."""
        with pytest.raises(ValidationError):
            ReportFraudInput(wallet=WALLET, tx_hashes=[TX_HASH], evidence=evidence)

    def test_evidence_at_bounds(self) -> None:
        """Exactly 10 and 5000 characters are accepted."""
        ReportFraudInput(wallet=WALLET, tx_hashes=[TX_HASH], evidence="x" * 10)
        ReportFraudInput(wallet=WALLET, tx_hashes=[TX_HASH], evidence="x" * 5000)


class TestRegisterAgentInput:
    """Tests for register_agent arguments."""

    def test_github_url_optional(self) -> None:
        """github_url may be omitted."""
        agent = RegisterAgentInput(wallet=WALLET, name="Scout", description="Finds deals")
        assert agent.github_url is None

    def test_github_url_kept_verbatim(self) -> None:
        """A valid URL is passed through unchanged."""
        agent = RegisterAgentInput(
            wallet=WALLET,
            name="Scout",
            description="Finds deals",
            github_url="https://github.com/example/scout",
        )
        assert agent.github_url == "https://github.com/example/scout"

    def test_rejects_invalid_url(self) -> None:
        """github_url must be a URL."""
        with pytest.raises(ValidationError) as exc_info:
            RegisterAgentInput(
                wallet=WALLET, name="Scout", description="Finds deals", github_url="not a url"
            )
        assert "Must be a valid URL" in str(exc_info.value)

    @pytest.mark.parametrize(
        ("name", "description"),
        [("", "Finds deals"), ("x" * 101, "Finds deals"), ("Scout", ""), ("Scout", "x" * 1001)],
    )
    def test_length_bounds(self, name: str, description: str) -> None:
        """name is 1..100 and description 1..1000 characters."""
        with pytest.raises(ValidationError):
            RegisterAgentInput(wallet=WALLET, name=name, description=description)


class TestNoInput:
    """Tests for argument-less tools."""

    def test_ignores_extra_arguments(self) -> None:
        """Unknown arguments are dropped."""
        assert NoInput.model_validate({"unexpected": 1}).model_dump() == {}
