from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from click.testing import CliRunner

from cli import cli
from governance.enums.governance_action import GovernanceAction
from governance.enums.proposal_status import ProposalStatus
from governance.enums.vote_choice import VoteChoice
from governance.exceptions import InvalidConfiguration, NetworkMismatch, NotEligible
from governance.models.proposal import Proposal, ProposalView, TransactionOutcome
from governance.models.session_state import SessionState

TX_HASH = "0x" + "ab" * 32


@pytest.fixture
def client():
    client = MagicMock()
    client.state = SessionState()
    client.connect = AsyncMock()
    client.close = AsyncMock()
    client.activate_view = AsyncMock()
    client.create_proposal = AsyncMock()
    client.vote = AsyncMock()
    client.execute = AsyncMock()
    return client


@pytest.fixture
def client_cls(client):
    with patch("cli.client_runner.GovernanceClient") as client_cls, patch("cli.client_runner.configure_logging"):
        client_cls.from_settings.return_value = client
        yield client_cls


def test_show_dao_status(client, client_cls):
    client.state.membership_balance = 2
    client.state.treasury_balance = 15 * 10**17
    client.state.proposal_count = 3

    result = CliRunner().invoke(cli, ["show_dao_status"])

    assert result.exit_code == 0, result.output
    assert "Your NFT Balance: 2" in result.output
    assert "Treasury Balance: 1.5 ETH" in result.output
    assert "Total Number of Proposals: 3" in result.output
    client.connect.assert_awaited_once()
    client.close.assert_awaited_once()


def test_list_proposals_empty(client, client_cls):
    client.describe_proposals.return_value = []

    result = CliRunner().invoke(cli, ["list_proposals"])

    assert result.exit_code == 0, result.output
    assert "No proposals have been created" in result.output


def test_list_proposals_prints_cards(client, client_cls):
    deadline = datetime(2026, 10, 16, 12, 5, tzinfo=timezone.utc)
    client.describe_proposals.return_value = [
        ProposalView(
            proposal=Proposal(id=0, nft_token_id=7, deadline=deadline, yay_votes=2, nay_votes=1),
            status=ProposalStatus.AWAITING_EXECUTION,
            actions=frozenset({GovernanceAction.EXECUTE}),
            expected_outcome=VoteChoice.YAY,
        ),
        ProposalView(
            proposal=Proposal(id=1, nft_token_id=8, deadline=deadline, executed=True),
            status=ProposalStatus.EXECUTED,
        ),
    ]

    result = CliRunner().invoke(cli, ["list_proposals"])

    assert result.exit_code == 0, result.output
    assert "Proposal ID: 0" in result.output
    assert "NFT to Purchase: 7" in result.output
    assert "Yay Votes: 2" in result.output
    assert "execute (YAY)" in result.output
    assert "Executed?: true" in result.output
    assert "Proposal Executed" in result.output


def test_create_proposal(client, client_cls):
    client.create_proposal.return_value = TransactionOutcome(action=GovernanceAction.PROPOSE, tx_hash=TX_HASH)
    client.state.proposal_count = 1

    result = CliRunner().invoke(cli, ["create_proposal", "--nft-token-id", "42"])

    assert result.exit_code == 0, result.output
    client.create_proposal.assert_awaited_once_with(42)
    assert TX_HASH in result.output
    assert "Total number of proposals: 1" in result.output


def test_vote_on_proposal(client, client_cls):
    client.vote.return_value = TransactionOutcome(action=GovernanceAction.VOTE, tx_hash=TX_HASH, block_number=5)

    result = CliRunner().invoke(cli, ["vote_on_proposal", "-i", "0", "-c", "NAY"])

    assert result.exit_code == 0, result.output
    client.vote.assert_awaited_once_with(0, "nay")
    assert "Voted NAY on proposal 0" in result.output


def test_vote_rejects_unknown_choice(client, client_cls):
    result = CliRunner().invoke(cli, ["vote_on_proposal", "-i", "0", "-c", "abstain"])

    assert result.exit_code == 2
    client_cls.from_settings.assert_not_called()


def test_execute_proposal(client, client_cls):
    client.execute.return_value = TransactionOutcome(action=GovernanceAction.EXECUTE, tx_hash=TX_HASH)

    result = CliRunner().invoke(cli, ["execute_proposal", "-i", "3"])

    assert result.exit_code == 0, result.output
    client.execute.assert_awaited_once_with(3)
    assert "Proposal 3 executed" in result.output


def test_client_error_is_reported_with_kind(client, client_cls):
    client.vote.side_effect = NotEligible("You do not own any membership NFTs.")

    result = CliRunner().invoke(cli, ["vote_on_proposal", "-i", "0", "-c", "yay"])

    assert result.exit_code == 1
    assert "NotEligible: You do not own any membership NFTs." in result.output
    client.close.assert_awaited_once()


def test_connect_failure_still_closes(client, client_cls):
    client.connect.side_effect = NetworkMismatch(80001, 1, "Polygon Mumbai")

    result = CliRunner().invoke(cli, ["show_dao_status"])

    assert result.exit_code == 1
    assert "Please switch to the Polygon Mumbai network" in result.output
    client.close.assert_awaited_once()


def test_wallet_uri_override(client, client_cls):
    result = CliRunner().invoke(cli, ["show_dao_status", "--wallet-uri", "http://localhost:1249"])

    assert result.exit_code == 0, result.output
    effective_settings = client_cls.from_settings.call_args[0][0]
    assert effective_settings.network.wallet_provider_uri == "http://localhost:1249"


def test_vote_reports_stale_state_after_failed_refresh(client, client_cls):
    client.vote.return_value = TransactionOutcome(action=GovernanceAction.VOTE, tx_hash=TX_HASH, refreshed=False)

    result = CliRunner().invoke(cli, ["vote_on_proposal", "-i", "0", "-c", "yay"])

    assert result.exit_code == 0, result.output
    assert "Voted YAY on proposal 0" in result.output
    assert "could not be re-read" in result.output


def test_invalid_wallet_uri_is_reported_as_configuration_error(client, client_cls):
    client.connect.side_effect = InvalidConfiguration("Unsupported wallet provider URI scheme: ftp")

    result = CliRunner().invoke(cli, ["show_dao_status", "--wallet-uri", "ftp://wallet.local"])

    assert result.exit_code == 1
    assert "InvalidConfiguration:" in result.output
