import click

from cli.client_runner import log_file_option, run_with_client, wallet_uri_option
from governance.enums.proposal_status import ProposalStatus
from governance.enums.view import View


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@wallet_uri_option
@log_file_option
def list_proposals(wallet_uri: str, log_file: str):
    """Lists every proposal with its status and the actions available to you."""

    async def _list(client):
        await client.activate_view(View.PROPOSALS)
        return client.describe_proposals()

    views = run_with_client(_list, log_file=log_file, wallet_uri=wallet_uri)
    if views is None:
        return
    if not views:
        click.echo("No proposals have been created")
        return

    for view in views:
        proposal = view.proposal
        click.echo(f"Proposal ID: {proposal.id}")
        click.echo(f"  NFT to Purchase: {proposal.nft_token_id}")
        click.echo(f"  Deadline: {proposal.deadline.astimezone().strftime('%Y-%m-%d %H:%M:%S %Z')}")
        click.echo(f"  Yay Votes: {proposal.yay_votes}")
        click.echo(f"  Nay Votes: {proposal.nay_votes}")
        click.echo(f"  Executed?: {str(proposal.executed).lower()}")
        if view.status is ProposalStatus.ACTIVE:
            hint = "vote yay / nay" if view.can_vote else "voting requires a membership NFT"
        elif view.status is ProposalStatus.AWAITING_EXECUTION:
            hint = f"execute ({view.expected_outcome.name})"
        else:
            hint = "Proposal Executed"
        click.echo(f"  Status: {view.status.value} - {hint}")
