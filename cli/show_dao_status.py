import click

from cli.client_runner import log_file_option, run_with_client, wallet_uri_option
from utils.formatter_utils import format_ether


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@wallet_uri_option
@log_file_option
def show_dao_status(wallet_uri: str, log_file: str):
    """Shows the treasury balance, the proposal count and your membership balance."""

    async def _status(client):
        # Connecting already loaded the three values into the session state
        state = client.state
        return state.membership_balance, state.treasury_balance, state.proposal_count

    result = run_with_client(_status, log_file=log_file, wallet_uri=wallet_uri)
    if result is None:
        return
    membership_balance, treasury_balance, proposal_count = result
    click.echo(f"Your NFT Balance: {membership_balance}")
    click.echo(f"Treasury Balance: {format_ether(treasury_balance)} ETH")
    click.echo(f"Total Number of Proposals: {proposal_count}")
