import click

from cli.client_runner import log_file_option, run_with_client, wallet_uri_option


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-n", "--nft-token-id", required=True, type=click.IntRange(min=0), help="NFT token id to purchase.")
@wallet_uri_option
@log_file_option
def create_proposal(nft_token_id: int, wallet_uri: str, log_file: str):
    """Creates a proposal to purchase an NFT with treasury funds."""

    async def _create(client):
        outcome = await client.create_proposal(nft_token_id)
        return outcome, client.state.proposal_count

    result = run_with_client(_create, log_file=log_file, wallet_uri=wallet_uri)
    if result is None:
        return
    outcome, count = result
    if outcome.refreshed:
        click.echo(f"Proposal created in transaction {outcome.tx_hash}. Total number of proposals: {count}")
    else:
        click.echo(f"Proposal created in transaction {outcome.tx_hash}.")
        click.echo("Transaction confirmed, but the DAO state could not be re-read. Run list_proposals to refresh.")
