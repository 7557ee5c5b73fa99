import click

from cli.client_runner import log_file_option, run_with_client, wallet_uri_option


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-i", "--proposal-id", required=True, type=click.IntRange(min=0), help="Proposal to execute.")
@wallet_uri_option
@log_file_option
def execute_proposal(proposal_id: int, wallet_uri: str, log_file: str):
    """Executes a proposal whose deadline has passed."""

    async def _execute(client):
        return await client.execute(proposal_id)

    outcome = run_with_client(_execute, log_file=log_file, wallet_uri=wallet_uri)
    if outcome is None:
        return
    click.echo(f"Proposal {proposal_id} executed in transaction {outcome.tx_hash}")
    if not outcome.refreshed:
        click.echo("Transaction confirmed, but the DAO state could not be re-read. Run list_proposals to refresh.")
