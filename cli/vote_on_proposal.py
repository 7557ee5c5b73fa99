import click

from cli.client_runner import log_file_option, run_with_client, wallet_uri_option


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-i", "--proposal-id", required=True, type=click.IntRange(min=0), help="Proposal to vote on.")
@click.option(
    "-c", "--choice", required=True, type=click.Choice(["yay", "nay"], case_sensitive=False), help="Your vote."
)
@wallet_uri_option
@log_file_option
def vote_on_proposal(proposal_id: int, choice: str, wallet_uri: str, log_file: str):
    """Votes YAY or NAY on an active proposal."""

    async def _vote(client):
        return await client.vote(proposal_id, choice)

    outcome = run_with_client(_vote, log_file=log_file, wallet_uri=wallet_uri)
    if outcome is None:
        return
    click.echo(f"Voted {choice.upper()} on proposal {proposal_id} in transaction {outcome.tx_hash}")
    if not outcome.refreshed:
        click.echo("Transaction confirmed, but the DAO state could not be re-read. Run list_proposals to refresh.")
