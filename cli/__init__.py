import click


from cli.show_dao_status import show_dao_status
from cli.list_proposals import list_proposals
from cli.create_proposal import create_proposal
from cli.vote_on_proposal import vote_on_proposal
from cli.execute_proposal import execute_proposal


@click.group()
@click.version_option(version="0.3.0")
@click.pass_context
def cli(ctx):
    pass


# DAO overview
cli.add_command(show_dao_status, "show_dao_status")

# Proposals view
cli.add_command(list_proposals, "list_proposals")

# Governance transactions
cli.add_command(create_proposal, "create_proposal")
cli.add_command(vote_on_proposal, "vote_on_proposal")
cli.add_command(execute_proposal, "execute_proposal")
