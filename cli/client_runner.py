import asyncio
from typing import Any, Awaitable, Callable, Optional

import click

from config.settings import settings
from governance.exceptions import GovernanceClientError
from governance.governance_client import GovernanceClient
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Governance CLI")


def run_with_client(
    action: Callable[[GovernanceClient], Awaitable[Any]],
    log_file: Optional[str] = None,
    wallet_uri: Optional[str] = None,
) -> Any:
    """
    Configures logging, builds a client from settings, runs `action` and tears the
    session down. Client failures are reported as click errors with their kind.
    """
    configure_logging(log_file, settings.app.log_level, debug=settings.app.debug)

    effective_settings = settings
    if wallet_uri:
        network = settings.network.model_copy(update={"wallet_provider_uri": wallet_uri})
        effective_settings = settings.model_copy(update={"network": network})

    async def _run():
        client = GovernanceClient.from_settings(effective_settings)
        try:
            await client.connect()
            return await action(client)
        finally:
            await client.close()

    try:
        return asyncio.run(_run())
    except GovernanceClientError as e:
        logger.error(f"{e.kind}: {e.message}")
        raise click.ClickException(f"{e.kind}: {e.message}") from e
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")


wallet_uri_option = click.option(
    "-w",
    "--wallet-uri",
    default=None,
    type=str,
    help="JSON-RPC endpoint of the wallet, e.g. http://127.0.0.1:1248. Defaults to WALLET_PROVIDER_URI.",
)
log_file_option = click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
