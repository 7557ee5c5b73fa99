"""Entry point for `python run.py <command>`; the installed `dao-governance` script calls `cli` directly."""
try:
    import uvloop
except ImportError:
    uvloop = None

from cli import cli
from config.settings import settings
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("DAO Governance")


def main():
    configure_logging(log_level=settings.app.log_level, debug=settings.app.debug)
    if uvloop:
        # Commands drive their client through asyncio.run, which picks this policy up
        uvloop.install()
    logger.debug(f"{settings.app.name} starting, event loop: {'uvloop' if uvloop else 'asyncio'}")
    cli(prog_name="dao-governance")


if __name__ == "__main__":
    main()
