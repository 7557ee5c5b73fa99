import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - [%(levelname)s] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_SIZE_BYTES = 5 * 1024 * 1024  # 5MB
LOG_BACKUP_COUNT = 3

# web3 logs every JSON-RPC request at DEBUG, aiohttp every connection
THIRD_PARTY_LOGGERS = ("urllib3", "web3", "aiohttp", "asyncio")

FORMATTER = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def parse_log_level(log_level: Union[int, str], debug: bool = False) -> int:
    """
    Resolves a numeric level or a level name ("debug", "WARNING") to a logging level.
    `debug` forces DEBUG regardless of the configured level.
    """
    if debug:
        return logging.DEBUG
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).strip().upper())
    if not isinstance(level, int):
        sys.stderr.write(f"Warning: unknown log level '{log_level}', using INFO\n")
        return logging.INFO
    return level


def configure_logging(
    filename: Optional[str] = None, log_level: Union[int, str] = logging.INFO, debug: bool = False
) -> None:
    """
    Configures the root logger for the governance CLI.

    Log records go to stderr so that command output on stdout stays parseable.
    Safe to call more than once: the entry point configures the console first,
    commands reconfigure it once `--log-file` is known.

    Args:
        filename: Optional path of a rotating log file.
        log_level: Numeric level or level name, usually `LOG_LEVEL` from settings.
        debug: `DEBUG` from settings, lowers the level to DEBUG.
    """
    level = parse_log_level(log_level, debug)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(FORMATTER)
    root_logger.addHandler(console_handler)

    if filename:
        try:
            file_handler = RotatingFileHandler(filename, maxBytes=MAX_LOG_SIZE_BYTES, backupCount=LOG_BACKUP_COUNT)
        except OSError as e:
            sys.stderr.write(f"Warning: Could not set up file logging to '{filename}': {e}\n")
        else:
            file_handler.setFormatter(FORMATTER)
            root_logger.addHandler(file_handler)

    # Keep RPC chatter out unless we are debugging ourselves
    third_party_level = logging.DEBUG if debug else logging.WARNING
    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
