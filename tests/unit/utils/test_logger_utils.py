import logging

import pytest

from utils.logger_utils import THIRD_PARTY_LOGGERS, configure_logging, parse_log_level


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    "value, debug, expected",
    [
        ("info", False, logging.INFO),
        (" WARNING ", False, logging.WARNING),
        (logging.ERROR, False, logging.ERROR),
        ("not-a-level", False, logging.INFO),
        ("ERROR", True, logging.DEBUG),
    ],
)
def test_parse_log_level(value, debug, expected):
    assert parse_log_level(value, debug) == expected


def test_configure_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "governance.log"

    configure_logging(log_level="WARNING")
    configure_logging(str(log_file), "DEBUG")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert all(logging.getLogger(name).level == logging.WARNING for name in THIRD_PARTY_LOGGERS)


def test_debug_lets_rpc_logs_through():
    configure_logging(debug=True)

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("web3").level == logging.DEBUG
