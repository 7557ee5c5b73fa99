# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Change Description: ledger integer / timestamp conversions and ether formatting
# on top of eth_utils.

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from eth_utils import from_wei
from eth_utils import to_checksum_address as eth_to_checksum_address

from utils.logger_utils import get_logger

logger = get_logger("Formatter Utils")

UINT256_MAX = 2**256 - 1


def to_uint256(value: Any, field_name: str) -> int:
    """
    Validates a ledger integer. Booleans and non-integers are rejected,
    values outside [0, 2**256 - 1] raise instead of being truncated.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer, got {type(value).__name__}")
    if value < 0 or value > UINT256_MAX:
        raise ValueError(f"{field_name} out of uint256 range: {value}")
    return value


def timestamp_to_datetime(seconds: int, field_name: str = "timestamp") -> datetime:
    """
    Converts ledger seconds since epoch to an aware UTC datetime.
    """
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise ValueError(f"{field_name} {seconds} is not representable as a datetime: {e}") from e


def wei_to_ether(wei: int) -> Decimal:
    return Decimal(from_wei(wei, "ether"))


def format_ether(wei: int) -> str:
    """
    Formats a wei amount the way wallets display it, e.g. 1500000000000000000 -> "1.5".
    """
    ether = wei_to_ether(wei)
    if ether == ether.to_integral_value():
        return f"{ether.quantize(Decimal(1))}.0"
    return format(ether.normalize(), "f")


def to_checksum_address(address: Optional[str]) -> Optional[str]:
    """
    Returns the EIP-55 checksummed form, or None for missing input.
    """
    if address is None or not isinstance(address, str):
        return None
    return eth_to_checksum_address(address)
